"""Culture-invariant rendering of fixed-width integers."""

from __future__ import annotations

from intparse.types import IntKind


def format_invariant(value: int, kind: IntKind) -> str:
    """Render ``value`` as plain ASCII decimal, ``-`` for negatives, no grouping.

    The output always round-trips through the exact parser for ``kind``.
    """

    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}")
    if not kind.contains(value):
        raise ValueError(
            f"{value} is outside the {kind.name} range [{kind.min_value}, {kind.max_value}]",
        )
    return f"{int(value):d}"
