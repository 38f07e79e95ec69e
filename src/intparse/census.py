"""Width census: which fixed-width integer kinds accept each text value.

Useful for profiling a text column before choosing a storage type for it.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from intparse.exact import try_parse_exact
from intparse.formatting import format_invariant
from intparse.tolerant import try_parse_tolerant
from intparse.types import ALL_KINDS, IntKind, kind_by_name


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValueCensus:
    """Per-value census row."""

    raw: str | None
    accepted: dict[str, int]  # kind name -> parsed value

    @property
    def parseable(self) -> bool:
        return bool(self.accepted)

    def narrowest(self, kinds: Sequence[IntKind] = ALL_KINDS) -> str | None:
        """Smallest accepting kind, signed before unsigned at equal width."""
        ranked = sorted(
            (kind for kind in kinds if kind.name in self.accepted),
            key=lambda kind: (kind.bits, not kind.signed),
        )
        return ranked[0].name if ranked else None


def census_values(
    values: Iterable[str | None],
    kinds: Sequence[IntKind] = ALL_KINDS,
    *,
    exact: bool = False,
) -> list[ValueCensus]:
    """Parse every value with every kind and record the accepting kinds."""

    if not kinds:
        raise ValueError("census requires at least one integer kind")

    rows: list[ValueCensus] = []
    for raw in values:
        accepted: dict[str, int] = {}
        for kind in kinds:
            result = try_parse_exact(raw, kind) if exact else try_parse_tolerant(raw, kind)
            if result.ok:
                accepted[kind.name] = result.value
        rows.append(ValueCensus(raw=raw, accepted=accepted))
    logger.debug(
        "census: %d values across %d kinds (exact=%s)", len(rows), len(kinds), exact,
    )
    return rows


def summarize_census(
    rows: Sequence[ValueCensus],
    kinds: Sequence[IntKind] = ALL_KINDS,
) -> dict[str, Any]:
    """Aggregate census rows into per-kind acceptance counts."""

    accepted_by_kind: Counter[str] = Counter()
    narrowest_by_kind: Counter[str] = Counter()
    unparseable = 0
    for row in rows:
        if not row.parseable:
            unparseable += 1
            continue
        accepted_by_kind.update(row.accepted.keys())
        narrowest = row.narrowest(kinds)
        if narrowest is not None:
            narrowest_by_kind[narrowest] += 1

    # Kinds that accept every parseable value, narrowest first.
    parseable = len(rows) - unparseable
    fits_all = [
        kind.name
        for kind in sorted(kinds, key=lambda kind: (kind.bits, not kind.signed))
        if parseable and accepted_by_kind[kind.name] == parseable
    ]
    return {
        "total": len(rows),
        "parseable": parseable,
        "unparseable": unparseable,
        "accepted_by_kind": {kind.name: accepted_by_kind[kind.name] for kind in kinds},
        "narrowest_by_kind": {kind.name: narrowest_by_kind[kind.name] for kind in kinds},
        "fits_all_parseable": fits_all,
    }


def census_to_dict(row: ValueCensus) -> dict[str, Any]:
    # Values go out as strings; JSON readers often decode numbers as doubles.
    return {
        "raw": row.raw,
        "accepted": {
            name: format_invariant(value, kind_by_name(name))
            for name, value in sorted(row.accepted.items())
        },
        "parseable": row.parseable,
    }
