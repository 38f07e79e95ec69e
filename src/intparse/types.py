"""Core types for invariant integer parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, NamedTuple, TypeAlias


IntKindName: TypeAlias = Literal["int32", "uint32", "int64", "uint64"]


class RangeContractError(ValueError):
    """Raised when an (index, length) pair does not lie within the text.

    This signals a bug in the caller, not bad input data. Malformed or
    out-of-range numbers are reported through ``ParseResult`` instead.
    """


class ParseResult(NamedTuple):
    """Outcome of a parse. ``value`` is 0 whenever ``ok`` is False."""

    ok: bool
    value: int = 0


@dataclass(frozen=True, slots=True)
class IntKind:
    """Fixed-width integer target: width, signedness and overflow threshold.

    For signed kinds ``threshold`` bounds the negative accumulator (folding
    another digit into anything below it fails). For unsigned kinds it bounds
    the positive accumulator from above.
    """

    name: IntKindName
    bits: int
    signed: bool
    min_value: int
    max_value: int
    threshold: int

    def __post_init__(self) -> None:
        if self.bits not in (32, 64):
            raise ValueError(f"bits must be 32 or 64, got {self.bits}")
        if self.min_value > 0 or self.max_value <= 0:
            raise ValueError(
                f"invalid bounds [{self.min_value}, {self.max_value}] for {self.name}",
            )
        if self.signed and self.threshold >= 0:
            raise ValueError("signed threshold must be negative")
        if not self.signed and self.threshold <= 0:
            raise ValueError("unsigned threshold must be positive")

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def wrap(self, value: int) -> int:
        """Reduce ``value`` to this kind's two's-complement width."""
        value &= (1 << self.bits) - 1
        if self.signed and value > self.max_value:
            value -= 1 << self.bits
        return value


INT32 = IntKind(
    name="int32",
    bits=32,
    signed=True,
    min_value=-2147483648,
    max_value=2147483647,
    threshold=-214748364,
)
UINT32 = IntKind(
    name="uint32",
    bits=32,
    signed=False,
    min_value=0,
    max_value=4294967295,
    threshold=477218587,
)
INT64 = IntKind(
    name="int64",
    bits=64,
    signed=True,
    min_value=-9223372036854775808,
    max_value=9223372036854775807,
    threshold=-1844674407370955160,
)
UINT64 = IntKind(
    name="uint64",
    bits=64,
    signed=False,
    min_value=0,
    max_value=18446744073709551615,
    threshold=2049638230412172400,
)

ALL_KINDS: tuple[IntKind, ...] = (INT32, UINT32, INT64, UINT64)

_KINDS_BY_NAME: dict[str, IntKind] = {kind.name: kind for kind in ALL_KINDS}


def kind_by_name(name: str) -> IntKind:
    """Look up a kind by its short name (``int32``, ``uint64``, ...)."""
    kind = _KINDS_BY_NAME.get(name.strip().lower())
    if kind is None:
        raise ValueError(
            f"Unknown integer kind: {name!r} (expected one of {sorted(_KINDS_BY_NAME)})",
        )
    return kind
