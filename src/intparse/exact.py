"""Exact-match integer parsing.

Every character of the range must be part of the number: an optional
leading ``-`` (signed kinds only) followed by ASCII decimal digits. No
whitespace, no ``+``, no trailing garbage.

Overflow is caught before it can happen. Each accumulation step compares
the running value against the kind's threshold, folds in the digit, and
reduces the result to the kind's width so that a wrap is visible the same
way it would be in fixed-width arithmetic.
"""

from __future__ import annotations

from intparse.ranges import resolve_length, validate_range
from intparse.types import INT32, INT64, UINT32, UINT64, IntKind, ParseResult


_FAILED = ParseResult(False, 0)


def _digit(ch: str) -> int:
    """ASCII digit value, or -1 for anything else (including Unicode digits)."""
    if "0" <= ch <= "9":
        return ord(ch) - 48
    return -1


def _parse_signed(text: str, index: int, length: int, kind: IntKind) -> ParseResult:
    negative = text[index] == "-"
    if negative:
        length -= 1
        if length == 0:
            return _FAILED
        index += 1

    # Accumulate as a negative value so the minimum (one larger in magnitude
    # than the maximum) is reachable.
    acc = 0
    for pos in range(index, index + length):
        digit = _digit(text[pos])
        if digit < 0 or acc < kind.threshold:
            return _FAILED
        acc = kind.wrap(acc * 10 - digit)
        if acc > 0:
            return _FAILED

    # Without a sign the magnitude of the minimum has no positive counterpart.
    if negative or acc != kind.min_value:
        return ParseResult(True, acc if negative else -acc)
    return _FAILED


def _parse_unsigned(text: str, index: int, length: int, kind: IntKind) -> ParseResult:
    acc = 0
    for pos in range(index, index + length):
        digit = _digit(text[pos])
        if digit < 0 or acc > kind.threshold:
            return _FAILED
        folded = kind.wrap(acc * 10 + digit)
        if folded < acc:
            return _FAILED
        acc = folded
    return ParseResult(True, acc)


def parse_range_exact(text: str, index: int, length: int, kind: IntKind) -> ParseResult:
    """Parse ``text[index:index + length]`` with no whitespace allowed."""
    validate_range(text, index, length)
    if length == 0:
        return _FAILED
    if kind.signed:
        return _parse_signed(text, index, length, kind)
    return _parse_unsigned(text, index, length, kind)


def try_parse_exact(
    text: str | None,
    kind: IntKind,
    index: int = 0,
    length: int | None = None,
) -> ParseResult:
    """Parse ``text[index:index + length]`` as ``kind`` with no whitespace allowed.

    ``length=None`` parses to the end of the text; in that form a ``None``
    text fails quietly. An explicit range that does not fit the text raises
    ``RangeContractError``.
    """

    resolved = resolve_length(text, index, length)
    if resolved is None or text is None:
        return _FAILED
    return parse_range_exact(text, index, resolved, kind)


def try_parse_int32(text: str | None, index: int = 0, length: int | None = None) -> ParseResult:
    return try_parse_exact(text, INT32, index, length)


def try_parse_uint32(text: str | None, index: int = 0, length: int | None = None) -> ParseResult:
    return try_parse_exact(text, UINT32, index, length)


def try_parse_int64(text: str | None, index: int = 0, length: int | None = None) -> ParseResult:
    return try_parse_exact(text, INT64, index, length)


def try_parse_uint64(text: str | None, index: int = 0, length: int | None = None) -> ParseResult:
    return try_parse_exact(text, UINT64, index, length)
