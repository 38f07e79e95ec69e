"""Whitespace-tolerant integer parsing.

Leading and trailing whitespace is trimmed, then the remainder must parse
exactly. There is no prefix mode: ``"12 3"`` and ``"123abc"``
fail here just as they do in ``intparse.exact``.
"""

from __future__ import annotations

from intparse.exact import parse_range_exact
from intparse.ranges import resolve_length, trim_range
from intparse.types import INT32, INT64, UINT32, UINT64, IntKind, ParseResult


def try_parse_tolerant(
    text: str | None,
    kind: IntKind,
    index: int = 0,
    length: int | None = None,
) -> ParseResult:
    """Trim whitespace from the range, then parse what is left as ``kind``.

    A ``None`` text fails without raising in the whole-string form. Explicit
    ranges are validated first and raise ``RangeContractError`` when invalid.
    """

    resolved = resolve_length(text, index, length)
    if resolved is None:
        return ParseResult(False, 0)
    trimmed = trim_range(text, index, resolved)
    if trimmed is None or text is None:
        return ParseResult(False, 0)
    start, span = trimmed
    return parse_range_exact(text, start, span, kind)


def try_parse_int32_tolerant(
    text: str | None, index: int = 0, length: int | None = None,
) -> ParseResult:
    return try_parse_tolerant(text, INT32, index, length)


def try_parse_uint32_tolerant(
    text: str | None, index: int = 0, length: int | None = None,
) -> ParseResult:
    return try_parse_tolerant(text, UINT32, index, length)


def try_parse_int64_tolerant(
    text: str | None, index: int = 0, length: int | None = None,
) -> ParseResult:
    return try_parse_tolerant(text, INT64, index, length)


def try_parse_uint64_tolerant(
    text: str | None, index: int = 0, length: int | None = None,
) -> ParseResult:
    return try_parse_tolerant(text, UINT64, index, length)
