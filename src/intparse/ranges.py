"""Range validation and whitespace trimming over (text, index, length) views."""

from __future__ import annotations

from intparse.types import RangeContractError


def validate_range(text: str | None, index: int, length: int) -> None:
    """Raise ``RangeContractError`` unless ``[index, index + length)`` lies in ``text``.

    A ``None`` text is treated as empty: only the empty range at 0 is valid.
    """

    text_length = 0 if text is None else len(text)
    if index < 0 or length < 0 or index + length > text_length:
        what = "None text" if text is None else f"text of length {text_length}"
        raise RangeContractError(
            f"range (index={index}, length={length}) is outside {what}",
        )


def resolve_length(text: str | None, index: int, length: int | None) -> int | None:
    """Fill in a missing length as "to the end of text".

    Returns ``None`` for the whole-string form over a ``None`` text, which
    callers report as an ordinary parse failure. Explicit ranges are
    validated.
    """

    if length is None:
        if text is None:
            return None
        length = len(text) - index
    validate_range(text, index, length)
    return length


def trim_range(text: str | None, index: int, length: int) -> tuple[int, int] | None:
    """Narrow a range to exclude leading and trailing whitespace.

    Returns the trimmed ``(index, length)``, or ``None`` when the range is
    empty or holds only whitespace. The text is never sliced or modified.
    """

    validate_range(text, index, length)
    if text is None:
        return None

    start = index
    last = index + length - 1
    while start <= last and text[start].isspace():
        start += 1
    while start <= last and text[last].isspace():
        last -= 1
    if start > last:
        return None
    return start, last - start + 1
