"""Tests for exact-match integer parsing."""
from __future__ import annotations

import random

import pytest

from intparse.exact import (
    parse_range_exact,
    try_parse_exact,
    try_parse_int32,
    try_parse_int64,
    try_parse_uint32,
    try_parse_uint64,
)
from intparse.formatting import format_invariant
from intparse.types import (
    ALL_KINDS,
    INT32,
    INT64,
    UINT32,
    UINT64,
    IntKind,
    ParseResult,
    RangeContractError,
)


class TestInt32:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", 0),
            ("-0", 0),
            ("1", 1),
            ("-1", -1),
            ("214748364", 214748364),
            ("-214748364", -214748364),
            ("2147483647", 2147483647),
            ("-2147483647", -2147483647),
            ("-2147483648", -2147483648),
            ("0000000000002147483647", 2147483647),
        ],
    )
    def test_accepts(self, text: str, expected: int) -> None:
        assert try_parse_int32(text) == ParseResult(True, expected)

    @pytest.mark.parametrize(
        "text",
        [
            "2147483648",
            "-2147483649",
            "4000000000",
            "-4000000000",
            "4294967270",
            "4294967279",
            "4294967289",
            "4294967299",
            "16000000000",
            "-16000000000",
            "21474836470",
            "- 1000",
            "+1",
            "1-",
            "--1",
        ],
    )
    def test_rejects(self, text: str) -> None:
        assert try_parse_int32(text) == ParseResult(False, 0)


class TestUInt32:
    def test_boundaries(self) -> None:
        assert try_parse_uint32("4294967295") == ParseResult(True, 4294967295)
        assert try_parse_uint32("2147483648") == ParseResult(True, 2147483648)
        assert try_parse_uint32("000000000000000004294967295").value == 4294967295
        assert try_parse_uint32("477218587").value == 477218587
        assert try_parse_uint32("4772185870").ok is False

    @pytest.mark.parametrize(
        "text",
        [
            "-0",
            "-1",
            "4294967296",
            "4772185870",
            "4772185879",
            "4772185899",
            "8000000000",
            "32000000000",
            "+5",
        ],
    )
    def test_rejects(self, text: str) -> None:
        assert try_parse_uint32(text) == ParseResult(False, 0)


class TestInt64:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1844674407370955159", 1844674407370955159),
            ("1844674407370955160", 1844674407370955160),
            ("1844674407370955161", 1844674407370955161),
            ("9223372036854775807", 9223372036854775807),
            ("-9223372036854775808", -9223372036854775808),
        ],
    )
    def test_accepts(self, text: str, expected: int) -> None:
        assert try_parse_int64(text) == ParseResult(True, expected)

    @pytest.mark.parametrize(
        "text",
        [
            "9223372036854775808",
            "-9223372036854775809",
            "18446744073709551590",
            "18446744073709551619",
            "-18446744073709551600",
            "-18446744073709551619",
            "10000000000000000000",
            "-160000000000000000000",
        ],
    )
    def test_rejects(self, text: str) -> None:
        assert try_parse_int64(text) == ParseResult(False, 0)


class TestUInt64:
    def test_boundaries(self) -> None:
        assert try_parse_uint64("0") == ParseResult(True, 0)
        assert try_parse_uint64("18446744073709551615") == ParseResult(
            True, 18446744073709551615,
        )
        assert try_parse_uint64("9223372036854775808") == ParseResult(
            True, 9223372036854775808,
        )

    @pytest.mark.parametrize(
        "text",
        [
            "-0",
            "-1",
            "18446744073709551616",
            "20496382304121723990",
            "20496382304121724000",
            "20496382304121724019",
            "20000000000000000000",
            "640000000000000000000",
        ],
    )
    def test_rejects(self, text: str) -> None:
        assert try_parse_uint64(text) == ParseResult(False, 0)


class TestSharedBehaviour:
    @pytest.mark.parametrize("kind", ALL_KINDS, ids=lambda kind: kind.name)
    @pytest.mark.parametrize(
        "text",
        ["", " ", "\t", "-", " 123 ", "123 ", " 123", "123abc", "12 3", "1_000", "1,000", "0x10", "1e3"],
    )
    def test_malformed_fails_for_every_kind(self, kind: IntKind, text: str) -> None:
        assert try_parse_exact(text, kind) == ParseResult(False, 0)

    @pytest.mark.parametrize("kind", ALL_KINDS, ids=lambda kind: kind.name)
    def test_leading_zeros(self, kind: IntKind) -> None:
        assert try_parse_exact("007", kind) == ParseResult(True, 7)

    @pytest.mark.parametrize("kind", ALL_KINDS, ids=lambda kind: kind.name)
    def test_extremes_round_trip(self, kind: IntKind) -> None:
        for value in (kind.min_value, kind.max_value, kind.min_value + 1, kind.max_value - 1):
            assert try_parse_exact(str(value), kind) == ParseResult(True, value)

    @pytest.mark.parametrize("kind", ALL_KINDS, ids=lambda kind: kind.name)
    def test_one_past_extremes_fail(self, kind: IntKind) -> None:
        assert try_parse_exact(str(kind.max_value + 1), kind).ok is False
        assert try_parse_exact(str(kind.min_value - 1), kind).ok is False

    def test_unicode_digits_rejected(self) -> None:
        # Arabic-Indic and fullwidth digits are digits to str.isdigit(), not here.
        assert try_parse_int32("\u0661\u0662").ok is False
        assert try_parse_uint64("\uff11\uff12").ok is False

    def test_result_unpacks(self) -> None:
        ok, value = try_parse_int64("-42")
        assert ok is True
        assert value == -42


class TestRanges:
    def test_parses_sub_range_without_slicing(self) -> None:
        text = "id=12345;"
        assert try_parse_int32(text, 3, 5) == ParseResult(True, 12345)
        assert try_parse_uint32(text, 3, 2) == ParseResult(True, 12)

    def test_sign_inside_sub_range(self) -> None:
        assert try_parse_int64("x-77y", 1, 3) == ParseResult(True, -77)

    def test_none_length_runs_to_end(self) -> None:
        assert try_parse_uint64("abc99", 3) == ParseResult(True, 99)

    def test_empty_sub_range_fails(self) -> None:
        assert try_parse_int32("123", 1, 0) == ParseResult(False, 0)

    def test_lone_sign_in_sub_range_fails(self) -> None:
        assert try_parse_int32("1-2", 1, 1) == ParseResult(False, 0)

    @pytest.mark.parametrize(
        "parse",
        [try_parse_int32, try_parse_uint32, try_parse_int64, try_parse_uint64],
    )
    @pytest.mark.parametrize(("index", "length"), [(-1, 2), (0, 10), (2, 3), (0, -1)])
    def test_out_of_bounds_raises(self, parse, index: int, length: int) -> None:
        with pytest.raises(RangeContractError):
            parse("1234", index, length)

    @pytest.mark.parametrize(
        "parse",
        [try_parse_int32, try_parse_uint32, try_parse_int64, try_parse_uint64],
    )
    def test_none_text_whole_string_fails_quietly(self, parse) -> None:
        assert parse(None) == ParseResult(False, 0)

    def test_none_text_with_length_raises(self) -> None:
        with pytest.raises(RangeContractError):
            try_parse_int32(None, 0, 3)

    def test_parse_range_exact_direct(self) -> None:
        assert parse_range_exact("--5", 1, 2, INT32) == ParseResult(True, -5)
        assert parse_range_exact("--5", 1, 2, UINT32) == ParseResult(False, 0)
        assert parse_range_exact("", 0, 0, INT64) == ParseResult(False, 0)
        assert parse_range_exact("9", 0, 1, UINT64) == ParseResult(True, 9)

    @pytest.mark.parametrize(
        ("text", "index", "length"),
        [("123", -1, 1), ("12", 1, 5), ("123", 0, -1)],
    )
    def test_parse_range_exact_validates_range(self, text: str, index: int, length: int) -> None:
        # A negative index must not fall back to indexing from the end.
        with pytest.raises(RangeContractError):
            parse_range_exact(text, index, length, INT32)


class TestRoundTrip:
    @pytest.mark.parametrize("kind", ALL_KINDS, ids=lambda kind: kind.name)
    def test_random_values_round_trip(self, kind: IntKind) -> None:
        rng = random.Random(f"round-trip-{kind.name}")
        for _ in range(2000):
            value = rng.randint(kind.min_value, kind.max_value)
            rendered = format_invariant(value, kind)
            assert try_parse_exact(rendered, kind) == ParseResult(True, value)

    @pytest.mark.parametrize("kind", ALL_KINDS, ids=lambda kind: kind.name)
    def test_random_digit_counts_round_trip(self, kind: IntKind) -> None:
        # Uniform sampling favours the longest values; also cover every length.
        rng = random.Random(f"digits-{kind.name}")
        for digits in range(1, len(str(kind.max_value)) + 1):
            for _ in range(50):
                value = min(rng.randrange(10 ** (digits - 1), 10 ** digits), kind.max_value)
                if kind.signed and rng.random() < 0.5:
                    value = max(-value, kind.min_value)
                rendered = format_invariant(value, kind)
                assert try_parse_exact(rendered, kind) == ParseResult(True, value)
