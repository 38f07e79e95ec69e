"""Locale-independent fixed-width integer parsing."""

from intparse.census import ValueCensus, census_to_dict, census_values, summarize_census
from intparse.exact import (
    parse_range_exact,
    try_parse_exact,
    try_parse_int32,
    try_parse_int64,
    try_parse_uint32,
    try_parse_uint64,
)
from intparse.formatting import format_invariant
from intparse.ranges import resolve_length, trim_range, validate_range
from intparse.tolerant import (
    try_parse_int32_tolerant,
    try_parse_int64_tolerant,
    try_parse_tolerant,
    try_parse_uint32_tolerant,
    try_parse_uint64_tolerant,
)
from intparse.types import (
    ALL_KINDS,
    INT32,
    INT64,
    UINT32,
    UINT64,
    IntKind,
    IntKindName,
    ParseResult,
    RangeContractError,
    kind_by_name,
)

__all__ = [
    "ALL_KINDS",
    "INT32",
    "INT64",
    "IntKind",
    "IntKindName",
    "ParseResult",
    "RangeContractError",
    "UINT32",
    "UINT64",
    "ValueCensus",
    "census_to_dict",
    "census_values",
    "format_invariant",
    "kind_by_name",
    "parse_range_exact",
    "resolve_length",
    "summarize_census",
    "trim_range",
    "try_parse_exact",
    "try_parse_int32",
    "try_parse_int32_tolerant",
    "try_parse_int64",
    "try_parse_int64_tolerant",
    "try_parse_tolerant",
    "try_parse_uint32",
    "try_parse_uint32_tolerant",
    "try_parse_uint64",
    "try_parse_uint64_tolerant",
    "validate_range",
]
