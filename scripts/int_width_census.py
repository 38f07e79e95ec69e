#!/usr/bin/env python3
"""Integer width census over a column of text values.

Reports, for each fixed-width integer kind, how many values it accepts,
the narrowest kind for each value, and which kinds can hold every
parseable value. Values come from a text file (one per line) or from a
column of a DuckDB database opened read-only.

Usage:
    python3 scripts/int_width_census.py --input values.txt
    python3 scripts/int_width_census.py --db data.duckdb --table trades --column qty
    python3 scripts/int_width_census.py --input values.txt --kinds int32,uint32 --exact

Structured JSON output goes to stdout; log messages go to stderr.
"""
from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Any

import duckdb
import orjson

from intparse import (
    ALL_KINDS,
    IntKind,
    census_to_dict,
    census_values,
    kind_by_name,
    summarize_census,
)

log = logging.getLogger("int_width_census")

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def dump_json(obj: Any) -> None:
    sys.stdout.buffer.write(
        orjson.dumps(obj, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS),
    )
    sys.stdout.buffer.write(b"\n")


def parse_kinds(raw: str | None) -> tuple[IntKind, ...]:
    """Parse a comma-separated kind list; ``None`` or blank means all kinds."""
    if raw is None or not raw.strip():
        return ALL_KINDS
    kinds: list[IntKind] = []
    for part in raw.split(","):
        if not part.strip():
            continue
        kind = kind_by_name(part)
        if kind not in kinds:
            kinds.append(kind)
    return tuple(kinds)


def read_text_values(path: Path) -> list[str]:
    # Lines are kept unstripped so the exact mode sees surrounding whitespace.
    return path.read_text(encoding="utf-8").splitlines()


def read_duckdb_values(db_path: Path, table: str, column: str) -> list[str | None]:
    for name in (table, column):
        if not _IDENTIFIER_RE.match(name):
            raise ValueError(f"Invalid SQL identifier: {name!r}")
    con = duckdb.connect(str(db_path), read_only=True)
    try:
        rows = con.execute(
            f'SELECT CAST("{column}" AS VARCHAR) FROM "{table}"'
        ).fetchall()
    finally:
        con.close()
    return [row[0] for row in rows]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Census of which integer widths accept a column of text values."
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--input", type=Path, default=None,
        help="Text file with one value per line",
    )
    source.add_argument(
        "--db", type=Path, default=None,
        help="Path to a DuckDB database (requires --table and --column)",
    )
    parser.add_argument("--table", default=None, help="DuckDB table name")
    parser.add_argument("--column", default=None, help="DuckDB column name")
    parser.add_argument(
        "--kinds", default=None,
        help="Comma-separated kinds to test (default: int32,uint32,int64,uint64)",
    )
    parser.add_argument(
        "--exact", action="store_true",
        help="Reject values with surrounding whitespace instead of trimming",
    )
    parser.add_argument(
        "--show-rows", action="store_true",
        help="Include per-value rows in the output",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.input is not None and (args.table is not None or args.column is not None):
        parser.error("--table and --column only apply to --db")
    if args.db is not None and (args.table is None or args.column is None):
        parser.error("--db requires --table and --column")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        kinds = parse_kinds(args.kinds)
    except ValueError as exc:
        log.error("%s", exc)
        return 1
    if not kinds:
        log.error("No integer kinds selected")
        return 1

    values: list[str | None]
    if args.input is not None:
        if not args.input.exists():
            log.error("Input file not found: %s", args.input)
            return 1
        try:
            values = list(read_text_values(args.input))
        except UnicodeDecodeError as exc:
            log.error("Input file is not valid UTF-8: %s (%s)", args.input, exc)
            return 1
        source = str(args.input)
    else:
        if not args.db.exists():
            log.error("Database not found: %s", args.db)
            return 1
        try:
            values = read_duckdb_values(args.db, args.table, args.column)
        except (ValueError, duckdb.Error) as exc:
            log.error("Failed to read %s.%s: %s", args.table, args.column, exc)
            return 1
        source = f"{args.db}:{args.table}.{args.column}"

    log.info("Read %d values from %s", len(values), source)
    rows = census_values(values, kinds, exact=args.exact)
    summary = summarize_census(rows, kinds)
    log.info(
        "Parseable: %d / %d; fits all parseable: %s",
        summary["parseable"],
        summary["total"],
        ", ".join(summary["fits_all_parseable"]) or "none",
    )

    output: dict[str, Any] = {
        "source": source,
        "mode": "exact" if args.exact else "tolerant",
        "kinds": [kind.name for kind in kinds],
        "summary": summary,
    }
    if args.show_rows:
        output["rows"] = [census_to_dict(row) for row in rows]

    dump_json(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
