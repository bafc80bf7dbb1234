"""CLI entry point for smarttable.

Usage:
    python -m smarttable eval <grid.tsv> <formula> --cell B3 [--trace]
    python -m smarttable shift <formula> --rows N --cols M
    python -m smarttable directions <grid.tsv> --cell B3
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger

from smarttable.config import get_settings
from smarttable.exceptions import SmartTableError
from smarttable.file_reader import read_grid
from smarttable.formulas import evaluate, shift_references
from smarttable.grid import Grid, scan
from smarttable.logging import setup_logging
from smarttable.numbers import format_number
from smarttable.references import CellAddress, parse_reference
from smarttable.resolver import directional_info


def _load(args: argparse.Namespace) -> tuple[Grid, CellAddress]:
    address = parse_reference(args.cell)
    if address is None:
        raise SmartTableError(f"Invalid cell reference: {args.cell}")
    rows = read_grid(Path(args.grid), encoding=get_settings().tsv_encoding)
    return scan(rows), address


def cmd_eval(args: argparse.Namespace) -> int:
    """Evaluate a formula against a TSV grid."""
    grid, address = _load(args)
    result = evaluate(args.formula, address, grid)
    print(result.display())
    if args.trace:
        print(result.trace)
    return 1 if result.is_error else 0


def cmd_shift(args: argparse.Namespace) -> int:
    """Shift the references in a formula."""
    print(shift_references(args.formula, args.rows, args.cols))
    return 0


def cmd_directions(args: argparse.Namespace) -> int:
    """Show which directional keywords are usable from a cell."""
    grid, address = _load(args)
    for direction, info in directional_info(address, grid).items():
        if info.available:
            values = ", ".join(str(format_number(v)) for v in info.values)
            print(f"{direction.value:<6} {info.cell_count} cells [{values}]")
        else:
            print(f"{direction.value:<6} unavailable: {info.reason}")
    return 0


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="smarttable",
        description="Evaluate table formulas against a TSV snapshot",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Minimum log level (default: SMARTTABLE_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # eval subcommand
    eval_parser = subparsers.add_parser(
        "eval",
        help="Evaluate a formula such as =SUM(A1:B3)",
    )
    eval_parser.add_argument("grid", help="Path to a TSV file with the table text")
    eval_parser.add_argument("formula", help="Formula, e.g. '=SUM(ABOVE)'")
    eval_parser.add_argument(
        "--cell",
        required=True,
        help="Cell the formula belongs to, in A1 notation",
    )
    eval_parser.add_argument(
        "--trace",
        action="store_true",
        help="Also print the values the result was computed from",
    )
    eval_parser.set_defaults(func=cmd_eval)

    # shift subcommand
    shift_parser = subparsers.add_parser(
        "shift",
        help="Shift cell references, as when filling a formula",
    )
    shift_parser.add_argument("formula", help="Formula to shift")
    shift_parser.add_argument("--rows", type=int, default=0, help="Row offset")
    shift_parser.add_argument("--cols", type=int, default=0, help="Column offset")
    shift_parser.set_defaults(func=cmd_shift)

    # directions subcommand
    directions_parser = subparsers.add_parser(
        "directions",
        help="Show ABOVE/BELOW/LEFT/RIGHT coverage from a cell",
    )
    directions_parser.add_argument("grid", help="Path to a TSV file")
    directions_parser.add_argument(
        "--cell", required=True, help="Current cell in A1 notation"
    )
    directions_parser.set_defaults(func=cmd_directions)

    args = parser.parse_args()

    settings = get_settings()
    setup_logging(
        json_logs=args.json_logs or settings.json_logs,
        log_level=args.log_level or settings.log_level,
    )

    try:
        result: int = args.func(args)
    except SmartTableError as e:
        logger.debug(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return result


if __name__ == "__main__":
    sys.exit(main())
