"""Grid scanner for smarttable.

Turns a snapshot of table text (rows of strings) into an immutable,
typed ``Grid`` that formulas are evaluated against. A grid is a pure
function of its input: rescan whenever the table text changes.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from loguru import logger

from smarttable.numbers import parse_numeric
from smarttable.references import CellAddress, format_reference, parse_reference


class CellKind(Enum):
    """Classification of a cell's text."""

    EMPTY = "empty"
    NUMBER = "number"
    TEXT = "text"


@dataclass(frozen=True)
class Cell:
    """A single scanned cell."""

    id: str  # A1 reference, e.g. "B3"
    address: CellAddress
    raw_text: str
    numeric_value: float | None
    kind: CellKind

    @property
    def row(self) -> int:
        return self.address.row

    @property
    def col(self) -> int:
        return self.address.col

    @property
    def is_numeric(self) -> bool:
        return self.kind is CellKind.NUMBER


@dataclass(frozen=True)
class Grid:
    """Immutable, typed snapshot of a table."""

    row_count: int
    col_count: int
    cells: tuple[tuple[Cell, ...], ...]
    by_reference: Mapping[str, Cell] = field(
        default_factory=dict, compare=False, repr=False
    )

    def cell_at(self, row: int, col: int) -> Cell | None:
        """Return the cell at (row, col), or None outside the grid."""
        if 0 <= row < self.row_count and 0 <= col < self.col_count:
            return self.cells[row][col]
        return None

    def lookup(self, ref: str) -> Cell | None:
        """Return the cell for an A1 reference (case-insensitive)."""
        address = parse_reference(ref)
        if address is None:
            return None
        return self.cell_at(address.row, address.col)

    def iter_cells(self) -> Iterator[Cell]:
        """Iterate all cells row by row."""
        for row in self.cells:
            yield from row

    @property
    def is_empty(self) -> bool:
        return self.row_count == 0


def classify_text(raw_text: str) -> tuple[float | None, CellKind]:
    """Return the numeric value and kind for a cell's text."""
    if not raw_text.strip():
        return None, CellKind.EMPTY
    value = parse_numeric(raw_text)
    if value is None:
        return None, CellKind.TEXT
    return value, CellKind.NUMBER


def scan(raw_rows: Sequence[Sequence[Any]]) -> Grid:
    """Scan rows of cell text into a Grid.

    The column count is the length of the longest row; shorter rows are
    padded with empty cells. Empty input yields a 0x0 grid.

    Args:
        raw_rows: Table text, one sequence of cell strings per row

    Returns:
        Grid with one Cell per (row, col) position
    """
    col_count = max((len(row) for row in raw_rows), default=0)
    row_count = len(raw_rows) if col_count else 0

    rows: list[tuple[Cell, ...]] = []
    by_reference: dict[str, Cell] = {}

    for r in range(row_count):
        source = raw_rows[r]
        row_cells: list[Cell] = []
        for c in range(col_count):
            value = source[c] if c < len(source) else None
            raw_text = "" if value is None else str(value)
            numeric_value, kind = classify_text(raw_text)
            ref = format_reference(r, c)
            cell = Cell(
                id=ref,
                address=CellAddress(r, c),
                raw_text=raw_text,
                numeric_value=numeric_value,
                kind=kind,
            )
            row_cells.append(cell)
            by_reference[ref] = cell
        rows.append(tuple(row_cells))

    logger.debug(f"Scanned table into {row_count}x{col_count} grid")

    return Grid(
        row_count=row_count,
        col_count=col_count,
        cells=tuple(rows),
        by_reference=MappingProxyType(by_reference),
    )
