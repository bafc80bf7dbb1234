"""Range resolution for smarttable formulas.

A formula argument is one of three shapes:

- a direction keyword (ABOVE, BELOW, LEFT, RIGHT), relative to the cell
  the formula lives in
- a range literal (``A1:C5``), corners in any order
- a single cell reference (``A1``)

Resolution yields the numeric values found in that region, row by row.
Reaching the edge of the table or selecting only text/empty cells is not
an error: the result is simply an empty list.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from loguru import logger

from smarttable.exceptions import InvalidReferenceError
from smarttable.grid import Cell, Grid
from smarttable.references import CellAddress, CellRange, parse_range, parse_reference


class Direction(Enum):
    """Directional keywords, resolved relative to the current cell."""

    ABOVE = "ABOVE"
    BELOW = "BELOW"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


Argument = Direction | CellRange | CellAddress


@dataclass
class DirectionInfo:
    """What a directional keyword would cover from a given cell."""

    direction: Direction
    available: bool
    cell_count: int = 0
    values: list[float] = field(default_factory=list)
    reason: str | None = None  # Set when not available


_EDGE_REASONS = {
    Direction.ABOVE: "Already in first row",
    Direction.BELOW: "Already in last row",
    Direction.LEFT: "Already in first column",
    Direction.RIGHT: "Already in last column",
}


def classify_argument(text: str) -> Argument | None:
    """Classify a formula argument.

    Tried in order: direction keyword, range literal, single reference.

    Returns:
        Direction, CellRange or CellAddress; None if the text is none of them
    """
    arg = text.strip().upper()
    try:
        return Direction(arg)
    except ValueError:
        pass
    cell_range = parse_range(arg)
    if cell_range is not None:
        return cell_range
    return parse_reference(arg)


def directional_addresses(
    direction: Direction, current_cell: CellAddress, grid: Grid
) -> list[CellAddress]:
    """Addresses strictly between the table edge and the current cell.

    Ordered top-to-bottom / left-to-right. Empty when the current cell is
    already at the edge in that direction.
    """
    row, col = current_cell
    if direction is Direction.ABOVE:
        return [CellAddress(r, col) for r in range(min(row, grid.row_count))]
    if direction is Direction.BELOW:
        return [CellAddress(r, col) for r in range(row + 1, grid.row_count)]
    if direction is Direction.LEFT:
        return [CellAddress(row, c) for c in range(min(col, grid.col_count))]
    return [CellAddress(row, c) for c in range(col + 1, grid.col_count)]


def _numeric_values(addresses: Iterable[CellAddress], grid: Grid) -> list[float]:
    values: list[float] = []
    for address in addresses:
        cell: Cell | None = grid.cell_at(address.row, address.col)
        if cell is not None and cell.is_numeric and cell.numeric_value is not None:
            values.append(cell.numeric_value)
    return values


def resolve_range(
    arg: str | Argument,
    current_cell: CellAddress | tuple[int, int],
    grid: Grid,
) -> list[float]:
    """Resolve a formula argument to the numeric values it covers.

    Args:
        arg: Argument text, or an already classified argument
        current_cell: Position of the cell holding the formula
        grid: Scanned table

    Returns:
        Numeric values in row-major order (possibly empty)

    Raises:
        InvalidReferenceError: If ``arg`` is text that is not a direction,
            range or cell reference
    """
    if isinstance(arg, str):
        classified = classify_argument(arg)
        if classified is None:
            raise InvalidReferenceError(arg, "not a direction, range or cell reference")
        arg = classified

    current = CellAddress.coerce(current_cell)

    if isinstance(arg, Direction):
        addresses = directional_addresses(arg, current, grid)
        if not addresses:
            logger.debug(f"No cells {arg.value.lower()} {current.label} (edge of table)")
        values = _numeric_values(addresses, grid)
    elif isinstance(arg, CellRange):
        values = _numeric_values(arg.addresses(), grid)
        logger.debug(f"Range {arg.normalized().label}: {len(values)} numeric values")
    else:
        values = _numeric_values([arg], grid)

    return values


def directional_info(
    current_cell: CellAddress | tuple[int, int], grid: Grid
) -> dict[Direction, DirectionInfo]:
    """Describe each direction available from the current cell.

    Useful for suggesting formulas: a direction is unavailable when the
    current cell is at that edge of the table.
    """
    current = CellAddress.coerce(current_cell)
    info: dict[Direction, DirectionInfo] = {}

    if current.row >= grid.row_count:
        for direction in Direction:
            info[direction] = DirectionInfo(
                direction, available=False, reason="Row index out of bounds"
            )
        return info

    for direction in Direction:
        addresses = directional_addresses(direction, current, grid)
        if not addresses:
            info[direction] = DirectionInfo(
                direction, available=False, reason=_EDGE_REASONS[direction]
            )
            continue
        info[direction] = DirectionInfo(
            direction,
            available=True,
            cell_count=len(addresses),
            values=_numeric_values(addresses, grid),
        )

    return info
