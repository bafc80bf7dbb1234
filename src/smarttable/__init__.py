"""smarttable - spreadsheet formulas for document tables.

Scans the text of a table into a typed grid and evaluates small
spreadsheet formulas (SUM, AVERAGE, COUNT, MAX, MIN, PRODUCT) over cell
ranges, single cells, or directions relative to the formula's cell.
"""

__version__ = "0.1.0"

from loguru import logger

from smarttable.exceptions import InvalidReferenceError, SmartTableError
from smarttable.formulas import (
    ErrorCode,
    EvaluationResult,
    FilledCell,
    FormulaFunction,
    evaluate,
    fill_formula,
    preview_formula,
    shift_references,
)
from smarttable.grid import Cell, CellKind, Grid, scan
from smarttable.numbers import parse_numeric
from smarttable.references import (
    CellAddress,
    CellRange,
    column_index_to_label,
    format_reference,
    label_to_column_index,
    parse_range,
    parse_reference,
)
from smarttable.resolver import Direction, DirectionInfo, directional_info, resolve_range

# Silent unless the application opts in (see smarttable.logging.setup_logging)
logger.disable("smarttable")

__all__ = [
    "Cell",
    "CellAddress",
    "CellKind",
    "CellRange",
    "Direction",
    "DirectionInfo",
    "ErrorCode",
    "EvaluationResult",
    "FilledCell",
    "FormulaFunction",
    "Grid",
    "InvalidReferenceError",
    "SmartTableError",
    "__version__",
    "column_index_to_label",
    "directional_info",
    "evaluate",
    "fill_formula",
    "format_reference",
    "label_to_column_index",
    "parse_numeric",
    "parse_range",
    "parse_reference",
    "preview_formula",
    "resolve_range",
    "scan",
    "shift_references",
]
