"""Formula evaluation for smarttable.

Evaluates ``FUNC(ARG)`` formulas against a scanned Grid:

    =SUM(ABOVE)   =AVERAGE(A1:B3)   =COUNT(A1)

Supported functions are SUM, AVERAGE, COUNT, MAX, MIN and PRODUCT.
Evaluation never raises; problems come back as an ErrorCode value so the
editor can re-evaluate on every keystroke.

Also provides relative reference shifting for fill/drag operations:
``SUM(A1:B2)`` filled one row down becomes ``SUM(A2:B3)``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from loguru import logger

from smarttable.exceptions import InvalidReferenceError
from smarttable.grid import Grid
from smarttable.numbers import format_number, round_result
from smarttable.references import CellAddress, format_reference, label_to_column_index
from smarttable.resolver import classify_argument, resolve_range


class ErrorCode(Enum):
    """Error values returned in place of a numeric result."""

    BAD_FORMAT = "!ERR:FMT"
    MISSING_ARGUMENT = "!ERR:ARG"
    UNKNOWN_FUNCTION = "!ERR:FUNC"
    INVALID_REFERENCE = "!ERR:REF"

    @property
    def description(self) -> str:
        return _ERROR_DESCRIPTIONS[self]


_ERROR_DESCRIPTIONS = {
    ErrorCode.BAD_FORMAT: "Invalid format",
    ErrorCode.MISSING_ARGUMENT: "Missing argument",
    ErrorCode.UNKNOWN_FUNCTION: "Unknown function",
    ErrorCode.INVALID_REFERENCE: "Invalid reference",
}


class FormulaFunction(Enum):
    """Aggregate functions available in formulas."""

    SUM = "SUM"
    AVERAGE = "AVERAGE"
    COUNT = "COUNT"
    MAX = "MAX"
    MIN = "MIN"
    PRODUCT = "PRODUCT"


_AGGREGATES: dict[FormulaFunction, Callable[[list[float]], float]] = {
    FormulaFunction.SUM: sum,
    FormulaFunction.AVERAGE: lambda values: sum(values) / len(values),
    FormulaFunction.COUNT: len,
    FormulaFunction.MAX: max,
    FormulaFunction.MIN: min,
    FormulaFunction.PRODUCT: math.prod,
}

_FORMULA_PATTERN = re.compile(r"^([A-Z]+)\((.*)\)$", re.DOTALL)

# Letters followed by digits, not embedded in a longer identifier and not
# a function name such as LOG10(
_REFERENCE_TOKEN = re.compile(r"(?<![A-Za-z0-9_])([A-Za-z]+)([0-9]+)(?![A-Za-z0-9_(])")


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating a formula.

    ``value`` is a number, or an ErrorCode. ``trace`` is a human-readable
    description for display and debugging only.
    """

    value: int | float | ErrorCode
    trace: str

    @property
    def is_error(self) -> bool:
        return isinstance(self.value, ErrorCode)

    def display(self) -> str:
        """Text to write into the cell."""
        if isinstance(self.value, ErrorCode):
            return self.value.value
        return str(self.value)


@dataclass(frozen=True)
class FilledCell:
    """A formula placed into one cell of a fill selection."""

    address: CellAddress
    formula: str
    result: EvaluationResult


def _error(code: ErrorCode, detail: str | None = None) -> EvaluationResult:
    trace = code.description if detail is None else f"{code.description}: {detail}"
    return EvaluationResult(code, trace)


def parse_formula(formula: str) -> tuple[str, str] | ErrorCode:
    """Split a formula into its function name and argument text.

    A leading ``=`` is optional; input is case-insensitive.

    Returns:
        (function_name, argument) upper-cased, or BAD_FORMAT /
        MISSING_ARGUMENT when the text is not a usable ``FUNC(ARG)``
    """
    clean = formula.strip()
    if clean.startswith("="):
        clean = clean[1:]
    clean = clean.strip().upper()

    match = _FORMULA_PATTERN.match(clean)
    if not match:
        return ErrorCode.BAD_FORMAT

    name, argument = match.group(1), match.group(2).strip()
    if not argument:
        return ErrorCode.MISSING_ARGUMENT
    return name, argument


def aggregate(function: FormulaFunction, values: list[float]) -> int | float:
    """Apply an aggregate function to resolved values.

    An empty value list always gives 0, for every function.
    """
    if not values:
        return 0
    return round_result(_AGGREGATES[function](values))


def _format_values(values: list[float]) -> str:
    return ", ".join(str(format_number(v)) for v in values)


def evaluate(
    formula: str,
    current_cell: CellAddress | tuple[int, int],
    grid: Grid,
) -> EvaluationResult:
    """Evaluate a formula in the context of a cell.

    Args:
        formula: Formula text such as ``=SUM(ABOVE)`` or ``average(a1:b3)``
        current_cell: (row, col) of the cell the formula belongs to
        grid: Scanned table

    Returns:
        EvaluationResult with the rounded number or an ErrorCode
    """
    parsed = parse_formula(formula)
    if isinstance(parsed, ErrorCode):
        logger.debug(f"Cannot parse formula {formula!r}: {parsed.description}")
        return _error(parsed)

    name, argument = parsed
    classified = classify_argument(argument)
    if classified is None:
        logger.debug(f"Cannot classify argument {argument!r}")
        return _error(ErrorCode.INVALID_REFERENCE, argument)

    try:
        values = resolve_range(classified, current_cell, grid)
    except InvalidReferenceError as e:
        logger.debug(f"Cannot resolve {argument!r}: {e}")
        return _error(ErrorCode.INVALID_REFERENCE, e.reference)

    if not values:
        return EvaluationResult(0, f"{name}({argument}) = 0 [No numeric data found]")

    try:
        function = FormulaFunction(name)
    except ValueError:
        logger.debug(f"Unknown function {name} in {formula!r}")
        return _error(ErrorCode.UNKNOWN_FUNCTION, name)

    result = aggregate(function, values)
    return EvaluationResult(
        result, f"{name}({argument}) = {result} [Values: {_format_values(values)}]"
    )


def preview_formula(
    formula: str,
    current_cell: CellAddress | tuple[int, int],
    grid: Grid,
) -> str:
    """One-line description of what a formula computes, for live previews."""
    return evaluate(formula, current_cell, grid).trace


def shift_references(formula: str, row_delta: int, col_delta: int) -> str:
    """Shift every cell reference in a formula by the given offsets.

    References are rewritten in place, left to right. A reference that
    would move above row 1 or left of column A is left unchanged.

    Examples:
        ("SUM(A1:B2)", 1, 0) -> "SUM(A2:B3)"
        ("SUM(A1:B2)", -5, 0) -> "SUM(A1:B2)"
    """

    def replace_ref(match: re.Match[str]) -> str:
        letters, digits = match.groups()
        row = int(digits) - 1 + row_delta
        col = label_to_column_index(letters) + col_delta
        if row < 0 or col < 0 or int(digits) == 0:
            return match.group(0)
        return format_reference(row, col)

    return _REFERENCE_TOKEN.sub(replace_ref, formula)


def fill_formula(
    formula: str,
    targets: Iterable[CellAddress | tuple[int, int]],
    grid: Grid,
) -> list[FilledCell]:
    """Fill a formula across a selection of cells.

    The first target is the source cell and keeps the formula as typed.
    Every other target receives the formula shifted by its offset from the
    source, evaluated at its own position.

    Raises:
        InvalidReferenceError: If a target has a negative coordinate
    """
    filled: list[FilledCell] = []
    source: CellAddress | None = None

    for target in targets:
        address = CellAddress.coerce(target)
        if source is None:
            source = address
            target_formula = formula
        else:
            target_formula = shift_references(
                formula, address.row - source.row, address.col - source.col
            )
        filled.append(
            FilledCell(address, target_formula, evaluate(target_formula, address, grid))
        )

    logger.debug(f"Filled {formula!r} into {len(filled)} cells")
    return filled
