"""
Cell reference codec for smarttable.

Converts between column labels and zero-based column indices, and between
A1-style reference strings and (row, col) coordinates.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple

from smarttable.exceptions import InvalidReferenceError

REFERENCE_PATTERN = re.compile(r"^([A-Z]+)([0-9]+)$")
RANGE_PATTERN = re.compile(r"^([A-Z]+[0-9]+):([A-Z]+[0-9]+)$")


class _Coordinates(NamedTuple):
    row: int
    col: int


class CellAddress(_Coordinates):
    """Zero-based (row, col) position of a cell.

    Compares equal to a plain (row, col) tuple.

    Raises:
        InvalidReferenceError: If either coordinate is negative
    """

    __slots__ = ()

    def __new__(cls, row: int, col: int) -> CellAddress:
        if row < 0 or col < 0:
            raise InvalidReferenceError(
                f"({row}, {col})", "coordinates must not be negative"
            )
        return super().__new__(cls, row, col)

    @property
    def label(self) -> str:
        """A1 notation for this address."""
        return format_reference(self.row, self.col)

    @classmethod
    def coerce(cls, value: CellAddress | tuple[int, int]) -> CellAddress:
        """Build an address from a (row, col) pair."""
        if isinstance(value, cls):
            return value
        row, col = value
        return cls(row, col)


@dataclass(frozen=True)
class CellRange:
    """A rectangular span between two corner cells.

    Corners are kept in the order given; ``B2:A1`` and ``A1:B2`` describe
    the same rectangle. Use the min/max accessors or ``normalized()`` when
    iterating.
    """

    start: CellAddress
    end: CellAddress

    @property
    def min_row(self) -> int:
        return min(self.start.row, self.end.row)

    @property
    def max_row(self) -> int:
        return max(self.start.row, self.end.row)

    @property
    def min_col(self) -> int:
        return min(self.start.col, self.end.col)

    @property
    def max_col(self) -> int:
        return max(self.start.col, self.end.col)

    @property
    def label(self) -> str:
        return f"{self.start.label}:{self.end.label}"

    def normalized(self) -> CellRange:
        """Return the same rectangle with start at top-left, end at bottom-right."""
        return CellRange(
            CellAddress(self.min_row, self.min_col),
            CellAddress(self.max_row, self.max_col),
        )

    def addresses(self) -> Iterator[CellAddress]:
        """Iterate every address in the rectangle, row by row."""
        for row in range(self.min_row, self.max_row + 1):
            for col in range(self.min_col, self.max_col + 1):
                yield CellAddress(row, col)


def column_index_to_label(index: int) -> str:
    """Convert a zero-based column index to its letter label.

    Examples:
        0 -> A, 1 -> B, 25 -> Z, 26 -> AA, 27 -> AB, 702 -> AAA

    Raises:
        InvalidReferenceError: If index is negative
    """
    if index < 0:
        raise InvalidReferenceError(str(index), "column index must not be negative")
    label = ""
    while True:
        label = chr(ord("A") + (index % 26)) + label
        index = index // 26 - 1
        if index < 0:
            break
    return label


def label_to_column_index(label: str) -> int:
    """Convert a column label to a zero-based column index.

    Examples:
        A -> 0, B -> 1, Z -> 25, AA -> 26, AB -> 27, AAA -> 702

    Raises:
        InvalidReferenceError: If label is empty or has characters outside A-Z
    """
    if not label:
        raise InvalidReferenceError(label, "empty column label")
    if not (label.isascii() and label.isalpha()):
        raise InvalidReferenceError(label, "column labels may only contain A-Z")
    result = 0
    for char in label.upper():
        result = result * 26 + (ord(char) - ord("A") + 1)
    return result - 1


def format_reference(row: int, col: int) -> str:
    """Convert zero-based row and column indices to A1 notation.

    Examples:
        (0, 0) -> A1, (0, 1) -> B1, (9, 2) -> C10
    """
    if row < 0:
        raise InvalidReferenceError(str(row), "row index must not be negative")
    return f"{column_index_to_label(col)}{row + 1}"


def parse_reference(ref: str) -> CellAddress | None:
    """Parse A1 notation into a zero-based address.

    Returns None when the text is not a cell reference, so callers can use
    it to classify formula arguments.

    Examples:
        A1 -> (0, 0), b1 -> (0, 1), C10 -> (9, 2), A0 -> None, ß1 -> None
    """
    if not ref.isascii():
        return None
    match = REFERENCE_PATTERN.match(ref.strip().upper())
    if not match:
        return None
    letters, digits = match.groups()
    row = int(digits) - 1
    if row < 0:
        return None
    return CellAddress(row, label_to_column_index(letters))


def parse_range(text: str) -> CellRange | None:
    """Parse a ``REF:REF`` range literal, corners in any order.

    Returns None when the text is not a range literal.
    """
    if not text.isascii():
        return None
    match = RANGE_PATTERN.match(text.strip().upper())
    if not match:
        return None
    start = parse_reference(match.group(1))
    end = parse_reference(match.group(2))
    if start is None or end is None:
        return None
    return CellRange(start, end)
