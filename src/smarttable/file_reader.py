"""Read table snapshots from TSV files."""

from __future__ import annotations

import re
from pathlib import Path

from smarttable.exceptions import GridFileError

_ESCAPE_PATTERN = re.compile(r"\\(.)")
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "\\": "\\"}


def read_grid(path: Path, encoding: str = "utf-8") -> list[list[str]]:
    """Read a TSV file into rows of cell text.

    Args:
        path: Path to the TSV file
        encoding: File encoding

    Returns:
        2D list of cell values

    Raises:
        GridFileError: If the file is missing or cannot be decoded
    """
    if not path.is_file():
        raise GridFileError(str(path), "File not found")
    try:
        content = path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise GridFileError(str(path), f"Cannot decode as {encoding}: {e}") from e
    return parse_tsv(content)


def parse_tsv(content: str) -> list[list[str]]:
    """Parse TSV content into a 2D grid.

    Handles escaped characters (\\t, \\n, \\r, \\\\).

    Args:
        content: TSV file content

    Returns:
        2D list of cell values
    """
    if not content or not content.strip():
        return []

    lines = content.replace("\r\n", "\n").rstrip("\n").split("\n")
    return [[_unescape_tsv_value(cell) for cell in line.split("\t")] for line in lines]


def _unescape_tsv_value(value: str) -> str:
    """Unescape a TSV value. Unknown escapes are kept as written."""
    return _ESCAPE_PATTERN.sub(lambda m: _ESCAPES.get(m.group(1), m.group(0)), value)
