"""Custom exceptions for smarttable."""

from __future__ import annotations


class SmartTableError(Exception):
    """Base exception for smarttable errors."""

    pass


class InvalidReferenceError(SmartTableError, ValueError):
    """Raised when a cell reference cannot be decoded.

    Only raised where a definite parse is required. Speculative parsing
    (``parse_reference``, ``parse_range``) returns None instead.
    """

    def __init__(self, reference: str, reason: str) -> None:
        self.reference = reference
        self.reason = reason
        super().__init__(f"Invalid reference '{reference}': {reason}")


class GridFileError(SmartTableError):
    """Raised when a grid file is missing or cannot be read."""

    def __init__(self, file_path: str, reason: str) -> None:
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"Invalid grid file '{file_path}': {reason}")
