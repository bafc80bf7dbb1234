"""Shared test fixtures for smarttable."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger

from smarttable.grid import Grid, scan


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop sinks added by the CLI so they do not outlive captured streams."""
    yield
    logger.remove()
    logger.disable("smarttable")


@pytest.fixture
def square_grid() -> Grid:
    """2x2 grid of plain numbers."""
    return scan([["10", "20"], ["30", "40"]])


@pytest.fixture
def column_grid() -> Grid:
    """Single column: 5, 7, 9."""
    return scan([["5"], ["7"], ["9"]])


@pytest.fixture
def budget_grid() -> Grid:
    """Mixed table with headers, formatted numbers and blanks.

        A           B           C
    1   Item        Q1          Q2
    2   Rent        $1,200.50   $1,300
    3   Travel      (500)       250
    4   Discount    10%
    5   Notes       n/a         75
    """
    return scan(
        [
            ["Item", "Q1", "Q2"],
            ["Rent", "$1,200.50", "$1,300"],
            ["Travel", "(500)", "250"],
            ["Discount", "10%", ""],
            ["Notes", "n/a", "75"],
        ]
    )
