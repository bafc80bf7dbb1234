"""Tests for the grid scanner."""

from smarttable.grid import CellKind, Grid, classify_text, scan
from smarttable.references import CellAddress


class TestScan:
    """Tests for scan."""

    def test_dimensions(self, budget_grid: Grid) -> None:
        assert budget_grid.row_count == 5
        assert budget_grid.col_count == 3
        assert len(budget_grid.cells) == 5
        assert all(len(row) == 3 for row in budget_grid.cells)

    def test_by_reference_is_bijective(self, budget_grid: Grid) -> None:
        assert len(budget_grid.by_reference) == 15
        for cell in budget_grid.iter_cells():
            assert budget_grid.by_reference[cell.id] is cell
            assert budget_grid.cells[cell.row][cell.col] is cell

    def test_cell_identity(self, budget_grid: Grid) -> None:
        cell = budget_grid.cells[1][1]
        assert cell.id == "B2"
        assert cell.address == CellAddress(1, 1)
        assert cell.raw_text == "$1,200.50"
        assert cell.numeric_value == 1200.50
        assert cell.kind is CellKind.NUMBER

    def test_kinds(self, budget_grid: Grid) -> None:
        assert budget_grid.by_reference["A1"].kind is CellKind.TEXT
        assert budget_grid.by_reference["C4"].kind is CellKind.EMPTY
        assert budget_grid.by_reference["B5"].kind is CellKind.TEXT
        assert budget_grid.by_reference["B3"].numeric_value == -500
        assert budget_grid.by_reference["B4"].numeric_value == 0.1

    def test_text_and_empty_have_no_value(self, budget_grid: Grid) -> None:
        assert budget_grid.by_reference["A1"].numeric_value is None
        assert budget_grid.by_reference["C4"].numeric_value is None

    def test_whitespace_only_is_empty(self) -> None:
        grid = scan([["   ", "\t"]])
        assert [cell.kind for cell in grid.iter_cells()] == [
            CellKind.EMPTY,
            CellKind.EMPTY,
        ]

    def test_empty_input(self) -> None:
        grid = scan([])
        assert grid.row_count == 0
        assert grid.col_count == 0
        assert grid.cells == ()
        assert len(grid.by_reference) == 0
        assert grid.is_empty

    def test_rows_without_columns(self) -> None:
        grid = scan([[], []])
        assert grid.row_count == 0
        assert grid.col_count == 0
        assert grid.cells == ()

    def test_ragged_rows_are_padded(self) -> None:
        grid = scan([["1", "2", "3"], ["4"]])
        assert grid.col_count == 3
        assert len(grid.cells[1]) == 3
        assert grid.cells[1][2].kind is CellKind.EMPTY
        assert grid.cells[1][2].raw_text == ""
        assert len(grid.by_reference) == 6

    def test_non_string_cells(self) -> None:
        grid = scan([[1, None, 2.5]])
        assert grid.cells[0][0].numeric_value == 1
        assert grid.cells[0][1].kind is CellKind.EMPTY
        assert grid.cells[0][2].numeric_value == 2.5

    def test_rescan_is_idempotent(self) -> None:
        rows = [["Item", "10"], ["", "$5"]]
        first = scan(rows)
        second = scan(rows)
        assert first == second
        assert first is not second
        assert list(first.iter_cells()) == list(second.iter_cells())

    def test_scan_does_not_mutate_input(self) -> None:
        rows = [["1", "2"], ["3"]]
        scan(rows)
        assert rows == [["1", "2"], ["3"]]


class TestGridAccess:
    """Tests for grid lookups."""

    def test_cell_at(self, square_grid: Grid) -> None:
        cell = square_grid.cell_at(1, 0)
        assert cell is not None
        assert cell.id == "A2"

    def test_cell_at_outside(self, square_grid: Grid) -> None:
        assert square_grid.cell_at(2, 0) is None
        assert square_grid.cell_at(0, 2) is None
        assert square_grid.cell_at(-1, 0) is None

    def test_lookup(self, square_grid: Grid) -> None:
        cell = square_grid.lookup("b2")
        assert cell is not None
        assert cell.numeric_value == 40

    def test_lookup_missing(self, square_grid: Grid) -> None:
        assert square_grid.lookup("C1") is None
        assert square_grid.lookup("nonsense") is None


class TestClassifyText:
    """Tests for classify_text."""

    def test_number(self) -> None:
        assert classify_text("1,000") == (1000, CellKind.NUMBER)

    def test_text(self) -> None:
        assert classify_text("Total") == (None, CellKind.TEXT)

    def test_empty(self) -> None:
        assert classify_text("") == (None, CellKind.EMPTY)
