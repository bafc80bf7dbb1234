"""Tests for numeric classification of cell text."""

import pytest

from smarttable.numbers import format_number, parse_numeric, round_result


class TestParseNumeric:
    """Tests for parse_numeric."""

    def test_currency_and_thousands(self) -> None:
        assert parse_numeric("$1,200.50") == 1200.50

    def test_percent(self) -> None:
        assert parse_numeric("50%") == 0.5

    def test_accounting_negative(self) -> None:
        assert parse_numeric("(500)") == -500

    def test_empty(self) -> None:
        assert parse_numeric("") is None
        assert parse_numeric("   ") is None

    def test_text(self) -> None:
        assert parse_numeric("abc") is None

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("42", 42),
            ("  42  ", 42),
            ("-3.5", -3.5),
            ("+7", 7),
            (".5", 0.5),
            ("1e3", 1000),
            ("€99", 99),
            ("£ 1 000", 1000),
            ("¥500", 500),
            ("-$5", -5),
            ("$(1,500)", -1500),
            ("(50)%", -0.5),
            ("12.5 %", 0.125),
        ],
    )
    def test_formatted_numbers(self, text: str, expected: float) -> None:
        assert parse_numeric(text) == pytest.approx(expected)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12 apples", 12),
            ("10kg", 10),
            ("1.2.3", 1.2),
            ("1_000", 1),
            ("2eggs", 2),
            ("5 kg%", 0.05),
        ],
    )
    def test_leading_number_is_used(self, text: str, expected: float) -> None:
        assert parse_numeric(text) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "text", ["%", "$", "()", "inf", "nan", "1e999", "kg10", "(500) apples", "-"]
    )
    def test_not_numeric(self, text: str) -> None:
        assert parse_numeric(text) is None

    def test_non_string_input(self) -> None:
        assert parse_numeric(7) == 7
        assert parse_numeric(None) is None


class TestFormatting:
    """Tests for result formatting helpers."""

    def test_format_number_integral_float(self) -> None:
        assert format_number(25.0) == 25
        assert isinstance(format_number(25.0), int)

    def test_format_number_keeps_fraction(self) -> None:
        assert format_number(1200.5) == 1200.5

    def test_round_result_integer_exact(self) -> None:
        assert round_result(100.0) == 100
        assert isinstance(round_result(100.0), int)

    def test_round_result_two_decimals(self) -> None:
        assert round_result(10 / 3) == 3.33
        assert round_result(0.1 + 0.2) == 0.3

    def test_round_result_half_up(self) -> None:
        assert round_result(1.125) == 1.13
        assert round_result(0.625) == 0.63
        assert round_result(-1.125) == -1.13

    def test_round_result_uses_exact_binary_value(self) -> None:
        # 1.005 is stored just below 1.005
        assert round_result(1.005) == 1

    def test_round_result_rounds_up_to_integer(self) -> None:
        assert round_result(2.999) == 3
