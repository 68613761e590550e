"""Tests for field formatters."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from cnab_gen.exceptions import InvalidFieldError
from cnab_gen.formatters import alpha, from_money, money, numeric, round_money
from cnab_gen.formatters import date as format_date


class TestNumeric:
    """Tests for numeric()."""

    def test_pads_left_with_zeros(self) -> None:
        assert numeric(42, 5) == "00042"

    def test_strips_non_digits(self) -> None:
        assert numeric("11.222.333/0001-81", 14) == "11222333000181"

    def test_truncates_from_the_left(self) -> None:
        """Longer values keep the rightmost digits."""
        assert numeric("123456789", 4) == "6789"

    def test_none_gives_zeros(self) -> None:
        assert numeric(None, 3) == "000"

    def test_text_without_digits_gives_zeros(self) -> None:
        assert numeric("abc", 4) == "0000"

    @pytest.mark.parametrize("value", ["12", "00012", "abc123def", "987654321", None])
    def test_idempotent(self, value) -> None:
        once = numeric(value, 5)
        assert numeric(once, 5) == once
        assert len(once) == 5


class TestAlpha:
    """Tests for alpha()."""

    def test_strips_accents_and_uppercases(self) -> None:
        assert alpha("João Ç", 10) == "JOAO C    "

    def test_truncates(self) -> None:
        assert alpha("Fornecedor de Materiais", 10) == "FORNECEDOR"

    def test_drops_punctuation(self) -> None:
        assert alpha("Acme, Ltda.", 10) == "ACME LTDA "

    def test_keeps_requested_characters(self) -> None:
        assert alpha("ana.silva@mail.com", 20, keep="@.-+") == "ANA.SILVA@MAIL.COM  "

    def test_none_gives_blanks(self) -> None:
        assert alpha(None, 4) == "    "

    def test_control_whitespace_becomes_space(self) -> None:
        assert alpha("A\tB\nC", 5) == "A B C"

    def test_keeps_underscore(self) -> None:
        assert alpha("a_b", 3) == "A_B"

    def test_ordinal_indicators_folded(self) -> None:
        result = alpha("Rua 1º de Maio nª", 20)

        assert result == "RUA 1O DE MAIO NA   "
        assert result.isascii()

    def test_letters_without_ascii_form_dropped(self) -> None:
        result = alpha("Łukasz Œuvre", 12)

        assert result == "UKASZ UVRE  "
        assert result.isascii()


class TestDate:
    """Tests for date()."""

    def test_date(self) -> None:
        assert format_date(date(2024, 3, 5)) == "05032024"

    def test_datetime(self) -> None:
        assert format_date(datetime(2024, 12, 31, 23, 59)) == "31122024"

    def test_iso_string(self) -> None:
        assert format_date("2024-02-29") == "29022024"

    def test_iso_datetime_string(self) -> None:
        assert format_date("2024-02-29T10:00:00") == "29022024"

    def test_year_below_1000_zero_padded(self) -> None:
        assert format_date(date(999, 1, 2)) == "02010999"
        assert format_date("0999-01-02") == "02010999"

    @pytest.mark.parametrize("value", [None, "", "not a date", "2024-13-40", 12345])
    def test_invalid_gives_zeros(self, value) -> None:
        assert format_date(value) == "00000000"


class TestMoney:
    """Tests for money()."""

    def test_implicit_decimals(self) -> None:
        assert money(Decimal("1234.5"), 15) == "000000000123450"

    def test_float_input(self) -> None:
        assert money(10.1, 10) == "0000001010"

    def test_numeric_string(self) -> None:
        assert money("99.99", 8) == "00009999"

    def test_rounds_half_up(self) -> None:
        assert money(Decimal("0.125"), 5) == "00013"
        assert money(Decimal("0.005"), 5) == "00001"

    def test_custom_decimals(self) -> None:
        assert money(Decimal("1.23456"), 10, decimals=5) == "0000123456"

    def test_none_gives_zeros(self) -> None:
        assert money(None, 6) == "000000"

    def test_unparseable_gives_zeros(self) -> None:
        assert money("abc", 6) == "000000"

    def test_zero(self) -> None:
        assert money(0, 4) == "0000"

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidFieldError, match="Negative"):
            money(Decimal("-1.00"), 15)

    def test_overflow_raises(self) -> None:
        with pytest.raises(InvalidFieldError, match="does not fit"):
            money(Decimal("1000000"), 5)

    @pytest.mark.parametrize("value", ["0.01", "1.005", "1234.565", "99999.994", "7"])
    def test_decodes_to_rounded_value(self, value: str) -> None:
        """Decoding the digits yields the value rounded to cents."""
        digits = money(Decimal(value), 15)
        assert from_money(digits) == round_money(Decimal(value))


class TestRoundMoney:
    """Tests for round_money()."""

    def test_half_up(self) -> None:
        assert round_money(Decimal("2.675")) == Decimal("2.68")

    def test_none_is_zero(self) -> None:
        assert round_money(None) == Decimal("0.00")
