"""
Unit tests for GenericRowParser

Tests cover:
- Delimiter detection (comma, semicolon, tab)
- Amount pattern search over the raw line
- Placeholder descriptions
- Dropped rows
- Always-today dates and always-income kind
"""
from decimal import Decimal

import pytest

from fintrack.common.models import TransactionKind
from fintrack.parsing.banks import BNIParser, BRIParser
from fintrack.parsing.extractors.generic import GenericRowParser


@pytest.fixture
def parser():
    return GenericRowParser()


# =============================================================================
# TEST: split
# =============================================================================

class TestSplit:

    def test_comma_first(self, parser):
        assert parser.split("a,b,c") == ["a", "b", "c"]

    def test_semicolon_when_comma_is_not_enough(self, parser):
        assert parser.split("a,x;b;c") == ["a,x", "b", "c"]

    def test_tab(self, parser):
        assert parser.split("a\tb\tc") == ["a", "b", "c"]

    def test_no_delimiter_with_three_columns(self, parser):
        assert parser.split("a,b") is None


# =============================================================================
# TEST: parse_line
# =============================================================================

class TestGenericParseLine:

    def test_locale_amount_and_description(self, parser, today):
        record = parser.parse_line("x,Transfer masuk,Rp 1.500.000,00", bank_key="jago", today=today)

        assert record.description == "Transfer masuk"
        assert record.amount == Decimal("1500000")
        assert record.kind is TransactionKind.INCOME
        assert record.category == "pendapatan"
        assert record.bank == "jago"

    def test_date_is_always_today(self, parser, today):
        record = parser.parse_line("ref;Bayar listrik;250.000", today=today)
        assert record.date == "2024-03-01"

    def test_tab_delimited_row(self, parser, today):
        record = parser.parse_line("ref\tBayar listrik\t250.000", today=today)

        assert record.description == "Bayar listrik"
        assert record.amount == Decimal("250000")
        assert record.category == "utilitas"

    def test_amount_is_first_numeral_on_line(self, parser, today):
        """The search runs over the whole line, so a leading date wins."""
        record = parser.parse_line("15/01/2024,Gaji,5.000.000", today=today)
        assert record.amount == Decimal("15")

    def test_minus_sign_is_not_captured(self, parser, today):
        """The amount pattern has no sign, so generic rows are income."""
        record = parser.parse_line("ref,Belanja,-50.000", today=today)

        assert record.kind is TransactionKind.INCOME
        assert record.amount == Decimal("50000")
        assert record.category == "belanja"

    def test_placeholder_without_columns(self, parser, today):
        record = parser.parse_line("Pembayaran 50.000", bank_key="bni", today=today)

        assert record.description == "Transaksi BNI"
        assert record.amount == Decimal("50000")

    def test_placeholder_without_bank_key(self, parser, today):
        record = parser.parse_line("Pembayaran 50.000", today=today)
        assert record.description == "Transaksi Bank"
        assert record.bank is None

    def test_quoted_description(self, parser, today):
        record = parser.parse_line('1,"Makan malam",75.000', today=today)
        assert record.description == "Makan malam"
        assert record.category == "makanan"


class TestGenericDroppedRows:

    def test_blank_line(self, parser):
        assert parser.parse_line("") is None
        assert parser.parse_line("  \t ") is None

    def test_no_amount(self, parser):
        assert parser.parse_line("a,b,c") is None

    def test_zero_amount(self, parser):
        assert parser.parse_line("a,b,0") is None

    def test_zero_locale_amount(self, parser):
        assert parser.parse_line("a,b,0,00") is None


# =============================================================================
# TEST: aliases
# =============================================================================

class TestGenericAliases:

    @pytest.mark.parametrize("alias_cls, name", [(BNIParser, "BNI"), (BRIParser, "BRI")])
    def test_aliases_behave_like_generic(self, alias_cls, name, today):
        line = "ref,Setoran,100.000"
        alias = alias_cls().parse_line(line, bank_key=name.lower(), today=today)
        generic = GenericRowParser().parse_line(line, bank_key=name.lower(), today=today)

        assert alias == generic
        assert alias_cls.bank_name == name
