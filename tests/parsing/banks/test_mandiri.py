"""
Unit tests for MandiriParser (semicolon-delimited, signed amount column)
"""
from decimal import Decimal

import pytest

from fintrack.common.models import TransactionKind
from fintrack.parsing.banks.mandiri import MandiriParser


@pytest.fixture
def parser():
    return MandiriParser()


class TestMandiriParseLine:

    def test_positive_amount_is_income(self, parser):
        record = parser.parse_line('15/01/2024;1200012345;Gaji Januari;IDR;5000000', bank_key='mandiri')

        assert record.kind is TransactionKind.INCOME
        assert record.amount == Decimal("5000000")
        assert record.description == "Gaji Januari"
        assert record.category == "gaji"
        assert record.date == "2024-01-15"
        assert record.bank == "mandiri"

    def test_negative_amount_is_expense(self, parser):
        record = parser.parse_line('16/01/2024;1200012345;Makan di warung;IDR;-35000')

        assert record.kind is TransactionKind.EXPENSE
        assert record.amount == Decimal("35000")
        assert record.category == "makanan"

    def test_negative_locale_amount(self, parser):
        record = parser.parse_line('2024-01-20;1200012345;Cicilan;IDR;-1.500.000,00')

        assert record.kind is TransactionKind.EXPENSE
        assert record.amount == Decimal("1500000")
        assert record.date == "2024-01-20"

    def test_missing_description_uses_placeholder(self, parser):
        record = parser.parse_line('15/01/2024;1200012345;;IDR;10000')
        assert record.description == "Transaksi Mandiri"
        assert record.category == "pendapatan"

    def test_extra_columns_are_ignored(self, parser):
        record = parser.parse_line('15/01/2024;1;Bioskop;IDR;-50000;saldo;extra')
        assert record.category == "hiburan"


class TestMandiriDroppedRows:

    def test_too_few_columns(self, parser):
        assert parser.parse_line('15/01/2024;1;Gaji;5000000') is None

    def test_zero_amount(self, parser):
        assert parser.parse_line('15/01/2024;1;Gaji;IDR;0') is None

    def test_unparseable_amount(self, parser):
        assert parser.parse_line('15/01/2024;1;Gaji;IDR;n/a') is None
