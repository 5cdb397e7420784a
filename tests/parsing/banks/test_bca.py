"""
Unit tests for BCAParser (comma-delimited, CR/DB flag column)
"""
from decimal import Decimal

import pytest

from fintrack.common.models import TransactionKind
from fintrack.parsing.banks.bca import BCAParser


@pytest.fixture
def parser():
    return BCAParser()


class TestBCAParseLine:

    def test_expense_row(self, parser):
        record = parser.parse_line('15/01/2024,"Belanja Bulanan",Main,150000,D,999999', bank_key='bca')

        assert record.kind is TransactionKind.EXPENSE
        assert record.amount == Decimal("150000")
        assert record.description == "Belanja Bulanan"
        assert record.date == "2024-01-15"
        assert record.category == "belanja"
        assert record.bank == "bca"

    def test_credit_flag_is_income(self, parser):
        record = parser.parse_line('16/01/2024,"Gaji Januari",KCU,5000000,CR,5999999', bank_key='bca')

        assert record.kind is TransactionKind.INCOME
        assert record.category == "gaji"

    def test_flag_indicator_is_case_sensitive(self, parser):
        record = parser.parse_line('16/01/2024,Transfer masuk,KCU,100000,c,1')
        assert record.kind is TransactionKind.EXPENSE

    def test_stray_quote_falls_back_to_plain_split(self, parser):
        record = parser.parse_line('15/01/2024,"Toko, Main,150000,D,1', bank_key='bca')

        assert record is not None
        assert record.description == "Toko"
        assert record.amount == Decimal("150000")
        assert record.kind is TransactionKind.EXPENSE
        assert record.date == "2024-01-15"

    def test_quoted_locale_amount(self, parser):
        record = parser.parse_line('16/01/2024,"Bayar listrik","KCU","350.000,00",DB,1')

        assert record.amount == Decimal("350000")
        assert record.kind is TransactionKind.EXPENSE
        assert record.category == "utilitas"

    def test_blank_description_uses_placeholder(self, parser):
        record = parser.parse_line('17/01/2024,"",Main,25000,D,1')
        assert record.description == "Transaksi BCA"
        assert record.category == "lainnya"

    def test_unparseable_date_uses_today(self, parser, today):
        record = parser.parse_line('PEND,Setoran tunai,Main,25000,CR,1', today=today)
        assert record.date == "2024-03-01"

    def test_signed_amount_is_magnitude(self, parser):
        record = parser.parse_line('15/01/2024,Tarik tunai,Main,-50000,D,1')
        assert record.amount == Decimal("50000")
        assert record.kind is TransactionKind.EXPENSE


class TestBCADroppedRows:

    def test_too_few_columns(self, parser):
        assert parser.parse_line('15/01/2024,"Belanja",Main,150000,D') is None

    def test_zero_amount(self, parser):
        assert parser.parse_line('15/01/2024,"Belanja",Main,0,D,999') is None

    def test_unparseable_amount(self, parser):
        assert parser.parse_line('15/01/2024,"Belanja",Main,abc,D,999') is None

    def test_blank_line(self, parser):
        assert parser.parse_line('   ') is None

    def test_oversized_field(self, parser):
        line = '15/01/2024,"' + 'x' * 200000 + '",Main,150000,D,1'
        assert parser.parse_line(line) is None
