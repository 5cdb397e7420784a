"""
Base Classes for Parsing Module

Every row parser turns one raw CSV line (header already removed) into a
DraftTransaction, or returns None when the row has to be dropped.
"""
import csv
from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import List, Optional

from fintrack.common.logging_config import get_logger
from fintrack.common.models import DraftTransaction, TransactionKind
from .categorizer import categorize
from .config.layout import BankLayout
from .normalizer import clean_description, normalize_amount, normalize_date

logger = get_logger(__name__)


class BaseRowParser(ABC):
    """
    Abstract Base Class for all single-line parsers.

    Parsers hold no per-run state, so one instance can be shared by
    concurrent imports.
    """

    bank_name = 'Bank'

    @abstractmethod
    def parse_line(self, line: str, bank_key: Optional[str] = None,
                   today: Optional[date] = None) -> Optional[DraftTransaction]:
        """
        Parses a single CSV line.
        Must be implemented by subclasses.
        """
        raise NotImplementedError

    def placeholder(self, bank_key: Optional[str] = None) -> str:
        """Description used when the row carries none."""
        return f"Transaksi {bank_key.upper() if bank_key else self.bank_name}"

    def build(self, kind: TransactionKind, amount: Decimal, description: str,
              date_str: str, bank_key: Optional[str]) -> DraftTransaction:
        """Assembles the draft and assigns its category."""
        return DraftTransaction(
            kind=kind,
            amount=amount,
            description=description,
            category=categorize(description, kind),
            date=date_str,
            bank=bank_key,
        )


class FixedLayoutParser(BaseRowParser):
    """
    Parser for bank exports with a fixed delimiter and column order.

    Subclasses provide a BankLayout and decide the transaction kind.
    """

    layout: BankLayout

    def split(self, line: str) -> Optional[List[str]]:
        """
        Splits a line honouring double-quoted fields.

        A stray quote makes csv.reader swallow the rest of the line, so a short
        result is retried as a plain delimiter split. Returns None when the
        line cannot be tokenized at all.
        """
        try:
            rows = list(csv.reader([line], delimiter=self.layout.delimiter))
        except csv.Error as e:
            logger.debug("Row dropped: unreadable CSV fields.", parser=self.__class__.__name__,
                         error=str(e))
            return None

        columns = rows[0] if rows else []
        if len(columns) < self.layout.min_columns:
            columns = line.split(self.layout.delimiter)
        return columns

    @abstractmethod
    def resolve_kind(self, columns: List[str], negative: bool) -> TransactionKind:
        """Decides Income/Expense from the row."""
        raise NotImplementedError

    def parse_line(self, line: str, bank_key: Optional[str] = None,
                   today: Optional[date] = None) -> Optional[DraftTransaction]:
        if not line or not line.strip():
            return None

        columns = self.split(line)
        if columns is None:
            return None
        if len(columns) < self.layout.min_columns:
            logger.debug("Row dropped: not enough columns.", parser=self.__class__.__name__,
                         columns=len(columns), required=self.layout.min_columns)
            return None

        parsed = normalize_amount(columns[self.layout.amount_column])
        if parsed is None or parsed.value == 0:
            logger.debug("Row dropped: zero or unparseable amount.", parser=self.__class__.__name__,
                         raw_amount=columns[self.layout.amount_column])
            return None

        description = clean_description(columns[self.layout.description_column])
        if not description:
            description = self.layout.placeholder

        return self.build(
            kind=self.resolve_kind(columns, parsed.negative),
            amount=parsed.value,
            description=description,
            date_str=normalize_date(columns[self.layout.date_column], today=today),
            bank_key=bank_key,
        )
