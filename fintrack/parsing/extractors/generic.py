"""
Generic Row Parser

Fallback for unknown or irregular CSV layouts. The delimiter is guessed per
line and the amount is found by pattern search over the raw line.
"""
from datetime import date
from typing import List, Optional

from fintrack.common.logging_config import get_logger
from fintrack.common.models import DraftTransaction, TransactionKind
from ..base import BaseRowParser
from ..normalizer import GENERIC_AMOUNT_PATTERN, clean_description, normalize_date, parse_generic_numeral

logger = get_logger(__name__)

DELIMITERS = (',', ';', '\t')
MIN_COLUMNS = 3


class GenericRowParser(BaseRowParser):
    """
    Heuristic parser used when no bank layout is registered for the key.

    The date column is never read: every record is dated today.
    """

    bank_name = 'Bank'

    def split(self, line: str) -> Optional[List[str]]:
        """Returns the columns of the first delimiter yielding at least 3 of them."""
        for delimiter in DELIMITERS:
            columns = line.split(delimiter)
            if len(columns) >= MIN_COLUMNS:
                return columns
        return None

    def parse_line(self, line: str, bank_key: Optional[str] = None,
                   today: Optional[date] = None) -> Optional[DraftTransaction]:
        if not line or not line.strip():
            return None

        columns = self.split(line)
        description = clean_description(columns[1]) if columns else ''
        if not description:
            description = self.placeholder(bank_key)

        match = GENERIC_AMOUNT_PATTERN.search(line)
        if not match:
            logger.debug("Row dropped: no amount pattern.", parser=self.__class__.__name__)
            return None

        value = parse_generic_numeral(match.group(0))
        if value is None or value == 0:
            logger.debug("Row dropped: zero or unparseable amount.", parser=self.__class__.__name__,
                         raw_amount=match.group(0))
            return None

        # The pattern cannot capture a minus sign, so this is Income in practice
        kind = TransactionKind.INCOME if value >= 0 else TransactionKind.EXPENSE

        return self.build(
            kind=kind,
            amount=abs(value),
            description=description,
            date_str=normalize_date(None, today=today),
            bank_key=bank_key,
        )
