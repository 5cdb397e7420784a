from typing import List

from fintrack.common.models import TransactionKind
from ..base import FixedLayoutParser
from ..config.layout import BankLayout

# 15/01/2024;1200012345;Gaji Januari;IDR;-150000
# Date, Account, Description, Currency, Signed amount
MANDIRI_LAYOUT = BankLayout(
    name="Mandiri - Livin",
    delimiter=';',
    min_columns=5,
    date_column=0,
    description_column=2,
    amount_column=4,
    placeholder="Transaksi Mandiri",
)


class MandiriParser(FixedLayoutParser):
    bank_name = 'Mandiri'
    layout = MANDIRI_LAYOUT

    def resolve_kind(self, columns: List[str], negative: bool) -> TransactionKind:
        return TransactionKind.EXPENSE if negative else TransactionKind.INCOME
