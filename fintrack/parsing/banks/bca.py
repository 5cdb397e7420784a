from typing import List

from fintrack.common.models import TransactionKind
from ..base import FixedLayoutParser
from ..config.layout import BankLayout

# 15/01/2024,"Belanja Bulanan",Main,150000,D,999999
# Date, Description, Branch, Amount, CR/DB flag, Balance
BCA_LAYOUT = BankLayout(
    name="BCA - KlikBCA",
    delimiter=',',
    min_columns=6,
    date_column=0,
    description_column=1,
    amount_column=3,
    flag_column=4,
    placeholder="Transaksi BCA",
)


class BCAParser(FixedLayoutParser):
    bank_name = 'BCA'
    layout = BCA_LAYOUT

    def resolve_kind(self, columns: List[str], negative: bool) -> TransactionKind:
        # Only the flag counts; the amount column is unsigned in this export
        flag = columns[self.layout.flag_column].strip()
        if self.layout.credit_indicator in flag:
            return TransactionKind.INCOME
        return TransactionKind.EXPENSE
