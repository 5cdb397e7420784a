"""
Bank Layout Configuration

Defines the dataclass describing a fixed-column bank CSV export.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BankLayout:
    """
    Configuration for a fixed bank CSV layout.

    Used by the bank row parsers to split a line and locate each field.

    Attributes:
        name: Human-readable layout name (e.g. "BCA - KlikBCA")
        delimiter: Column separator
        min_columns: Rows with fewer columns are dropped
        date_column: Index of the transaction date
        description_column: Index of the free-text description
        amount_column: Index of the amount token
        flag_column: Index of the debit/credit indicator, if the layout has one
        placeholder: Description used when the column is blank
    """
    name: str
    delimiter: str
    min_columns: int
    date_column: int
    description_column: int
    amount_column: int
    placeholder: str
    flag_column: Optional[int] = None
    credit_indicator: str = 'C'
