from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import List, Optional


class TransactionKind(str, Enum):
    """Direction of a money movement. Values are the wire strings used by the frontend."""
    INCOME = 'pemasukan'
    EXPENSE = 'pengeluaran'


def _as_number(value: Decimal):
    # JSON clients expect plain numbers; integral amounts stay integers
    if value == value.to_integral_value():
        return int(value)
    return float(value)


@dataclass(frozen=True)
class DraftTransaction:
    """
    Normalized record produced by the ingestion pipeline.
    Owned by the caller once returned; identity and timestamps are assigned on storage.
    """
    kind: TransactionKind
    amount: Decimal  # Always > 0
    description: str
    category: str
    date: str  # YYYY-MM-DD
    bank: Optional[str] = None

    def to_dict(self):
        data = {
            'type': self.kind.value,
            'amount': _as_number(self.amount),
            'description': self.description,
            'category': self.category,
            'date': self.date,
        }
        if self.bank:
            data['bank'] = self.bank
        return data


@dataclass(frozen=True)
class ImportSummary:
    total: int
    income: Decimal
    expense: Decimal

    @classmethod
    def from_records(cls, records: List[DraftTransaction]) -> "ImportSummary":
        income = sum((r.amount for r in records if r.kind is TransactionKind.INCOME), Decimal(0))
        expense = sum((r.amount for r in records if r.kind is TransactionKind.EXPENSE), Decimal(0))
        return cls(total=len(records), income=income, expense=expense)

    def to_dict(self):
        return {
            'total': self.total,
            'income': _as_number(self.income),
            'expense': _as_number(self.expense),
        }


@dataclass
class Transaction:
    """
    Stored transaction. A DraftTransaction plus identity and bookkeeping fields.
    """
    id: str
    kind: TransactionKind
    amount: Decimal
    description: str
    category: str
    date: str
    created_at: str
    bank: Optional[str] = None
    receipt_image: Optional[str] = None

    @classmethod
    def from_draft(cls, draft: DraftTransaction, id: str, created_at: str,
                   receipt_image: Optional[str] = None) -> "Transaction":
        return cls(
            id=id,
            kind=draft.kind,
            amount=draft.amount,
            description=draft.description,
            category=draft.category,
            date=draft.date,
            created_at=created_at,
            bank=draft.bank,
            receipt_image=receipt_image,
        )

    def to_dict(self):
        data = {
            'id': self.id,
            'type': self.kind.value,
            'amount': _as_number(self.amount),
            'description': self.description,
            'category': self.category,
            'date': self.date,
            'createdAt': self.created_at,
        }
        if self.bank:
            data['bank'] = self.bank
        if self.receipt_image:
            data['receiptImage'] = self.receipt_image
        return data
