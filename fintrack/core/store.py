import itertools
import threading
import time
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List, Optional

from fintrack.common.exceptions import InvalidTransactionError, TransactionNotFoundError
from fintrack.common.models import DraftTransaction, Transaction, TransactionKind
from fintrack.parsing.categorizer import categorize
from fintrack.parsing.normalizer import normalize_date

SAMPLE_TRANSACTION = DraftTransaction(
    kind=TransactionKind.INCOME,
    amount=Decimal('5000000'),
    description='Gaji Bulan Januari',
    category='gaji',
    date='2024-01-15',
)


def draft_from_payload(payload: dict, today: Optional[date] = None) -> DraftTransaction:
    """
    Validates a manually submitted transaction (JSON body) into a draft.

    Raises:
        InvalidTransactionError: unknown type, non-positive amount or blank description
    """
    try:
        kind = TransactionKind(payload.get('type'))
    except ValueError:
        raise InvalidTransactionError("Tipe transaksi harus 'pemasukan' atau 'pengeluaran'")

    try:
        amount = Decimal(str(payload.get('amount')))
    except (InvalidOperation, ValueError):
        raise InvalidTransactionError("Jumlah tidak valid")
    if not amount.is_finite() or amount <= 0:
        raise InvalidTransactionError("Jumlah harus lebih dari 0")

    description = str(payload.get('description') or '').strip()
    if not description:
        raise InvalidTransactionError("Keterangan tidak boleh kosong")

    category = str(payload.get('category') or '').strip() or categorize(description, kind)
    raw_date = payload.get('date')
    date_str = normalize_date(raw_date, today=today) if raw_date else (today or date.today()).isoformat()

    return DraftTransaction(
        kind=kind,
        amount=amount,
        description=description,
        category=category,
        date=date_str,
        bank=payload.get('bank') or None,
    )


class TransactionStore:
    """
    In-memory transaction store.

    Owned by the application instance and handed to request handlers; its
    content lives until the process restarts.
    """

    def __init__(self, seed_sample_data: bool = False):
        self._transactions: Dict[str, Transaction] = {}
        self._lock = threading.Lock()
        self._sequence = itertools.count()
        if seed_sample_data:
            self.add(SAMPLE_TRANSACTION)

    def _next_id(self) -> str:
        # Millisecond timestamp like the original ids, plus a sequence to keep bulk inserts unique
        return f"{int(time.time() * 1000)}{next(self._sequence):04d}"

    def add(self, draft: DraftTransaction, receipt_image: Optional[str] = None) -> Transaction:
        with self._lock:
            tx = Transaction.from_draft(
                draft,
                id=self._next_id(),
                created_at=datetime.now().isoformat(),
                receipt_image=receipt_image,
            )
            self._transactions[tx.id] = tx
            return tx

    def add_many(self, drafts: Iterable[DraftTransaction]) -> List[Transaction]:
        return [self.add(d) for d in drafts]

    def get(self, transaction_id: str) -> Transaction:
        with self._lock:
            tx = self._transactions.get(transaction_id)
        if tx is None:
            raise TransactionNotFoundError(transaction_id)
        return tx

    def delete(self, transaction_id: str) -> Transaction:
        with self._lock:
            tx = self._transactions.pop(transaction_id, None)
        if tx is None:
            raise TransactionNotFoundError(transaction_id)
        return tx

    def list(self, kind: Optional[TransactionKind] = None, category: Optional[str] = None,
             month: Optional[str] = None) -> List[Transaction]:
        """
        Returns transactions in insertion order.

        Args:
            kind: Only this direction
            category: Only this category label
            month: Only dates starting with this YYYY-MM prefix
        """
        with self._lock:
            items = list(self._transactions.values())

        if kind is not None:
            items = [t for t in items if t.kind is kind]
        if category:
            items = [t for t in items if t.category == category]
        if month:
            items = [t for t in items if t.date.startswith(month)]
        return items

    def count(self) -> int:
        with self._lock:
            return len(self._transactions)

    def clear(self) -> None:
        with self._lock:
            self._transactions.clear()
