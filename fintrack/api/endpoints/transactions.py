from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from fintrack.api.state import get_store
from fintrack.common.exceptions import InvalidTransactionError, TransactionNotFoundError
from fintrack.common.logging_config import get_logger
from fintrack.common.models import TransactionKind
from fintrack.core.store import TransactionStore, draft_from_payload

logger = get_logger(__name__)
router = APIRouter()


class TransactionPayload(BaseModel):
    type: Optional[str] = None
    amount: Any = None
    description: Optional[str] = None
    category: Optional[str] = None
    date: Optional[str] = None
    bank: Optional[str] = None


@router.get("")
def list_transactions(
    type: Optional[TransactionKind] = None,
    category: Optional[str] = None,
    month: Optional[str] = None,
    store: TransactionStore = Depends(get_store),
):
    """Stored transactions, optionally filtered by type, category and YYYY-MM month."""
    return [t.to_dict() for t in store.list(kind=type, category=category, month=month)]


@router.post("")
def create_transaction(payload: TransactionPayload, store: TransactionStore = Depends(get_store)):
    try:
        draft = draft_from_payload(payload.model_dump())
    except InvalidTransactionError as e:
        logger.warning(f"Transaction rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    tx = store.add(draft)
    logger.info("Transaction stored.", transaction_id=tx.id, type=tx.kind.value, category=tx.category)
    return {"success": True, "transaction": tx.to_dict(), "message": "Transaksi berhasil ditambahkan!"}


@router.delete("/{transaction_id}")
def delete_transaction(transaction_id: str, store: TransactionStore = Depends(get_store)):
    try:
        tx = store.delete(transaction_id)
    except TransactionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    logger.info("Transaction deleted.", transaction_id=tx.id)
    return {"success": True, "message": "Transaksi berhasil dihapus!"}
