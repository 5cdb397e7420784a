from fastapi import APIRouter, Depends

from fintrack.api.state import get_store
from fintrack.core.statistics import compute_statistics
from fintrack.core.store import TransactionStore

router = APIRouter()


@router.get("")
def get_statistics(store: TransactionStore = Depends(get_store)):
    return compute_statistics(store.list())
