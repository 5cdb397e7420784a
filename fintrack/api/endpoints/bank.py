from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from fintrack.api.state import get_facade
from fintrack.common.exceptions import UnreadableInputError
from fintrack.common.logging_config import get_logger
from fintrack.parsing.config.registry import list_banks
from fintrack.parsing.facade import IngestionFacade

logger = get_logger(__name__)
router = APIRouter()


@router.get("/banks")
def get_banks():
    """Recognized bank keys. Any other key is still accepted and parsed generically."""
    return {"banks": list_banks()}


@router.post("/bank/import")
async def import_bank_csv(
    csvFile: UploadFile = File(...),
    bankName: str = Form(""),
    facade: IngestionFacade = Depends(get_facade),
):
    """
    Parses an internet banking CSV export into draft transactions.
    Nothing is stored; the client confirms each record through /api/transactions.
    """
    filename = csvFile.filename or ""
    if not filename.lower().endswith(".csv"):
        raise HTTPException(status_code=400, detail="Hanya file CSV yang diizinkan!")

    try:
        logger.info(f"Bank CSV upload started: {filename}", bank_key=bankName)
        raw = await csvFile.read()
        result = facade.import_bytes(raw, bankName, filename=filename)
    except UnreadableInputError as e:
        logger.warning(f"Bank CSV unreadable: {e}", filename=filename)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Internal error during bank import: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Gagal memproses file: {str(e)}")

    payload = result.to_dict()
    return {
        "success": True,
        "transactions": payload["transactions"],
        "summary": payload["summary"],
        "message": f"{result.summary.total} transaksi berhasil dibaca",
    }
