from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from fintrack.api.state import get_scanner
from fintrack.common.exceptions import InvalidReceiptError
from fintrack.common.logging_config import get_logger
from fintrack.parsing.sources.receipt import ReceiptScanner

logger = get_logger(__name__)
router = APIRouter()


@router.post("")
async def upload_receipt(receipt: UploadFile = File(...), scanner: ReceiptScanner = Depends(get_scanner)):
    """
    Receives a receipt image and returns the transaction read from it.
    Nothing is stored; the client confirms by posting to /api/transactions.
    """
    try:
        logger.info(f"Receipt upload started: {receipt.filename}")
        content = await receipt.read()
        draft = scanner.scan(receipt.filename, receipt.content_type, len(content))
    except InvalidReceiptError as e:
        logger.warning(f"Receipt rejected: {e}", filename=receipt.filename, content_type=receipt.content_type)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Internal error during receipt upload: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Gagal memproses gambar: {str(e)}")

    return {
        "success": True,
        "extractedData": draft.to_dict(),
        "receiptImage": receipt.filename,
        "message": "Gambar berhasil diproses!",
    }
