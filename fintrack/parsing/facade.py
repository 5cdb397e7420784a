from datetime import date
from typing import Optional

from fintrack.common.exceptions import UnreadableInputError
from fintrack.common.logging_config import get_logger
from .pipeline import IngestionResult, ingest

logger = get_logger(__name__)

# Internet banking exports are UTF-8 or Windows-1252
ENCODINGS = ('utf-8-sig', 'cp1252')


class IngestionFacade:
    """
    Bridges raw uploads to the ingestion pipeline.

    Decoding the upload is the only step that may fail outright; once text is
    available the pipeline drops bad rows instead of raising.
    """

    def decode(self, raw: bytes, filename: Optional[str] = None) -> str:
        if raw is None or not raw.strip():
            raise UnreadableInputError("Empty statement upload", filename=filename, reason="no content")
        if b'\x00' in raw:
            raise UnreadableInputError("Statement is not a text file", filename=filename,
                                       reason="binary content")

        for encoding in ENCODINGS:
            try:
                return raw.decode(encoding)
            except UnicodeDecodeError:
                logger.debug(f"Decoding with {encoding} failed", filename=filename)

        raise UnreadableInputError("Statement is not a text file", filename=filename,
                                   reason="undecodable bytes")

    def import_bytes(self, raw: bytes, bank_key: Optional[str], filename: Optional[str] = None,
                     today: Optional[date] = None) -> IngestionResult:
        """
        Decodes an uploaded CSV and runs the pipeline over it.

        Raises:
            UnreadableInputError: when the payload is empty or not text
        """
        text = self.decode(raw, filename=filename)
        result = ingest(text, bank_key, today=today)
        logger.info(f"Statement imported: {filename or '<memory>'}", bank_key=bank_key,
                    tx_count=result.summary.total)
        return result
