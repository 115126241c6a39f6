"""
JSON file implementation of ledger storage.

The whole document lives in a single file. Saves write a temporary
file next to it and swap it in with os.replace, so a crash mid-write
leaves the previous document intact.
"""

import os
import tempfile
from pathlib import Path

from shopledger.config import get_logger
from shopledger.core.entities import LedgerDocument
from shopledger.core.exceptions import StoreCorruptionError, StoreWriteError
from shopledger.core.interfaces.ledger_store import ILedgerStore
from shopledger.infrastructure.storage.codec import decode_document, encode_document

logger = get_logger(__name__)


class JsonFileLedgerStore(ILedgerStore):
    """Ledger document stored as one JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> LedgerDocument:
        """Read the document; missing or corrupt files yield an empty ledger."""
        if not self.path.exists():
            logger.debug("ledger_file_missing", path=str(self.path))
            return LedgerDocument.empty()

        try:
            raw = self.path.read_bytes()
            if not raw.strip():
                return LedgerDocument.empty()
            return decode_document(raw, str(self.path))
        except OSError as e:
            corruption = StoreCorruptionError(str(self.path), str(e))
        except StoreCorruptionError as e:
            corruption = e

        logger.warning(
            "ledger_store_corrupt",
            path=str(self.path),
            reason=corruption.details.get("reason"),
        )
        return LedgerDocument.empty()

    def save(self, document: LedgerDocument) -> None:
        """Atomically replace the file with *document*."""
        payload = encode_document(document, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StoreWriteError(str(self.path), str(e)) from e

        logger.debug(
            "ledger_saved",
            path=str(self.path),
            items=len(document.items),
            sales=len(document.sales),
        )
