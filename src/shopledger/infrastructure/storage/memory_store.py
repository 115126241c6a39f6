"""In-memory ledger storage holding the serialized blob."""

from shopledger.config import get_logger
from shopledger.core.entities import LedgerDocument
from shopledger.core.exceptions import StoreCorruptionError
from shopledger.core.interfaces.ledger_store import ILedgerStore
from shopledger.infrastructure.storage.codec import decode_document, encode_document

logger = get_logger(__name__)


class InMemoryLedgerStore(ILedgerStore):
    """Keeps the document as a JSON string, like a key-value blob store.

    Every load decodes a fresh copy, so callers never share state with
    the stored blob.
    """

    def __init__(self, raw: str | None = None) -> None:
        self.raw = raw

    def load(self) -> LedgerDocument:
        if not self.raw:
            return LedgerDocument.empty()
        try:
            return decode_document(self.raw, "memory")
        except StoreCorruptionError as e:
            logger.warning("ledger_store_corrupt", path="memory", reason=e.details.get("reason"))
            return LedgerDocument.empty()

    def save(self, document: LedgerDocument) -> None:
        self.raw = encode_document(document)
