"""Abstract interface for ledger document storage."""

from abc import ABC, abstractmethod

from shopledger.core.entities import LedgerDocument


class ILedgerStore(ABC):
    """
    Loads and saves the whole ledger document as one blob.

    ``load`` never fails on missing or unreadable data: it returns an
    empty, valid document instead.
    """

    @abstractmethod
    def load(self) -> LedgerDocument:
        """Load the current document (a fresh copy on every call)."""
        pass

    @abstractmethod
    def save(self, document: LedgerDocument) -> None:
        """Replace the stored document with *document*."""
        pass
