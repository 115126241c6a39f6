"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import UTC, date, datetime

import pytest

from shopledger.application.ledger_service import LedgerService
from shopledger.config import reset_settings
from shopledger.core.entities import LedgerDocument
from shopledger.core.services import ItemLedger, SalesLedger
from shopledger.infrastructure.export import TextReportExporter
from shopledger.infrastructure.storage import InMemoryLedgerStore, reset_ledger_store

FIXED_NOW = datetime(2024, 2, 1, 9, 30, tzinfo=UTC)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch) -> Generator[None, None, None]:
    """Point storage and exports at a temp dir and drop cached singletons."""
    from shopledger.application.services import reset_services

    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("EXPORT_OUTPUT_DIR", str(tmp_path / "exports"))
    reset_settings()
    reset_ledger_store()
    reset_services()
    yield
    reset_settings()
    reset_ledger_store()
    reset_services()


@pytest.fixture
def fixed_clock():
    """Clock returning a constant timestamp."""
    return lambda: FIXED_NOW


@pytest.fixture
def document() -> LedgerDocument:
    return LedgerDocument.empty()


@pytest.fixture
def items(document) -> ItemLedger:
    return ItemLedger(document)


@pytest.fixture
def sales(document, items) -> SalesLedger:
    return SalesLedger(document, items)


@pytest.fixture
def rice_document(document, items) -> LedgerDocument:
    """Rice stocked at 10.00 x 50 on 2024-01-05."""
    items.upsert_item("Rice", 10.0, 50, date(2024, 1, 5))
    return document


@pytest.fixture
def memory_store() -> InMemoryLedgerStore:
    return InMemoryLedgerStore()


@pytest.fixture
def service(memory_store, fixed_clock) -> LedgerService:
    return LedgerService(
        store=memory_store,
        exporter=TextReportExporter(shop_name="Corner Shop"),
        clock=fixed_clock,
    )
