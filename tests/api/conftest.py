"""Fixtures for API tests: the app wired to an in-memory ledger."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from shopledger.api.dependencies import get_ledger_service
from shopledger.api.main import app
from shopledger.application.ledger_service import LedgerService


@pytest.fixture
def client(service: LedgerService) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_ledger_service] = lambda: service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.pop(get_ledger_service, None)


@pytest.fixture
def stocked_client(client: TestClient) -> TestClient:
    """Rice stocked at 10.00 x 50 in 2024-01."""
    response = client.post(
        "/api/items",
        json={"name": "Rice", "price": 10.0, "qty": 50, "entry_date": "2024-01-05"},
    )
    assert response.status_code == 201
    return client


@pytest.fixture
def sale_payload() -> dict:
    return {
        "sale_date": "2024-01-10",
        "buyer": "Ali",
        "address": "12 Market St",
        "contact": "0550",
        "item": "Rice",
        "price": 12.0,
        "qty": 5,
    }
