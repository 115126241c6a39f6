"""API tests for health endpoints."""

from fastapi.testclient import TestClient

from shopledger.api.dependencies import get_app_settings
from shopledger.config import Settings


class TestHealthAPI:
    def test_health(self, client: TestClient):
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["uptime_seconds"] >= 0
        assert data["items"] is None

    def test_ledger_health(self, stocked_client: TestClient):
        response = stocked_client.get("/api/health/ledger")
        assert response.status_code == 200
        assert response.json()["items"] == 1

    def test_unknown_route(self, client: TestClient):
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"

    def test_version_from_settings(self, client: TestClient):
        app = client.app
        app.dependency_overrides[get_app_settings] = lambda: Settings(app_version="9.9.9")
        try:
            assert client.get("/api/health").json()["version"] == "9.9.9"
            assert client.get("/api/health/ledger").json()["version"] == "9.9.9"
        finally:
            app.dependency_overrides.pop(get_app_settings, None)
