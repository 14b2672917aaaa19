"""Unit tests for the admin API routes."""

import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.application.services.student_registry_service import StudentRegistryService

ADMIN_HEADERS = {"X-Caller-Address": "admin-0"}


@pytest.fixture
def client(registry: StudentRegistryService) -> TestClient:
    return TestClient(create_app(service=registry))


class TestAdminRoutes:
    def test_list_admins(self, client: TestClient) -> None:
        response = client.get("/v1/admins")

        assert response.status_code == 200
        assert response.json() == {"admins": ["admin-0"], "total_count": 1}

    def test_add_admin(self, client: TestClient) -> None:
        response = client.post(
            "/v1/admins", json={"address": "admin-1"}, headers=ADMIN_HEADERS
        )

        assert response.status_code == 204
        assert client.get("/v1/admins").json()["total_count"] == 2

    def test_non_admin_cannot_add(self, client: TestClient) -> None:
        response = client.post(
            "/v1/admins",
            json={"address": "stranger"},
            headers={"X-Caller-Address": "stranger"},
        )

        assert response.status_code == 403
        assert client.get("/v1/admins").json()["admins"] == ["admin-0"]

    def test_duplicate_admin_conflict(self, client: TestClient) -> None:
        response = client.post(
            "/v1/admins", json={"address": "admin-0"}, headers=ADMIN_HEADERS
        )

        assert response.status_code == 409
        assert response.json()["detail"]["error_code"] == "ADMIN_EXISTS"

    def test_remove_admin(self, client: TestClient) -> None:
        client.post("/v1/admins", json={"address": "admin-1"}, headers=ADMIN_HEADERS)

        response = client.delete("/v1/admins/admin-1", headers=ADMIN_HEADERS)

        assert response.status_code == 204
        assert client.get("/v1/admins").json()["admins"] == ["admin-0"]

    def test_last_admin_protected(self, client: TestClient) -> None:
        response = client.delete("/v1/admins/admin-0", headers=ADMIN_HEADERS)

        assert response.status_code == 409
        assert response.json()["detail"]["error_code"] == "LAST_ADMIN_PROTECTED"

    def test_self_removal_rejected(self, client: TestClient) -> None:
        client.post("/v1/admins", json={"address": "admin-1"}, headers=ADMIN_HEADERS)

        response = client.delete("/v1/admins/admin-0", headers=ADMIN_HEADERS)

        assert response.status_code == 409
        assert response.json()["detail"]["error_code"] == "SELF_REMOVAL"

    def test_remove_unknown_admin(self, client: TestClient) -> None:
        client.post("/v1/admins", json={"address": "admin-1"}, headers=ADMIN_HEADERS)

        response = client.delete("/v1/admins/nobody", headers=ADMIN_HEADERS)

        assert response.status_code == 404
