"""Unit tests for token, enrollment and health API routes."""

import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.application.services.student_registry_service import StudentRegistryService
from src.domain.models import StudentApplication
from tests.helpers import ADMIN, HOLDER


@pytest.fixture
def client(registry: StudentRegistryService, application: StudentApplication) -> TestClient:
    registry.issue(ADMIN, HOLDER, application)
    return TestClient(create_app(service=registry))


class TestTokenReads:
    def test_owner(self, client: TestClient) -> None:
        response = client.get("/v1/tokens/2021/0001/owner")

        assert response.status_code == 200
        assert response.json() == {"token_id": "2021/0001", "owner": HOLDER}

    def test_uri(self, client: TestClient) -> None:
        response = client.get("/v1/tokens/2021/0001/uri")

        assert response.status_code == 200
        assert response.json()["uri"].startswith("https://")

    def test_unknown_token(self, client: TestClient) -> None:
        response = client.get("/v1/tokens/1999/9999/owner")

        assert response.status_code == 404
        assert response.json()["detail"]["error_code"] == "INVALID_TOKEN"

    def test_balance(self, client: TestClient) -> None:
        assert client.get(f"/v1/tokens/balance/{HOLDER}").json()["balance"] == 1
        assert client.get("/v1/tokens/balance/0xNobody").json()["balance"] == 0

    def test_enrollment(self, client: TestClient) -> None:
        assert client.get(f"/v1/enrollment/{HOLDER}").json()["enrolled"] is True
        assert client.get("/v1/enrollment/0xNobody").json()["enrolled"] is False


class TestTransferRoutesDisabled:
    def test_transfer_not_allowed(self, client: TestClient) -> None:
        response = client.post(
            "/v1/tokens/transfer",
            json={"from_address": HOLDER, "to_address": "0xOther", "token_id": "2021/0001"},
            headers={"X-Caller-Address": HOLDER},
        )

        assert response.status_code == 405
        assert response.json()["detail"]["error_code"] == "NON_TRANSFERABLE"
        assert client.get("/v1/tokens/2021/0001/owner").json()["owner"] == HOLDER

    def test_approve_not_allowed(self, client: TestClient) -> None:
        response = client.post(
            "/v1/tokens/approve",
            json={"approved": "0xOther", "token_id": "2021/0001"},
            headers={"X-Caller-Address": HOLDER},
        )

        assert response.status_code == 405

    @pytest.mark.parametrize("path", ["/v1/tokens/transfer", "/v1/tokens/approve"])
    def test_rejected_without_caller_header(self, client: TestClient, path: str) -> None:
        body = {
            "from_address": HOLDER,
            "to_address": "0xOther",
            "approved": "0xOther",
            "token_id": "2021/0001",
        }

        response = client.post(path, json=body)

        assert response.status_code == 405
        assert response.json()["detail"]["error_code"] == "NON_TRANSFERABLE"


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/v1/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "admin_count": 1, "total_supply": 1}


class TestCreateApp:
    def test_missing_registry_unavailable(self, client: TestClient) -> None:
        client.app.state.registry = None  # type: ignore[attr-defined]

        response = client.get("/v1/health")

        assert response.status_code == 503
