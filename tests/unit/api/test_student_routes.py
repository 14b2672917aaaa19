"""Unit tests for the student API routes.

Tests run the full application against an in-memory registry and verify
status codes and RFC 7807 bodies for each rejection category.
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.application.services.student_registry_service import StudentRegistryService

ADMIN_HEADERS = {"X-Caller-Address": "admin-0"}

ISSUE_BODY = {
    "holder_address": "0xHolder",
    "full_name": "John Doe",
    "date_of_birth": "2002-05-14",
    "email": "john@raf.rs",
    "external_id": "2021/0001",
    "department": "Computer Science",
    "year": 1,
    "enrolled_at": "2021-10-01",
}


@pytest.fixture
def client(registry: StudentRegistryService) -> TestClient:
    return TestClient(create_app(service=registry))


@pytest.fixture
def issued(client: TestClient) -> None:
    response = client.post("/v1/students", json=ISSUE_BODY, headers=ADMIN_HEADERS)
    assert response.status_code == 201


class TestIssueStudent:
    def test_issue_returns_token(self, client: TestClient) -> None:
        response = client.post("/v1/students", json=ISSUE_BODY, headers=ADMIN_HEADERS)

        assert response.status_code == 201
        assert response.json() == {"token_id": "2021/0001", "holder_address": "0xHolder"}
        assert "X-Correlation-ID" in response.headers

    def test_incoming_correlation_id_echoed(self, client: TestClient) -> None:
        response = client.post(
            "/v1/students",
            json=ISSUE_BODY,
            headers={**ADMIN_HEADERS, "X-Correlation-ID": "req-issue-1"},
        )

        assert response.headers["X-Correlation-ID"] == "req-issue-1"

    def test_missing_caller_header(self, client: TestClient) -> None:
        response = client.post("/v1/students", json=ISSUE_BODY)

        assert response.status_code == 401
        assert response.json()["detail"]["title"] == "Caller Missing"

    def test_non_admin_forbidden(self, client: TestClient) -> None:
        response = client.post(
            "/v1/students", json=ISSUE_BODY, headers={"X-Caller-Address": "stranger"}
        )

        assert response.status_code == 403
        detail = response.json()["detail"]
        assert detail["error_code"] == "UNAUTHORIZED"
        assert detail["caller"] == "stranger"

    def test_duplicate_email_conflict(self, client: TestClient, issued: None) -> None:
        body = {**ISSUE_BODY, "external_id": "2021/0002"}

        response = client.post("/v1/students", json=body, headers=ADMIN_HEADERS)

        assert response.status_code == 409
        assert response.json()["detail"]["error_code"] == "EMAIL_EXISTS"

    def test_wrong_domain_unprocessable(self, client: TestClient) -> None:
        body = {**ISSUE_BODY, "email": "john@gmail.com"}

        response = client.post("/v1/students", json=body, headers=ADMIN_HEADERS)

        assert response.status_code == 422
        assert response.json()["detail"]["error_code"] == "INVALID_EMAIL"

    def test_blank_external_id_unprocessable(self, client: TestClient) -> None:
        body = {**ISSUE_BODY, "external_id": "   "}

        response = client.post("/v1/students", json=body, headers=ADMIN_HEADERS)

        assert response.status_code == 422


class TestReadStudents:
    def test_get_record_with_slash_in_id(self, client: TestClient, issued: None) -> None:
        response = client.get("/v1/students/2021/0001")

        assert response.status_code == 200
        body = response.json()
        assert body["external_id"] == "2021/0001"
        assert body["status"] == "Active"
        assert body["graduated_at"] is None

    def test_unknown_student_not_found(self, client: TestClient) -> None:
        response = client.get("/v1/students/1999/9999")

        assert response.status_code == 404
        assert response.json()["detail"]["error_code"] == "INVALID_STUDENT"

    def test_list_students(self, client: TestClient, issued: None) -> None:
        response = client.get("/v1/students")

        assert response.status_code == 200
        assert response.json()["total_count"] == 1

    def test_summary(self, client: TestClient, issued: None) -> None:
        response = client.get("/v1/students/2021/0001/summary")

        assert response.status_code == 200
        assert "Student ID: 2021/0001" in response.json()["summary"]


class TestLifecycleRoutes:
    def test_update_year(self, client: TestClient, issued: None) -> None:
        response = client.put(
            "/v1/students/2021/0001/year", json={"year": 3}, headers=ADMIN_HEADERS
        )

        assert response.status_code == 200
        assert response.json()["year"] == 3

    def test_set_status(self, client: TestClient, issued: None) -> None:
        response = client.put(
            "/v1/students/2021/0001/status",
            json={"status": "Probation", "reason": "missed exams"},
            headers=ADMIN_HEADERS,
        )

        assert response.status_code == 200
        assert response.json()["probation_reason"] == "missed exams"

    def test_set_graduated_status_rejected(self, client: TestClient, issued: None) -> None:
        response = client.put(
            "/v1/students/2021/0001/status",
            json={"status": "Graduated"},
            headers=ADMIN_HEADERS,
        )

        assert response.status_code == 422
        assert response.json()["detail"]["error_code"] == "INVALID_STATUS"

    def test_transfer_department(self, client: TestClient, issued: None) -> None:
        response = client.put(
            "/v1/students/2021/0001/department",
            json={"department": "Mathematics"},
            headers=ADMIN_HEADERS,
        )

        assert response.status_code == 200
        assert response.json()["department"] == "Mathematics"

    def test_graduate_flow(self, client: TestClient, issued: None) -> None:
        client.put("/v1/students/2021/0001/year", json={"year": 4}, headers=ADMIN_HEADERS)

        response = client.post("/v1/students/2021/0001/graduate", headers=ADMIN_HEADERS)

        assert response.status_code == 200
        assert response.json()["status"] == "Graduated"
        assert response.json()["graduated_at"] is not None

        again = client.post("/v1/students/2021/0001/graduate", headers=ADMIN_HEADERS)
        assert again.status_code == 409
        assert again.json()["detail"]["error_code"] == "ALREADY_GRADUATED"

    def test_graduate_not_final_year(self, client: TestClient, issued: None) -> None:
        response = client.post("/v1/students/2021/0001/graduate", headers=ADMIN_HEADERS)

        assert response.status_code == 422
        assert response.json()["detail"]["error_code"] == "NOT_FINAL_YEAR"
