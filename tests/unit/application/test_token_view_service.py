"""Unit tests for NonTransferableTokenService.

Tests verify token reads reflect issuance and that every transfer or
approval attempt raises NonTransferableError without side effects.
"""

import pytest

from src.application.services.student_registry_service import StudentRegistryService
from src.domain.errors import InvalidTokenError, NonTransferableError
from src.domain.models import StudentApplication
from tests.helpers import ADMIN, HOLDER


@pytest.fixture
def issued(registry: StudentRegistryService, application: StudentApplication) -> str:
    return registry.issue(ADMIN, HOLDER, application)


class TestTokenReads:
    def test_name_and_symbol(self, registry: StudentRegistryService) -> None:
        assert registry.tokens.name() == "Student ID"
        assert registry.tokens.symbol() == "SID"

    def test_owner_and_uri(self, registry: StudentRegistryService, issued: str) -> None:
        assert registry.tokens.owner_of(issued) == HOLDER
        assert registry.tokens.token_uri(issued) == registry.config.default_image_url

    def test_total_supply_and_balance(
        self, registry: StudentRegistryService, issued: str
    ) -> None:
        assert registry.tokens.total_supply() == 1
        assert registry.tokens.balance_of(HOLDER) == 1
        assert registry.tokens.balance_of("0xNobody") == 0

    def test_unknown_token(self, registry: StudentRegistryService) -> None:
        with pytest.raises(InvalidTokenError):
            registry.tokens.owner_of("1999/9999")
        with pytest.raises(InvalidTokenError):
            registry.tokens.token_uri("1999/9999")
        with pytest.raises(InvalidTokenError):
            registry.tokens.get_approved("1999/9999")

    def test_no_approvals_exist(self, registry: StudentRegistryService, issued: str) -> None:
        assert registry.tokens.get_approved(issued) == ""
        assert registry.tokens.is_approved_for_all(HOLDER, ADMIN) is False


class TestTransferSurfaceDisabled:
    """Every mutation of ownership or approvals is rejected."""

    def test_transfer_from(self, registry: StudentRegistryService, issued: str) -> None:
        with pytest.raises(NonTransferableError):
            registry.tokens.transfer_from(HOLDER, HOLDER, "0xOther", issued)

        assert registry.tokens.owner_of(issued) == HOLDER

    def test_safe_transfer_from(self, registry: StudentRegistryService, issued: str) -> None:
        with pytest.raises(NonTransferableError):
            registry.tokens.safe_transfer_from(HOLDER, HOLDER, "0xOther", issued, b"x")

        assert registry.tokens.owner_of(issued) == HOLDER

    def test_admin_cannot_transfer_either(
        self, registry: StudentRegistryService, issued: str
    ) -> None:
        with pytest.raises(NonTransferableError):
            registry.tokens.transfer_from(ADMIN, HOLDER, ADMIN, issued)

    def test_approve(self, registry: StudentRegistryService, issued: str) -> None:
        with pytest.raises(NonTransferableError) as exc_info:
            registry.tokens.approve(HOLDER, "0xOther", issued)

        assert exc_info.value.operation == "approve"
        assert registry.tokens.get_approved(issued) == ""

    def test_set_approval_for_all(self, registry: StudentRegistryService) -> None:
        with pytest.raises(NonTransferableError):
            registry.tokens.set_approval_for_all(HOLDER, "0xOther", True)

        assert registry.tokens.is_approved_for_all(HOLDER, "0xOther") is False

    def test_rejection_on_unknown_token_is_still_non_transferable(
        self, registry: StudentRegistryService
    ) -> None:
        with pytest.raises(NonTransferableError):
            registry.tokens.transfer_from(HOLDER, HOLDER, "0xOther", "1999/9999")
