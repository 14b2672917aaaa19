"""
Pytest configuration and shared fixtures for Student ID Registry tests.

Testing Standards:
- Unit tests go in tests/unit/<layer>/
- Registry fixtures are built fresh per test; nothing is shared
- Property tests use hypothesis
"""

import pytest

from src.application.services.student_registry_service import StudentRegistryService
from src.bootstrap.student_registry import build_student_registry
from src.config.registry_config import TEST_REGISTRY_CONFIG, RegistryConfig
from src.domain.models import StudentApplication
from src.infrastructure.adapters import FixedHeightClock, InMemoryAuditLog
from tests.helpers import make_application


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from src import __version__

    return __version__


@pytest.fixture
def registry_config() -> RegistryConfig:
    return TEST_REGISTRY_CONFIG


@pytest.fixture
def clock() -> FixedHeightClock:
    """Clock pinned at height 100."""
    return FixedHeightClock(height=100)


@pytest.fixture
def audit_log() -> InMemoryAuditLog:
    return InMemoryAuditLog()


@pytest.fixture
def registry(
    registry_config: RegistryConfig,
    clock: FixedHeightClock,
    audit_log: InMemoryAuditLog,
) -> StudentRegistryService:
    """Fresh registry seeded with a single admin, "admin-0"."""
    return build_student_registry(
        registry_config,
        clock=clock,
        audit_sink=audit_log,
    )


@pytest.fixture
def application() -> StudentApplication:
    """Application for 2021/0001 / john@raf.rs in year 1."""
    return make_application()
