"""Student ID Registry configuration.

This module defines the registry's institutional constants with
environment variable overrides for deployment tuning.

Environment Variables:
- REGISTRY_EMAIL_DOMAIN: Suffix every student email must end with (default: @raf.rs)
- REGISTRY_FINAL_YEAR: Year a student must be in to graduate (default: 4)
- REGISTRY_DEFAULT_IMAGE_URL: Image assigned to every issued token
- REGISTRY_TOKEN_NAME: Token collection name (default: Student ID)
- REGISTRY_TOKEN_SYMBOL: Token collection symbol (default: SID)
- REGISTRY_INITIAL_ADMINS: Comma-separated admin addresses seeded at startup
- LOG_LEVEL: Minimum log level name (default: INFO)
- ENVIRONMENT: "production" for JSON logs, anything else for console logs
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_EMAIL_DOMAIN = "@raf.rs"
DEFAULT_FINAL_YEAR = 4
DEFAULT_IMAGE_URL = "https://raf.rs/static/student-id/default.png"
DEFAULT_TOKEN_NAME = "Student ID"
DEFAULT_TOKEN_SYMBOL = "SID"


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_list_env(key: str) -> tuple[str, ...]:
    """Get comma-separated environment variable as a tuple.

    Blank items are dropped and surrounding whitespace is stripped.
    """
    value = os.environ.get(key, "")
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class RegistryConfig:
    """Configuration for the Student ID Registry.

    All values can be overridden via environment variables.

    Attributes:
        email_domain: Institutional suffix required on every email.
        final_year: Year of study required for graduation.
        default_image_url: Image URL assigned to every issued token.
        token_name: Token collection name reported by the token views.
        token_symbol: Token collection symbol reported by the token views.
        initial_admins: Addresses seeded into the admin set at startup.
        environment: Deployment environment ("production" or "development").
        log_level: Minimum log level name.
    """

    email_domain: str = DEFAULT_EMAIL_DOMAIN
    final_year: int = DEFAULT_FINAL_YEAR
    default_image_url: str = DEFAULT_IMAGE_URL
    token_name: str = DEFAULT_TOKEN_NAME
    token_symbol: str = DEFAULT_TOKEN_SYMBOL
    initial_admins: tuple[str, ...] = field(default_factory=tuple)
    environment: str = "production"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.email_domain:
            raise ValueError("email_domain must not be empty")
        if self.final_year < 1:
            raise ValueError(f"final_year must be positive, got {self.final_year}")
        if not self.default_image_url:
            raise ValueError("default_image_url must not be empty")

    @classmethod
    def from_environment(cls) -> "RegistryConfig":
        """Create config from environment variables with defaults.

        Returns:
            RegistryConfig with values from environment or defaults.
        """
        return cls(
            email_domain=os.environ.get("REGISTRY_EMAIL_DOMAIN", DEFAULT_EMAIL_DOMAIN),
            final_year=_get_int_env("REGISTRY_FINAL_YEAR", DEFAULT_FINAL_YEAR),
            default_image_url=os.environ.get(
                "REGISTRY_DEFAULT_IMAGE_URL", DEFAULT_IMAGE_URL
            ),
            token_name=os.environ.get("REGISTRY_TOKEN_NAME", DEFAULT_TOKEN_NAME),
            token_symbol=os.environ.get("REGISTRY_TOKEN_SYMBOL", DEFAULT_TOKEN_SYMBOL),
            initial_admins=_get_list_env("REGISTRY_INITIAL_ADMINS"),
            environment=os.environ.get("ENVIRONMENT", "production"),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
        )


# Default production config (no seeded admins; bootstrap must supply them)
DEFAULT_REGISTRY_CONFIG = RegistryConfig()

# Testing config with a console logger
TEST_REGISTRY_CONFIG = RegistryConfig(
    initial_admins=("admin-0",),
    environment="development",
)
