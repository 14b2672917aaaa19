"""Base exception classes for the Student ID Registry domain layer."""


class RegistryError(Exception):
    """Base exception for all registry domain errors.

    All domain-specific exceptions MUST inherit from this class.
    Every registry error is raised before any store is touched, so
    callers may always recover by correcting input or accepting the
    rejection.

    Subclasses define:
    - ERROR_CODE: Stable machine-readable code.
    - HTTP_STATUS: Status code used by the API layer.
    - URN_SUFFIX: Problem type suffix for RFC 7807 responses.
    - TITLE: Short human-readable summary of the problem type.
    """

    ERROR_CODE = "REGISTRY_ERROR"
    HTTP_STATUS = 500
    URN_SUFFIX = "registry:error"
    TITLE = "Registry Error"

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)

    def to_rfc7807(self, instance: str) -> dict:
        """Convert to RFC 7807 problem details format.

        Args:
            instance: The request instance URI.

        Returns:
            RFC 7807 compliant error response.
        """
        return {
            "type": f"urn:student-registry:{self.URN_SUFFIX}",
            "title": self.TITLE,
            "status": self.HTTP_STATUS,
            "detail": self.message,
            "instance": instance,
            "error_code": self.ERROR_CODE,
        }
