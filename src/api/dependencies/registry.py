"""Registry API dependencies.

The registry instance lives on app.state and is handed to routes by
get_registry_service. The calling principal is taken from the
X-Caller-Address header; authenticating that address is the hosting
environment's job, so the value is treated as opaque.
"""

from fastapi import Header, HTTPException, Request

from src.application.services.student_registry_service import StudentRegistryService

# Header carrying the opaque caller identifier
CALLER_HEADER = "X-Caller-Address"


def get_registry_service(request: Request) -> StudentRegistryService:
    """Get the registry instance attached to the application.

    Raises:
        HTTPException: 503 if the application was built without a registry.
    """
    service = getattr(request.app.state, "registry", None)
    if service is None:
        raise HTTPException(
            status_code=503,
            detail={
                "type": "urn:student-registry:service:unavailable",
                "title": "Registry Unavailable",
                "status": 503,
                "detail": "No registry is attached to this application",
                "instance": str(request.url),
            },
        )
    return service


async def get_caller_address(
    request: Request,
    x_caller_address: str | None = Header(default=None, alias=CALLER_HEADER),
) -> str:
    """Extract the caller address from the request headers.

    Raises:
        HTTPException: 401 if the header is missing or blank.
    """
    if x_caller_address is None or not x_caller_address.strip():
        raise HTTPException(
            status_code=401,
            detail={
                "type": "urn:student-registry:auth:caller-missing",
                "title": "Caller Missing",
                "status": 401,
                "detail": f"Mutating requests require the {CALLER_HEADER} header",
                "instance": str(request.url),
            },
        )
    return x_caller_address.strip()


async def get_optional_caller_address(
    x_caller_address: str | None = Header(default=None, alias=CALLER_HEADER),
) -> str:
    """Caller address for routes that answer the same with or without one.

    Returns:
        The stripped header value, or "" when absent.
    """
    return (x_caller_address or "").strip()
