"""RFC 7807 problem details for registry errors.

Every RegistryError carries its own HTTP status and problem type;
routes translate them with registry_problem.
"""

from fastapi import HTTPException, Request

from src.domain.exceptions import RegistryError


def registry_problem(error: RegistryError, request: Request) -> HTTPException:
    """Build the HTTPException for a registry error.

    Args:
        error: The domain error raised by the registry.
        request: The current request, used as the problem instance.

    Returns:
        HTTPException carrying RFC 7807 details. Raise it with
        ``from None`` to keep the domain traceback out of the response.
    """
    return HTTPException(
        status_code=error.HTTP_STATUS,
        detail=error.to_rfc7807(instance=str(request.url)),
    )


def invalid_request_problem(message: str, request: Request) -> HTTPException:
    """Build a 422 problem for input rejected by model validation."""
    return HTTPException(
        status_code=422,
        detail={
            "type": "urn:student-registry:request:invalid",
            "title": "Invalid Request",
            "status": 422,
            "detail": message,
            "instance": str(request.url),
        },
    )
