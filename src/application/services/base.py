"""Base service logging mixin.

Every registry service logs through a logger bound with its class name
and component. Inside an HTTP request the logging processor adds the
request's correlation ID and caller to every line.

Event naming:
- Successful mutations log at info with a past-tense event name
  (student_issued, admin_added)
- Rejections log at warning as "<operation>_rejected" with the
  error code, then the error propagates unchanged

Usage:
    from src.application.services.base import LoggingMixin

    class MyService(LoggingMixin):
        def __init__(self, store: OrderedStoreProtocol[str]) -> None:
            self._store = store
            self._init_logger()

        def update(self, caller: str, token_id: str) -> None:
            log = self._log_operation("update", caller=caller, token_id=token_id)
            try:
                self._check(caller)
            except RegistryError as exc:
                self._log_rejection(log, "update", exc)
                raise
            log.info("token_updated")
"""

import structlog

from src.domain.exceptions import RegistryError


class LoggingMixin:
    """Mixin providing structured logging for registry services.

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "registry") -> None:
        """Bind the service name and component.

        Call in __init__ once dependencies are set.

        Args:
            component: Component tag ("registry", "token", ...).
        """
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Create an operation-scoped logger.

        Args:
            operation: Name of the registry operation.
            **context: Additional context (caller, token_id, ...).

        Returns:
            BoundLogger with operation and context bound.
        """
        return self._log.bind(operation=operation, **context)

    @staticmethod
    def _log_rejection(
        log: structlog.BoundLogger, operation: str, error: RegistryError
    ) -> None:
        """Log a rejected operation at warning level."""
        log.warning(
            f"{operation}_rejected",
            error_code=error.ERROR_CODE,
            detail=error.message,
        )
