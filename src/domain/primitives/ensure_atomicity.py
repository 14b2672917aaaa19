"""Registry primitive: all-or-nothing store writes.

This module provides a context manager that groups several collection
writes into one unit. Each write registers a rollback handler; if any
later write raises, every registered handler runs in reverse order
(LIFO) and the original exception is re-raised.

Registry operations validate every precondition before entering the
context, so a rollback only ever undoes writes of the same call.

Usage:
    with AtomicWriteContext() as ctx:
        records.put(record)
        ctx.add_rollback(lambda: records.discard(record.token_id))
        ownership.assign(token_id, holder)
        ctx.add_rollback(lambda: ownership.release(token_id))
        # On exception: both handlers called, exception re-raised
"""

from collections.abc import Callable
from types import TracebackType

import structlog

log = structlog.get_logger()

RollbackHandler = Callable[[], None]


class AtomicWriteContext:
    """Context manager ensuring a group of writes lands together.

    Rollback handlers are called in reverse order (LIFO) if an exception
    escapes the block. Exceptions from rollback handlers are logged and
    do not stop the remaining handlers. The original exception is always
    re-raised.

    Example:
        >>> with AtomicWriteContext() as ctx:
        ...     ctx.add_rollback(lambda: print("Rolling back"))
        ...     raise ValueError("Something went wrong")
        # Output: Rolling back
        # Then ValueError is re-raised

    Attributes:
        _rollback_handlers: Registered rollback handlers (LIFO order).
    """

    def __init__(self, operation: str = "") -> None:
        """Initialize the atomic write context.

        Args:
            operation: Name of the registry operation, for logging.
        """
        self._operation = operation
        self._rollback_handlers: list[RollbackHandler] = []

    def add_rollback(self, handler: RollbackHandler) -> None:
        """Register a rollback handler to be called on failure.

        Args:
            handler: A callable that undoes one completed write.
                     Must take no arguments.
        """
        self._rollback_handlers.append(handler)

    def __enter__(self) -> "AtomicWriteContext":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        """Exit the context, executing rollbacks on exception.

        Returns:
            False - always re-raises the original exception if one occurred.
        """
        if exc_val is not None:
            log.warning(
                "atomic_write_failed",
                operation=self._operation,
                error=str(exc_val),
                error_type=exc_type.__name__ if exc_type else "Unknown",
                rollback_count=len(self._rollback_handlers),
            )

            for handler in reversed(self._rollback_handlers):
                try:
                    handler()
                except Exception as rollback_error:
                    # Log rollback errors but continue with other handlers
                    log.error(
                        "rollback_handler_failed",
                        operation=self._operation,
                        rollback_error=str(rollback_error),
                        rollback_error_type=type(rollback_error).__name__,
                    )

        return False
