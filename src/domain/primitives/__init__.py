"""Registry primitives for the domain layer.

- AtomicWriteContext: Groups collection writes with LIFO rollback
"""

from src.domain.primitives.ensure_atomicity import AtomicWriteContext

__all__: list[str] = ["AtomicWriteContext"]
