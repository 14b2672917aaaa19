"""Admin Set - the principals allowed to mutate the registry.

Invariant: the set always holds at least one admin. Addition and
seeding only reject duplicates; removal is guarded.

Removal checks run in this order:
1. Caller must be an admin (UnauthorizedError)
2. The set must hold more than one admin (LastAdminProtectedError)
3. Caller may not remove themselves (SelfRemovalError)
4. Target must be an admin (AdminNotFoundError)
"""

from __future__ import annotations

from collections.abc import Iterable

from src.application.ports.ordered_store import OrderedStoreProtocol
from src.domain.errors import (
    AdminExistsError,
    AdminNotFoundError,
    LastAdminProtectedError,
    SelfRemovalError,
    UnauthorizedError,
)

# Fewest admins the set may hold
MINIMUM_ADMIN_COUNT: int = 1


class AdminSet:
    """Set of admin addresses stored in an ordered collection.

    This class enforces the admin-set rules only; audit events are
    emitted by the registry service that owns it.

    Example:
        >>> admins = AdminSet(InMemoryOrderedStore("admins"))
        >>> admins.seed(["0xA"])
        >>> admins.add("0xA", "0xB")
        >>> admins.remove("0xA", "0xB")
    """

    def __init__(self, store: OrderedStoreProtocol[bool]) -> None:
        self._store = store

    def is_admin(self, address: str) -> bool:
        """Check admin membership. Pure lookup, no side effects."""
        return self._store.has(address)

    def count(self) -> int:
        return len(self._store)

    def list_admins(self) -> list[str]:
        """Return admin addresses in ascending order."""
        return [address for address, _ in self._store.items()]

    def seed(self, addresses: Iterable[str]) -> None:
        """Seed the set at construction time.

        Duplicates are collapsed. Seeding requires no authorization.

        Args:
            addresses: Initial admin addresses.

        Raises:
            ValueError: If no address is supplied or one is blank.
        """
        seeded = 0
        for address in addresses:
            if not address:
                raise ValueError("admin address must not be blank")
            self._store.set(address, True)
            seeded += 1
        if seeded == 0 and self.count() == 0:
            raise ValueError("the admin set must be seeded with at least one admin")

    def require_admin(self, caller: str, operation: str) -> None:
        """Raise unless caller is an admin.

        Args:
            caller: Address performing the operation.
            operation: Operation name reported in the error.

        Raises:
            UnauthorizedError: If caller is not an admin.
        """
        if not self.is_admin(caller):
            raise UnauthorizedError(caller=caller, operation=operation)

    def add(self, caller: str, new_admin: str) -> None:
        """Add an admin.

        Raises:
            UnauthorizedError: If caller is not an admin.
            AdminExistsError: If new_admin is already an admin.
        """
        self.require_admin(caller, "add_admin")
        if self.is_admin(new_admin):
            raise AdminExistsError(new_admin)
        if not new_admin:
            raise ValueError("admin address must not be blank")
        self._store.set(new_admin, True)

    def remove(self, caller: str, target: str) -> None:
        """Remove an admin, keeping at least one in the set.

        The set-size check runs before the self-removal and membership
        checks, so every removal from a one-admin set fails with
        LastAdminProtectedError whatever the target.

        Raises:
            UnauthorizedError: If caller is not an admin.
            LastAdminProtectedError: If only one admin remains.
            SelfRemovalError: If caller equals target.
            AdminNotFoundError: If target is not an admin.
        """
        self.require_admin(caller, "remove_admin")
        if self.count() <= MINIMUM_ADMIN_COUNT:
            raise LastAdminProtectedError(target)
        if caller == target:
            raise SelfRemovalError(caller)
        if not self.is_admin(target):
            raise AdminNotFoundError(target)
        self._store.remove(target)
