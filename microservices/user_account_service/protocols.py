"""
User Account Service Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Optional, Protocol, runtime_checkable

# Import only models (no I/O dependencies)
from .models import User


@runtime_checkable
class UserStoreProtocol(Protocol):
    """
    Interface for the user store.

    Implementations own the canonical records and must make every
    operation on a single id linearizable.
    """

    async def put(self, user_id: str, user: User) -> None:
        """Insert or overwrite a user"""
        ...

    async def get(self, user_id: str) -> Optional[User]:
        """Get a user by ID, None if absent"""
        ...

    async def delete(self, user_id: str) -> bool:
        """Remove a user, False if absent"""
        ...

    async def exists(self, user_id: str) -> bool:
        """Check whether a user is stored"""
        ...

    async def replace(self, user_id: str, user: User) -> bool:
        """Overwrite an existing user, False if absent"""
        ...

    async def count(self) -> int:
        """Number of stored users"""
        ...


@runtime_checkable
class IdentityGeneratorProtocol(Protocol):
    """Interface for user ID generation - safe for concurrent use"""

    def next(self) -> str:
        """Return a fresh, never before issued identifier"""
        ...
