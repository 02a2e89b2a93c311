"""
User Account Service Factory

Factory functions for creating service instances with real dependencies.
This is the ONLY place that wires concrete collaborators together.

Usage:
    from .factory import create_user_account_service
    service = create_user_account_service()
"""
from typing import Optional

from .identity import UUIDIdentityGenerator
from .protocols import IdentityGeneratorProtocol, UserStoreProtocol
from .user_account_service import UserAccountService
from .user_repository import InMemoryUserStore
from .validator import UserValidator


def create_user_account_service(
    store: Optional[UserStoreProtocol] = None,
    identity_generator: Optional[IdentityGeneratorProtocol] = None,
    validator: Optional[UserValidator] = None,
) -> UserAccountService:
    """
    Create UserAccountService with real dependencies.

    Args:
        store: User store, defaults to a fresh InMemoryUserStore
        identity_generator: ID generator, defaults to UUIDIdentityGenerator
        validator: Payload validator, defaults to UserValidator

    Returns:
        Configured UserAccountService instance
    """
    return UserAccountService(
        store=store or InMemoryUserStore(),
        identity_generator=identity_generator or UUIDIdentityGenerator(),
        validator=validator or UserValidator(),
    )
