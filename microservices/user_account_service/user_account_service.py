"""
User Account Service Business Logic

User account lifecycle layer for the microservice.
Handles validation, identity assignment, and error handling while
delegating storage to an injected UserStoreProtocol implementation.

Lifecycle per id: NonExistent -> Active -> NonExistent. Deletion is final;
an id is never issued again.
"""

from typing import Any, Dict, Optional
from datetime import datetime, timezone
import logging

from pydantic import ValidationError

from .models import User, UserPayload
from .protocols import UserStoreProtocol, IdentityGeneratorProtocol
from .validator import UserValidator

logger = logging.getLogger(__name__)


class UserServiceError(Exception):
    """Base exception for user service errors"""
    pass


class UserValidationError(UserServiceError):
    """Payload violates one or more field rules"""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class UserNotFoundError(UserServiceError):
    """No active user with the given ID"""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class UserAccountService:
    """
    User account business logic service

    All state lives in the store; the service keeps nothing between calls
    and adds no locking on top of the store's per-id guarantees.
    """

    def __init__(
        self,
        store: UserStoreProtocol,
        identity_generator: IdentityGeneratorProtocol,
        validator: Optional[UserValidator] = None,
    ):
        self.store = store
        self.identity_generator = identity_generator
        self.validator = validator or UserValidator()

    # User Lifecycle Operations

    async def create(self, payload: Any) -> User:
        """
        Create a new user

        Args:
            payload: Decoded request body; any client-sent id is ignored

        Returns:
            The stored user with its assigned id

        Raises:
            UserValidationError: If the payload is invalid
            UserServiceError: If the store fails
        """
        self._ensure_valid(payload, action="create")
        attributes = self._parse_payload(payload)

        try:
            now = datetime.now(timezone.utc)
            user = User(
                id=self.identity_generator.next(),
                created_at=now,
                updated_at=now,
                **attributes.model_dump(),
            )
            await self.store.put(user.id, user)
        except Exception as e:
            logger.error(f"Failed to create user: {e}", exc_info=True)
            raise UserServiceError(f"Failed to create user: {str(e)}")

        logger.info(f"User created: {user.id}")
        return user

    async def get_user(self, user_id: str) -> User:
        """
        Get a user by ID

        Raises:
            UserNotFoundError: If no such user exists
        """
        try:
            user = None
            if await self.store.exists(user_id):
                user = await self.store.get(user_id)
        except Exception as e:
            logger.error(f"Failed to get user {user_id}: {e}", exc_info=True)
            raise UserServiceError(f"Failed to get user: {str(e)}")

        # A delete may land between exists and get
        if user is None:
            logger.warning(f"User not found: {user_id}")
            raise UserNotFoundError(user_id)
        return user

    async def update(self, user_id: str, payload: Any) -> User:
        """
        Replace every mutable field of an existing user

        Existence is checked before the payload is validated, so an unknown
        id yields UserNotFoundError even for a malformed payload.

        Args:
            user_id: User identifier
            payload: Full replacement representation (PUT semantics)

        Returns:
            Updated user; id and created_at are preserved

        Raises:
            UserNotFoundError: If no such user exists
            UserValidationError: If the payload is invalid
        """
        current = await self.get_user(user_id)
        self._ensure_valid(payload, action="update", user_id=user_id)
        attributes = self._parse_payload(payload)

        try:
            updated = User(
                id=current.id,
                created_at=current.created_at,
                updated_at=datetime.now(timezone.utc),
                **attributes.model_dump(),
            )
            replaced = await self.store.replace(user_id, updated)
        except Exception as e:
            logger.error(f"Failed to update user {user_id}: {e}", exc_info=True)
            raise UserServiceError(f"Failed to update user: {str(e)}")

        if not replaced:
            logger.warning(f"User deleted during update: {user_id}")
            raise UserNotFoundError(user_id)

        logger.info(f"User updated: {user_id}")
        return updated

    async def delete(self, user_id: str) -> None:
        """
        Permanently delete a user

        Raises:
            UserNotFoundError: If no such user exists
        """
        try:
            deleted = False
            if await self.store.exists(user_id):
                deleted = await self.store.delete(user_id)
        except Exception as e:
            logger.error(f"Failed to delete user {user_id}: {e}", exc_info=True)
            raise UserServiceError(f"Failed to delete user: {str(e)}")

        if not deleted:
            logger.warning(f"User not found: {user_id}")
            raise UserNotFoundError(user_id)

        logger.info(f"User deleted: {user_id}")

    # Service Operations

    async def health_check(self) -> Dict[str, Any]:
        """Health check for the service"""
        try:
            user_count = await self.store.count()
            return {
                "status": "healthy",
                "user_count": user_count,
                "timestamp": datetime.now(timezone.utc),
            }
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return {
                "status": "unhealthy",
                "user_count": 0,
                "timestamp": datetime.now(timezone.utc),
            }

    # Private Helper Methods

    def _ensure_valid(self, payload: Any, action: str, user_id: Optional[str] = None) -> None:
        """Raise UserValidationError listing every field error"""
        result = self.validator.validate(payload)
        if not result.is_valid:
            target = f" {user_id}" if user_id else ""
            logger.warning(f"Rejected {action}{target}: {len(result.errors)} validation error(s)")
            raise UserValidationError(result.errors)

    @staticmethod
    def _parse_payload(payload: Any) -> UserPayload:
        """Coerce a validated payload into the model; model rejections stay 400s"""
        try:
            return UserPayload.model_validate(payload)
        except ValidationError as e:
            reasons = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            logger.warning(f"Payload rejected by model: {len(reasons)} error(s)")
            raise UserValidationError(reasons)
