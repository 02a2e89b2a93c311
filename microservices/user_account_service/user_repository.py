"""
User Repository - In-Memory Version

Data access layer for user accounts. Records live in a process-local dict;
operations on one id are serialized by a striped lock so they are
linearizable, while distinct ids rarely share a lock.

Callers always receive deep copies: the repository is the only owner of the
canonical records.
"""

import logging
import threading
from typing import Dict, List, Optional

from .models import User

logger = logging.getLogger(__name__)

DEFAULT_LOCK_STRIPES = 64


class InMemoryUserStore:
    """
    User store backed by a dict

    Implements UserStoreProtocol.
    """

    def __init__(self, lock_stripes: int = DEFAULT_LOCK_STRIPES):
        if lock_stripes < 1:
            raise ValueError("lock_stripes must be at least 1")
        self._users: Dict[str, User] = {}
        self._locks: List[threading.Lock] = [threading.Lock() for _ in range(lock_stripes)]

    def _lock_for(self, user_id: str) -> threading.Lock:
        return self._locks[hash(user_id) % len(self._locks)]

    async def put(self, user_id: str, user: User) -> None:
        """Insert or overwrite a user"""
        with self._lock_for(user_id):
            self._users[user_id] = user.model_copy(deep=True)
        logger.debug(f"Stored user {user_id}")

    async def get(self, user_id: str) -> Optional[User]:
        """Get a user by ID"""
        with self._lock_for(user_id):
            user = self._users.get(user_id)
            return user.model_copy(deep=True) if user else None

    async def delete(self, user_id: str) -> bool:
        """Hard delete a user; False if no such user"""
        with self._lock_for(user_id):
            removed = self._users.pop(user_id, None)
        if removed is None:
            return False
        logger.debug(f"Removed user {user_id}")
        return True

    async def exists(self, user_id: str) -> bool:
        """Check whether a user is stored"""
        with self._lock_for(user_id):
            return user_id in self._users

    async def replace(self, user_id: str, user: User) -> bool:
        """Overwrite a user only if it is still stored"""
        with self._lock_for(user_id):
            if user_id not in self._users:
                return False
            self._users[user_id] = user.model_copy(deep=True)
        logger.debug(f"Replaced user {user_id}")
        return True

    async def count(self) -> int:
        """Number of stored users"""
        return len(self._users)
