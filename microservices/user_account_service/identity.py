"""
User ID generation

Opaque identifiers built from random 128-bit UUIDs. Every issued value is
remembered so an id can never be handed out twice, even after the user it
named has been deleted.
"""

import logging
import threading
import uuid
from typing import Set

logger = logging.getLogger(__name__)


class UUIDIdentityGenerator:
    """
    Thread-safe, collision-free UUID4 identity generator

    The issued set is never pruned: it holds one 32-character string per
    create for the life of the process, deleted users included. A
    long-running deployment with heavy churn should persist issued ids in
    the store instead.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._issued: Set[str] = set()

    def next(self) -> str:
        with self._lock:
            candidate = uuid.uuid4().hex
            while candidate in self._issued:
                logger.warning("Regenerating colliding user ID")
                candidate = uuid.uuid4().hex
            self._issued.add(candidate)
            return candidate

    def issued_count(self) -> int:
        with self._lock:
            return len(self._issued)
