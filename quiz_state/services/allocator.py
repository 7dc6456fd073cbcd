"""Monotonic quiz identifier allocation"""
import logging

from quiz_state.services.storage import StateStore

logger = logging.getLogger(__name__)

class IdentifierAllocator:
    """Hands out quiz ids from the shared counter"""

    def __init__(self, store: StateStore):
        self.store = store

    def allocate_next_id(self) -> int:
        """
        Reserve the next quiz id.

        The counter is incremented in place before it is read, so concurrent
        transactions cannot observe the same value. The caller's transaction
        owns the write; rolling it back releases the id.
        """
        new_id = self.store.increment_quiz_counter()
        logger.debug(f"Allocated quiz id {new_id}")
        return new_id
