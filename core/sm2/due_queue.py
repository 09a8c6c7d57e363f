"""
Due queue for one owner's review session.

The queue is a snapshot taken at `load` time: items that become due while a
session is running only show up on the next load, and a graded item never
comes back in the same session.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from core.sm2.review_item import ReviewItem
from core.sm2.store import ReviewStore, due_sort_key

logger = logging.getLogger(__name__)


class DueQueue:
    """
    Ordered in-memory set of items currently eligible for review.

    Order is oldest-due first (next_review_at ascending), ties broken by id.
    """

    def __init__(self, store: ReviewStore, limit: Optional[int] = None):
        if limit is not None and limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")
        self.store = store
        self.limit = limit
        self.owner_id: Optional[str] = None
        self.loaded_at: Optional[datetime] = None
        self._items: list[ReviewItem] = []

    def load(self, owner_id: str, as_of: datetime) -> list[ReviewItem]:
        """
        Replace the snapshot with the owner's items due as of `as_of`.

        If the store read fails, the previous snapshot is kept untouched.

        Returns:
            The new queue contents, head first
        """
        fetched = self.store.find_due(owner_id, as_of)

        items = [
            item for item in fetched
            if item.owner_id == owner_id and item.is_due(as_of)
        ]
        items.sort(key=due_sort_key)
        if self.limit is not None:
            items = items[:self.limit]

        self._items = items
        self.owner_id = owner_id
        self.loaded_at = as_of
        logger.debug("Loaded %d due item(s) for owner %s", len(items), owner_id)
        return list(items)

    def current(self) -> Optional[ReviewItem]:
        """The head of the queue, or None when empty."""
        return self._items[0] if self._items else None

    def remove(self, item_id: str) -> bool:
        """
        Drop an item from the in-memory queue. Does not touch the store.

        Returns:
            True if the item was in the queue
        """
        for index, item in enumerate(self._items):
            if item.id == item_id:
                del self._items[index]
                return True
        return False

    def ids(self) -> list[str]:
        return [item.id for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return any(item.id == item_id for item in self._items)
