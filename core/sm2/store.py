"""
Review store collaborator.

The engine only talks to storage through the `ReviewStore` protocol, so it can
run against the SQLAlchemy store in production and the in-memory store in
tests and demos.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from core.sm2.errors import StoreUnavailable
from core.sm2.review_item import ReviewItem


class ReviewStore(Protocol):
    """Durable record-per-id storage for review items."""

    def find_due(self, owner_id: str, as_of: datetime) -> list[ReviewItem]:
        """Items of `owner_id` with next_review_at <= as_of."""
        ...

    def get_by_id(self, item_id: str) -> Optional[ReviewItem]:
        """The item with this id, or None."""
        ...

    def save(self, item: ReviewItem) -> None:
        """Insert or replace the full record. Raises StoreUnavailable on failure."""
        ...

    def delete_by_id(self, item_id: str) -> bool:
        """Delete the record; True if it existed. Raises StoreUnavailable on failure."""
        ...

    def list_by_owner(self, owner_id: str) -> list[ReviewItem]:
        """All items of `owner_id`, ordered by next_review_at then id."""
        ...


def due_sort_key(item: ReviewItem) -> tuple[datetime, str]:
    """Oldest-due first, ties broken by id."""
    return (item.next_review_at, item.id)


class InMemoryReviewStore:
    """
    Dict-backed review store.

    Failures can be injected per operation with `fail_reads`, `fail_saves`
    and `fail_deletes`.
    """

    def __init__(self, items: Optional[list[ReviewItem]] = None):
        self._items: dict[str, ReviewItem] = {}
        self.fail_reads = False
        self.fail_saves = False
        self.fail_deletes = False
        self.save_calls = 0
        for item in items or []:
            self._items[item.id] = item

    def find_due(self, owner_id: str, as_of: datetime) -> list[ReviewItem]:
        if self.fail_reads:
            raise StoreUnavailable("find_due", detail="injected read failure")
        due = [
            item for item in self._items.values()
            if item.owner_id == owner_id and item.is_due(as_of)
        ]
        due.sort(key=due_sort_key)
        return due

    def get_by_id(self, item_id: str) -> Optional[ReviewItem]:
        if self.fail_reads:
            raise StoreUnavailable("get_by_id", item_id=item_id, detail="injected read failure")
        return self._items.get(item_id)

    def save(self, item: ReviewItem) -> None:
        self.save_calls += 1
        if self.fail_saves:
            raise StoreUnavailable("save", item_id=item.id, detail="injected write failure")
        self._items[item.id] = item

    def delete_by_id(self, item_id: str) -> bool:
        if self.fail_deletes:
            raise StoreUnavailable("delete", item_id=item_id, detail="injected delete failure")
        return self._items.pop(item_id, None) is not None

    def list_by_owner(self, owner_id: str) -> list[ReviewItem]:
        if self.fail_reads:
            raise StoreUnavailable("list_by_owner", detail="injected read failure")
        items = [item for item in self._items.values() if item.owner_id == owner_id]
        items.sort(key=due_sort_key)
        return items

    def __len__(self) -> int:
        return len(self._items)
