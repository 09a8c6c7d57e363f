"""
Review engine errors.

Every failure carries enough context (item id, attempted quality, failed
operation) for the caller to decide whether to retry.
"""

from __future__ import annotations

from typing import Optional


class ReviewError(Exception):
    """Base class for all review engine errors."""


class InvalidGrade(ReviewError, ValueError):
    """Quality outside [0, 5]. Rejected before any state change."""

    def __init__(self, quality: object, item_id: Optional[str] = None):
        self.quality = quality
        self.item_id = item_id
        super().__init__(f"Invalid grade {quality!r}: quality must be an integer in [0, 5]")


class NoCurrentItem(ReviewError):
    """Grade submitted while the queue is empty."""

    def __init__(self, item_id: Optional[str] = None):
        self.item_id = item_id
        super().__init__(f"No item is currently presented (grade targeted {item_id!r})")


class StaleItem(ReviewError):
    """Grade targets an item that is not the head of the queue."""

    def __init__(self, item_id: str, current_id: str):
        self.item_id = item_id
        self.current_id = current_id
        super().__init__(f"Item {item_id!r} is not the current item ({current_id!r})")


class StoreUnavailable(ReviewError):
    """A store read, write or delete failed. Safe to retry."""

    retryable = True

    def __init__(
        self,
        operation: str,
        item_id: Optional[str] = None,
        quality: Optional[int] = None,
        detail: str = "",
    ):
        self.operation = operation
        self.item_id = item_id
        self.quality = quality
        message = f"Review store unavailable during {operation}"
        if item_id is not None:
            message += f" (item {item_id!r})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class InvalidReviewItem(ReviewError, ValueError):
    """A ReviewItem field breaks a data model invariant."""


class ItemNotFound(ReviewError, LookupError):
    """No item with this id exists for the owner."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Review item {item_id!r} not found")
