"""
Review item lifecycle: creation and deletion.

Scheduling fields are never edited here; only grading changes them.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from pydantic import ValidationError

from core.sm2.errors import InvalidReviewItem, ItemNotFound
from core.sm2.review_item import ReviewItem, new_review_item
from core.sm2.schemas import NewReviewItem
from core.sm2.store import ReviewStore

logger = logging.getLogger(__name__)


def create_item(
    store: ReviewStore,
    owner_id: str,
    title: str,
    content: Optional[str] = None,
    task_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> ReviewItem:
    """
    Validate user input and persist a new review item, due immediately.

    Raises:
        InvalidReviewItem: if the title is missing or too long
        StoreUnavailable: if the store write fails
    """
    try:
        request = NewReviewItem(title=title, content=content, task_id=task_id)
    except ValidationError as exc:
        raise InvalidReviewItem(str(exc)) from exc

    item = new_review_item(
        owner_id=owner_id,
        title=request.title,
        content=request.content,
        task_id=request.task_id,
        now=now,
    )
    store.save(item)
    logger.info("Created review item %s for owner %s", item.id, owner_id)
    return item


def delete_item(store: ReviewStore, owner_id: str, item_id: str) -> None:
    """
    Delete a review item owned by `owner_id`.

    Raises:
        ItemNotFound: if the item does not exist or belongs to another owner
        StoreUnavailable: if the store read or delete fails
    """
    item = store.get_by_id(item_id)
    if item is None or item.owner_id != owner_id:
        raise ItemNotFound(item_id)
    if not store.delete_by_id(item_id):
        raise ItemNotFound(item_id)
    logger.info("Deleted review item %s for owner %s", item_id, owner_id)
