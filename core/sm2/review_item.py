"""
Review Item - SM-2 Item State

Defines the persistent scheduling state of a single learnable item.

Key fields:
- Ease factor: how quickly intervals grow (floor 1.3)
- Interval: days until the next review after the last successful one
- Repetitions: consecutive successful reviews
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from core.sm2.constants import (
    INITIAL_EASE_FACTOR,
    INITIAL_INTERVAL_DAYS,
    INITIAL_REPETITIONS,
    MIN_EASE_FACTOR,
)
from core.sm2.errors import InvalidReviewItem


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ReviewItem:
    """
    Scheduling state for a single review item.

    Scheduling fields are only ever changed by grading; see
    `ReviewItem.rescheduled`.
    """
    id: str
    owner_id: str
    title: str
    content: Optional[str]

    # SM-2 state
    ease_factor: float
    interval_days: int
    repetitions: int

    # Timestamps (UTC, timezone-aware)
    next_review_at: datetime
    created_at: datetime
    updated_at: datetime

    # Optional link to the task this item was created from
    task_id: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise InvalidReviewItem("id must be non-empty")
        if not self.owner_id:
            raise InvalidReviewItem("owner_id must be non-empty")
        if not self.title or not self.title.strip():
            raise InvalidReviewItem("title must be non-empty")
        if self.ease_factor < MIN_EASE_FACTOR:
            raise InvalidReviewItem(f"ease_factor must be >= {MIN_EASE_FACTOR}, got {self.ease_factor}")
        if self.interval_days < 1:
            raise InvalidReviewItem(f"interval_days must be >= 1, got {self.interval_days}")
        if self.repetitions < 0:
            raise InvalidReviewItem(f"repetitions must be >= 0, got {self.repetitions}")
        for name in ("next_review_at", "created_at", "updated_at"):
            value = getattr(self, name)
            if value.tzinfo is None:
                raise InvalidReviewItem(f"{name} must be timezone-aware")

    def is_due(self, as_of: datetime) -> bool:
        """True when the item's next review time has passed."""
        return self.next_review_at <= as_of

    def rescheduled(
        self,
        ease_factor: float,
        interval_days: int,
        repetitions: int,
        now: datetime,
    ) -> "ReviewItem":
        """
        Return a copy carrying new scheduling fields.

        next_review_at is always derived from `now + interval_days`.
        """
        return replace(
            self,
            ease_factor=ease_factor,
            interval_days=interval_days,
            repetitions=repetitions,
            next_review_at=now + timedelta(days=interval_days),
            updated_at=now,
        )


def new_review_item(
    owner_id: str,
    title: str,
    content: Optional[str] = None,
    task_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> ReviewItem:
    """
    Initialize a new review item (never reviewed before).

    New items are due immediately.

    Args:
        owner_id: Owning user
        title: Short label (required)
        content: Optional material to recall
        task_id: Optional task the item belongs to
        now: Creation time (defaults to now)

    Returns:
        ReviewItem with default SM-2 state
    """
    if now is None:
        now = utc_now()

    return ReviewItem(
        id=str(uuid.uuid4()),
        owner_id=owner_id,
        title=title,
        content=content,
        ease_factor=INITIAL_EASE_FACTOR,
        interval_days=INITIAL_INTERVAL_DAYS,
        repetitions=INITIAL_REPETITIONS,
        next_review_at=now,
        created_at=now,
        updated_at=now,
        task_id=task_id,
    )
