"""
Review Session Controller

Drives one owner's review session, one item at a time:

    IDLE -> PRESENTING -> GRADING -> PRESENTING | IDLE

Grading sequence:
1. Validate the grade and check it targets the current item
2. Compute the new schedule (calculator)
3. Write the full updated record (store)
4. Drop the item from the queue and present the next head

A failed store write leaves the item at the head so the same grade can be
resubmitted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from core.sm2 import items as item_lifecycle
from core.sm2.calculator import compute_next, is_passing, validate_quality
from core.sm2.due_queue import DueQueue
from core.sm2.errors import InvalidGrade, NoCurrentItem, StaleItem, StoreUnavailable
from core.sm2.review_item import ReviewItem, utc_now
from core.sm2.store import ReviewStore

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Review session states."""
    IDLE = "idle"              # Nothing loaded, or queue exhausted
    PRESENTING = "presenting"  # Current item shown, awaiting a grade
    GRADING = "grading"        # Grade received, store write in flight


@dataclass
class SessionStats:
    """Counters for the current session."""
    reviewed: int = 0
    passed: int = 0

    @property
    def failed(self) -> int:
        return self.reviewed - self.passed

    @property
    def accuracy(self) -> Optional[float]:
        if self.reviewed == 0:
            return None
        return self.passed / self.reviewed


class ReviewSessionController:
    """
    Caller-facing review API for a single (owner, session).

    Args:
        store: Review store collaborator
        clock: Returns the current UTC time (injectable for tests)
        limit: Optional bound on the number of items loaded per session
    """

    def __init__(
        self,
        store: ReviewStore,
        clock: Callable[[], datetime] = utc_now,
        limit: Optional[int] = None,
    ):
        self.store = store
        self.clock = clock
        self.queue = DueQueue(store, limit=limit)
        self.stats = SessionStats()
        self._state = SessionState.IDLE

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def owner_id(self) -> Optional[str]:
        return self.queue.owner_id

    @property
    def remaining(self) -> int:
        """Items left in the in-memory queue."""
        return len(self.queue)

    # ---- Session lifecycle ----

    def start_session(self, owner_id: str) -> Optional[ReviewItem]:
        """
        Load the owner's due items and present the first one.

        On store failure, the previous queue and state are kept.

        Returns:
            The current item, or None if nothing is due
        """
        self.queue.load(owner_id, self.clock())
        self.stats = SessionStats()
        current = self.queue.current()
        self._state = SessionState.PRESENTING if current is not None else SessionState.IDLE
        logger.info("Started review session for owner %s with %d due item(s)", owner_id, len(self.queue))
        return current

    def current_item(self) -> Optional[ReviewItem]:
        return self.queue.current()

    # ---- Grading ----

    def grade(self, item_id: str, quality: int) -> ReviewItem:
        """
        Grade the current item and advance the queue.

        Args:
            item_id: Id of the item being graded (must be the current item)
            quality: Recall quality (0-5)

        Returns:
            The updated item as written to the store

        Raises:
            InvalidGrade: quality outside [0, 5]; nothing changes
            NoCurrentItem: the queue is empty
            StaleItem: item_id is not the current item; queue unchanged
            StoreUnavailable: the write failed; the item stays current
        """
        try:
            quality = validate_quality(quality)
        except InvalidGrade as exc:
            raise InvalidGrade(exc.quality, item_id=item_id) from None

        current = self.queue.current()
        if current is None:
            logger.warning("Grade for %s submitted with no current item", item_id)
            raise NoCurrentItem(item_id)
        if current.id != item_id:
            logger.warning("Stale grade for %s, current item is %s", item_id, current.id)
            raise StaleItem(item_id, current.id)

        self._state = SessionState.GRADING
        update = compute_next(
            quality,
            current.repetitions,
            current.ease_factor,
            current.interval_days,
        )
        updated = current.rescheduled(
            ease_factor=update.ease_factor,
            interval_days=update.interval_days,
            repetitions=update.repetitions,
            now=self.clock(),
        )

        try:
            self.store.save(updated)
        except StoreUnavailable as exc:
            self._state = SessionState.PRESENTING
            logger.warning("Could not save grade %d for item %s: %s", quality, item_id, exc)
            raise StoreUnavailable(
                "save", item_id=item_id, quality=quality, detail=str(exc)
            ) from exc
        except Exception:
            # Item stays at the head so the grade can be resubmitted
            self._state = SessionState.PRESENTING
            logger.exception("Unexpected error saving grade %d for item %s", quality, item_id)
            raise

        self.queue.remove(item_id)
        self.stats.reviewed += 1
        if is_passing(quality):
            self.stats.passed += 1
        self._state = SessionState.PRESENTING if self.queue.current() is not None else SessionState.IDLE

        logger.debug(
            "Graded %s q=%d: ease=%.2f interval=%d reps=%d",
            item_id, quality, updated.ease_factor, updated.interval_days, updated.repetitions,
        )
        return updated

    submit_grade = grade

    # ---- Informational ----

    def due_count(self, owner_id: str) -> int:
        """Number of persisted items due now (independent of the loaded queue)."""
        return len(self.store.find_due(owner_id, self.clock()))

    # ---- Item lifecycle ----

    def add_item(
        self,
        owner_id: str,
        title: str,
        content: Optional[str] = None,
        task_id: Optional[str] = None,
    ) -> ReviewItem:
        """
        Create a new item, due immediately.

        The item joins the queue on the next start_session.
        """
        return item_lifecycle.create_item(
            self.store,
            owner_id,
            title,
            content=content,
            task_id=task_id,
            now=self.clock(),
        )

    def delete_item(self, owner_id: str, item_id: str) -> None:
        """Delete an item and drop it from the active queue if present."""
        item_lifecycle.delete_item(self.store, owner_id, item_id)
        if self.queue.remove(item_id) and self.queue.current() is None:
            self._state = SessionState.IDLE
