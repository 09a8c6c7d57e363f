"""
SM-2 - Adaptive Spaced-Repetition Review Scheduler

Main API for the review engine.

This package implements:
- The SM-2 interval calculator (pure, no I/O)
- A snapshot due queue per owner and session
- A session controller driving present -> grade -> advance
- A store protocol with SQLAlchemy and in-memory implementations

Quick start:
    from core import sm2

    engine = sm2.get_engine()
    sm2.init_db(engine)
    controller = sm2.ReviewSessionController(sm2.SqlAlchemyReviewStore(engine))

    item = controller.start_session("alice")
    if item is not None:
        controller.submit_grade(item.id, sm2.Quality.GOOD)
"""

# Core algorithm
from core.sm2.calculator import ScheduleUpdate, compute_next, validate_quality

# Data model
from core.sm2.review_item import ReviewItem, new_review_item, utc_now
from core.sm2.schemas import NewReviewItem

# Session engine
from core.sm2.due_queue import DueQueue
from core.sm2.session import ReviewSessionController, SessionState, SessionStats

# Storage
from core.sm2.store import InMemoryReviewStore, ReviewStore
from core.sm2.database import (
    SqlAlchemyReviewStore,
    get_database_url,
    get_default_user_id,
    get_engine,
    get_session_limit,
    init_db,
    is_test_mode,
    reset_db,
)

# Errors
from core.sm2.errors import (
    InvalidGrade,
    InvalidReviewItem,
    ItemNotFound,
    NoCurrentItem,
    ReviewError,
    StaleItem,
    StoreUnavailable,
)

# Constants
from core.sm2.constants import (
    INITIAL_EASE_FACTOR,
    INITIAL_INTERVAL_DAYS,
    MIN_EASE_FACTOR,
    QUALITY_LABELS,
    Quality,
)


__all__ = [
    # Core algorithm
    "ScheduleUpdate",
    "compute_next",
    "validate_quality",

    # Data model
    "ReviewItem",
    "NewReviewItem",
    "new_review_item",
    "utc_now",

    # Session engine
    "DueQueue",
    "ReviewSessionController",
    "SessionState",
    "SessionStats",

    # Storage
    "ReviewStore",
    "InMemoryReviewStore",
    "SqlAlchemyReviewStore",
    "get_database_url",
    "get_default_user_id",
    "get_engine",
    "get_session_limit",
    "init_db",
    "is_test_mode",
    "reset_db",

    # Errors
    "ReviewError",
    "InvalidGrade",
    "InvalidReviewItem",
    "ItemNotFound",
    "NoCurrentItem",
    "StaleItem",
    "StoreUnavailable",

    # Constants
    "Quality",
    "QUALITY_LABELS",
    "INITIAL_EASE_FACTOR",
    "INITIAL_INTERVAL_DAYS",
    "MIN_EASE_FACTOR",
]
