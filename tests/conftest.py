import os
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from core import sm2

# Set test environment variables
os.environ["TEST_MODE"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"


T0 = datetime(2026, 1, 10, 9, 0, tzinfo=timezone.utc)


class FakeClock:
    """Controllable UTC clock."""

    def __init__(self, now: datetime = T0):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return sm2.InMemoryReviewStore()


@pytest.fixture
def make_item(clock):
    """Build a ReviewItem due relative to the fake clock."""

    def _make(
        item_id: str,
        owner_id: str = "alice",
        title: Optional[str] = None,
        due_at: Optional[datetime] = None,
        ease_factor: float = 2.5,
        interval_days: int = 1,
        repetitions: int = 0,
        content: Optional[str] = None,
    ) -> sm2.ReviewItem:
        due_at = due_at or clock.now
        return sm2.ReviewItem(
            id=item_id,
            owner_id=owner_id,
            title=title or f"Item {item_id}",
            content=content,
            ease_factor=ease_factor,
            interval_days=interval_days,
            repetitions=repetitions,
            next_review_at=due_at,
            created_at=due_at - timedelta(days=interval_days),
            updated_at=due_at - timedelta(days=interval_days),
        )

    return _make


@pytest.fixture
def controller(store, clock):
    return sm2.ReviewSessionController(store, clock=clock)


@pytest.fixture
def sql_engine():
    """In-memory SQLite engine shared across sessions, schema created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    sm2.init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_store(sql_engine):
    return sm2.SqlAlchemyReviewStore(sql_engine)
