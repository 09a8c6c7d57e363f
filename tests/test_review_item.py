"""Tests for the ReviewItem data model and input schema."""

from dataclasses import replace
from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from core.sm2.errors import InvalidReviewItem
from core.sm2.review_item import new_review_item, utc_now
from core.sm2.schemas import NewReviewItem
from tests.conftest import T0


class TestNewReviewItem:
    def test_defaults(self):
        item = new_review_item("alice", "Mitochondria", now=T0)

        assert item.owner_id == "alice"
        assert item.title == "Mitochondria"
        assert item.content is None
        assert item.task_id is None
        assert item.ease_factor == 2.5
        assert item.interval_days == 1
        assert item.repetitions == 0
        assert item.next_review_at == T0
        assert item.created_at == T0
        assert item.updated_at == T0

    def test_due_immediately(self):
        item = new_review_item("alice", "Mitochondria", now=T0)
        assert item.is_due(T0)
        assert not item.is_due(T0 - timedelta(seconds=1))

    def test_unique_ids(self):
        ids = {new_review_item("alice", "x", now=T0).id for _ in range(50)}
        assert len(ids) == 50

    def test_defaults_to_current_time(self):
        before = utc_now()
        item = new_review_item("alice", "x")
        assert before <= item.created_at <= utc_now()
        assert item.created_at.tzinfo is not None


class TestInvariants:
    @pytest.fixture
    def item(self):
        return new_review_item("alice", "Mitochondria", now=T0)

    @pytest.mark.parametrize("field,value", [
        ("title", ""),
        ("title", "   "),
        ("owner_id", ""),
        ("id", ""),
        ("ease_factor", 1.29),
        ("interval_days", 0),
        ("repetitions", -1),
        ("next_review_at", datetime(2026, 1, 1)),
    ])
    def test_rejects_invalid_fields(self, item, field, value):
        with pytest.raises(InvalidReviewItem):
            replace(item, **{field: value})

    def test_invalid_item_is_value_error(self, item):
        with pytest.raises(ValueError):
            replace(item, interval_days=0)

    def test_is_immutable(self, item):
        with pytest.raises(AttributeError):
            item.ease_factor = 3.0


class TestRescheduled:
    def test_next_review_is_updated_at_plus_interval(self):
        item = new_review_item("alice", "Mitochondria", now=T0)
        now = T0 + timedelta(days=3, hours=2)

        updated = item.rescheduled(ease_factor=2.6, interval_days=6, repetitions=2, now=now)

        assert updated.updated_at == now
        assert updated.next_review_at == now + timedelta(days=6)
        assert updated.ease_factor == 2.6
        assert updated.interval_days == 6
        assert updated.repetitions == 2

    def test_identity_fields_preserved(self):
        item = new_review_item("alice", "Mitochondria", content="Powerhouse", task_id="task-1", now=T0)

        updated = item.rescheduled(ease_factor=2.6, interval_days=1, repetitions=1, now=T0)

        assert updated.id == item.id
        assert updated.owner_id == "alice"
        assert updated.title == "Mitochondria"
        assert updated.content == "Powerhouse"
        assert updated.task_id == "task-1"
        assert updated.created_at == T0
        assert item.repetitions == 0  # original untouched


class TestNewReviewItemSchema:
    def test_strips_title_and_blank_content(self):
        request = NewReviewItem(title="  Krebs cycle  ", content="   ")
        assert request.title == "Krebs cycle"
        assert request.content is None

    def test_keeps_content(self):
        request = NewReviewItem(title="Krebs cycle", content=" citrate \n")
        assert request.content == "citrate"

    @pytest.mark.parametrize("title", ["", "    ", "x" * 201])
    def test_rejects_bad_titles(self, title):
        with pytest.raises(ValidationError):
            NewReviewItem(title=title)
