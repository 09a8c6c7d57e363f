"""Tests for the SQLAlchemy review store and database configuration."""

import logging
from datetime import timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core import sm2
from core.sm2.database import get_database_url, get_session_limit, is_test_mode
from core.sm2.models import ReviewItemRow


class TestSqlAlchemyReviewStore:
    def test_save_and_get_round_trip(self, sql_store, make_item):
        item = make_item("a", content="Powerhouse of the cell", ease_factor=2.36, interval_days=6, repetitions=2)

        sql_store.save(item)

        assert sql_store.get_by_id("a") == item

    def test_timestamps_come_back_utc_aware(self, sql_store, make_item):
        sql_store.save(make_item("a"))

        loaded = sql_store.get_by_id("a")

        assert loaded.next_review_at.tzinfo is not None
        assert loaded.next_review_at.utcoffset() == timedelta(0)
        assert loaded.created_at.tzinfo == timezone.utc

    def test_get_missing_returns_none(self, sql_store):
        assert sql_store.get_by_id("missing") is None

    def test_save_replaces_full_record(self, sql_store, make_item, clock):
        item = make_item("a")
        sql_store.save(item)

        updated = item.rescheduled(ease_factor=2.6, interval_days=1, repetitions=1, now=clock.now)
        sql_store.save(updated)

        loaded = sql_store.get_by_id("a")
        assert loaded.repetitions == 1
        assert loaded.ease_factor == pytest.approx(2.6)
        assert loaded.next_review_at == clock.now + timedelta(days=1)
        assert len(sql_store.list_by_owner("alice")) == 1

    def test_find_due_orders_and_filters(self, sql_store, make_item, clock):
        due = clock.now - timedelta(hours=2)
        sql_store.save(make_item("item-2", due_at=due))
        sql_store.save(make_item("item-1", due_at=due))
        sql_store.save(make_item("older", due_at=clock.now - timedelta(days=1)))
        sql_store.save(make_item("future", due_at=clock.now + timedelta(minutes=1)))
        sql_store.save(make_item("bobs", owner_id="bob"))

        due_items = sql_store.find_due("alice", clock.now)

        assert [item.id for item in due_items] == ["older", "item-1", "item-2"]

    def test_find_due_includes_exact_due_time(self, sql_store, make_item, clock):
        sql_store.save(make_item("a", due_at=clock.now))
        assert [item.id for item in sql_store.find_due("alice", clock.now)] == ["a"]

    def test_list_by_owner(self, sql_store, make_item, clock):
        sql_store.save(make_item("later", due_at=clock.now + timedelta(days=3)))
        sql_store.save(make_item("now"))
        sql_store.save(make_item("bobs", owner_id="bob"))

        assert [item.id for item in sql_store.list_by_owner("alice")] == ["now", "later"]

    def test_delete(self, sql_store, make_item):
        sql_store.save(make_item("a"))

        assert sql_store.delete_by_id("a") is True
        assert sql_store.delete_by_id("a") is False
        assert sql_store.get_by_id("a") is None

    def test_errors_become_store_unavailable(self, make_item, clock):
        engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
        store = sm2.SqlAlchemyReviewStore(engine)  # no schema

        with pytest.raises(sm2.StoreUnavailable) as exc_info:
            store.find_due("alice", clock.now)
        assert exc_info.value.operation == "find_due"

        with pytest.raises(sm2.StoreUnavailable) as exc_info:
            store.save(make_item("a"))
        assert exc_info.value.item_id == "a"

        engine.dispose()


class TestSchema:
    def test_init_db_is_idempotent(self, sql_engine, sql_store, make_item):
        sql_store.save(make_item("a"))

        sm2.init_db(sql_engine)

        assert sql_store.get_by_id("a") is not None

    def test_reset_db_drops_data(self, sql_engine, sql_store, make_item):
        sql_store.save(make_item("a"))

        sm2.reset_db(sql_engine)

        assert sql_store.list_by_owner("alice") == []


class TestConfiguration:
    def test_database_url_required(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with pytest.raises(ValueError):
            get_database_url()

    def test_test_mode_switches_database(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost:5432/review_db")
        monkeypatch.setenv("TEST_MODE", "true")

        assert is_test_mode()
        assert get_database_url() == "postgresql://u:p@localhost:5432/test_review_db"

    def test_production_mode_keeps_database(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@localhost:5432/review_db")
        monkeypatch.setenv("TEST_MODE", "false")

        assert get_database_url() == "postgresql://u:p@localhost:5432/review_db"

    def test_session_limit(self, monkeypatch):
        monkeypatch.delenv("REVIEW_SESSION_LIMIT", raising=False)
        assert get_session_limit() is None

        monkeypatch.setenv("REVIEW_SESSION_LIMIT", "20")
        assert get_session_limit() == 20

        monkeypatch.setenv("REVIEW_SESSION_LIMIT", "0")
        with pytest.raises(ValueError):
            get_session_limit()

    def test_default_user_id(self, monkeypatch):
        monkeypatch.delenv("DEFAULT_USER_ID", raising=False)
        assert sm2.get_default_user_id() == "local"

        monkeypatch.setenv("DEFAULT_USER_ID", "alice")
        assert sm2.get_default_user_id() == "alice"


class TestControllerOnDatabase:
    def test_review_flow_persists_schedule(self, sql_store, clock):
        controller = sm2.ReviewSessionController(sql_store, clock=clock)
        added = controller.add_item("alice", "Mitochondria", content="Powerhouse")

        assert controller.start_session("alice").id == added.id
        controller.submit_grade(added.id, sm2.Quality.EASY)

        stored = sql_store.get_by_id(added.id)
        assert stored.repetitions == 1
        assert stored.interval_days == 1
        assert stored.ease_factor == pytest.approx(2.6)
        assert stored.next_review_at == clock.now + timedelta(days=1)
        assert controller.due_count("alice") == 0

        clock.advance(days=1)
        assert controller.start_session("alice").id == added.id
        controller.submit_grade(added.id, sm2.Quality.GOOD)

        assert sql_store.get_by_id(added.id).interval_days == 6


class TestCorruptRows:
    @pytest.fixture
    def corrupt_row(self, sql_engine, clock):
        session = sessionmaker(bind=sql_engine)()
        try:
            session.add(ReviewItemRow(
                id="bad",
                owner_id="alice",
                title="Broken",
                ease_factor=1.0,
                interval_days=1,
                repetitions=0,
                next_review_at=clock.now,
                created_at=clock.now,
                updated_at=clock.now,
            ))
            session.commit()
        finally:
            session.close()

    def test_reads_name_the_bad_row(self, sql_store, corrupt_row, clock, caplog):
        with caplog.at_level(logging.ERROR, logger="core.sm2.database"):
            with pytest.raises(sm2.InvalidReviewItem, match="'bad'"):
                sql_store.find_due("alice", clock.now)

        assert "bad" in caplog.text

    def test_corrupt_row_is_not_reported_as_outage(self, sql_store, corrupt_row, clock):
        with pytest.raises(sm2.InvalidReviewItem) as exc_info:
            sql_store.list_by_owner("alice")

        assert not isinstance(exc_info.value, sm2.StoreUnavailable)
