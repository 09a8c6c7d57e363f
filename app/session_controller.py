"""
Session lifecycle helpers for Streamlit app.

Thin glue between widgets and the review engine; engine errors are shown to
the user instead of crashing the page.
"""

from __future__ import annotations

import streamlit as st

from core import sm2
from core.sm2.calculator import is_passing


def start_new_session() -> None:
    """
    Load the user's due items and present the first one.
    """
    controller: sm2.ReviewSessionController = st.session_state.controller
    try:
        current = controller.start_session(st.session_state.user_id)
    except sm2.StoreUnavailable as exc:
        st.error(f"Could not load due items: {exc}")
        return

    st.session_state.session_started = True
    st.session_state.show_answer = False
    if current is None:
        st.info("All caught up! No reviews due right now. Come back later.")


def process_grade(quality: sm2.Quality) -> None:
    """
    Grade the presented item and move to the next one.
    """
    controller: sm2.ReviewSessionController = st.session_state.controller
    current = controller.current_item()
    if current is None:
        st.warning("No item to grade. Start a new session.")
        return

    try:
        updated = controller.submit_grade(current.id, quality)
    except sm2.StoreUnavailable as exc:
        # Item stays presented; the user can resubmit
        st.error(f"Could not save your grade, please try again. ({exc})")
        return
    except (sm2.StaleItem, sm2.NoCurrentItem) as exc:
        st.warning(f"{exc}. Reloading session.")
        start_new_session()
        st.rerun()
        return

    st.session_state.show_answer = False
    st.toast(grade_feedback(quality, updated))
    st.rerun()


def delete_current_item() -> None:
    controller: sm2.ReviewSessionController = st.session_state.controller
    current = controller.current_item()
    if current is None:
        return
    try:
        controller.delete_item(st.session_state.user_id, current.id)
    except sm2.ReviewError as exc:
        st.error(f"Could not delete item: {exc}")
        return
    st.session_state.show_answer = False
    st.rerun()


def end_session() -> None:
    """
    End the current session (the queue is reloaded on the next start).
    """
    st.session_state.session_started = False
    st.session_state.show_answer = False
    st.session_state.controller = sm2.ReviewSessionController(
        st.session_state.controller.store,
        limit=st.session_state.controller.queue.limit,
    )


def grade_feedback(quality: int, updated: sm2.ReviewItem) -> str:
    """Toast text shown after a grade is saved."""
    if is_passing(quality):
        return f"Great! ✅ Next review in {updated.interval_days} day(s)"
    return "Try again soon 📚"
