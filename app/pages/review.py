"""
Review page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import (
    delete_current_item,
    end_session,
    process_grade,
    start_new_session,
)
from app.ui import (
    render_feedback_buttons,
    render_review_card,
    render_session_complete,
    render_session_stats,
)
from core import sm2


def render_review_page() -> None:
    """
    Render the review flow (intro or active session).
    """
    if render_session_stats():
        end_session()
        st.rerun()

    if st.session_state.controller.current_item() is None:
        _render_intro_screen()
    else:
        _render_active_session()


def _render_intro_screen() -> None:
    st.title("🧠 Spaced Repetition")
    if sm2.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using test_review_db (set TEST_MODE=false in .env for production)")

    controller: sm2.ReviewSessionController = st.session_state.controller
    if st.session_state.session_started:
        render_session_complete()

    try:
        due = controller.due_count(st.session_state.user_id)
    except sm2.StoreUnavailable as exc:
        st.error(f"Could not count due items: {exc}")
        return

    st.markdown(f"**{due} due**")
    if st.button("Start Review", type="primary", use_container_width=True, disabled=due == 0):
        start_new_session()
        st.rerun()


def _render_active_session() -> None:
    controller: sm2.ReviewSessionController = st.session_state.controller
    item = controller.current_item()

    render_review_card(item, show_content=st.session_state.show_answer)
    st.markdown("<br>", unsafe_allow_html=True)

    if not st.session_state.show_answer:
        if st.button("Reveal Answer", use_container_width=True, type="primary"):
            st.session_state.show_answer = True
            st.rerun()
    else:
        quality = render_feedback_buttons(key_suffix=item.id)
        if quality is not None:
            process_grade(quality)

    if st.button("🗑️ Delete item", help="Delete this item permanently"):
        delete_current_item()
