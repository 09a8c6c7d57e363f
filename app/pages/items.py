"""
Review item management page: add new items and browse existing ones.
"""

from __future__ import annotations

import streamlit as st

from core import sm2


def render_items_page() -> None:
    st.subheader("Review Items")
    _render_add_form()
    st.divider()
    _render_item_table()


def _render_add_form() -> None:
    with st.form("add_review_item", clear_on_submit=True):
        title = st.text_input("Title", placeholder="What do you want to remember?")
        content = st.text_area("Content", placeholder="Key points, facts, or concepts...", height=120)
        submitted = st.form_submit_button("Add Item", type="primary", use_container_width=True)

    if not submitted:
        return

    controller: sm2.ReviewSessionController = st.session_state.controller
    try:
        controller.add_item(st.session_state.user_id, title, content=content)
    except sm2.InvalidReviewItem:
        st.error("Please enter a title.")
    except sm2.StoreUnavailable as exc:
        st.error(f"Failed to add item: {exc}")
    else:
        st.success("Review item added!")


def _render_item_table() -> None:
    controller: sm2.ReviewSessionController = st.session_state.controller
    try:
        items = controller.store.list_by_owner(st.session_state.user_id)
    except sm2.StoreUnavailable as exc:
        st.error(f"Could not load items: {exc}")
        return

    if not items:
        st.info("No review items yet.")
        return

    st.dataframe(
        [
            {
                "Title": item.title,
                "Next review": item.next_review_at.strftime("%Y-%m-%d %H:%M"),
                "Interval (days)": item.interval_days,
                "Reviews": item.repetitions,
                "Ease": round(item.ease_factor, 2),
            }
            for item in items
        ],
        use_container_width=True,
        hide_index=True,
    )
