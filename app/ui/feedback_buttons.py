"""
Feedback Button UI

Renders the four recall grading buttons.
"""

from __future__ import annotations

from typing import Optional

import streamlit as st

from core import sm2


BUTTON_ICONS = {
    sm2.Quality.FORGOT: "❌",
    sm2.Quality.HARD: "😰",
    sm2.Quality.GOOD: "👍",
    sm2.Quality.EASY: "✨",
}


def render_feedback_buttons(key_suffix: str = "") -> Optional[sm2.Quality]:
    """
    Render feedback grading buttons in a 2x2 grid.

    Args:
        key_suffix: Makes widget keys unique per presented item

    Returns:
        Quality selected by the user, or None if no button clicked
    """
    st.markdown("**How well did you recall this?**")

    grades = list(sm2.QUALITY_LABELS)
    selected = None
    for row_start in range(0, len(grades), 2):
        columns = st.columns(2)
        for column, quality in zip(columns, grades[row_start:row_start + 2]):
            label = f"{BUTTON_ICONS[quality]} {sm2.QUALITY_LABELS[quality]}"
            with column:
                if st.button(label, key=f"grade_{int(quality)}_{key_suffix}", use_container_width=True):
                    selected = quality
    return selected
