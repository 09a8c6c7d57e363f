"""
Review Card UI Component

Renders a review item as a card: title on the front, content on the back.
"""

from __future__ import annotations

import html

import streamlit as st

from core import sm2


CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "210px"
FRONT_BG_COLOR = "#f0f2f6"
BACK_BG_COLOR = "#e8f4f8"


def render_review_card(item: sm2.ReviewItem, show_content: bool = False) -> None:
    """
    Render a review item card.

    Args:
        item: Item to show
        show_content: If True, render the back (content) under the title
    """
    bg_color = BACK_BG_COLOR if show_content else FRONT_BG_COLOR
    corner_html = (
        '<div style="position: absolute; top: 15px; right: 20px; font-size: 0.9em; '
        f'color: #666; font-style: italic;">Reviews: {item.repetitions} • '
        f'Ease: {item.ease_factor:.1f}</div>'
    )
    title_html = (
        '<h1 style="font-size: 2.2em; color: #1f1f1f; margin: 0; text-align: center; '
        'line-height: 1.4; max-width: 100%; overflow-wrap: anywhere;">'
        f"{html.escape(item.title)}</h1>"
    )

    content_html = ""
    if show_content:
        body = item.content or "(no content)"
        content_html = (
            '<p style="font-size: 1.1em; color: #444; margin: 15px 0 0 0; '
            'white-space: pre-wrap; text-align: left; max-width: 100%; '
            f'overflow-wrap: anywhere;">{html.escape(body)}</p>'
        )

    st.markdown(
        f'<div style="background-color: {bg_color}; padding: {CARD_PADDING}; '
        'border-radius: 15px; box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1); '
        f'min-height: {CARD_MIN_HEIGHT}; display: flex; flex-direction: column; '
        'align-items: center; justify-content: center; position: relative;">'
        f"{corner_html}{title_html}{content_html}</div>",
        unsafe_allow_html=True
    )
