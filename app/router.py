"""
Simple page router for Streamlit tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.pages.items import render_items_page
from app.pages.review import render_review_page


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[], None]


PAGES = [
    AppPage(title="Review", render=render_review_page),
    AppPage(title="Items", render=render_items_page),
]
