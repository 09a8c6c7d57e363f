"""UI Components for the review app"""

from app.ui.review_card import render_review_card
from app.ui.session_stats import render_session_stats, render_session_complete
from app.ui.feedback_buttons import render_feedback_buttons

__all__ = [
    "render_review_card",
    "render_session_stats",
    "render_session_complete",
    "render_feedback_buttons",
]
