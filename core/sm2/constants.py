"""
SM-2 Constants and Parameters

All configurable parameters for the SM-2 review scheduler in one place.
"""

from enum import IntEnum


# ---- Quality Grades ----

class Quality(IntEnum):
    """Canonical recall grades offered by the review buttons."""
    FORGOT = 1  # Recall failed
    HARD = 3    # Recalled with serious difficulty
    GOOD = 4    # Recalled after hesitation
    EASY = 5    # Perfect recall


MIN_QUALITY = 0
MAX_QUALITY = 5
PASSING_QUALITY = 3  # Grades at or above this count as a successful recall

QUALITY_LABELS = {
    Quality.FORGOT: "Forgot",
    Quality.HARD: "Hard",
    Quality.GOOD: "Good",
    Quality.EASY: "Easy",
}


# ---- Initial State ----

INITIAL_EASE_FACTOR = 2.5
INITIAL_INTERVAL_DAYS = 1
INITIAL_REPETITIONS = 0


# ---- Algorithm Parameters ----

MIN_EASE_FACTOR = 1.3     # Floor, no upper clamp
FIRST_INTERVAL_DAYS = 1   # After the first successful recall
SECOND_INTERVAL_DAYS = 6  # After the second successful recall
FAILED_INTERVAL_DAYS = 1  # After any failed recall
