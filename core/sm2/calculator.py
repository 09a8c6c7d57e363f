"""
Calculator - SM-2 Algorithm Logic

Pure SM-2 interval computation (no database calls, no clock).

Workflow:
1. Update the ease factor from the recall quality
2. Clamp the ease factor to its floor
3. On success, grow the interval; on failure, reset it

This module handles ONLY the algorithm logic.
Persistence is handled by the store, sequencing by the session controller.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from core.sm2.constants import (
    FAILED_INTERVAL_DAYS,
    FIRST_INTERVAL_DAYS,
    MAX_QUALITY,
    MIN_EASE_FACTOR,
    MIN_QUALITY,
    PASSING_QUALITY,
    SECOND_INTERVAL_DAYS,
)
from core.sm2.errors import InvalidGrade


@dataclass(frozen=True)
class ScheduleUpdate:
    """New scheduling fields produced by one review."""
    ease_factor: float
    interval_days: int
    repetitions: int


def validate_quality(quality: object) -> int:
    """
    Check that a grade is an integer in [0, 5].

    Bools and floats are rejected even when numerically in range.

    Raises:
        InvalidGrade: if the grade is out of range or not an integer
    """
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise InvalidGrade(quality)
    if not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise InvalidGrade(quality)
    return int(quality)


def is_passing(quality: int) -> bool:
    """True when a grade counts as a successful recall."""
    return quality >= PASSING_QUALITY


def next_ease_factor(prior_ease_factor: float, quality: int) -> float:
    """
    Update the ease factor from recall quality.

    Formula:
        EF' = EF + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))

    The result never drops below 1.3. There is no upper clamp.
    """
    miss = MAX_QUALITY - quality
    ease_factor = prior_ease_factor + (0.1 - miss * (0.08 + miss * 0.02))
    return max(MIN_EASE_FACTOR, ease_factor)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_next(
    quality: int,
    prior_repetitions: int,
    prior_ease_factor: float,
    prior_interval_days: int,
) -> ScheduleUpdate:
    """
    Compute the next scheduling fields for one review.

    Args:
        quality: Recall quality (0-5)
            0 - Complete blackout
            1 - Incorrect, remembered once the answer was shown
            2 - Incorrect, but the answer seemed easy to recall
            3 - Correct with serious difficulty
            4 - Correct after hesitation
            5 - Perfect recall
        prior_repetitions: Consecutive successful reviews so far
        prior_ease_factor: Current ease factor (>= 1.3)
        prior_interval_days: Current interval in days (>= 1)

    Returns:
        ScheduleUpdate with the new ease factor, interval and repetitions

    Raises:
        InvalidGrade: if quality is outside [0, 5]
        ValueError: if the prior state breaks an invariant
    """
    quality = validate_quality(quality)
    if prior_repetitions < 0:
        raise ValueError(f"prior_repetitions must be >= 0, got {prior_repetitions}")
    if prior_ease_factor < MIN_EASE_FACTOR:
        raise ValueError(f"prior_ease_factor must be >= {MIN_EASE_FACTOR}, got {prior_ease_factor}")
    if prior_interval_days < 1:
        raise ValueError(f"prior_interval_days must be >= 1, got {prior_interval_days}")

    ease_factor = next_ease_factor(prior_ease_factor, quality)

    if not is_passing(quality):
        # Failed recall degrades ease but does not reset it
        return ScheduleUpdate(
            ease_factor=ease_factor,
            interval_days=FAILED_INTERVAL_DAYS,
            repetitions=0,
        )

    if prior_repetitions == 0:
        interval_days = FIRST_INTERVAL_DAYS
    elif prior_repetitions == 1:
        interval_days = SECOND_INTERVAL_DAYS
    else:
        interval_days = max(1, _round_half_up(prior_interval_days * ease_factor))

    return ScheduleUpdate(
        ease_factor=ease_factor,
        interval_days=interval_days,
        repetitions=prior_repetitions + 1,
    )
