"""
Interval Function - how long until a card is due again.

    delay = DAY_MS * max(attempt_number, 1) ** ln(confidence)

Confidence and review maturity combine here and nowhere else: high
confidence on a card with many prior attempts pushes the next review out
super-linearly, while low confidence collapses it back toward one day.

Degenerate inputs:
- confidence <= 0: ln is undefined, the growth term is taken as 1 (one day)
- attempt_number == 0: the base is clamped to 1, so the first review is
  always one day out regardless of confidence
"""

from __future__ import annotations

import math

DAY_MS = 86_400_000

MIN_CONFIDENCE = 0
MAX_CONFIDENCE = 10


def growth_exponent(confidence: int) -> float:
    """Exponent applied to the attempt count; 0 when confidence is not positive."""
    if confidence <= 0:
        return 0.0
    return math.log(confidence)


def next_review_delay(attempt_number: int, confidence: int, base_ms: int = DAY_MS) -> int:
    """
    Delay in ms before the next review.

    Args:
        attempt_number: Reviews recorded so far for the card (>= 0)
        confidence: Score reported for this review, 0-10
        base_ms: Delay for the first review, one day by default

    Returns:
        Whole milliseconds, rounded down, never less than 1
    """
    if attempt_number < 0:
        raise ValueError(f"attempt_number must be non-negative, got {attempt_number}")

    base = max(attempt_number, 1)
    delay = math.floor(base_ms * math.pow(base, growth_exponent(confidence)))
    return max(delay, 1)
