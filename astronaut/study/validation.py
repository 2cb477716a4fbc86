"""
Input boundary checks.

Raw user input is checked here before it reaches the card store or the
scheduler. Failures raise ValidationError so callers can re-prompt.
"""

from __future__ import annotations

from astronaut.core.errors import ValidationError
from astronaut.study.interval import MAX_CONFIDENCE, MIN_CONFIDENCE


def parse_confidence(raw: str | int) -> int:
    """Parse a confidence score in [0, 10]."""
    if isinstance(raw, bool):
        raise ValidationError(f"Confidence must be a whole number, got {raw!r}")
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        try:
            value = int(text)
        except ValueError:
            raise ValidationError(f"Confidence must be a whole number, got {text!r}") from None

    if not MIN_CONFIDENCE <= value <= MAX_CONFIDENCE:
        raise ValidationError(
            f"Confidence must be between {MIN_CONFIDENCE} and {MAX_CONFIDENCE}, got {value}"
        )
    return value


def validate_card_text(front: str | None, back: str | None) -> tuple[str, str]:
    """Return stripped front/back text, rejecting blank sides."""
    front = (front or "").strip()
    back = (back or "").strip()
    if not front:
        raise ValidationError("Card front must not be empty")
    if not back:
        raise ValidationError("Card back must not be empty")
    return front, back
