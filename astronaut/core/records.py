"""
Attempt records: the unit of persisted scheduling state.

A card has no row of its own. It exists as the sequence of attempt records
sharing its ``card_id``, starting with a seed record (attempt 0) written when
the card is added. Records are immutable once written.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass


def new_attempt_id() -> str:
    """Generate a globally unique attempt id."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class AttemptRecord:
    """One review event for a card and the schedule decided at that time."""

    attempt_id: str
    card_id: int
    front: str
    back: str
    attempt_number: int
    confidence: int
    review_time: int  # ms since epoch
    next_attempt_number: int
    next_review_time: int  # ms since epoch

    @classmethod
    def seed(cls, card_id: int, front: str, back: str, now: int) -> AttemptRecord:
        """Initial record for a new card, due immediately."""
        return cls(
            attempt_id=new_attempt_id(),
            card_id=card_id,
            front=front,
            back=back,
            attempt_number=0,
            confidence=0,
            review_time=now,
            next_attempt_number=1,
            next_review_time=now,
        )

    def is_due(self, now: int) -> bool:
        return self.next_review_time <= now
