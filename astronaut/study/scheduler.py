"""
Scheduler - records one review and decides when the card is due next.

This is the only code that appends review attempts. Earlier attempts are
never touched; the new attempt becomes the card's current state because
its next review time lies after ``now``.
"""

from __future__ import annotations

from loguru import logger

from astronaut.core.errors import NotFoundError
from astronaut.core.records import AttemptRecord, new_attempt_id
from astronaut.db.card_store import CardStore
from astronaut.study.interval import DAY_MS, next_review_delay


class Scheduler:
    """Append-only review scheduler over a CardStore."""

    def __init__(self, store: CardStore, base_interval_ms: int = DAY_MS):
        self.store = store
        self.base_interval_ms = base_interval_ms

    def record_review(self, card_id: int, confidence: int, now: int) -> AttemptRecord:
        """
        Record a review of ``card_id`` at ``now`` with the given confidence.

        Args:
            card_id: Card being reviewed
            confidence: Validated score in [0, 10]
            now: Review time in ms since epoch

        Returns:
            The newly appended attempt record

        Raises:
            NotFoundError: The card has no attempts; nothing is written
        """
        latest = self.store.latest_for(card_id)
        if latest is None:
            logger.warning(f"Review requested for unknown card {card_id}")
            raise NotFoundError(card_id)

        delay = next_review_delay(latest.attempt_number, confidence, self.base_interval_ms)
        attempt_number = latest.attempt_number + 1
        record = AttemptRecord(
            attempt_id=new_attempt_id(),
            card_id=card_id,
            front=latest.front,
            back=latest.back,
            attempt_number=attempt_number,
            confidence=confidence,
            review_time=now,
            next_attempt_number=attempt_number + 1,
            next_review_time=now + delay,
        )
        self.store.append_attempt(record)

        logger.info(
            f"Card {card_id} reviewed (confidence {confidence}), "
            f"attempt {attempt_number} due in {delay} ms"
        )
        return record
