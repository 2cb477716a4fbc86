"""
Attempt log table.

Every review of a card appends one row; rows are never updated or deleted.
The current state of a card is derived from its rows (see ``db.queries``).
"""

from __future__ import annotations

from sqlalchemy import BigInteger, CheckConstraint, Index, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from astronaut.core.records import AttemptRecord

from .base import Base


class Attempt(Base):
    """Persisted attempt record."""

    __tablename__ = "attempts"
    __table_args__ = (
        UniqueConstraint("card_id", "attempt_number", name="uq_attempts_card_attempt"),
        CheckConstraint("confidence >= 0 AND confidence <= 10", name="ck_attempts_confidence"),
        CheckConstraint(
            "next_attempt_number = attempt_number + 1", name="ck_attempts_next_attempt"
        ),
        CheckConstraint("length(trim(front)) > 0 AND length(trim(back)) > 0", name="ck_attempts_text"),
        Index("ix_attempts_card_next_review", "card_id", "next_review_time"),
    )

    attempt_id: Mapped[str] = mapped_column(Text, primary_key=True)
    card_id: Mapped[int] = mapped_column(Integer, nullable=False)
    front: Mapped[str] = mapped_column(Text, nullable=False)
    back: Mapped[str] = mapped_column(Text, nullable=False)
    attempt_number: Mapped[int] = mapped_column(Integer, nullable=False)
    confidence: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    review_time: Mapped[int] = mapped_column(BigInteger, nullable=False)
    next_attempt_number: Mapped[int] = mapped_column(Integer, nullable=False)
    next_review_time: Mapped[int] = mapped_column(BigInteger, nullable=False)

    @classmethod
    def from_record(cls, record: AttemptRecord) -> Attempt:
        return cls(
            attempt_id=record.attempt_id,
            card_id=record.card_id,
            front=record.front,
            back=record.back,
            attempt_number=record.attempt_number,
            confidence=record.confidence,
            review_time=record.review_time,
            next_attempt_number=record.next_attempt_number,
            next_review_time=record.next_review_time,
        )

    def to_record(self) -> AttemptRecord:
        return AttemptRecord(
            attempt_id=self.attempt_id,
            card_id=self.card_id,
            front=self.front,
            back=self.back,
            attempt_number=self.attempt_number,
            confidence=self.confidence,
            review_time=self.review_time,
            next_attempt_number=self.next_attempt_number,
            next_review_time=self.next_review_time,
        )

    def __repr__(self) -> str:
        return (
            f"<Attempt card={self.card_id} #{self.attempt_number} "
            f"next_review={self.next_review_time}>"
        )
