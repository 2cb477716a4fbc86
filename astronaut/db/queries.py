"""
Centralized queries over the attempt log.

The current state of a card is the attempt with the greatest
``next_review_time`` (ties go to the higher ``attempt_number``). It is
computed with an explicit ``row_number()`` window per card rather than
relying on how a particular engine orders ``GROUP BY`` results.

Usage:
    from astronaut.db.queries import select_current_states

    latest = session.scalars(select_current_states()).all()
"""

from __future__ import annotations

from sqlalchemy import Select, func, select
from sqlalchemy.orm import aliased

from astronaut.db.models import Attempt

# =============================================================================
# CURRENT STATE QUERIES
# =============================================================================


def select_current_states(card_id: int | None = None) -> Select[tuple[Attempt]]:
    """Latest-scheduled attempt per card, ordered by card id."""
    row_rank = (
        func.row_number()
        .over(
            partition_by=Attempt.card_id,
            order_by=(Attempt.next_review_time.desc(), Attempt.attempt_number.desc()),
        )
        .label("row_rank")
    )
    ranked = select(Attempt, row_rank)
    if card_id is not None:
        ranked = ranked.where(Attempt.card_id == card_id)
    ranked = ranked.subquery("ranked")

    latest = aliased(Attempt, ranked)
    return select(latest).where(ranked.c.row_rank == 1).order_by(latest.card_id)


# =============================================================================
# CARD QUERIES
# =============================================================================


def select_max_card_id() -> Select[tuple[int | None]]:
    return select(func.max(Attempt.card_id))


def select_card_count() -> Select[tuple[int]]:
    return select(func.count(func.distinct(Attempt.card_id)))


def select_history(card_id: int) -> Select[tuple[Attempt]]:
    """Every attempt for one card, oldest first."""
    return (
        select(Attempt)
        .where(Attempt.card_id == card_id)
        .order_by(Attempt.attempt_number)
    )


def select_all_attempts() -> Select[tuple[Attempt]]:
    return select(Attempt).order_by(Attempt.card_id, Attempt.attempt_number)
