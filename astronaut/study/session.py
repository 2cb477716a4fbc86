"""
Review session driver.

Walks the due set in selector order, presents each card, collects a
confidence score and hands it to the scheduler. The due set is taken once
when the session starts; cards rescheduled during the session are not
shown again until a later session.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from loguru import logger

from astronaut.core.clock import Clock, current_time_ms
from astronaut.core.errors import NotFoundError
from astronaut.core.records import AttemptRecord
from astronaut.study.due import DueSetSelector
from astronaut.study.scheduler import Scheduler
from astronaut.study.validation import parse_confidence


class Presenter(Protocol):
    """Input/output boundary used by a review session."""

    def nothing_due(self) -> None: ...

    def announce(self, due_count: int) -> None: ...

    def show_front(self, record: AttemptRecord) -> None: ...

    def wait_for_flip(self, record: AttemptRecord) -> None: ...

    def show_back(self, record: AttemptRecord) -> None: ...

    def ask_confidence(self, record: AttemptRecord) -> int: ...

    def show_scheduled(self, record: AttemptRecord) -> None: ...

    def finished(self, summary: SessionSummary) -> None: ...


@dataclass
class SessionSummary:
    """Outcome of a review session."""

    total_due: int
    reviewed: int
    scheduled: list[AttemptRecord] = field(default_factory=list)

    @property
    def completed(self) -> bool:
        return self.reviewed == self.total_due


class ReviewSession:
    """One pass over the cards due at session start."""

    def __init__(
        self,
        selector: DueSetSelector,
        scheduler: Scheduler,
        presenter: Presenter,
        clock: Clock = current_time_ms,
    ):
        self.selector = selector
        self.scheduler = scheduler
        self.presenter = presenter
        self.clock = clock
        self.total_due = 0
        self.reviewed = 0
        self.scheduled: list[AttemptRecord] = []

    @property
    def remaining(self) -> int:
        return self.total_due - self.reviewed

    def summary(self) -> SessionSummary:
        return SessionSummary(
            total_due=self.total_due, reviewed=self.reviewed, scheduled=list(self.scheduled)
        )

    def run(self) -> SessionSummary:
        """
        Review every card due now.

        Raises:
            NotFoundError: A due card vanished from the store; the rest of
                the session is skipped
        """
        due = self.selector.due_at(self.clock())
        self.total_due = len(due)

        if not due:
            logger.debug("No cards due")
            self.presenter.nothing_due()
            return self.summary()

        logger.info(f"Review session started with {self.total_due} due card(s)")
        self.presenter.announce(self.total_due)

        for record in due:
            self._review(record)

        summary = self.summary()
        self.presenter.finished(summary)
        logger.info(f"Review session finished: {self.reviewed} card(s) reviewed")
        return summary

    def _review(self, record: AttemptRecord) -> None:
        self.presenter.show_front(record)
        self.presenter.wait_for_flip(record)
        self.presenter.show_back(record)
        confidence = parse_confidence(self.presenter.ask_confidence(record))

        try:
            scheduled = self.scheduler.record_review(record.card_id, confidence, self.clock())
        except NotFoundError:
            logger.error(
                f"Card {record.card_id} disappeared mid-session; "
                f"skipping {self.remaining - 1} remaining card(s)"
            )
            raise

        self.scheduled.append(scheduled)
        self.reviewed += 1
        self.presenter.show_scheduled(scheduled)
