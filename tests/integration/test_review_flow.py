"""
Integration Tests for the review flow.

Drives several days of review sessions against a SQLite file and checks
the schedule that comes out, including after reopening the database.
"""

import math

import pytest

from astronaut.core.clock import fixed_clock
from astronaut.db.card_store import CardStore
from astronaut.study.due import DueSetSelector
from astronaut.study.interval import DAY_MS
from astronaut.study.scheduler import Scheduler
from astronaut.study.session import ReviewSession

pytestmark = pytest.mark.integration


def run_session(store, presenter, now):
    session = ReviewSession(
        selector=DueSetSelector(store),
        scheduler=Scheduler(store),
        presenter=presenter,
        clock=fixed_clock(now),
    )
    return session.run()


class TestMultiDayReview:
    """A small deck reviewed on consecutive days."""

    def test_schedule_over_three_days(self, file_store, presenter_factory):
        file_store.create_card("2+2", "4", now=0)
        file_store.create_card("capital of France", "Paris", now=0)

        day0 = run_session(file_store, presenter_factory(confidences=[10, 2]), now=0)
        assert day0.reviewed == 2
        assert all(r.next_review_time == DAY_MS for r in day0.scheduled)

        # Nothing is due until a full day has passed
        idle = presenter_factory()
        assert run_session(file_store, idle, now=DAY_MS - 1).reviewed == 0
        assert idle.calls == [("nothing_due", None)]

        day1 = run_session(file_store, presenter_factory(confidences=[10, 2]), now=DAY_MS)
        assert day1.reviewed == 2
        assert all(r.attempt_number == 2 for r in day1.scheduled)

        day2_presenter = presenter_factory(confidences=[10, 2])
        day2 = run_session(file_store, day2_presenter, now=2 * DAY_MS)
        delays = {r.card_id: r.next_review_time - r.review_time for r in day2.scheduled}

        assert delays[0] == math.floor(DAY_MS * math.pow(2, math.log(10)))
        assert delays[1] == math.floor(DAY_MS * math.pow(2, math.log(2)))
        assert delays[0] > delays[1]

    def test_history_survives_reopen(self, file_store, db_path, presenter_factory):
        card_id = file_store.create_card("2+2", "4", now=0)
        run_session(file_store, presenter_factory(confidences=[5]), now=0)

        reopened = CardStore.from_url(f"sqlite:///{db_path}")
        history = reopened.history(card_id)

        assert [r.attempt_number for r in history] == [0, 1]
        assert reopened.latest_for(card_id).next_review_time == DAY_MS
        assert DueSetSelector(reopened).due_at(DAY_MS)[0].card_id == card_id

    def test_cards_added_between_sessions_join_the_queue(self, file_store, presenter_factory):
        file_store.create_card("q0", "a0", now=0)
        run_session(file_store, presenter_factory(confidences=[5]), now=0)
        file_store.create_card("q1", "a1", now=100)

        presenter = presenter_factory(confidences=[5, 5])
        run_session(file_store, presenter, now=DAY_MS)

        # card 0 is due at DAY_MS, card 1 since t=100
        assert presenter.fronts() == [0, 1]
