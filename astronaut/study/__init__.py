"""Scheduling engine: interval function, due-set selection, review scheduling."""

from .due import DueSetSelector
from .interval import DAY_MS, next_review_delay
from .scheduler import Scheduler
from .session import ReviewSession, SessionSummary

__all__ = [
    "DAY_MS",
    "DueSetSelector",
    "ReviewSession",
    "Scheduler",
    "SessionSummary",
    "next_review_delay",
]
