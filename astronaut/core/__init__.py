"""Core primitives shared by the store, the scheduler and the CLI."""

from .clock import Clock, current_time_ms, fixed_clock
from .errors import AstronautError, NotFoundError, StorageError, ValidationError
from .records import AttemptRecord, new_attempt_id

__all__ = [
    "AstronautError",
    "AttemptRecord",
    "Clock",
    "NotFoundError",
    "StorageError",
    "ValidationError",
    "current_time_ms",
    "fixed_clock",
    "new_attempt_id",
]
