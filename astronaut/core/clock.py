"""
Clock boundary.

Timestamps are integer milliseconds since the epoch. Components take
``now`` or a ``Clock`` explicitly instead of reading the time themselves.
"""

from __future__ import annotations

import time
from collections.abc import Callable

Clock = Callable[[], int]


def current_time_ms() -> int:
    """Milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def fixed_clock(now: int) -> Clock:
    """A clock that always returns ``now``."""
    return lambda: now
