"""Due-Set Selector: which cards need review at a given time."""

from __future__ import annotations

from astronaut.core.records import AttemptRecord
from astronaut.db.card_store import CardStore


class DueSetSelector:
    """Read-only view of the cards due for review."""

    def __init__(self, store: CardStore):
        self.store = store

    def due_at(self, now: int) -> list[AttemptRecord]:
        """
        Current states with ``next_review_time <= now``.

        Most recently scheduled first; equal times fall back to card id.
        """
        due = [record for record in self.store.all_current_states() if record.is_due(now)]
        due.sort(key=lambda r: (-r.next_review_time, r.card_id))
        return due

    def count_due(self, now: int) -> int:
        return sum(1 for record in self.store.all_current_states() if record.is_due(now))
