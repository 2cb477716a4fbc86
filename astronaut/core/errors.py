"""
Error types raised across astronaut.

StorageError and NotFoundError come out of the persistence layer and the
scheduler; ValidationError is raised at the input boundary and is never
expected to reach the scheduler.
"""

from __future__ import annotations


class AstronautError(Exception):
    """Base class for all astronaut errors."""
    pass


class StorageError(AstronautError):
    """Raised when the card store cannot read or write."""
    pass


class NotFoundError(AstronautError):
    """Raised when a card id has no attempt records."""

    def __init__(self, card_id: int):
        self.card_id = card_id
        super().__init__(f"Card {card_id} not found")


class ValidationError(AstronautError):
    """Raised for malformed user input (confidence, blank card text)."""
    pass
