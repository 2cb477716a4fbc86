"""
Card Store for astronaut.

Append-only persistence of attempt records:
- card creation (allocates the id and writes the seed attempt)
- appending attempts produced by the scheduler
- reading the current state of one or all cards

There are no update or delete operations. Every write is a single
transaction; every engine failure surfaces as ``StorageError``.
"""

from __future__ import annotations

from collections.abc import Generator, Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from astronaut.core.clock import Clock, current_time_ms
from astronaut.core.errors import StorageError
from astronaut.core.records import AttemptRecord
from astronaut.db.database import init_db, make_engine, make_session_factory, session_scope
from astronaut.db.models import Attempt
from astronaut.db.queries import (
    select_all_attempts,
    select_card_count,
    select_current_states,
    select_history,
    select_max_card_id,
)


class CardStore:
    """
    SQLAlchemy-backed store of attempt records.

    The session factory is passed in, so tests can hand the store an
    in-memory engine and the CLI a file-backed one.
    """

    def __init__(self, session_factory: sessionmaker[Session], clock: Clock = current_time_ms):
        """
        Initialize the card store.

        Args:
            session_factory: Factory for ORM sessions bound to the database
            clock: Source of creation timestamps (ms since epoch)
        """
        self._session_factory = session_factory
        self._clock = clock

    @classmethod
    def from_url(
        cls,
        database_url: str,
        *,
        echo: bool = False,
        create: bool = False,
        clock: Clock = current_time_ms,
    ) -> CardStore:
        """
        Build a store for ``database_url``.

        Args:
            database_url: SQLAlchemy database URL
            echo: Echo SQL statements
            create: Create missing tables first
            clock: Source of creation timestamps
        """
        engine = make_engine(database_url, echo=echo)
        if create:
            try:
                init_db(engine)
            except SQLAlchemyError as e:
                raise StorageError(f"Could not initialize database: {e}") from e
        return cls(make_session_factory(engine), clock=clock)

    @contextmanager
    def _scope(self, action: str) -> Generator[Session, None, None]:
        try:
            with session_scope(self._session_factory) as session:
                yield session
        # sqlite3 raises OverflowError itself for integers past 64 bits
        except (SQLAlchemyError, OverflowError) as e:
            logger.error(f"Storage failure while trying to {action}: {e}")
            raise StorageError(f"Could not {action}: {e}") from e

    # =========================================================================
    # Writes
    # =========================================================================

    def create_card(self, front: str, back: str, now: int | None = None) -> int:
        """
        Create a card and its seed attempt.

        Args:
            front: Prompt side of the card
            back: Answer side of the card
            now: Creation time in ms (defaults to the store clock)

        Returns:
            The new card id: one more than the largest existing id, 0 when empty
        """
        if not front or not front.strip() or not back or not back.strip():
            raise StorageError("Card front and back must not be blank")

        created_at = self._clock() if now is None else now
        with self._scope("create card") as session:
            largest = session.scalar(select_max_card_id())
            card_id = 0 if largest is None else largest + 1
            seed = AttemptRecord.seed(card_id, front, back, created_at)
            session.add(Attempt.from_record(seed))

        logger.info(f"Card {card_id} created (attempt {seed.attempt_id})")
        return card_id

    def append_attempt(self, record: AttemptRecord) -> None:
        """
        Append one attempt record.

        Args:
            record: Attempt to persist; must not collide with an existing
                (card_id, attempt_number) pair
        """
        with self._scope(f"append attempt for card {record.card_id}") as session:
            session.add(Attempt.from_record(record))

        logger.debug(
            f"Card {record.card_id} attempt {record.attempt_number} stored, "
            f"next review at {record.next_review_time}"
        )

    # =========================================================================
    # Reads
    # =========================================================================

    def all_current_states(self) -> Iterator[AttemptRecord]:
        """
        Yield the current state of every card, by ascending card id.

        Each call re-runs the query, so the result reflects every write
        committed before the call.
        """
        with self._scope("read current states") as session:
            for attempt in session.scalars(select_current_states()):
                yield attempt.to_record()

    def latest_for(self, card_id: int) -> AttemptRecord | None:
        """Current state of one card, or None if the card does not exist."""
        with self._scope(f"read card {card_id}") as session:
            attempt = session.scalars(select_current_states(card_id)).first()
            return attempt.to_record() if attempt is not None else None

    def count(self) -> int:
        """Number of distinct cards."""
        with self._scope("count cards") as session:
            return session.scalar(select_card_count()) or 0

    def history(self, card_id: int) -> list[AttemptRecord]:
        """Every attempt for one card, oldest first."""
        with self._scope(f"read history of card {card_id}") as session:
            return [a.to_record() for a in session.scalars(select_history(card_id))]

    def all_attempts(self) -> Iterator[AttemptRecord]:
        """Yield every attempt in the store, grouped by card."""
        with self._scope("read attempts") as session:
            for attempt in session.scalars(select_all_attempts()):
                yield attempt.to_record()
