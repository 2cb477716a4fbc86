"""Persistence: SQLAlchemy models, engine helpers and the card store."""

from .card_store import CardStore
from .database import init_db, make_engine, make_session_factory, session_scope

__all__ = [
    "CardStore",
    "init_db",
    "make_engine",
    "make_session_factory",
    "session_scope",
]
