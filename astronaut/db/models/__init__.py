# SQLAlchemy models
from .attempt import Attempt
from .base import Base

__all__ = [
    "Attempt",
    "Base",
]
