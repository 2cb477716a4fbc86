"""
astronaut - command-line spaced repetition.

Cards are stored as an append-only log of attempt records in SQLite;
each review appends a new record whose next review time grows with the
number of prior attempts and the confidence reported for the review.
"""

__version__ = "0.1.0"
