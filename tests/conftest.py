"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from astronaut.core.records import AttemptRecord  # noqa: E402
from astronaut.db.card_store import CardStore  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (use a SQLite file)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def store():
    """Card store over a fresh in-memory database."""
    return CardStore.from_url("sqlite://", create=True)


@pytest.fixture
def db_path(tmp_path):
    """Path for a file-backed test database."""
    return tmp_path / "cards.db"


@pytest.fixture
def file_store(db_path):
    """Card store over a SQLite file in a temp directory."""
    return CardStore.from_url(f"sqlite:///{db_path}", create=True)


@pytest.fixture
def sample_card():
    """Provide sample card text for testing."""
    return {"front": "2+2", "back": "4"}


class FakePresenter:
    """Scripted presenter: answers confidence prompts from a list and records calls."""

    def __init__(self, confidences=None):
        self.confidences = list(confidences or [])
        self.calls: list[tuple[str, object]] = []
        self.summary = None

    def nothing_due(self):
        self.calls.append(("nothing_due", None))

    def announce(self, due_count):
        self.calls.append(("announce", due_count))

    def show_front(self, record: AttemptRecord):
        self.calls.append(("front", record.card_id))

    def wait_for_flip(self, record: AttemptRecord):
        self.calls.append(("flip", record.card_id))

    def show_back(self, record: AttemptRecord):
        self.calls.append(("back", record.card_id))

    def ask_confidence(self, record: AttemptRecord):
        self.calls.append(("ask", record.card_id))
        return self.confidences.pop(0)

    def show_scheduled(self, record: AttemptRecord):
        self.calls.append(("scheduled", record.card_id))

    def finished(self, summary):
        self.calls.append(("finished", summary.reviewed))
        self.summary = summary

    def fronts(self) -> list[int]:
        return [card_id for name, card_id in self.calls if name == "front"]


@pytest.fixture
def presenter_factory():
    """Build a FakePresenter with scripted confidence answers."""
    return FakePresenter
