"""
Unit tests for the typer commands.

Commands run in-process through typer's CliRunner against a temp
ASTRONAUT_HOME; terminal prompts are patched.
"""

import sys
from unittest.mock import patch

import pytest
from loguru import logger
from typer.testing import CliRunner

from astronaut.cli.main import app
from astronaut.config import get_settings
from astronaut.core.errors import NotFoundError, StorageError
from astronaut.study.session import ReviewSession

runner = CliRunner()


@pytest.fixture
def home(monkeypatch, tmp_path):
    """Initialized astronaut home with settings read from the environment."""
    monkeypatch.setenv("ASTRONAUT_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("ASTRONAUT_DATABASE_URL", raising=False)
    get_settings.cache_clear()

    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0, result.output

    yield tmp_path / "home"

    get_settings.cache_clear()
    # The CLI points loguru at the runner's stderr, which is closed by now
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


def add_cards(*fronts):
    for front in fronts:
        result = runner.invoke(app, ["add-card", "-f", front, "-b", "answer"])
        assert result.exit_code == 0, result.output


class TestReviewInterrupted:
    def test_keyboard_interrupt_reports_progress(self, home):
        add_cards("q0", "q1")

        with patch(
            "astronaut.cli.presenter.Prompt.ask",
            side_effect=["", "5", KeyboardInterrupt()],
        ):
            result = runner.invoke(app, ["review"])

        assert result.exit_code == 130
        assert "Session aborted after 1 card(s)." in result.output

    def test_closed_stdin_reports_progress(self, home):
        """Input running out mid-session ends it like Ctrl-C."""
        add_cards("q0", "q1")

        result = runner.invoke(app, ["review"], input="\n5\n")

        assert result.exit_code == 130
        assert "2 cards left to review." in result.output
        assert "Session aborted after 1 card(s)." in result.output

    def test_interrupt_keeps_finished_reviews(self, home):
        add_cards("q0", "q1")

        with patch(
            "astronaut.cli.presenter.Prompt.ask",
            side_effect=["", "5", KeyboardInterrupt()],
        ):
            runner.invoke(app, ["review"])

        result = runner.invoke(app, ["status"])
        assert "Due now: 1" in result.output


class TestReviewFailure:
    def test_storage_error_after_progress(self, home):
        add_cards("q0")

        def fail_midway(session):
            session.reviewed = 2
            raise StorageError("disk full")

        with patch.object(ReviewSession, "run", autospec=True, side_effect=fail_midway):
            result = runner.invoke(app, ["review"])

        assert result.exit_code == 1
        assert "2 card(s) were reviewed before the failure." in result.output
        assert "Error: disk full" in result.output

    def test_not_found_before_any_review(self, home):
        add_cards("q0")

        with patch.object(ReviewSession, "run", autospec=True, side_effect=NotFoundError(0)):
            result = runner.invoke(app, ["review"])

        assert result.exit_code == 1
        assert "Card 0 not found" in result.output
        assert "before the failure" not in result.output


class TestFailureLogging:
    def test_failures_logged_at_error(self, home):
        with patch("astronaut.cli.main.logger") as log:
            result = runner.invoke(app, ["add-card", "-f", "  ", "-b", "4"])

        assert result.exit_code == 1
        log.error.assert_called_once()
        assert "ValidationError" in log.error.call_args[0][0]


class TestShortAddCard:
    def test_a_adds_card(self, home):
        result = runner.invoke(app, ["a", "-f", "2+2", "-b", "4"])

        assert result.exit_code == 0, result.output
        assert "card 0 added to ship." in result.output

    def test_aliases_are_hidden(self):
        hidden = {info.name for info in app.registered_commands if info.hidden}
        assert hidden == {"a", "inspect"}
