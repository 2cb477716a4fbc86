"""
Terminal presentation for review sessions and card listings.

Front of the card in a green panel, answer in a blue one, then a
confidence prompt that keeps asking until it gets a whole number 0-10.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from astronaut.core.errors import ValidationError
from astronaut.core.records import AttemptRecord
from astronaut.study.interval import DAY_MS
from astronaut.study.session import SessionSummary
from astronaut.study.validation import parse_confidence


def format_timestamp(ms: int) -> str:
    """Local wall-clock time for a ms timestamp; raw ms past what datetime can show."""
    try:
        return datetime.fromtimestamp(ms / 1000).strftime("%Y-%m-%d %H:%M")
    except (ValueError, OverflowError, OSError):
        return f"{ms} ms"


def format_delay(ms: int) -> str:
    """Human-readable delay, in days once it reaches one day."""
    if ms >= DAY_MS:
        days = ms / DAY_MS
        return f"{days:.1f} days" if days != 1 else "1 day"
    hours = ms / 3_600_000
    if hours >= 1:
        return f"{hours:.1f} hours"
    return f"{max(ms // 60_000, 0)} min"


def attempts_table(records: Iterable[AttemptRecord], title: str) -> Table:
    """Table of attempt records, one row each."""
    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("Card", justify="right", style="cyan")
    table.add_column("Front", overflow="fold")
    table.add_column("Back", overflow="fold")
    table.add_column("Attempt", justify="right")
    table.add_column("Confidence", justify="right")
    table.add_column("Reviewed")
    table.add_column("Next review", style="green")

    for record in records:
        table.add_row(
            str(record.card_id),
            record.front,
            record.back,
            str(record.attempt_number),
            str(record.confidence),
            format_timestamp(record.review_time),
            format_timestamp(record.next_review_time),
        )
    return table


class RichPresenter:
    """Presenter backed by a rich Console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def nothing_due(self) -> None:
        self.console.print("[bold green]Congrats, you're all done for now![/bold green]")

    def announce(self, due_count: int) -> None:
        noun = "card" if due_count == 1 else "cards"
        self.console.print(f"[bold yellow]{due_count} {noun} left to review.[/bold yellow]\n")

    def show_front(self, record: AttemptRecord) -> None:
        self.console.print(
            Panel(
                record.front,
                title=f"[bold green]CARD {record.card_id}[/bold green]",
                border_style="green",
                box=box.HEAVY,
                padding=(1, 2),
            )
        )

    def wait_for_flip(self, record: AttemptRecord) -> None:
        Prompt.ask(
            "Press Enter when ready to flip card",
            console=self.console,
            default="",
            show_default=False,
        )

    def show_back(self, record: AttemptRecord) -> None:
        self.console.print(
            Panel(
                record.back,
                title="[bold blue]ANSWER[/bold blue]",
                border_style="blue",
                box=box.HEAVY,
                padding=(1, 2),
            )
        )

    def ask_confidence(self, record: AttemptRecord) -> int:
        self.console.print("[dim]0 = no idea, 10 = instant recall[/dim]")
        while True:
            raw = Prompt.ask("How easy was that (0-10)?", console=self.console)
            try:
                return parse_confidence(raw)
            except ValidationError as e:
                self.console.print(f"[yellow]{e}[/yellow]")

    def show_scheduled(self, record: AttemptRecord) -> None:
        delay = record.next_review_time - record.review_time
        self.console.print(
            f"[dim]Next review in {format_delay(delay)} "
            f"({format_timestamp(record.next_review_time)})[/dim]\n"
        )

    def finished(self, summary: SessionSummary) -> None:
        noun = "card" if summary.reviewed == 1 else "cards"
        self.console.print(f"[bold]Reviewed {summary.reviewed} {noun}.[/bold]")
        self.console.print("[bold green]Congrats, you're all done for now![/bold green]")
