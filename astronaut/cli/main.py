"""
Typer CLI for astronaut.

Commands:
    astronaut init                      - Create ~/.astronaut and the card database
    astronaut add-card -f FRONT -b BACK - Add a card to the backlog (short: a)
    astronaut review                    - Review every card that is due (old name: inspect)
    astronaut due                       - Show due cards without reviewing
    astronaut list [--latest]           - Show all attempts (or current states)
    astronaut history CARD_ID           - Show every attempt of one card
    astronaut status                    - Card and due counts

Usage:
    astronaut --help
    astronaut add-card --front "2+2" --back "4"
    ASTRONAUT_HOME=/tmp/deck astronaut review
"""

from __future__ import annotations

import sys
from typing import Annotated

import typer
from loguru import logger
from rich import print as rprint
from rich.console import Console

from astronaut import __version__
from astronaut.cli.presenter import RichPresenter, attempts_table
from astronaut.config import Settings, get_settings
from astronaut.core.clock import current_time_ms
from astronaut.core.errors import AstronautError, NotFoundError
from astronaut.db.card_store import CardStore
from astronaut.study.due import DueSetSelector
from astronaut.study.scheduler import Scheduler
from astronaut.study.session import ReviewSession
from astronaut.study.validation import validate_card_text

app = typer.Typer(
    name="astronaut",
    help="astronaut - command-line spaced repetition",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


# =============================================================================
# Helpers
# =============================================================================


def configure_logging(settings: Settings) -> None:
    """Send loguru output to stderr, plus an optional log file."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<level>{message}</level>",
    )
    if settings.log_file:
        logger.add(
            settings.log_file,
            level="DEBUG",
            rotation="1 MB",
            retention=5,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        )


def _open_store(settings: Settings) -> CardStore:
    """Open the configured card store; the default database must already exist."""
    if settings.uses_default_database():
        if not settings.get_database_path().exists():
            rprint("[yellow]No card database found.[/yellow]")
            rprint("Run [cyan]astronaut init[/cyan] first.")
            raise typer.Exit(code=1)
        return CardStore.from_url(settings.get_database_url(), echo=settings.echo_sql)
    return CardStore.from_url(settings.get_database_url(), echo=settings.echo_sql, create=True)


def _fail(error: AstronautError) -> typer.Exit:
    logger.error(f"Command failed: {type(error).__name__}: {error}")
    logger.opt(exception=error).debug("Failure traceback")
    rprint(f"[red]Error:[/red] {error}")
    return typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"astronaut {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = False,
) -> None:
    """Command-line spaced repetition."""
    configure_logging(get_settings())


# =============================================================================
# Commands
# =============================================================================


@app.command()
def init() -> None:
    """Initialize the astronaut home directory and card database."""
    settings = get_settings()
    home = settings.home.expanduser()

    rprint(f"creating {home}")
    home.mkdir(parents=True, exist_ok=True)

    try:
        CardStore.from_url(settings.get_database_url(), echo=settings.echo_sql, create=True)
    except AstronautError as e:
        raise _fail(e)

    rprint(f"[green]cards db initialized[/green] at {settings.get_database_url()}")


@app.command("add-card")
def add_card(
    front: Annotated[str, typer.Option("--front", "-f", help="Front of the card")],
    back: Annotated[str, typer.Option("--back", "-b", help="Back of the card")],
) -> None:
    """Add a card to the backlog. It is due for review immediately."""
    settings = get_settings()
    try:
        front, back = validate_card_text(front, back)
        store = _open_store(settings)
        card_id = store.create_card(front, back)
    except AstronautError as e:
        raise _fail(e)

    rprint(f"[green]card {card_id} added to ship.[/green]")


# Short name for add-card
app.command("a", hidden=True)(add_card)


@app.command()
def review() -> None:
    """
    Review every card that is due now.

    Each card shows its front, flips on Enter, then asks how easy recall
    was on a 0-10 scale. Higher scores push the next review further out.
    """
    settings = get_settings()
    try:
        store = _open_store(settings)
    except AstronautError as e:
        raise _fail(e)

    session = ReviewSession(
        selector=DueSetSelector(store),
        scheduler=Scheduler(store, base_interval_ms=settings.base_interval_ms),
        presenter=RichPresenter(console),
        clock=current_time_ms,
    )

    try:
        session.run()
    except (KeyboardInterrupt, EOFError):
        console.print(f"\n[yellow]Session aborted after {session.reviewed} card(s).[/yellow]")
        raise typer.Exit(code=130)
    except AstronautError as e:
        if session.reviewed:
            rprint(f"[dim]{session.reviewed} card(s) were reviewed before the failure.[/dim]")
        raise _fail(e)


# Older name for review, kept for existing scripts
app.command("inspect", hidden=True)(review)


@app.command()
def due() -> None:
    """Show cards that are due without reviewing them."""
    settings = get_settings()
    try:
        store = _open_store(settings)
        records = DueSetSelector(store).due_at(current_time_ms())
    except AstronautError as e:
        raise _fail(e)

    if not records:
        rprint("[green]Congrats, you're all done for now![/green]")
        return
    console.print(attempts_table(records, title=f"{len(records)} card(s) due"))


@app.command("list")
def list_cards(
    latest: Annotated[
        bool, typer.Option("--latest", "-l", help="Only the current state of each card")
    ] = False,
) -> None:
    """List all cards with their full attempt log."""
    settings = get_settings()
    try:
        store = _open_store(settings)
        if latest:
            records = list(store.all_current_states())
        else:
            records = list(store.all_attempts())
    except AstronautError as e:
        raise _fail(e)

    if not records:
        rprint("[yellow]No cards yet.[/yellow] Add one with [cyan]astronaut add-card[/cyan].")
        return
    title = "Current card states" if latest else "All attempts"
    console.print(attempts_table(records, title=title))


@app.command()
def history(
    card_id: Annotated[int, typer.Argument(help="Card to show")],
) -> None:
    """Show every attempt recorded for one card."""
    settings = get_settings()
    try:
        store = _open_store(settings)
        records = store.history(card_id)
        if not records:
            raise NotFoundError(card_id)
    except AstronautError as e:
        raise _fail(e)

    console.print(attempts_table(records, title=f"Card {card_id}"))


@app.command()
def status() -> None:
    """Show the number of cards and how many are due now."""
    settings = get_settings()
    try:
        store = _open_store(settings)
        total = store.count()
        due_now = DueSetSelector(store).count_due(current_time_ms())
    except AstronautError as e:
        raise _fail(e)

    rprint(f"Cards:   {total}")
    rprint(f"Due now: {due_now}")


# =============================================================================
# Entry Point
# =============================================================================


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
