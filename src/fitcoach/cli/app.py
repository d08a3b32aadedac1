"""Main CLI application using Typer."""
import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..progress import (
    XP_PER_LEVEL,
    level_of,
    member_since,
    motivation_text,
    xp_of,
    xp_to_next_level,
)
from ..storage import ProgressRepository
from ..ui.formatting import format_xp_bar, render_message_body
from .providers import get_coach, get_store

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="fitcoach",
    help="Terminal chat client for an AI fitness coach",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


@app.command()
def chat(
    provider: str | None = typer.Option(
        None,
        "--provider",
        "-p",
        help="Coach provider: 'webhook' or 'openai' (default: $COACH_PROVIDER or webhook)"
    ),
    store_backend: str | None = typer.Option(
        None,
        "--store",
        "-s",
        help="Progress store: 'json' (persistent) or 'memory' (session-only)"
    ),
    store_path: str | None = typer.Option(
        None,
        "--store-path",
        help="Path for the JSON store (only with --store json)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive chat interface."""
    async def _chat():
        from ..ui import run_textual_tui

        coach = get_coach(console, provider)
        try:
            store = get_store(store_backend, store_path)
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)

        try:
            await run_textual_tui(coach=coach, store=store, log_level=log_level)
        finally:
            await coach.close()
            console.print("\n[dim]Keep showing up![/dim]")

    try:
        asyncio.run(_chat())
    except KeyboardInterrupt:
        pass


@app.command()
def progress(
    store_path: str | None = typer.Option(
        None,
        "--store-path",
        help="Path for the JSON store"
    ),
):
    """Show stored level, experience and session statistics."""
    repository = ProgressRepository(get_store("json", store_path))
    current = repository.load_progress()
    total = current.total_messages
    level = level_of(total)
    xp = xp_of(total)

    table = Table(show_header=False, box=None)
    table.add_column("Stat", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Level", str(level))
    table.add_row("Experience", f"[blue]{format_xp_bar(xp, XP_PER_LEVEL)}[/blue] {xp}/{XP_PER_LEVEL}")
    table.add_row("Next level", f"{xp_to_next_level(total)} to go")
    table.add_row("Total messages", str(total))
    table.add_row("Sessions", str(current.sessions_count))
    table.add_row("Member since", member_since(current))

    console.print(Panel(table, title="Progress", border_style="blue"))
    console.print(f"[italic dim]{motivation_text(level)}[/italic dim]")


@app.command()
def render(
    source: Path | None = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        help="File with reply text to render (omit to read stdin)"
    ),
):
    """Render coach-style markup (headings, lists, bold, italic) to the terminal."""
    if source is not None:
        text = source.read_text(encoding="utf-8")
    else:
        import sys
        text = sys.stdin.read()

    console.print(render_message_body(text))


if __name__ == "__main__":
    app()
