"""Provider factory functions for CLI.

Centralizes creation of the coaching service and the key-value store from
environment variables. Hides configuration details from command
implementations.
"""

import os

import typer
from rich.console import Console

from ..coach import CoachService, create_coach_service
from ..storage import KeyValueStore, create_key_value_store

# Default console for output
_console = Console()


def get_store(backend: str | None = None, path: str | None = None) -> KeyValueStore:
    """Create the key-value store from options or environment variables.

    Args:
        backend: Store backend, overrides FITCOACH_STORE_BACKEND
        path: Store file path, overrides FITCOACH_STORE_PATH

    Returns:
        KeyValueStore instance

    Environment variables:
        FITCOACH_STORE_BACKEND: Store backend (json or memory; default: json)
        FITCOACH_STORE_PATH: JSON store path (default: ~/.fitcoach/store.json)
    """
    backend = (backend or os.getenv("FITCOACH_STORE_BACKEND", "json")).lower()
    config = {}
    store_path = path or os.getenv("FITCOACH_STORE_PATH")
    if backend == "json" and store_path:
        config["path"] = store_path
    return create_key_value_store(backend, **config)


def get_coach(console: Console | None = None, provider: str | None = None) -> CoachService:
    """Create the coaching service from environment variables.

    Args:
        console: Optional Rich console for output
        provider: Provider type, overrides COACH_PROVIDER

    Returns:
        CoachService instance

    Raises:
        SystemExit: If the selected provider is not configured

    Environment variables:
        COACH_PROVIDER: Provider type (webhook or openai; default: webhook)
        COACH_WEBHOOK_URL: Webhook endpoint (for webhook provider)
        COACH_TIMEOUT: Request timeout in seconds (default: 60)
        OPENAI_API_KEY: OpenAI API key (for openai provider)
        OPENAI_CHAT_MODEL: OpenAI model (default: gpt-4o-mini)
    """
    con = console or _console
    coach_provider = (provider or os.getenv("COACH_PROVIDER", "webhook")).lower()

    if coach_provider == "webhook":
        url = os.getenv("COACH_WEBHOOK_URL")
        if not url:
            con.print("[red]Error: COACH_WEBHOOK_URL not set in environment[/red]")
            raise typer.Exit(code=1)
        try:
            timeout = float(os.getenv("COACH_TIMEOUT", "60"))
        except ValueError:
            con.print("[yellow]Warning: invalid COACH_TIMEOUT, using 60s[/yellow]")
            timeout = 60.0
        return create_coach_service("webhook", url=url, timeout=timeout)

    elif coach_provider == "openai":
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            con.print("[red]Error: OPENAI_API_KEY not set in environment[/red]")
            raise typer.Exit(code=1)
        model = os.getenv("OPENAI_CHAT_MODEL", "gpt-4o-mini")
        return create_coach_service("openai", api_key=api_key, model=model)

    con.print(f"[red]Error: Unknown coach provider: {coach_provider}[/red]")
    raise typer.Exit(code=1)
