"""Doctor commands for environment diagnostics and API key setup."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_http_client
from core.config import AppSettings, write_user_env_vars

_console = Console()


def check_connectivity(settings: AppSettings, *, transport: httpx.BaseTransport | None = None) -> tuple[bool, str]:
    """Reach the TMDB API root. Any HTTP answer counts as reachable."""

    try:
        with build_http_client(settings, transport=transport) as client:
            response = client.get(settings.base_url)
        return True, f"HTTP {response.status_code}"
    except httpx.RequestError as exc:
        return False, str(exc) or exc.__class__.__name__


def doctor() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="tmdb-cli Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if settings.api_key:
        table.add_row("API key", "OK", "TMDB_API_KEY is set")
    else:
        table.add_row("API key", "MISSING", "Run `tmdb setup-key` or set TMDB_API_KEY")
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    ok_http, detail_http = check_connectivity(settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not settings.api_key:
        _console.print("\n[yellow]Note:[/yellow] Searches fail with an invalid API key error until a key is configured.")


def setup_key() -> None:
    """Store the TMDB API key in the user config .env (no manual editing)."""

    api_key = typer.prompt("TMDB API key", hide_input=True, confirmation_prompt=False).strip()
    if not api_key:
        raise typer.BadParameter("API key must not be empty")

    env_path = write_user_env_vars({"TMDB_API_KEY": api_key})
    _console.print(f"[green]Saved TMDB API key to:[/green] {env_path}")
