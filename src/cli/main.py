"""Typer root application.

Commands:
- `search`: query TMDB and print the results.
- `doctor` / `setup-key`: diagnostics and API key configuration.
"""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console
from rich.logging import RichHandler

from cli.doctor import doctor, setup_key
from cli.search import search

app = typer.Typer(
    no_args_is_help=True,
    help="Search movies on TMDB from the command line.",
    pretty_exceptions_enable=False,
)

app.command(name="search")(search)
app.command(name="doctor")(doctor)
app.command(name="setup-key")(setup_key)


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr through Rich."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Search movies on TMDB from the command line."""

    configure_logging(verbose)


def run() -> None:
    # Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8).
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app()


if __name__ == "__main__":
    run()
