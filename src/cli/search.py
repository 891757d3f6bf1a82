"""`search` command: validate arguments, query TMDB, render the listing."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console

from adapters.tmdb_client import TmdbSearchClient
from cli.ui_components import print_error, print_warning, render_introduction, render_movies
from cli.validators import ArgumentValidationError, build_search_query
from core.config import AppSettings
from core.domain.errors import SearchError
from core.domain.models import SearchOutcome, SearchQuery
from core.interfaces.searcher import MovieSearcher

logger = logging.getLogger(__name__)

_console = Console()
_err_console = Console(stderr=True)


def _resolve_searcher(ctx: typer.Context) -> MovieSearcher:
    """Use the searcher injected through `ctx.obj`, or build the TMDB one."""

    if isinstance(ctx.obj, MovieSearcher):
        return ctx.obj
    return TmdbSearchClient.from_settings(AppSettings())


def render_outcome(console: Console, query: SearchQuery, outcome: SearchOutcome) -> None:
    """Print warnings for benign empty outcomes, the full listing otherwise."""

    total_pages = outcome.total_pages
    if total_pages > 0 and query.page > total_pages:
        print_warning(
            console,
            f"Page {query.page} exceeds total pages of {total_pages}. "
            f"Please change the page option to maximum of {total_pages}.",
        )
        return

    if not outcome.movies:
        print_warning(console, f"No results found for '{query.text}'.")
        return

    render_introduction(console, query, len(outcome.movies), total_pages)
    render_movies(console, outcome.movies)


def search(
    ctx: typer.Context,
    search_text: str = typer.Argument(..., metavar="SEARCH", help="Search term."),
    limit: str = typer.Argument(..., metavar="LIMIT", help="Number of movies to show."),
    year: Optional[str] = typer.Option(None, "--year", help="Filter by release year."),
    page: Optional[str] = typer.Option(None, "--page", help="Result page to fetch (default 1)."),
) -> None:
    """Search movies on TMDB."""

    try:
        query = build_search_query(search_text, limit, year=year, page=page)
    except ArgumentValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    searcher = _resolve_searcher(ctx)
    logger.debug("Searching %r (limit=%s, page=%s, year=%s)", query.text, query.limit, query.page, query.year)

    try:
        outcome = searcher.search(query.text, query.limit, query.page, query.year)
    except SearchError as exc:
        print_error(_err_console, exc.message)
        raise typer.Exit(code=1) from exc

    render_outcome(_console, query, outcome)
