"""CLI UI components (Rich).

Why keep them apart:
- Avoids mixing command logic with visual details.
- Lets `search` and `doctor` share the same message styles.

Every line is printed with `soft_wrap=True`: Rich must not re-wrap messages
whose exact text users (and tests) rely on.
"""

from __future__ import annotations

import textwrap
from collections.abc import Iterable

from rich.console import Console
from rich.text import Text

from core.domain.models import MovieRecord, SearchQuery

OVERVIEW_WIDTH = 80
OVERVIEW_INDENT = " " * 6


def print_warning(console: Console, message: str) -> None:
    console.print(Text(f"[WARNING] {message}", style="bold yellow"), soft_wrap=True)


def print_error(console: Console, message: str) -> None:
    console.print(Text(f"[ERROR] {message}", style="bold red"), soft_wrap=True)


def render_introduction(console: Console, query: SearchQuery, found: int, total_pages: int) -> None:
    """Header block: search term, filters and pagination."""

    heading = f"Search for: {query.text}"
    console.print(Text(heading, style="bold yellow"), soft_wrap=True)
    console.print(Text("-" * len(heading), style="yellow"), soft_wrap=True)
    if query.year is not None:
        console.print(Text(f" Filtered by year: {query.year}"), soft_wrap=True)
    console.print(Text(f" Limit: {query.limit}"), soft_wrap=True)
    console.print(Text(f" Found: {found} movie(s)"), soft_wrap=True)
    console.print(Text(f" Page: {query.page}/{total_pages}"), soft_wrap=True)
    console.print()


def wrap_overview(overview: str | None) -> str:
    """Indent and word-wrap an overview at a fixed width (long words are not split)."""

    text = overview or "No description available"
    lines = textwrap.wrap(text, width=OVERVIEW_WIDTH, break_long_words=False) or [text]
    return OVERVIEW_INDENT + ("\n" + OVERVIEW_INDENT).join(lines)


def render_movies(console: Console, movies: Iterable[MovieRecord]) -> None:
    for movie in movies:
        line = Text.assemble(
            ("  🎬 ", "green"),
            (movie.title, "bold green"),
            " ",
            (f"({movie.release_date or 'N/A'})", "yellow"),
        )
        console.print(line, soft_wrap=True)
        console.print(Text(wrap_overview(movie.overview), style="bright_black"), soft_wrap=True)
        console.print()
