"""Validation of raw `search` arguments.

Arguments arrive as strings so that the error messages are ours, not click's.
Checks run in a fixed order (search, limit, year, page) and stop at the first
violation.
"""

from __future__ import annotations

import re

from core.domain.models import SearchQuery

_INTEGER_RE = re.compile(r"[+-]?\d+")


class ArgumentValidationError(ValueError):
    """A CLI argument that cannot be turned into a search parameter."""


def filter_string(value: str | None, name: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ArgumentValidationError(f"{name.capitalize()} must not be empty.")
    return text


def filter_integer(value: str | int | None, name: str) -> int:
    raw = str(value if value is not None else "").strip()
    if not _INTEGER_RE.fullmatch(raw):
        raise ArgumentValidationError(f"{name.capitalize()} must be an integer.")
    return int(raw)


def filter_optional_integer(value: str | int | None, name: str) -> int | None:
    if value is None:
        return None
    return filter_integer(value, name)


def filter_page(value: str | int | None) -> int:
    page = filter_optional_integer(value, "page")
    if page is None:
        return 1
    if page < 1:
        raise ArgumentValidationError("Page number must be greater than 0.")
    return page


def build_search_query(
    search: str | None,
    limit: str | int | None,
    year: str | int | None = None,
    page: str | int | None = None,
) -> SearchQuery:
    """Validate raw CLI input into a `SearchQuery`.

    Raises `ArgumentValidationError` for the first invalid argument.
    """

    text = filter_string(search, "search")

    parsed_limit = filter_integer(limit, "limit")
    if parsed_limit < 1:
        raise ArgumentValidationError("Limit must be greater than 0.")

    parsed_year = filter_optional_integer(year, "year")
    if parsed_year is not None and parsed_year < 1:
        raise ArgumentValidationError("Year must be greater than 0.")

    parsed_page = filter_page(page)

    return SearchQuery(text=text, limit=parsed_limit, page=parsed_page, year=parsed_year)
