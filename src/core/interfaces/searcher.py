"""Movie search contract.

Why Protocol:
- Defines a structural contract (duck typing) without rigid inheritance.
- Lets the CLI run against the TMDB adapter or a test double interchangeably.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import SearchOutcome


@runtime_checkable
class MovieSearcher(Protocol):
    """Minimal contract for a movie search backend.

    Design rules:
    - `search` is synchronous: one blocking request per CLI invocation.
    - Failures are raised as `core.domain.errors.SearchError`.
    """

    def search(self, text: str, limit: int, page: int = 1, year: int | None = None) -> SearchOutcome:
        """Search movies matching `text` and return at most `limit` of them."""

        ...
