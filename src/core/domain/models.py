"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at the boundary where TMDB JSON becomes typed records.
- Frozen models give us immutable values that compare by content.

Note:
- These models describe *what* a search is, not *how* it is fetched.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class SearchQuery(BaseModel):
    """Validated parameters of a single search invocation."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(
        ...,
        min_length=1,
        description="Search term sent as `query`.",
    )
    limit: int = Field(
        ...,
        gt=0,
        description="Maximum number of movies to display.",
    )
    page: int = Field(
        default=1,
        gt=0,
        description="TMDB result page to fetch.",
    )
    year: int | None = Field(
        default=None,
        gt=0,
        description="Optional release year filter.",
    )


class MovieRecord(BaseModel):
    """A movie as returned by the search endpoint.

    Only the fields we display are kept; everything else TMDB sends is ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = Field(
        ...,
        description="Movie title.",
    )
    overview: str | None = Field(
        default=None,
        description="Plot summary, if TMDB has one.",
    )
    release_date: str | None = Field(
        default=None,
        description="Release date as sent by TMDB (not parsed).",
    )


class SearchOutcome(BaseModel):
    """Full typed result of one search call, including pagination metadata."""

    model_config = ConfigDict(frozen=True)

    movies: tuple[MovieRecord, ...] = Field(
        default=(),
        description="Matched movies in endpoint order, capped at the query limit.",
    )
    total_results: int = Field(
        default=0,
        ge=0,
        description="`total_results` reported by TMDB.",
    )
    total_pages: int = Field(
        default=0,
        ge=0,
        description="`total_pages` reported by TMDB.",
    )
