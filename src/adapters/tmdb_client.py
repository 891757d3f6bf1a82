"""TMDB movie search adapter.

- Calls `GET /search/movie` once per search (no retries, no cache).
- Maps the JSON body into `SearchOutcome`, keeping TMDB's ordering.
- Translates httpx failures into `SearchError` with fixed user-facing messages.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from adapters.http_client import build_http_client
from core.config import AppSettings
from core.domain.errors import SearchError
from core.domain.models import MovieRecord, SearchOutcome
from core.interfaces.searcher import MovieSearcher

logger = logging.getLogger(__name__)

SEARCH_PATH = "/search/movie"
LANGUAGE = "en-US"


class TmdbSearchClient(MovieSearcher):
    """Searches movies on TMDB with a static v3 API key."""

    def __init__(
        self,
        api_key: str,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._settings = settings or AppSettings()
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> "TmdbSearchClient":
        settings = settings or AppSettings()
        if not settings.api_key:
            logger.debug("TMDB_API_KEY is not set; TMDB will reject the request")
        return cls(settings.api_key, settings)

    @property
    def search_url(self) -> str:
        return self._settings.base_url.rstrip("/") + SEARCH_PATH

    def build_params(self, text: str, page: int, year: int | None = None) -> dict[str, Any]:
        params: dict[str, Any] = {
            "query": text,
            "api_key": self._api_key,
            "language": LANGUAGE,
            "page": page,
        }
        if year is not None:
            params["year"] = year
        return params

    def search(self, text: str, limit: int, page: int = 1, year: int | None = None) -> SearchOutcome:
        params = self.build_params(text, page, year)
        logger.debug("GET %s query=%r page=%s year=%s", self.search_url, text, page, year)

        try:
            with build_http_client(self._settings, transport=self._transport) as client:
                response = client.get(self.search_url, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.debug("TMDB search failed with HTTP %s", status_code)
            raise SearchError.from_status(status_code, cause=exc) from exc
        except httpx.RequestError as exc:
            logger.debug("TMDB search failed: %s", exc)
            raise SearchError.network(cause=exc) from exc

        logger.debug("TMDB responded with HTTP %s", response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            logger.debug("TMDB returned a non-JSON body")
            raise SearchError.invalid_response(response.status_code, cause=exc) from exc

        try:
            outcome = parse_search_payload(payload, limit)
        except (TypeError, ValidationError) as exc:
            logger.debug("TMDB returned an unexpected payload: %s", exc)
            raise SearchError.invalid_response(response.status_code, cause=exc) from exc

        logger.debug("Mapped %d of %d movie(s)", len(outcome.movies), outcome.total_results)
        return outcome


def parse_search_payload(payload: Any, limit: int) -> SearchOutcome:
    """Map a `/search/movie` JSON body into a `SearchOutcome`.

    A missing (or null) `results` key is the same as an empty list. Items are
    truncated to the first `limit` entries and otherwise left untouched.
    """

    if not isinstance(payload, dict):
        raise TypeError(f"expected a JSON object, got {type(payload).__name__}")

    raw_results = payload.get("results") or []
    if not isinstance(raw_results, list):
        raise TypeError(f"expected `results` to be a list, got {type(raw_results).__name__}")

    movies = tuple(MovieRecord.model_validate(item) for item in raw_results[: max(limit, 0)])

    return SearchOutcome(
        movies=movies,
        total_results=payload.get("total_results") or 0,
        total_pages=payload.get("total_pages") or 0,
    )
