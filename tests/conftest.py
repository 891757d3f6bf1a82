from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest
from typer.testing import CliRunner

from adapters.tmdb_client import TmdbSearchClient
from core.config import AppSettings
from core.domain.errors import SearchError
from core.domain.models import MovieRecord, SearchOutcome


class FakeSearcher:
    """In-memory `MovieSearcher` that records every call."""

    def __init__(self, outcome: SearchOutcome | None = None, error: SearchError | None = None) -> None:
        self.outcome = outcome or SearchOutcome()
        self.error = error
        self.calls: list[tuple[str, int, int, int | None]] = []

    def search(self, text: str, limit: int, page: int = 1, year: int | None = None) -> SearchOutcome:
        self.calls.append((text, limit, page, year))
        if self.error is not None:
            raise self.error
        return self.outcome


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TMDB_API_KEY", "TMDB_BASE_URL", "TMDB_HTTP_TIMEOUT_SECONDS", "TMDB_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(api_key="dummy_api_key", _env_file=None)


@pytest.fixture
def make_client(settings: AppSettings) -> Callable[..., TmdbSearchClient]:
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> TmdbSearchClient:
        return TmdbSearchClient("dummy_api_key", settings, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def two_movies() -> SearchOutcome:
    return SearchOutcome(
        movies=(
            MovieRecord(title="Test Movie 1", overview="Description of Test Movie 1", release_date="1999-01-01"),
            MovieRecord(title="Test Movie 2", overview="Description of Test Movie 2", release_date="2000-02-01"),
        ),
        total_results=2,
        total_pages=1,
    )


@pytest.fixture
def fake_searcher() -> type[FakeSearcher]:
    return FakeSearcher
