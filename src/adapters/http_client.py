"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and redirect policy for every TMDB call.
- Eases testing: a `httpx.MockTransport` can be plugged in instead of the network.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_http_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with safe defaults.

    Why a builder:
    - Centralizes timeouts/headers so search and diagnostics behave the same.
    - Redirects are never followed: an unexpected 3xx from TMDB is an error
      we want to surface, not hide.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=headers,
        transport=transport,
    )
