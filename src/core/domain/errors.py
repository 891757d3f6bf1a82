"""Errors raised by movie searches.

Every failure of the search endpoint ends up as a `SearchError`. The message
text is what reaches the user, so it is fixed per kind.
"""

from __future__ import annotations

from enum import Enum


class SearchErrorKind(str, Enum):
    """Category of a failed search."""

    NETWORK = "network"
    INVALID_API_KEY = "invalid_api_key"
    NOT_FOUND = "not_found"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    REDIRECT = "redirect"
    INVALID_RESPONSE = "invalid_response"


NETWORK_ERROR_MESSAGE = (
    "Network error while connecting to the TMDB API. Please check your internet connection."
)
INVALID_API_KEY_MESSAGE = "Invalid TMDB API key. Please set the TMDB_API_KEY environment variable."
NOT_FOUND_MESSAGE = "TMDB API endpoint not found. The API URL may be outdated."
CLIENT_ERROR_MESSAGE = "TMDB API client error (Status: {status_code}). Please check your request parameters."
SERVER_ERROR_MESSAGE = "TMDB API server error. Please try again later."
REDIRECT_MESSAGE = "Unexpected redirect from the TMDB API."
INVALID_RESPONSE_MESSAGE = "Invalid response received from the TMDB API."


class SearchError(Exception):
    """A search that could not be completed.

    `status_code` is the HTTP status of the failed response, or 0 when no
    response was received at all.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: SearchErrorKind,
        status_code: int = 0,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.cause = cause

    @classmethod
    def network(cls, cause: BaseException | None = None) -> "SearchError":
        return cls(NETWORK_ERROR_MESSAGE, kind=SearchErrorKind.NETWORK, status_code=0, cause=cause)

    @classmethod
    def invalid_response(cls, status_code: int, cause: BaseException | None = None) -> "SearchError":
        return cls(
            INVALID_RESPONSE_MESSAGE,
            kind=SearchErrorKind.INVALID_RESPONSE,
            status_code=status_code,
            cause=cause,
        )

    @classmethod
    def from_status(cls, status_code: int, cause: BaseException | None = None) -> "SearchError":
        """Map a non-2xx HTTP status to its user-facing error."""

        if status_code == 401:
            return cls(INVALID_API_KEY_MESSAGE, kind=SearchErrorKind.INVALID_API_KEY, status_code=401, cause=cause)
        if status_code == 404:
            return cls(NOT_FOUND_MESSAGE, kind=SearchErrorKind.NOT_FOUND, status_code=404, cause=cause)
        if 400 <= status_code < 500:
            return cls(
                CLIENT_ERROR_MESSAGE.format(status_code=status_code),
                kind=SearchErrorKind.CLIENT_ERROR,
                status_code=status_code,
                cause=cause,
            )
        if status_code >= 500:
            return cls(SERVER_ERROR_MESSAGE, kind=SearchErrorKind.SERVER_ERROR, status_code=status_code, cause=cause)
        if 300 <= status_code < 400:
            return cls(REDIRECT_MESSAGE, kind=SearchErrorKind.REDIRECT, status_code=status_code, cause=cause)
        return cls.invalid_response(status_code, cause=cause)
