"""Exceptions raised by spotwire."""

from __future__ import annotations

from http import HTTPStatus


class SpotifyError(RuntimeError):
    """Base class for errors raised while talking to Spotify."""


class SpotifyStatusError(SpotifyError):
    """Raised when the API answers with a status that is neither success nor 401."""

    def __init__(
        self,
        status_code: int,
        body: str,
        *,
        method: str = "",
        url: str = "",
        retry_after: float | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        self.retry_after = retry_after
        detail = f" {body[:200]}" if body else ""
        super().__init__(f"{method} {url} returned HTTP {status_code}.{detail}".strip())

    @property
    def is_not_found(self) -> bool:
        return self.status_code == HTTPStatus.NOT_FOUND

    @property
    def is_forbidden(self) -> bool:
        return self.status_code == HTTPStatus.FORBIDDEN

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == HTTPStatus.TOO_MANY_REQUESTS

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= HTTPStatus.INTERNAL_SERVER_ERROR


class ReauthenticationRequiredError(SpotifyError):
    """Raised when the API keeps rejecting freshly refreshed access tokens."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(
            f"Access token rejected after {attempts} refresh attempt(s); "
            "the refresh token is likely revoked"
        )


class TokenRefreshError(SpotifyError):
    """Raised when a token exchange against the accounts service fails."""

    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class PageNotBoundError(SpotifyError):
    """Raised when traversal is requested on a page that has no dispatcher."""
