"""Spotify credentials, OAuth scopes and API defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from .env import require_env_vars
from .http_resilience import ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

SPOTIFY_API_BASE_URL: Final[str] = "https://api.spotify.com/v1/"
SPOTIFY_ACCOUNTS_BASE_URL: Final[str] = "https://accounts.spotify.com/"
SPOTIFY_AUTHORIZE_URL: Final[str] = SPOTIFY_ACCOUNTS_BASE_URL + "authorize"
SPOTIFY_TOKEN_URL: Final[str] = SPOTIFY_ACCOUNTS_BASE_URL + "api/token"  # noqa: S105

MARKET_FROM_TOKEN: Final[str] = "from_token"
DEFAULT_MAX_AUTH_RETRIES: Final[int] = 2

CREDENTIAL_ENV_VARS: Final[tuple[str, str, str]] = (
    "SPOTIFY_CLIENT_ID",
    "SPOTIFY_CLIENT_SECRET",
    "SPOTIFY_REDIRECT_URI",
)


class Scope(StrEnum):
    USER_READ_PRIVATE = "user-read-private"
    USER_READ_BIRTHDATE = "user-read-birthdate"
    USER_READ_EMAIL = "user-read-email"
    STREAMING = "streaming"
    APP_REMOTE_CONTROL = "app-remote-control"
    USER_TOP_READ = "user-top-read"
    USER_READ_RECENTLY_PLAYED = "user-read-recently-played"
    USER_LIBRARY_READ = "user-library-read"
    USER_LIBRARY_MODIFY = "user-library-modify"
    PLAYLIST_READ_COLLABORATIVE = "playlist-read-collaborative"
    PLAYLIST_READ_PRIVATE = "playlist-read-private"
    PLAYLIST_MODIFY_PUBLIC = "playlist-modify-public"
    PLAYLIST_MODIFY_PRIVATE = "playlist-modify-private"
    USER_READ_CURRENTLY_PLAYING = "user-read-currently-playing"
    USER_READ_PLAYBACK_STATE = "user-read-playback-state"
    USER_MODIFY_PLAYBACK_STATE = "user-modify-playback-state"
    USER_FOLLOW_READ = "user-follow-read"
    USER_FOLLOW_MODIFY = "user-follow-modify"


LIBRARY_SCOPES: Final[tuple[Scope, ...]] = (Scope.USER_LIBRARY_READ, Scope.USER_LIBRARY_MODIFY)
PLAYBACK_SCOPES: Final[tuple[Scope, ...]] = (
    Scope.USER_READ_CURRENTLY_PLAYING,
    Scope.USER_READ_PLAYBACK_STATE,
    Scope.USER_MODIFY_PLAYBACK_STATE,
)


def merge_scopes(*scopes: Iterable[Scope]) -> tuple[Scope, ...]:
    merged: list[Scope] = []
    for scope_list in scopes:
        for scope in scope_list:
            if scope not in merged:
                merged.append(scope)
    return tuple(merged)


@dataclass(frozen=True, slots=True)
class SpotifyCredentials:
    """Application credentials used only to mint and refresh tokens."""

    client_id: str
    client_secret: str = field(repr=False)
    redirect_uri: str


def get_spotify_credentials(
    *,
    environ: Mapping[str, str] | None = None,
    load_env_file: bool = True,
) -> SpotifyCredentials:
    values = require_env_vars(
        CREDENTIAL_ENV_VARS,
        environ=environ,
        load_env_file=load_env_file and environ is None,
    )
    return SpotifyCredentials(
        client_id=values["SPOTIFY_CLIENT_ID"],
        client_secret=values["SPOTIFY_CLIENT_SECRET"],
        redirect_uri=values["SPOTIFY_REDIRECT_URI"],
    )


def _default_api_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="spotify-api",
        base_url=SPOTIFY_API_BASE_URL,
        retry=RetryPolicy(total=3),
        default_headers={"Accept": "application/json"},
    )


def _default_accounts_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="spotify-accounts",
        base_url=SPOTIFY_ACCOUNTS_BASE_URL,
        timeout_seconds=15.0,
        retry=RetryPolicy(total=2),
    )


@dataclass(frozen=True, slots=True)
class ApiConfig:
    """Per-dispatcher settings resolved once instead of at every call site."""

    market: str = MARKET_FROM_TOKEN
    max_auth_retries: int = DEFAULT_MAX_AUTH_RETRIES
    chunk_concurrency: int = 1
    adopt_rotated_refresh_token: bool = False
    resilience: ResilienceConfig = field(default_factory=_default_api_resilience)

    def __post_init__(self) -> None:
        if self.max_auth_retries < 0:
            raise ValueError("max_auth_retries must be non-negative")
        if self.chunk_concurrency < 1:
            raise ValueError("chunk_concurrency must be at least 1")


@dataclass(frozen=True, slots=True)
class AccountsConfig:
    authorize_url: str = SPOTIFY_AUTHORIZE_URL
    token_url: str = SPOTIFY_TOKEN_URL
    resilience: ResilienceConfig = field(default_factory=_default_accounts_resilience)
