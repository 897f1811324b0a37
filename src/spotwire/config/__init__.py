"""Configuration helpers."""

from __future__ import annotations

from .env import require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import NO_RETRY, ResilienceConfig, ResponseHook, RetryPolicy
from .logging import configure_logging
from .spotify import (
    LIBRARY_SCOPES,
    MARKET_FROM_TOKEN,
    PLAYBACK_SCOPES,
    SPOTIFY_API_BASE_URL,
    SPOTIFY_AUTHORIZE_URL,
    SPOTIFY_TOKEN_URL,
    AccountsConfig,
    ApiConfig,
    Scope,
    SpotifyCredentials,
    get_spotify_credentials,
    merge_scopes,
)

__all__ = [
    "LIBRARY_SCOPES",
    "MARKET_FROM_TOKEN",
    "NO_RETRY",
    "PLAYBACK_SCOPES",
    "SPOTIFY_API_BASE_URL",
    "SPOTIFY_AUTHORIZE_URL",
    "SPOTIFY_TOKEN_URL",
    "AccountsConfig",
    "ApiConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "ResilienceConfig",
    "ResponseHook",
    "RetryPolicy",
    "Scope",
    "SpotifyCredentials",
    "configure_logging",
    "get_spotify_credentials",
    "merge_scopes",
    "require_env_var",
    "require_env_vars",
]
