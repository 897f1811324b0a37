"""Credential store: authorize URL and token exchanges."""

from __future__ import annotations

from .client import TokenClient, TokenRefresher
from .oauth import SpotifyOAuth, generate_state
from .schema import Token

__all__ = [
    "SpotifyOAuth",
    "Token",
    "TokenClient",
    "TokenRefresher",
    "generate_state",
]
