"""Authorization URL construction for the authorization-code flow."""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

from spotwire.config.spotify import SPOTIFY_AUTHORIZE_URL

if TYPE_CHECKING:
    from collections.abc import Iterable

    from spotwire.config.spotify import Scope, SpotifyCredentials

DEFAULT_STATE_LENGTH = 16
_STATE_ALPHABET = string.ascii_letters + string.digits


def generate_state(length: int = DEFAULT_STATE_LENGTH) -> str:
    if length < 1:
        raise ValueError("State length must be positive")
    return "".join(secrets.choice(_STATE_ALPHABET) for _ in range(length))


@dataclass(slots=True)
class SpotifyOAuth:
    """Builds the URL a user visits to grant the application access."""

    credentials: SpotifyCredentials
    scopes: tuple[Scope, ...] = ()
    state: str = field(default_factory=generate_state)
    show_dialog: bool = False
    authorize_url: str = SPOTIFY_AUTHORIZE_URL

    def with_scopes(self, scopes: Iterable[Scope]) -> SpotifyOAuth:
        self.scopes = tuple(scopes)
        return self

    def regenerate_state(self, length: int = DEFAULT_STATE_LENGTH) -> str:
        self.state = generate_state(length)
        return self.state

    def build_authorize_url(self) -> str:
        params = httpx.QueryParams(
            [
                ("client_id", self.credentials.client_id),
                ("response_type", "code"),
                ("redirect_uri", self.credentials.redirect_uri),
                ("state", self.state),
                ("scope", " ".join(str(scope) for scope in self.scopes)),
                ("show_dialog", "true" if self.show_dialog else "false"),
            ]
        )
        return str(httpx.URL(self.authorize_url, params=params))
