"""Token exchanges against the Spotify accounts service."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

import httpx
from pydantic import ValidationError

from spotwire.adapters.http_resilience import ResilientClient
from spotwire.config.spotify import AccountsConfig, get_spotify_credentials
from spotwire.errors import TokenRefreshError

from .schema import Token

if TYPE_CHECKING:
    from collections.abc import Callable

    from spotwire.config.http_resilience import ResilienceConfig
    from spotwire.config.spotify import SpotifyCredentials

log = getLogger(__name__)


class TokenRefresher(Protocol):
    async def refresh_access_token(self, refresh_token: str) -> Token: ...


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class TokenClient:
    """Authorization-code and refresh-token exchanges using HTTP Basic auth."""

    credentials: SpotifyCredentials = field(default_factory=get_spotify_credentials)
    config: AccountsConfig = field(default_factory=AccountsConfig)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    async def request_tokens(self, code: str) -> Token:
        return await self._exchange(
            {
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": self.credentials.redirect_uri,
            }
        )

    async def refresh_access_token(self, refresh_token: str) -> Token:
        return await self._exchange(
            {"grant_type": "refresh_token", "refresh_token": refresh_token}
        )

    async def _exchange(self, form: dict[str, str]) -> Token:
        grant_type = form["grant_type"]
        async with self.client_factory(self.config.resilience) as client:
            response = await client.post(
                self.config.token_url,
                data=form,
                auth=httpx.BasicAuth(self.credentials.client_id, self.credentials.client_secret),
            )

        if response.status_code != httpx.codes.OK:
            log.error(f"Token exchange ({grant_type}) failed with HTTP {response.status_code}")
            raise TokenRefreshError(
                f"Token exchange ({grant_type}) failed with HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            token = Token.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise TokenRefreshError(
                f"Unexpected token response for {grant_type}",
                status_code=response.status_code,
                body=response.text,
            ) from exc
        log.debug(f"Token exchange ({grant_type}) succeeded, expires in {token.expires_in}s")
        return token
