"""Authenticated request dispatch with refresh-and-retry on 401."""

from __future__ import annotations

import asyncio
from http import HTTPStatus
from logging import getLogger
from typing import TYPE_CHECKING, Final

from spotwire.adapters.http_resilience import ResilientClient, retry_after_seconds
from spotwire.auth.client import TokenClient
from spotwire.config.spotify import ApiConfig
from spotwire.errors import ReauthenticationRequiredError, SpotifyStatusError

from .session import Session

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    import httpx
    from pydantic import BaseModel

    from spotwire.auth.client import TokenRefresher
    from spotwire.config.http_resilience import ResilienceConfig

    from .request import RequestDescriptor

log = getLogger(__name__)

SUCCESS_STATUSES: Final[frozenset[int]] = frozenset(
    {HTTPStatus.OK, HTTPStatus.CREATED, HTTPStatus.ACCEPTED, HTTPStatus.NO_CONTENT}
)


class Dispatcher:
    """Sends requests with the current bearer token and owns the token session.

    A 401 triggers a refresh through ``token_refresher`` followed by a replay
    of the same descriptor, at most ``ApiConfig.max_auth_retries`` times.
    Refreshes are serialized so concurrent callers sharing this dispatcher do
    not refresh twice for the same rejected token.
    """

    def __init__(
        self,
        access_token: str,
        refresh_token: str,
        *,
        token_refresher: TokenRefresher | None = None,
        config: ApiConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self.session = Session(access_token=access_token, refresh_token=refresh_token)
        self.config = config or ApiConfig()
        self._token_refresher = token_refresher or TokenClient()
        self._client_factory = client_factory or ResilientClient
        self._client: ResilientClient | None = None
        self._refresh_lock = asyncio.Lock()

    @property
    def market(self) -> str:
        return self.config.market

    @property
    def chunk_concurrency(self) -> int:
        return self.config.chunk_concurrency

    async def __aenter__(self) -> Dispatcher:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def send(self, request: RequestDescriptor) -> httpx.Response:
        auth_retries = 0
        while True:
            token = self.session.access_token
            response = await self._send_once(request.clone(), token)
            status = response.status_code

            if status in SUCCESS_STATUSES:
                return response

            if status == HTTPStatus.UNAUTHORIZED:
                if auth_retries >= self.config.max_auth_retries:
                    log.error(
                        f"{request.method} {request.url} still unauthorized "
                        f"after {auth_retries} token refresh(es)"
                    )
                    raise ReauthenticationRequiredError(auth_retries)
                auth_retries += 1
                await self._refresh(rejected_token=token)
                continue

            log.warning(f"{request.method} {response.request.url} returned HTTP {status}")
            raise SpotifyStatusError(
                status,
                response.text,
                method=request.method,
                url=str(response.request.url),
                retry_after=retry_after_seconds(response),
            )

    async def get_json(self, request: RequestDescriptor) -> object:
        """Send and decode the body; empty bodies (204) decode to ``None``."""

        response = await self.send(request)
        if response.status_code == HTTPStatus.NO_CONTENT or not response.content:
            return None
        return response.json()

    async def fetch[M: BaseModel](self, request: RequestDescriptor, model: type[M]) -> M:
        return model.model_validate(await self.get_json(request))

    async def _send_once(self, request: RequestDescriptor, token: str) -> httpx.Response:
        client = self._get_client()
        log.debug(f"Dispatching {request.method} {request.url}")
        return await client.request(
            request.method,
            request.url,
            params=list(request.params) or None,
            json=request.json,
            headers={"Authorization": f"Bearer {token}"},
        )

    async def _refresh(self, *, rejected_token: str) -> None:
        async with self._refresh_lock:
            if self.session.access_token != rejected_token:
                log.debug("Access token already replaced by a concurrent refresh")
                return
            token = await self._token_refresher.refresh_access_token(self.session.refresh_token)
            self.session.access_token = token.access_token
            if token.refresh_token and self.config.adopt_rotated_refresh_token:
                self.session.refresh_token = token.refresh_token
            self.session.refresh_count += 1
            log.info(f"Refreshed access token (refresh #{self.session.refresh_count})")

    def _get_client(self) -> ResilientClient:
        if self._client is None or self._client.is_closed:
            self._client = self._client_factory(self.config.resilience)
        return self._client
