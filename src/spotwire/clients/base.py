"""Shared plumbing for the per-resource clients."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Final

from spotwire.dispatch.chunking import chunked
from spotwire.dispatch.dispatcher import Dispatcher

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence
    from types import TracebackType

    from spotwire.adapters.http_resilience import ResilientClient
    from spotwire.auth.client import TokenRefresher
    from spotwire.config.http_resilience import ResilienceConfig
    from spotwire.config.spotify import ApiConfig
    from spotwire.dispatch.request import QueryValue
    from spotwire.schema.paging import LinkedPage

DEFAULT_PAGE_LIMIT: Final[int] = 20
MAX_PAGE_LIMIT: Final[int] = 50


def paging_params(
    limit: int | None,
    offset: int | None,
    *,
    max_limit: int = MAX_PAGE_LIMIT,
) -> list[tuple[str, QueryValue]]:
    """Limits outside ``1..max_limit`` fall back to the provider default of 20."""

    resolved = limit if limit is not None and 1 <= limit <= max_limit else DEFAULT_PAGE_LIMIT
    return [("limit", resolved), ("offset", offset or 0)]


def datetime_to_epoch_ms(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return int(value.astimezone(UTC).timestamp() * 1000)


def join_ids(ids: Sequence[str]) -> str:
    return ",".join(ids)


class ResourceClient:
    """Holds a dispatcher and the helpers every resource client needs.

    Either pass ``access_token``/``refresh_token`` to get a private dispatcher,
    or ``dispatcher=`` to share one session between several clients.
    """

    def __init__(
        self,
        access_token: str | None = None,
        refresh_token: str | None = None,
        *,
        dispatcher: Dispatcher | None = None,
        token_refresher: TokenRefresher | None = None,
        config: ApiConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        if dispatcher is None:
            if not access_token or not refresh_token:
                raise ValueError("Either a dispatcher or both access and refresh tokens are required")
            dispatcher = Dispatcher(
                access_token,
                refresh_token,
                token_refresher=token_refresher,
                config=config,
                client_factory=client_factory,
            )
        self.dispatcher = dispatcher

    async def __aenter__(self) -> ResourceClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.dispatcher.aclose()

    def market(self, market: str | None) -> str:
        return market or self.dispatcher.market

    def bind_page[P: LinkedPage](
        self,
        page: P,
        parser: Callable[[object], P] | None = None,
    ) -> P:
        return page.bind(self.dispatcher, parser)

    async def chunked[T, R](
        self,
        items: Sequence[T],
        size: int,
        fetch: Callable[[list[T]], Awaitable[Sequence[R]]],
    ) -> list[R]:
        return await chunked(items, size, fetch, concurrency=self.dispatcher.chunk_concurrency)
