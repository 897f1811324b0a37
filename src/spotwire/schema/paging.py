"""Offset and cursor pages that can walk their own collection."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable  # noqa: TC003
from typing import Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from spotwire.dispatch.dispatcher import Dispatcher  # noqa: TC001
from spotwire.dispatch.request import RequestDescriptor
from spotwire.errors import PageNotBoundError

T = TypeVar("T")


class LinkedPage(BaseModel):
    """Base for pages bound to the dispatcher that produced them.

    ``_parser`` turns the raw JSON of an adjacent page into a page of the same
    type; endpoints that wrap their page in an envelope (``{"albums": {...}}``)
    bind a parser that unwraps it.
    """

    model_config = ConfigDict(extra="ignore")

    _dispatcher: Dispatcher | None = PrivateAttr(default=None)
    _parser: Callable[[object], Self] | None = PrivateAttr(default=None)

    def bind(
        self,
        dispatcher: Dispatcher,
        parser: Callable[[object], Self] | None = None,
    ) -> Self:
        self._dispatcher = dispatcher
        self._parser = parser
        return self

    @property
    def is_bound(self) -> bool:
        return self._dispatcher is not None

    async def _fetch_linked(self, url: str) -> Self:
        dispatcher = self._dispatcher
        if dispatcher is None:
            raise PageNotBoundError(f"{type(self).__name__} is not bound to a dispatcher")
        payload = await dispatcher.get_json(RequestDescriptor.get(url))
        parser = self._parser or type(self).model_validate
        return parser(payload).bind(dispatcher, self._parser)


class Page(LinkedPage, Generic[T]):
    """Offset-paginated slice of a remote collection."""

    href: str = ""
    items: list[T] = Field(default_factory=list)
    limit: int = 0
    next: str | None = None
    offset: int = 0
    previous: str | None = None
    total: int | None = None

    @property
    def has_next(self) -> bool:
        return self.next is not None

    @property
    def has_previous(self) -> bool:
        return self.previous is not None

    async def next_page(self) -> Self | None:
        if self.next is None:
            return None
        return await self._fetch_linked(self.next)

    async def previous_page(self) -> Self | None:
        if self.previous is None:
            return None
        return await self._fetch_linked(self.previous)

    async def all_items(self) -> list[T]:
        """Return the whole collection in provider order, starting from any page.

        Walks ``previous`` links to the first page and ``next`` links to the
        last. Any failed fetch aborts the call; partial results are never
        returned.
        """

        earlier: list[T] = []
        page = await self.previous_page()
        while page is not None:
            earlier.extend(reversed(page.items))
            page = await page.previous_page()
        earlier.reverse()

        collected = [*earlier, *self.items]
        page = await self.next_page()
        while page is not None:
            collected.extend(page.items)
            page = await page.next_page()
        return collected

    async def iter_items(self) -> AsyncIterator[T]:
        """Yield this page's items and every following page's items lazily."""

        page: Self | None = self
        while page is not None:
            for item in page.items:
                yield item
            page = await page.next_page()


class Cursors(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    after: str | None = None
    before: str | None = None


class CursorPage(LinkedPage, Generic[T]):
    """Forward-only page used for followed artists and play history."""

    href: str = ""
    items: list[T] = Field(default_factory=list)
    limit: int = 0
    next: str | None = None
    cursors: Cursors | None = None
    total: int | None = None

    @property
    def has_next(self) -> bool:
        return self.next is not None

    @property
    def after(self) -> str | None:
        return self.cursors.after if self.cursors is not None else None

    async def next_page(self) -> Self | None:
        if self.next is None:
            return None
        return await self._fetch_linked(self.next)

    async def all_items(self) -> list[T]:
        collected = list(self.items)
        page = await self.next_page()
        while page is not None:
            collected.extend(page.items)
            page = await page.next_page()
        return collected

    async def iter_items(self) -> AsyncIterator[T]:
        page: Self | None = self
        while page is not None:
            for item in page.items:
                yield item
            page = await page.next_page()
