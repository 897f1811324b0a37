"""Catalog search and its query builder."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Self

from spotwire.dispatch.request import RequestDescriptor
from spotwire.schema import SearchResults

from .base import ResourceClient, paging_params

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from spotwire.schema.paging import LinkedPage


class SearchType(StrEnum):
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    TRACK = "track"
    SHOW = "show"
    EPISODE = "episode"


@dataclass(slots=True)
class SearchQuery:
    """Builds the ``q`` parameter from keywords and field filters.

    >>> SearchQuery().keyword("bad").artist("Michael Jackson").year_range(1980, 1989).build()
    'bad artist:Michael Jackson year:1980-1989'
    """

    terms: list[str] = field(default_factory=list)

    def keyword(self, text: str) -> Self:
        self.terms.append(text)
        return self

    def album(self, name: str) -> Self:
        return self._filter("album", name)

    def artist(self, name: str) -> Self:
        return self._filter("artist", name)

    def track(self, name: str) -> Self:
        return self._filter("track", name)

    def genre(self, name: str) -> Self:
        return self._filter("genre", name)

    def year(self, year: int) -> Self:
        return self._filter("year", str(year))

    def year_range(self, start: int, end: int) -> Self:
        if start > end:
            raise ValueError(f"Year range starts after it ends: {start}-{end}")
        return self._filter("year", f"{start}-{end}")

    def build(self) -> str:
        return " ".join(self.terms)

    def _filter(self, name: str, value: str) -> Self:
        self.terms.append(f"{name}:{value}")
        return self


@dataclass(frozen=True, slots=True)
class SearchRequest:
    query: SearchQuery | str
    types: Sequence[SearchType] = (SearchType.TRACK,)
    market: str | None = None
    limit: int | None = None
    offset: int | None = None
    include_external: bool = False

    @property
    def q(self) -> str:
        return self.query if isinstance(self.query, str) else self.query.build()


def _result_parser[P: LinkedPage](
    select: Callable[[SearchResults], P | None], kind: str
) -> Callable[[object], P]:
    """Parse a linked search page through ``SearchResults`` and pick one result type."""

    def parse(payload: object) -> P:
        page = select(SearchResults.model_validate(payload))
        if page is None:
            raise ValueError(f"Search response holds no {kind} page")
        return page

    return parse


class SearchClient(ResourceClient):
    async def search(self, request: SearchRequest) -> SearchResults:
        """Search the catalog; only the pages for the requested types are set."""

        q = request.q
        if not q:
            raise ValueError("Search query must not be empty")
        if not request.types:
            raise ValueError("At least one search type is required")

        params = [
            ("q", q),
            ("type", ",".join(dict.fromkeys(str(kind) for kind in request.types))),
            ("market", self.market(request.market)),
            *paging_params(request.limit, request.offset),
        ]
        if request.include_external:
            params.append(("include_external", "audio"))
        results = await self.dispatcher.fetch(RequestDescriptor.get("search", params), SearchResults)
        self._bind_results(results)
        return results

    def _bind_results(self, results: SearchResults) -> None:
        if results.albums is not None:
            self.bind_page(results.albums, _result_parser(lambda r: r.albums, "albums"))
        if results.artists is not None:
            self.bind_page(results.artists, _result_parser(lambda r: r.artists, "artists"))
        if results.playlists is not None:
            self.bind_page(results.playlists, _result_parser(lambda r: r.playlists, "playlists"))
        if results.tracks is not None:
            self.bind_page(results.tracks, _result_parser(lambda r: r.tracks, "tracks"))
        if results.shows is not None:
            self.bind_page(results.shows, _result_parser(lambda r: r.shows, "shows"))
        if results.episodes is not None:
            self.bind_page(results.episodes, _result_parser(lambda r: r.episodes, "episodes"))
