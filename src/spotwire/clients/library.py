"""The current user's saved tracks, albums and shows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import TypeAdapter

from spotwire.dispatch.chunking import LIBRARY_IDS_PER_REQUEST
from spotwire.dispatch.request import RequestDescriptor
from spotwire.schema import Page, SavedAlbum, SavedShow, SavedTrack

from .base import ResourceClient, join_ids, paging_params

if TYPE_CHECKING:
    from collections.abc import Sequence

_flags_adapter = TypeAdapter(list[bool])


class LibraryItem(StrEnum):
    TRACKS = "tracks"
    ALBUMS = "albums"
    SHOWS = "shows"


@dataclass(frozen=True, slots=True)
class GetSavedRequest:
    limit: int | None = None
    offset: int | None = None
    market: str | None = None


class LibraryClient(ResourceClient):
    async def get_saved_tracks(self, request: GetSavedRequest | None = None) -> Page[SavedTrack]:
        page = await self.dispatcher.fetch(self._saved_descriptor(LibraryItem.TRACKS, request), Page[SavedTrack])
        return self.bind_page(page)

    async def get_saved_albums(self, request: GetSavedRequest | None = None) -> Page[SavedAlbum]:
        page = await self.dispatcher.fetch(self._saved_descriptor(LibraryItem.ALBUMS, request), Page[SavedAlbum])
        return self.bind_page(page)

    async def get_saved_shows(self, request: GetSavedRequest | None = None) -> Page[SavedShow]:
        page = await self.dispatcher.fetch(self._saved_descriptor(LibraryItem.SHOWS, request), Page[SavedShow])
        return self.bind_page(page)

    async def save_tracks(self, track_ids: Sequence[str]) -> None:
        await self._modify("PUT", LibraryItem.TRACKS, track_ids)

    async def save_albums(self, album_ids: Sequence[str]) -> None:
        await self._modify("PUT", LibraryItem.ALBUMS, album_ids)

    async def save_shows(self, show_ids: Sequence[str]) -> None:
        await self._modify("PUT", LibraryItem.SHOWS, show_ids)

    async def remove_saved_tracks(self, track_ids: Sequence[str]) -> None:
        await self._modify("DELETE", LibraryItem.TRACKS, track_ids)

    async def remove_saved_albums(self, album_ids: Sequence[str]) -> None:
        await self._modify("DELETE", LibraryItem.ALBUMS, album_ids)

    async def remove_saved_shows(self, show_ids: Sequence[str]) -> None:
        await self._modify("DELETE", LibraryItem.SHOWS, show_ids)

    async def is_saved_tracks(self, track_ids: Sequence[str]) -> list[bool]:
        return await self._contains(LibraryItem.TRACKS, track_ids)

    async def is_saved_albums(self, album_ids: Sequence[str]) -> list[bool]:
        return await self._contains(LibraryItem.ALBUMS, album_ids)

    async def is_saved_shows(self, show_ids: Sequence[str]) -> list[bool]:
        return await self._contains(LibraryItem.SHOWS, show_ids)

    def _saved_descriptor(self, item: LibraryItem, request: GetSavedRequest | None) -> RequestDescriptor:
        request = request or GetSavedRequest()
        params = paging_params(request.limit, request.offset)
        # saved shows take no market
        if item is not LibraryItem.SHOWS:
            params.append(("market", self.market(request.market)))
        return RequestDescriptor.get(f"me/{item}", params)

    async def _modify(self, method: str, item: LibraryItem, ids: Sequence[str]) -> None:
        async def send(chunk: list[str]) -> list[None]:
            await self.dispatcher.send(RequestDescriptor.build(method, f"me/{item}", [("ids", join_ids(chunk))]))
            return []

        await self.chunked(ids, LIBRARY_IDS_PER_REQUEST, send)

    async def _contains(self, item: LibraryItem, ids: Sequence[str]) -> list[bool]:
        async def fetch(chunk: list[str]) -> list[bool]:
            descriptor = RequestDescriptor.get(f"me/{item}/contains", [("ids", join_ids(chunk))])
            return _flags_adapter.validate_python(await self.dispatcher.get_json(descriptor))

        return await self.chunked(ids, LIBRARY_IDS_PER_REQUEST, fetch)
