"""Album endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from spotwire.dispatch.chunking import ALBUMS_PER_REQUEST
from spotwire.dispatch.request import RequestDescriptor
from spotwire.schema import Album, AlbumsEnvelope, Page, SimplifiedTrack

from .base import ResourceClient, join_ids, paging_params

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True, slots=True)
class GetAlbumRequest:
    id: str
    market: str | None = None


@dataclass(frozen=True, slots=True)
class GetAlbumsRequest:
    ids: Sequence[str]
    market: str | None = None


@dataclass(frozen=True, slots=True)
class GetAlbumTracksRequest:
    id: str
    limit: int | None = None
    offset: int | None = None
    market: str | None = None


class AlbumClient(ResourceClient):
    async def get_album(self, request: GetAlbumRequest) -> Album:
        descriptor = RequestDescriptor.get(
            f"albums/{request.id}", [("market", self.market(request.market))]
        )
        album = await self.dispatcher.fetch(descriptor, Album)
        if album.tracks is not None:
            self.bind_page(album.tracks)
        return album

    async def get_albums(self, request: GetAlbumsRequest) -> list[Album | None]:
        """Entries are ``None`` for ids Spotify does not know."""

        market = self.market(request.market)

        async def fetch(ids: list[str]) -> list[Album | None]:
            descriptor = RequestDescriptor.get("albums", [("ids", join_ids(ids)), ("market", market)])
            envelope = await self.dispatcher.fetch(descriptor, AlbumsEnvelope)
            for album in envelope.albums:
                if album is not None and album.tracks is not None:
                    self.bind_page(album.tracks)
            return envelope.albums

        return await self.chunked(request.ids, ALBUMS_PER_REQUEST, fetch)

    async def get_album_tracks(self, request: GetAlbumTracksRequest) -> Page[SimplifiedTrack]:
        descriptor = RequestDescriptor.get(
            f"albums/{request.id}/tracks",
            [
                *paging_params(request.limit, request.offset),
                ("market", self.market(request.market)),
            ],
        )
        page = await self.dispatcher.fetch(descriptor, Page[SimplifiedTrack])
        return self.bind_page(page)
