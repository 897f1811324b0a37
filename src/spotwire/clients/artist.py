"""Artist endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from spotwire.dispatch.chunking import ARTISTS_PER_REQUEST
from spotwire.dispatch.request import RequestDescriptor
from spotwire.schema import Artist, ArtistsEnvelope, Page, SimplifiedAlbum, Track, TracksEnvelope

from .base import ResourceClient, join_ids, paging_params

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


class AlbumGroup(StrEnum):
    ALBUM = "album"
    SINGLE = "single"
    APPEARS_ON = "appears_on"
    COMPILATION = "compilation"


def format_album_groups(groups: Iterable[AlbumGroup]) -> str:
    """Deduplicate and order groups the way they are declared."""

    order = list(AlbumGroup)
    return ",".join(str(group) for group in sorted(set(groups), key=order.index))


@dataclass(frozen=True, slots=True)
class GetArtistRequest:
    id: str


@dataclass(frozen=True, slots=True)
class GetArtistsRequest:
    ids: Sequence[str]


@dataclass(frozen=True, slots=True)
class GetArtistAlbumsRequest:
    id: str
    include_groups: Sequence[AlbumGroup] | None = None
    market: str | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass(frozen=True, slots=True)
class GetArtistTopTracksRequest:
    id: str
    market: str | None = None


@dataclass(frozen=True, slots=True)
class GetRelatedArtistsRequest:
    id: str


class ArtistClient(ResourceClient):
    async def get_artist(self, request: GetArtistRequest) -> Artist:
        return await self.dispatcher.fetch(RequestDescriptor.get(f"artists/{request.id}"), Artist)

    async def get_artists(self, request: GetArtistsRequest) -> list[Artist | None]:
        async def fetch(ids: list[str]) -> list[Artist | None]:
            descriptor = RequestDescriptor.get("artists", [("ids", join_ids(ids))])
            envelope = await self.dispatcher.fetch(descriptor, ArtistsEnvelope)
            return envelope.artists

        return await self.chunked(request.ids, ARTISTS_PER_REQUEST, fetch)

    async def get_artist_albums(self, request: GetArtistAlbumsRequest) -> Page[SimplifiedAlbum]:
        params = [
            *paging_params(request.limit, request.offset),
            ("market", self.market(request.market)),
        ]
        if request.include_groups:
            params.append(("include_groups", format_album_groups(request.include_groups)))
        descriptor = RequestDescriptor.get(f"artists/{request.id}/albums", params)
        page = await self.dispatcher.fetch(descriptor, Page[SimplifiedAlbum])
        return self.bind_page(page)

    async def get_top_tracks(self, request: GetArtistTopTracksRequest) -> list[Track]:
        descriptor = RequestDescriptor.get(
            f"artists/{request.id}/top-tracks", [("market", self.market(request.market))]
        )
        envelope = await self.dispatcher.fetch(descriptor, TracksEnvelope)
        return [track for track in envelope.tracks if track is not None]

    async def get_related_artists(self, request: GetRelatedArtistsRequest) -> list[Artist]:
        descriptor = RequestDescriptor.get(f"artists/{request.id}/related-artists")
        envelope = await self.dispatcher.fetch(descriptor, ArtistsEnvelope)
        return [artist for artist in envelope.artists if artist is not None]
