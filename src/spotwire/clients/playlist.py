"""Playlist endpoints, including the batched item mutations."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import TypeAdapter

from spotwire.dispatch.chunking import PLAYLIST_ITEMS_PER_REQUEST, split_chunks
from spotwire.dispatch.request import RequestDescriptor
from spotwire.schema import (
    Image,
    Page,
    Playlist,
    PlaylistTrack,
    SimplifiedPlaylist,
    Snapshot,
)

from .base import ResourceClient, paging_params

if TYPE_CHECKING:
    from collections.abc import Sequence

log = getLogger(__name__)

MAX_PLAYLIST_ITEMS_LIMIT = 100

_images_adapter = TypeAdapter(list[Image])


@dataclass(frozen=True, slots=True)
class GetPlaylistRequest:
    id: str
    market: str | None = None
    fields: str | None = None


@dataclass(frozen=True, slots=True)
class GetPlaylistsRequest:
    """List the current user's playlists, or ``user_id``'s when given."""

    user_id: str | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass(frozen=True, slots=True)
class GetPlaylistItemsRequest:
    id: str
    limit: int | None = None
    offset: int | None = None
    market: str | None = None


@dataclass(frozen=True, slots=True)
class CreatePlaylistRequest:
    user_id: str
    name: str
    public: bool | None = None
    collaborative: bool | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class ChangePlaylistDetailsRequest:
    id: str
    name: str | None = None
    public: bool | None = None
    collaborative: bool | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class AddItemsRequest:
    id: str
    uris: Sequence[str]
    position: int | None = None


@dataclass(frozen=True, slots=True)
class RemoveItemsRequest:
    id: str
    uris: Sequence[str]
    snapshot_id: str | None = None


@dataclass(frozen=True, slots=True)
class ReorderItemsRequest:
    id: str
    range_start: int
    insert_before: int
    range_length: int = 1
    snapshot_id: str | None = None


@dataclass(frozen=True, slots=True)
class ReplaceItemsRequest:
    id: str
    uris: Sequence[str]


def _optional_fields(**fields: object) -> dict[str, object]:
    return {key: value for key, value in fields.items() if value is not None}


class PlaylistClient(ResourceClient):
    async def get_playlist(self, request: GetPlaylistRequest) -> Playlist:
        descriptor = RequestDescriptor.get(
            f"playlists/{request.id}",
            [("market", self.market(request.market)), ("fields", request.fields)],
        )
        playlist = await self.dispatcher.fetch(descriptor, Playlist)
        if playlist.tracks is not None:
            self.bind_page(playlist.tracks)
        return playlist

    async def get_playlists(self, request: GetPlaylistsRequest | None = None) -> Page[SimplifiedPlaylist]:
        request = request or GetPlaylistsRequest()
        url = "me/playlists" if request.user_id is None else f"users/{request.user_id}/playlists"
        descriptor = RequestDescriptor.get(url, paging_params(request.limit, request.offset))
        page = await self.dispatcher.fetch(descriptor, Page[SimplifiedPlaylist])
        return self.bind_page(page)

    async def get_playlist_items(self, request: GetPlaylistItemsRequest) -> Page[PlaylistTrack]:
        descriptor = RequestDescriptor.get(
            f"playlists/{request.id}/tracks",
            [
                *paging_params(request.limit, request.offset, max_limit=MAX_PLAYLIST_ITEMS_LIMIT),
                ("market", self.market(request.market)),
            ],
        )
        page = await self.dispatcher.fetch(descriptor, Page[PlaylistTrack])
        return self.bind_page(page)

    async def create_playlist(self, request: CreatePlaylistRequest) -> Playlist:
        body = {
            "name": request.name,
            **_optional_fields(
                public=request.public,
                collaborative=request.collaborative,
                description=request.description,
            ),
        }
        descriptor = RequestDescriptor.build("POST", f"users/{request.user_id}/playlists", json=body)
        playlist = await self.dispatcher.fetch(descriptor, Playlist)
        log.info(f"Created playlist {playlist.id} for user {request.user_id}")
        return playlist

    async def change_details(self, request: ChangePlaylistDetailsRequest) -> None:
        body = _optional_fields(
            name=request.name,
            public=request.public,
            collaborative=request.collaborative,
            description=request.description,
        )
        if not body:
            raise ValueError("At least one playlist detail must be changed")
        await self.dispatcher.send(RequestDescriptor.build("PUT", f"playlists/{request.id}", json=body))

    async def add_items(self, request: AddItemsRequest) -> list[Snapshot]:
        """Add items 100 at a time, one snapshot per request.

        With an explicit ``position`` every following chunk is inserted right
        after the previous one so the input order survives in the playlist.
        """

        snapshots: list[Snapshot] = []
        position = request.position
        for chunk in split_chunks(request.uris, PLAYLIST_ITEMS_PER_REQUEST):
            body: dict[str, object] = {"uris": chunk}
            if position is not None:
                body["position"] = position
                position += len(chunk)
            descriptor = RequestDescriptor.build("POST", f"playlists/{request.id}/tracks", json=body)
            snapshots.append(await self.dispatcher.fetch(descriptor, Snapshot))
        return snapshots

    async def remove_items(self, request: RemoveItemsRequest) -> list[Snapshot]:
        snapshots: list[Snapshot] = []
        snapshot_id = request.snapshot_id
        for chunk in split_chunks(request.uris, PLAYLIST_ITEMS_PER_REQUEST):
            body: dict[str, object] = {"tracks": [{"uri": uri} for uri in chunk]}
            # only the first chunk can refer to the caller's snapshot
            if snapshot_id is not None:
                body["snapshot_id"] = snapshot_id
                snapshot_id = None
            descriptor = RequestDescriptor.build("DELETE", f"playlists/{request.id}/tracks", json=body)
            snapshots.append(await self.dispatcher.fetch(descriptor, Snapshot))
        return snapshots

    async def reorder_items(self, request: ReorderItemsRequest) -> Snapshot:
        body = {
            "range_start": request.range_start,
            "range_length": request.range_length,
            "insert_before": request.insert_before,
            **_optional_fields(snapshot_id=request.snapshot_id),
        }
        descriptor = RequestDescriptor.build("PUT", f"playlists/{request.id}/tracks", json=body)
        return await self.dispatcher.fetch(descriptor, Snapshot)

    async def replace_items(self, request: ReplaceItemsRequest) -> list[Snapshot]:
        """Replace the playlist with ``uris``.

        The first 100 items replace the current contents and the remainder is
        appended in order. An empty ``uris`` clears the playlist.
        """

        chunks = split_chunks(request.uris, PLAYLIST_ITEMS_PER_REQUEST) or [[]]
        url = f"playlists/{request.id}/tracks"
        snapshots = [
            await self.dispatcher.fetch(
                RequestDescriptor.build("PUT", url, json={"uris": chunks[0]}), Snapshot
            )
        ]
        for chunk in chunks[1:]:
            descriptor = RequestDescriptor.build("POST", url, json={"uris": chunk})
            snapshots.append(await self.dispatcher.fetch(descriptor, Snapshot))
        return snapshots

    async def get_cover_images(self, playlist_id: str) -> list[Image]:
        payload = await self.dispatcher.get_json(RequestDescriptor.get(f"playlists/{playlist_id}/images"))
        return _images_adapter.validate_python(payload or [])
