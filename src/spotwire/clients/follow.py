"""Follow relationships between the current user, artists, users and playlists."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import TypeAdapter

from spotwire.dispatch.chunking import FOLLOW_IDS_PER_REQUEST, PLAYLIST_FOLLOWER_CHECKS_PER_REQUEST
from spotwire.dispatch.request import RequestDescriptor
from spotwire.schema import Artist, CursorPage, FollowedArtistsEnvelope

from .base import MAX_PAGE_LIMIT, ResourceClient, join_ids

if TYPE_CHECKING:
    from collections.abc import Sequence

_flags_adapter = TypeAdapter(list[bool])


class FollowType(StrEnum):
    ARTIST = "artist"
    USER = "user"


@dataclass(frozen=True, slots=True)
class GetFollowedArtistsRequest:
    limit: int | None = None
    after: str | None = None


def _followed_artists(payload: object) -> CursorPage[Artist]:
    return FollowedArtistsEnvelope.model_validate(payload).artists


class FollowClient(ResourceClient):
    async def follow_artists(self, artist_ids: Sequence[str]) -> None:
        await self._modify("PUT", FollowType.ARTIST, artist_ids)

    async def follow_users(self, user_ids: Sequence[str]) -> None:
        await self._modify("PUT", FollowType.USER, user_ids)

    async def unfollow_artists(self, artist_ids: Sequence[str]) -> None:
        await self._modify("DELETE", FollowType.ARTIST, artist_ids)

    async def unfollow_users(self, user_ids: Sequence[str]) -> None:
        await self._modify("DELETE", FollowType.USER, user_ids)

    async def is_following_artists(self, artist_ids: Sequence[str]) -> list[bool]:
        return await self._contains(FollowType.ARTIST, artist_ids)

    async def is_following_users(self, user_ids: Sequence[str]) -> list[bool]:
        return await self._contains(FollowType.USER, user_ids)

    async def follow_playlist(self, playlist_id: str, *, public: bool = True) -> None:
        await self.dispatcher.send(
            RequestDescriptor.build("PUT", f"playlists/{playlist_id}/followers", json={"public": public})
        )

    async def unfollow_playlist(self, playlist_id: str) -> None:
        await self.dispatcher.send(RequestDescriptor.build("DELETE", f"playlists/{playlist_id}/followers"))

    async def are_users_following_playlist(self, playlist_id: str, user_ids: Sequence[str]) -> list[bool]:
        async def fetch(chunk: list[str]) -> list[bool]:
            descriptor = RequestDescriptor.get(
                f"playlists/{playlist_id}/followers/contains", [("ids", join_ids(chunk))]
            )
            return _flags_adapter.validate_python(await self.dispatcher.get_json(descriptor))

        return await self.chunked(user_ids, PLAYLIST_FOLLOWER_CHECKS_PER_REQUEST, fetch)

    async def get_followed_artists(self, request: GetFollowedArtistsRequest | None = None) -> CursorPage[Artist]:
        request = request or GetFollowedArtistsRequest()
        limit = request.limit if request.limit is not None and 1 <= request.limit <= MAX_PAGE_LIMIT else 20
        descriptor = RequestDescriptor.get(
            "me/following",
            [("type", FollowType.ARTIST), ("limit", limit), ("after", request.after)],
        )
        page = _followed_artists(await self.dispatcher.get_json(descriptor))
        return self.bind_page(page, _followed_artists)

    async def _modify(self, method: str, kind: FollowType, ids: Sequence[str]) -> None:
        async def send(chunk: list[str]) -> list[None]:
            descriptor = RequestDescriptor.build(
                method, "me/following", [("type", kind), ("ids", join_ids(chunk))]
            )
            await self.dispatcher.send(descriptor)
            return []

        await self.chunked(ids, FOLLOW_IDS_PER_REQUEST, send)

    async def _contains(self, kind: FollowType, ids: Sequence[str]) -> list[bool]:
        async def fetch(chunk: list[str]) -> list[bool]:
            descriptor = RequestDescriptor.get(
                "me/following/contains", [("type", kind), ("ids", join_ids(chunk))]
            )
            return _flags_adapter.validate_python(await self.dispatcher.get_json(descriptor))

        return await self.chunked(ids, FOLLOW_IDS_PER_REQUEST, fetch)
