"""Playlists and their items."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from typing import Literal

from pydantic import Field

from .common import Followers, ImageList, SpotifyBaseModel, SpotifyObject
from .paging import Page
from .show import PlayableItem  # noqa: TC001
from .user import PublicUser


class PlaylistTracksRef(SpotifyBaseModel):
    href: str | None = None
    total: int = 0


class PlaylistTrack(SpotifyBaseModel):
    added_at: datetime | None = None
    added_by: PublicUser | None = None
    is_local: bool = False
    track: PlayableItem | None = None


class SimplifiedPlaylist(SpotifyObject):
    name: str
    description: str | None = None
    collaborative: bool = False
    public: bool | None = None
    owner: PublicUser | None = None
    images: ImageList = Field(default_factory=list)
    snapshot_id: str | None = None
    tracks: PlaylistTracksRef | None = None
    type: Literal["playlist"] = "playlist"


class Playlist(SimplifiedPlaylist):
    tracks: Page[PlaylistTrack] | None = None  # type: ignore[assignment]
    followers: Followers | None = None


class PlaylistPageEnvelope(SpotifyBaseModel):
    playlists: Page[SimplifiedPlaylist]
