"""Playback state, devices and listening history."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import Field

from .common import ExternalUrls, SpotifyBaseModel
from .music import Track
from .show import PlayableItem  # noqa: TC001


class Device(SpotifyBaseModel):
    id: str | None = None
    name: str
    type: str
    is_active: bool = False
    is_private_session: bool = False
    is_restricted: bool = False
    volume_percent: int | None = None
    supports_volume: bool = True


class DevicesEnvelope(SpotifyBaseModel):
    devices: list[Device] = Field(default_factory=list)


class PlaybackContext(SpotifyBaseModel):
    type: str
    uri: str
    href: str | None = None
    external_urls: ExternalUrls = Field(default_factory=dict)


class Actions(SpotifyBaseModel):
    disallows: dict[str, bool] = Field(default_factory=dict)


class CurrentlyPlaying(SpotifyBaseModel):
    context: PlaybackContext | None = None
    timestamp: int = 0
    progress_ms: int | None = None
    is_playing: bool = False
    item: PlayableItem | None = None
    currently_playing_type: str = "unknown"
    actions: Actions | None = None


class CurrentlyPlayingContext(CurrentlyPlaying):
    device: Device | None = None
    repeat_state: str = "off"
    shuffle_state: bool = False


class PlayHistory(SpotifyBaseModel):
    track: Track
    played_at: datetime
    context: PlaybackContext | None = None
