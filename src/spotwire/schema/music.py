"""Artists, albums, tracks and audio analysis."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .common import (
    Copyright,
    Followers,
    ImageList,
    Restrictions,
    SpotifyBaseModel,
    SpotifyObject,
)
from .paging import CursorPage, Page


class SimplifiedArtist(SpotifyObject):
    name: str
    type: Literal["artist"] = "artist"


class Artist(SimplifiedArtist):
    genres: list[str] = Field(default_factory=list)
    images: ImageList = Field(default_factory=list)
    followers: Followers | None = None
    popularity: int | None = None


class LinkedTrack(SpotifyObject):
    type: str = "track"


class SimplifiedTrack(SpotifyObject):
    name: str
    artists: list[SimplifiedArtist] = Field(default_factory=list)
    available_markets: list[str] = Field(default_factory=list)
    disc_number: int = 1
    track_number: int = 1
    duration_ms: int = 0
    explicit: bool = False
    is_local: bool = False
    is_playable: bool | None = None
    linked_from: LinkedTrack | None = None
    restrictions: Restrictions | None = None
    preview_url: str | None = None
    type: Literal["track"] = "track"


class SimplifiedAlbum(SpotifyObject):
    name: str
    album_type: str | None = None
    album_group: str | None = None
    total_tracks: int | None = None
    release_date: str | None = None
    release_date_precision: str | None = None
    artists: list[SimplifiedArtist] = Field(default_factory=list)
    available_markets: list[str] = Field(default_factory=list)
    images: ImageList = Field(default_factory=list)
    restrictions: Restrictions | None = None
    type: Literal["album"] = "album"


class Album(SimplifiedAlbum):
    tracks: Page[SimplifiedTrack] | None = None
    copyrights: list[Copyright] = Field(default_factory=list)
    external_ids: dict[str, str] = Field(default_factory=dict)
    genres: list[str] = Field(default_factory=list)
    label: str | None = None
    popularity: int | None = None


class Track(SimplifiedTrack):
    album: SimplifiedAlbum | None = None
    external_ids: dict[str, str] = Field(default_factory=dict)
    popularity: int | None = None


class AudioFeatures(SpotifyBaseModel):
    id: str
    acousticness: float
    danceability: float
    duration_ms: int
    energy: float
    instrumentalness: float
    key: int
    liveness: float
    loudness: float
    mode: int
    speechiness: float
    tempo: float
    time_signature: int
    valence: float
    analysis_url: str | None = None
    track_href: str | None = None
    uri: str | None = None
    type: str = "audio_features"


class TimeInterval(SpotifyBaseModel):
    start: float
    duration: float
    confidence: float = 0.0


class Section(TimeInterval):
    loudness: float = 0.0
    tempo: float = 0.0
    tempo_confidence: float = 0.0
    key: int = -1
    key_confidence: float = 0.0
    mode: int = -1
    mode_confidence: float = 0.0
    time_signature: int = 4
    time_signature_confidence: float = 0.0


class Segment(TimeInterval):
    loudness_start: float = 0.0
    loudness_max: float = 0.0
    loudness_max_time: float = 0.0
    loudness_end: float = 0.0
    pitches: list[float] = Field(default_factory=list)
    timbre: list[float] = Field(default_factory=list)


class AudioAnalysis(SpotifyBaseModel):
    meta: dict[str, object] = Field(default_factory=dict)
    track: dict[str, object] = Field(default_factory=dict)
    bars: list[TimeInterval] = Field(default_factory=list)
    beats: list[TimeInterval] = Field(default_factory=list)
    sections: list[Section] = Field(default_factory=list)
    segments: list[Segment] = Field(default_factory=list)
    tatums: list[TimeInterval] = Field(default_factory=list)


class AlbumsEnvelope(SpotifyBaseModel):
    albums: list[Album | None] = Field(default_factory=list)


class ArtistsEnvelope(SpotifyBaseModel):
    artists: list[Artist | None] = Field(default_factory=list)


class TracksEnvelope(SpotifyBaseModel):
    tracks: list[Track | None] = Field(default_factory=list)


class AudioFeaturesEnvelope(SpotifyBaseModel):
    audio_features: list[AudioFeatures | None] = Field(default_factory=list)


class AlbumPageEnvelope(SpotifyBaseModel):
    albums: Page[SimplifiedAlbum]


class FollowedArtistsEnvelope(SpotifyBaseModel):
    artists: CursorPage[Artist]
