"""Podcast shows and episodes, and the track-or-episode union."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Discriminator, Field, Tag

from .common import ImageList, Restrictions, SpotifyBaseModel, SpotifyObject
from .music import Track


class SimplifiedShow(SpotifyObject):
    name: str
    description: str = ""
    publisher: str | None = None
    media_type: str | None = None
    languages: list[str] = Field(default_factory=list)
    available_markets: list[str] = Field(default_factory=list)
    explicit: bool = False
    images: ImageList = Field(default_factory=list)
    total_episodes: int | None = None
    type: Literal["show"] = "show"


class SimplifiedEpisode(SpotifyObject):
    name: str
    description: str = ""
    duration_ms: int = 0
    explicit: bool = False
    images: ImageList = Field(default_factory=list)
    is_playable: bool | None = None
    language: str | None = None
    release_date: str | None = None
    release_date_precision: str | None = None
    restrictions: Restrictions | None = None
    type: Literal["episode"] = "episode"


class Episode(SimplifiedEpisode):
    show: SimplifiedShow | None = None


def _playable_type(value: object) -> str:
    if isinstance(value, dict):
        return "episode" if value.get("type") == "episode" else "track"
    return "episode" if isinstance(value, Episode) else "track"


type PlayableItem = Annotated[
    Annotated[Track, Tag("track")] | Annotated[Episode, Tag("episode")],
    Discriminator(_playable_type),
]
