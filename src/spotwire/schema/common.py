"""Shared Pydantic building blocks for Spotify payloads."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _none_as_empty(value: object) -> object:
    return [] if value is None else value


class SpotifyBaseModel(BaseModel):
    """Immutable snapshot of a provider object; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class Image(SpotifyBaseModel):
    url: str
    height: int | None = None
    width: int | None = None


class Followers(SpotifyBaseModel):
    href: str | None = None
    total: int = 0


class Copyright(SpotifyBaseModel):
    text: str
    type: str


class Restrictions(SpotifyBaseModel):
    reason: str


class Snapshot(SpotifyBaseModel):
    snapshot_id: str


# Spotify sends ``null`` instead of ``[]`` for images on some objects.
type ImageList = Annotated[list[Image], BeforeValidator(_none_as_empty)]
type ExternalUrls = dict[str, str]


class SpotifyObject(SpotifyBaseModel):
    """Fields every addressable Spotify object carries."""

    id: str | None = None
    href: str | None = None
    uri: str | None = None
    external_urls: ExternalUrls = Field(default_factory=dict)
