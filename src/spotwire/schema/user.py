"""Spotify user profiles."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .common import Followers, ImageList, SpotifyBaseModel, SpotifyObject


class PublicUser(SpotifyObject):
    display_name: str | None = None
    followers: Followers | None = None
    images: ImageList = Field(default_factory=list)
    type: Literal["user"] = "user"


class ExplicitContent(SpotifyBaseModel):
    filter_enabled: bool = False
    filter_locked: bool = False


class PrivateUser(PublicUser):
    country: str | None = None
    email: str | None = None
    product: str | None = None
    birthdate: str | None = None
    explicit_content: ExplicitContent | None = None
