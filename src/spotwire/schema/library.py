"""Items saved in the current user's library."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from .common import SpotifyBaseModel
from .music import Album, Track
from .show import SimplifiedShow


class SavedTrack(SpotifyBaseModel):
    added_at: datetime | None = None
    track: Track


class SavedAlbum(SpotifyBaseModel):
    added_at: datetime | None = None
    album: Album


class SavedShow(SpotifyBaseModel):
    added_at: datetime | None = None
    show: SimplifiedShow
