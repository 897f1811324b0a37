"""Search response shapes."""

from __future__ import annotations

from .common import SpotifyBaseModel
from .music import Artist, SimplifiedAlbum, Track
from .paging import Page
from .playlist import SimplifiedPlaylist
from .show import SimplifiedEpisode, SimplifiedShow


class SearchResults(SpotifyBaseModel):
    """One page per requested type; types not requested stay ``None``."""

    albums: Page[SimplifiedAlbum] | None = None
    artists: Page[Artist] | None = None
    playlists: Page[SimplifiedPlaylist] | None = None
    tracks: Page[Track] | None = None
    shows: Page[SimplifiedShow] | None = None
    episodes: Page[SimplifiedEpisode] | None = None
