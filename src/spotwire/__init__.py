"""Asynchronous, typed client for the Spotify Web API."""

from __future__ import annotations

from importlib import metadata

from .clients import (
    AlbumClient,
    ArtistClient,
    BrowseClient,
    FollowClient,
    LibraryClient,
    PersonalizationClient,
    PlayerClient,
    PlaylistClient,
    SearchClient,
    SpotifyClient,
    TrackClient,
    UserClient,
)
from .dispatch import (
    Dispatcher,
    PageNotBoundError,
    ReauthenticationRequiredError,
    RequestDescriptor,
    SpotifyError,
    SpotifyStatusError,
    TokenRefreshError,
)
from .schema import CursorPage, Page

try:
    __version__ = metadata.version("spotwire")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "AlbumClient",
    "ArtistClient",
    "BrowseClient",
    "CursorPage",
    "Dispatcher",
    "FollowClient",
    "LibraryClient",
    "Page",
    "PageNotBoundError",
    "PersonalizationClient",
    "PlayerClient",
    "PlaylistClient",
    "ReauthenticationRequiredError",
    "RequestDescriptor",
    "SearchClient",
    "SpotifyClient",
    "SpotifyError",
    "SpotifyStatusError",
    "TokenRefreshError",
    "TrackClient",
    "UserClient",
    "__version__",
]
