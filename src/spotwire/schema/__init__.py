"""Pydantic models for Spotify Web API payloads."""

from __future__ import annotations

from .browse import (
    Category,
    CategoryPageEnvelope,
    FeaturedPlaylists,
    GenreSeeds,
    RecommendationSeed,
    Recommendations,
)
from .common import Copyright, Followers, Image, Restrictions, Snapshot, SpotifyBaseModel
from .library import SavedAlbum, SavedShow, SavedTrack
from .music import (
    Album,
    AlbumPageEnvelope,
    AlbumsEnvelope,
    Artist,
    ArtistsEnvelope,
    AudioAnalysis,
    AudioFeatures,
    AudioFeaturesEnvelope,
    FollowedArtistsEnvelope,
    SimplifiedAlbum,
    SimplifiedArtist,
    SimplifiedTrack,
    Track,
    TracksEnvelope,
)
from .paging import CursorPage, Cursors, LinkedPage, Page
from .player import (
    Actions,
    CurrentlyPlaying,
    CurrentlyPlayingContext,
    Device,
    DevicesEnvelope,
    PlaybackContext,
    PlayHistory,
)
from .playlist import (
    Playlist,
    PlaylistPageEnvelope,
    PlaylistTrack,
    PlaylistTracksRef,
    SimplifiedPlaylist,
)
from .search import SearchResults
from .show import Episode, PlayableItem, SimplifiedEpisode, SimplifiedShow
from .user import ExplicitContent, PrivateUser, PublicUser

__all__ = [
    "Actions",
    "Album",
    "AlbumPageEnvelope",
    "AlbumsEnvelope",
    "Artist",
    "ArtistsEnvelope",
    "AudioAnalysis",
    "AudioFeatures",
    "AudioFeaturesEnvelope",
    "Category",
    "CategoryPageEnvelope",
    "Copyright",
    "CurrentlyPlaying",
    "CurrentlyPlayingContext",
    "CursorPage",
    "Cursors",
    "Device",
    "DevicesEnvelope",
    "Episode",
    "ExplicitContent",
    "FeaturedPlaylists",
    "FollowedArtistsEnvelope",
    "Followers",
    "GenreSeeds",
    "Image",
    "LinkedPage",
    "Page",
    "PlayHistory",
    "PlayableItem",
    "PlaybackContext",
    "Playlist",
    "PlaylistPageEnvelope",
    "PlaylistTrack",
    "PlaylistTracksRef",
    "PrivateUser",
    "PublicUser",
    "RecommendationSeed",
    "Recommendations",
    "Restrictions",
    "SavedAlbum",
    "SavedShow",
    "SavedTrack",
    "SearchResults",
    "SimplifiedAlbum",
    "SimplifiedArtist",
    "SimplifiedEpisode",
    "SimplifiedPlaylist",
    "SimplifiedShow",
    "SimplifiedTrack",
    "Snapshot",
    "SpotifyBaseModel",
    "Track",
    "TracksEnvelope",
]
