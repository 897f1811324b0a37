"""Per-resource Spotify Web API clients."""

from __future__ import annotations

from .album import AlbumClient, GetAlbumRequest, GetAlbumsRequest, GetAlbumTracksRequest
from .artist import (
    AlbumGroup,
    ArtistClient,
    GetArtistAlbumsRequest,
    GetArtistRequest,
    GetArtistsRequest,
    GetArtistTopTracksRequest,
    GetRelatedArtistsRequest,
)
from .base import ResourceClient
from .browse import (
    BrowseClient,
    GetCategoriesRequest,
    GetCategoryPlaylistsRequest,
    GetCategoryRequest,
    GetFeaturedPlaylistsRequest,
    GetNewReleasesRequest,
    GetRecommendationsRequest,
    RecommendationFilter,
    TrackAttribute,
)
from .follow import FollowClient, FollowType, GetFollowedArtistsRequest
from .library import GetSavedRequest, LibraryClient
from .personalization import GetTopItemsRequest, PersonalizationClient, TimeRange
from .player import GetRecentlyPlayedRequest, PlayerClient, RepeatState, StartRequest
from .playlist import (
    AddItemsRequest,
    ChangePlaylistDetailsRequest,
    CreatePlaylistRequest,
    GetPlaylistItemsRequest,
    GetPlaylistRequest,
    GetPlaylistsRequest,
    PlaylistClient,
    RemoveItemsRequest,
    ReorderItemsRequest,
    ReplaceItemsRequest,
)
from .search import SearchClient, SearchQuery, SearchRequest, SearchType
from .spotify import SpotifyClient
from .track import GetTrackRequest, GetTracksRequest, TrackClient
from .user import GetUserRequest, UserClient

__all__ = [
    "AddItemsRequest",
    "AlbumClient",
    "AlbumGroup",
    "ArtistClient",
    "BrowseClient",
    "ChangePlaylistDetailsRequest",
    "CreatePlaylistRequest",
    "FollowClient",
    "FollowType",
    "GetAlbumRequest",
    "GetAlbumTracksRequest",
    "GetAlbumsRequest",
    "GetArtistAlbumsRequest",
    "GetArtistRequest",
    "GetArtistTopTracksRequest",
    "GetArtistsRequest",
    "GetCategoriesRequest",
    "GetCategoryPlaylistsRequest",
    "GetCategoryRequest",
    "GetFeaturedPlaylistsRequest",
    "GetFollowedArtistsRequest",
    "GetNewReleasesRequest",
    "GetPlaylistItemsRequest",
    "GetPlaylistRequest",
    "GetPlaylistsRequest",
    "GetRecentlyPlayedRequest",
    "GetRecommendationsRequest",
    "GetRelatedArtistsRequest",
    "GetSavedRequest",
    "GetTopItemsRequest",
    "GetTrackRequest",
    "GetTracksRequest",
    "GetUserRequest",
    "LibraryClient",
    "PersonalizationClient",
    "PlayerClient",
    "PlaylistClient",
    "RecommendationFilter",
    "RemoveItemsRequest",
    "ReorderItemsRequest",
    "RepeatState",
    "ReplaceItemsRequest",
    "ResourceClient",
    "SearchClient",
    "SearchQuery",
    "SearchRequest",
    "SearchType",
    "SpotifyClient",
    "StartRequest",
    "TimeRange",
    "TrackAttribute",
    "TrackClient",
    "UserClient",
]
