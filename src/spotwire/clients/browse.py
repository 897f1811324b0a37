"""Browse categories, featured content and recommendations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Final, Self

from spotwire.dispatch.request import RequestDescriptor
from spotwire.schema import (
    AlbumPageEnvelope,
    Category,
    CategoryPageEnvelope,
    FeaturedPlaylists,
    GenreSeeds,
    Page,
    Recommendations,
    SimplifiedAlbum,
    PlaylistPageEnvelope,
    SimplifiedPlaylist,
)

from .base import ResourceClient, paging_params

if TYPE_CHECKING:
    from datetime import datetime

    from spotwire.dispatch.request import QueryValue

MAX_RECOMMENDATION_SEEDS: Final[int] = 5
MAX_RECOMMENDATIONS_LIMIT: Final[int] = 100
FEATURED_TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S"


class TrackAttribute(StrEnum):
    ACOUSTICNESS = "acousticness"
    DANCEABILITY = "danceability"
    DURATION_MS = "duration_ms"
    ENERGY = "energy"
    INSTRUMENTALNESS = "instrumentalness"
    KEY = "key"
    LIVENESS = "liveness"
    LOUDNESS = "loudness"
    MODE = "mode"
    POPULARITY = "popularity"
    SPEECHINESS = "speechiness"
    TEMPO = "tempo"
    TIME_SIGNATURE = "time_signature"
    VALENCE = "valence"


@dataclass(slots=True)
class RecommendationFilter:
    """Seeds and tunable attributes for ``get_recommendations``.

    At most five seeds are kept across artists, genres and tracks; later
    seeds are ignored. Seeds of one kind are sent comma-joined.
    """

    seeds: list[tuple[str, str]] = field(default_factory=list)
    attributes: dict[str, float | int] = field(default_factory=dict)

    def artist(self, artist_id: str) -> Self:
        return self._seed("seed_artists", artist_id)

    def genre(self, genre: str) -> Self:
        return self._seed("seed_genres", genre)

    def track(self, track_id: str) -> Self:
        return self._seed("seed_tracks", track_id)

    def minimum(self, attribute: TrackAttribute, value: float) -> Self:
        self.attributes[f"min_{attribute}"] = value
        return self

    def maximum(self, attribute: TrackAttribute, value: float) -> Self:
        self.attributes[f"max_{attribute}"] = value
        return self

    def target(self, attribute: TrackAttribute, value: float) -> Self:
        self.attributes[f"target_{attribute}"] = value
        return self

    def to_params(self) -> list[tuple[str, QueryValue]]:
        grouped: dict[str, list[str]] = {}
        for kind, value in self.seeds:
            grouped.setdefault(kind, []).append(value)
        params: list[tuple[str, QueryValue]] = [
            (kind, ",".join(values)) for kind, values in grouped.items()
        ]
        params.extend(self.attributes.items())
        return params

    def _seed(self, kind: str, value: str) -> Self:
        if len(self.seeds) < MAX_RECOMMENDATION_SEEDS:
            self.seeds.append((kind, value))
        return self


@dataclass(frozen=True, slots=True)
class GetCategoryRequest:
    id: str
    country: str | None = None
    locale: str | None = None


@dataclass(frozen=True, slots=True)
class GetCategoriesRequest:
    country: str | None = None
    locale: str | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass(frozen=True, slots=True)
class GetCategoryPlaylistsRequest:
    id: str
    country: str | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass(frozen=True, slots=True)
class GetFeaturedPlaylistsRequest:
    country: str | None = None
    locale: str | None = None
    timestamp: datetime | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass(frozen=True, slots=True)
class GetNewReleasesRequest:
    country: str | None = None
    limit: int | None = None
    offset: int | None = None


@dataclass(frozen=True, slots=True)
class GetRecommendationsRequest:
    filter: RecommendationFilter
    limit: int | None = None
    market: str | None = None


def _categories_parser(payload: object) -> Page[Category]:
    return CategoryPageEnvelope.model_validate(payload).categories


def _playlists_parser(payload: object) -> Page[SimplifiedPlaylist]:
    return PlaylistPageEnvelope.model_validate(payload).playlists


def _featured_parser(payload: object) -> Page[SimplifiedPlaylist]:
    return FeaturedPlaylists.model_validate(payload).playlists


def _new_releases_parser(payload: object) -> Page[SimplifiedAlbum]:
    return AlbumPageEnvelope.model_validate(payload).albums


class BrowseClient(ResourceClient):
    async def get_category(self, request: GetCategoryRequest) -> Category:
        descriptor = RequestDescriptor.get(
            f"browse/categories/{request.id}",
            [("country", request.country), ("locale", request.locale)],
        )
        return await self.dispatcher.fetch(descriptor, Category)

    async def get_categories(self, request: GetCategoriesRequest | None = None) -> Page[Category]:
        request = request or GetCategoriesRequest()
        descriptor = RequestDescriptor.get(
            "browse/categories",
            [
                *paging_params(request.limit, request.offset),
                ("country", request.country),
                ("locale", request.locale),
            ],
        )
        envelope = await self.dispatcher.fetch(descriptor, CategoryPageEnvelope)
        return self.bind_page(envelope.categories, _categories_parser)

    async def get_category_playlists(self, request: GetCategoryPlaylistsRequest) -> Page[SimplifiedPlaylist]:
        descriptor = RequestDescriptor.get(
            f"browse/categories/{request.id}/playlists",
            [*paging_params(request.limit, request.offset), ("country", request.country)],
        )
        envelope = await self.dispatcher.fetch(descriptor, PlaylistPageEnvelope)
        return self.bind_page(envelope.playlists, _playlists_parser)

    async def get_featured_playlists(
        self, request: GetFeaturedPlaylistsRequest | None = None
    ) -> FeaturedPlaylists:
        request = request or GetFeaturedPlaylistsRequest()
        timestamp = request.timestamp.strftime(FEATURED_TIMESTAMP_FORMAT) if request.timestamp else None
        descriptor = RequestDescriptor.get(
            "browse/featured-playlists",
            [
                *paging_params(request.limit, request.offset),
                ("country", request.country),
                ("locale", request.locale),
                ("timestamp", timestamp),
            ],
        )
        featured = await self.dispatcher.fetch(descriptor, FeaturedPlaylists)
        self.bind_page(featured.playlists, _featured_parser)
        return featured

    async def get_new_releases(self, request: GetNewReleasesRequest | None = None) -> Page[SimplifiedAlbum]:
        request = request or GetNewReleasesRequest()
        descriptor = RequestDescriptor.get(
            "browse/new-releases",
            [*paging_params(request.limit, request.offset), ("country", request.country)],
        )
        envelope = await self.dispatcher.fetch(descriptor, AlbumPageEnvelope)
        return self.bind_page(envelope.albums, _new_releases_parser)

    async def get_recommendations(self, request: GetRecommendationsRequest) -> Recommendations:
        if not request.filter.seeds:
            raise ValueError("Recommendations need at least one artist, genre or track seed")
        limit, _ = paging_params(request.limit, None, max_limit=MAX_RECOMMENDATIONS_LIMIT)
        descriptor = RequestDescriptor.get(
            "recommendations",
            [limit, ("market", self.market(request.market)), *request.filter.to_params()],
        )
        return await self.dispatcher.fetch(descriptor, Recommendations)

    async def get_available_genre_seeds(self) -> list[str]:
        seeds = await self.dispatcher.fetch(
            RequestDescriptor.get("recommendations/available-genre-seeds"), GenreSeeds
        )
        return seeds.genres
