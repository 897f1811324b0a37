"""Browse categories, featured content and recommendations."""

from __future__ import annotations

from pydantic import Field

from .common import ImageList, SpotifyBaseModel
from .music import Track
from .paging import Page
from .playlist import SimplifiedPlaylist


class Category(SpotifyBaseModel):
    id: str
    name: str
    href: str | None = None
    icons: ImageList = Field(default_factory=list)


class CategoryPageEnvelope(SpotifyBaseModel):
    categories: Page[Category]


class FeaturedPlaylists(SpotifyBaseModel):
    message: str | None = None
    playlists: Page[SimplifiedPlaylist]


class RecommendationSeed(SpotifyBaseModel):
    id: str
    type: str
    href: str | None = None
    initial_pool_size: int | None = Field(default=None, alias="initialPoolSize")
    after_filtering_size: int | None = Field(default=None, alias="afterFilteringSize")
    after_relinking_size: int | None = Field(default=None, alias="afterRelinkingSize")


class Recommendations(SpotifyBaseModel):
    seeds: list[RecommendationSeed] = Field(default_factory=list)
    tracks: list[Track] = Field(default_factory=list)


class GenreSeeds(SpotifyBaseModel):
    genres: list[str] = Field(default_factory=list)
