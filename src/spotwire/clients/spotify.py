"""One entry point bundling every resource client over a shared session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from spotwire.dispatch.dispatcher import Dispatcher

from .album import AlbumClient
from .artist import ArtistClient
from .browse import BrowseClient
from .follow import FollowClient
from .library import LibraryClient
from .personalization import PersonalizationClient
from .player import PlayerClient
from .playlist import PlaylistClient
from .search import SearchClient
from .track import TrackClient
from .user import UserClient

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from spotwire.adapters.http_resilience import ResilientClient
    from spotwire.auth.client import TokenRefresher
    from spotwire.config.http_resilience import ResilienceConfig
    from spotwire.config.spotify import ApiConfig


class SpotifyClient:
    """All resource clients sharing one dispatcher.

    A token refresh triggered through any resource is visible to all others.

    >>> async with SpotifyClient(access, refresh) as spotify:
    ...     album = await spotify.albums.get_album(GetAlbumRequest("4aawyAB9vmqN3uQ7FjRGTy"))
    """

    def __init__(
        self,
        access_token: str | None = None,
        refresh_token: str | None = None,
        *,
        dispatcher: Dispatcher | None = None,
        token_refresher: TokenRefresher | None = None,
        config: ApiConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        if dispatcher is None:
            if not access_token or not refresh_token:
                raise ValueError("Either a dispatcher or both access and refresh tokens are required")
            dispatcher = Dispatcher(
                access_token,
                refresh_token,
                token_refresher=token_refresher,
                config=config,
                client_factory=client_factory,
            )
        self.dispatcher = dispatcher
        self.albums = AlbumClient(dispatcher=dispatcher)
        self.artists = ArtistClient(dispatcher=dispatcher)
        self.browse = BrowseClient(dispatcher=dispatcher)
        self.follow = FollowClient(dispatcher=dispatcher)
        self.library = LibraryClient(dispatcher=dispatcher)
        self.personalization = PersonalizationClient(dispatcher=dispatcher)
        self.player = PlayerClient(dispatcher=dispatcher)
        self.playlists = PlaylistClient(dispatcher=dispatcher)
        self.search = SearchClient(dispatcher=dispatcher)
        self.tracks = TrackClient(dispatcher=dispatcher)
        self.users = UserClient(dispatcher=dispatcher)

    async def __aenter__(self) -> SpotifyClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.dispatcher.aclose()
