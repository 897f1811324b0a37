from __future__ import annotations

import asyncio

import httpx
import pytest

from spotwire.clients import (
    AlbumClient,
    AlbumGroup,
    ArtistClient,
    GetAlbumRequest,
    GetAlbumsRequest,
    GetAlbumTracksRequest,
    GetArtistAlbumsRequest,
    GetArtistsRequest,
    GetArtistTopTracksRequest,
    GetTracksRequest,
    GetUserRequest,
    TrackClient,
    UserClient,
)
from spotwire.clients.artist import format_album_groups
from tests.helpers.payloads import API, artist, page, simplified_album, track
from tests.helpers.spotify_api import api_config, endpoint, make_dispatcher


def test_resource_client_requires_tokens_or_dispatcher() -> None:
    with pytest.raises(ValueError, match="dispatcher"):
        AlbumClient()


def test_get_album_defaults_market_and_binds_track_page() -> None:
    requests: list[httpx.Request] = []
    second_page = page([track("t3")], offset=2, previous=f"{API}albums/al1/tracks?offset=0")

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if endpoint(request) == "albums/al1":
            tracks = page([track("t1"), track("t2")], next=f"{API}albums/al1/tracks?offset=2")
            return httpx.Response(200, json={**simplified_album("al1"), "tracks": tracks})
        return httpx.Response(200, json=second_page)

    client = AlbumClient(dispatcher=make_dispatcher(handler))

    async def run() -> list[str]:
        album = await client.get_album(GetAlbumRequest("al1"))
        assert album.tracks is not None
        return [item.id or "" for item in await album.tracks.all_items()]

    assert asyncio.run(run()) == ["t1", "t2", "t3"]
    assert requests[0].url.params["market"] == "from_token"


def test_configured_market_is_used_unless_overridden() -> None:
    markets: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        markets.append(request.url.params["market"])
        return httpx.Response(200, json=simplified_album("al1"))

    client = AlbumClient(dispatcher=make_dispatcher(handler, config=api_config(market="DE")))

    asyncio.run(client.get_album(GetAlbumRequest("al1")))
    asyncio.run(client.get_album(GetAlbumRequest("al1", market="SE")))

    assert markets == ["DE", "SE"]


def test_get_albums_chunks_by_twenty_and_keeps_order() -> None:
    batches: list[list[str]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        ids = request.url.params["ids"].split(",")
        batches.append(ids)
        return httpx.Response(200, json={"albums": [simplified_album(album_id) for album_id in ids]})

    ids = [f"al{index}" for index in range(45)]
    client = AlbumClient(dispatcher=make_dispatcher(handler))

    albums = asyncio.run(client.get_albums(GetAlbumsRequest(ids)))

    assert [len(batch) for batch in batches] == [20, 20, 5]
    assert [album.id for album in albums if album] == ids


def test_get_albums_with_empty_ids_sends_nothing() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    client = AlbumClient(dispatcher=make_dispatcher(handler))

    assert asyncio.run(client.get_albums(GetAlbumsRequest([]))) == []


def test_get_album_tracks_falls_back_to_default_limit() -> None:
    params: list[httpx.QueryParams] = []

    def handler(request: httpx.Request) -> httpx.Response:
        params.append(request.url.params)
        return httpx.Response(200, json=page([track()]))

    client = AlbumClient(dispatcher=make_dispatcher(handler))

    asyncio.run(client.get_album_tracks(GetAlbumTracksRequest("al1", limit=500, offset=10)))

    assert params[0]["limit"] == "20"
    assert params[0]["offset"] == "10"


def test_album_groups_are_deduplicated_in_declaration_order() -> None:
    groups = [AlbumGroup.COMPILATION, AlbumGroup.ALBUM, AlbumGroup.COMPILATION, AlbumGroup.SINGLE]

    assert format_album_groups(groups) == "album,single,compilation"


def test_get_artist_albums_sends_include_groups() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=page([simplified_album()]))

    client = ArtistClient(dispatcher=make_dispatcher(handler))
    request = GetArtistAlbumsRequest("ar1", include_groups=[AlbumGroup.SINGLE, AlbumGroup.ALBUM])

    albums = asyncio.run(client.get_artist_albums(request))

    assert endpoint(seen[0]) == "artists/ar1/albums"
    assert seen[0].url.params["include_groups"] == "album,single"
    assert albums.is_bound


def test_get_artists_and_top_tracks() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        path = endpoint(request)
        if path == "artists":
            ids = request.url.params["ids"].split(",")
            return httpx.Response(200, json={"artists": [artist(artist_id) for artist_id in ids]})
        assert path == "artists/ar1/top-tracks"
        assert request.url.params["market"] == "US"
        return httpx.Response(200, json={"tracks": [track("t1"), track("t2")]})

    client = ArtistClient(dispatcher=make_dispatcher(handler))

    artists = asyncio.run(client.get_artists(GetArtistsRequest(["ar1", "ar2"])))
    top = asyncio.run(client.get_top_tracks(GetArtistTopTracksRequest("ar1", market="US")))

    assert [item.id for item in artists if item] == ["ar1", "ar2"]
    assert [item.id for item in top] == ["t1", "t2"]


def test_get_tracks_preserves_duplicates_across_batches() -> None:
    batches: list[list[str]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        ids = request.url.params["ids"].split(",")
        batches.append(ids)
        return httpx.Response(200, json={"tracks": [track(track_id) for track_id in ids]})

    ids = ["t1", "t2"] * 65
    client = TrackClient(dispatcher=make_dispatcher(handler))

    tracks = asyncio.run(client.get_tracks(GetTracksRequest(ids)))

    assert [len(batch) for batch in batches] == [50, 50, 30]
    assert [item.id for item in tracks if item] == ids


def test_get_audio_features_chunks_by_hundred() -> None:
    batches: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        ids = request.url.params["ids"].split(",")
        batches.append(len(ids))
        return httpx.Response(200, json={"audio_features": [None for _ in ids]})

    client = TrackClient(dispatcher=make_dispatcher(handler))

    features = asyncio.run(client.get_audio_features([f"t{index}" for index in range(150)]))

    assert batches == [100, 50]
    assert features == [None] * 150


def test_user_profiles() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if endpoint(request) == "me":
            return httpx.Response(200, json={"id": "me", "display_name": "Me", "country": "DE", "product": "premium"})
        return httpx.Response(200, json={"id": "someone", "display_name": "Someone"})

    client = UserClient(dispatcher=make_dispatcher(handler))

    me = asyncio.run(client.get_current_user())
    other = asyncio.run(client.get_user(GetUserRequest("someone")))

    assert me.country == "DE"
    assert other.display_name == "Someone"
