from __future__ import annotations

import asyncio

import httpx
import pytest

from spotwire.config.spotify import ApiConfig
from spotwire.dispatch import RequestDescriptor
from spotwire.errors import ReauthenticationRequiredError, SpotifyStatusError
from spotwire.schema import Artist
from tests.helpers.payloads import artist
from tests.helpers.spotify_api import FakeTokenRefresher, api_config, bearer, endpoint, make_dispatcher


def test_send_attaches_bearer_token_and_resolves_base_url() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=artist("a1"))

    dispatcher = make_dispatcher(handler)
    result = asyncio.run(dispatcher.fetch(RequestDescriptor.get("artists/a1"), Artist))

    assert result.id == "a1"
    assert str(seen[0].url) == "https://api.spotify.com/v1/artists/a1"
    assert bearer(seen[0]) == "initial-token"


def test_unauthorized_refreshes_once_and_replays_with_new_token() -> None:
    seen_tokens: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_tokens.append(bearer(request))
        if bearer(request) != "fresh-token":
            return httpx.Response(401, json={"error": {"status": 401, "message": "expired"}})
        return httpx.Response(200, json=artist("a1"))

    refresher = FakeTokenRefresher()
    dispatcher = make_dispatcher(handler, refresher=refresher)

    result = asyncio.run(dispatcher.fetch(RequestDescriptor.get("artists/a1"), Artist))

    assert result.name == "Example Artist"
    assert seen_tokens == ["initial-token", "fresh-token"]
    assert refresher.calls == ["refresh-token"]
    assert dispatcher.session.access_token == "fresh-token"
    assert dispatcher.session.refresh_count == 1


def test_replayed_request_keeps_method_query_and_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if len(seen) == 1:
            return httpx.Response(401)
        return httpx.Response(201, json={"snapshot_id": "s"})

    dispatcher = make_dispatcher(handler)
    descriptor = RequestDescriptor.build(
        "POST", "playlists/p/tracks", [("position", 3)], json={"uris": ["spotify:track:1"]}
    )

    asyncio.run(dispatcher.send(descriptor))

    first, replay = seen
    assert replay.method == first.method == "POST"
    assert replay.url == first.url
    assert replay.content == first.content
    assert descriptor.json == {"uris": ["spotify:track:1"]}


def test_repeated_unauthorized_raises_after_retry_cap() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(bearer(request))
        return httpx.Response(401)

    refresher = FakeTokenRefresher(tokens=["second", "third", "fourth"])
    dispatcher = make_dispatcher(handler, refresher=refresher, config=api_config(max_auth_retries=2))

    with pytest.raises(ReauthenticationRequiredError) as exc:
        asyncio.run(dispatcher.send(RequestDescriptor.get("me")))

    assert exc.value.attempts == 2
    assert calls == ["initial-token", "second", "third"]
    assert len(refresher.calls) == 2


def test_zero_retry_cap_raises_without_refreshing() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(401)

    refresher = FakeTokenRefresher()
    dispatcher = make_dispatcher(handler, refresher=refresher, config=api_config(max_auth_retries=0))

    with pytest.raises(ReauthenticationRequiredError):
        asyncio.run(dispatcher.send(RequestDescriptor.get("me")))

    assert refresher.calls == []


@pytest.mark.parametrize("status", [400, 403, 404, 429, 500])
def test_other_failures_are_terminal_and_do_not_refresh(status: int) -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(status, headers={"Retry-After": "7"}, text="nope")

    refresher = FakeTokenRefresher()
    dispatcher = make_dispatcher(handler, refresher=refresher)

    with pytest.raises(SpotifyStatusError) as exc:
        asyncio.run(dispatcher.send(RequestDescriptor.get("artists/a1")))

    assert exc.value.status_code == status
    assert exc.value.body == "nope"
    assert exc.value.method == "GET"
    assert exc.value.retry_after == 7.0
    assert len(calls) == 1
    assert refresher.calls == []


def test_status_error_flags() -> None:
    assert SpotifyStatusError(404, "").is_not_found
    assert SpotifyStatusError(403, "").is_forbidden
    assert SpotifyStatusError(429, "").is_rate_limited
    assert SpotifyStatusError(503, "").is_server_error
    assert not SpotifyStatusError(400, "").is_server_error


def test_transport_errors_propagate_without_refresh() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    refresher = FakeTokenRefresher()
    dispatcher = make_dispatcher(handler, refresher=refresher)

    with pytest.raises(httpx.ConnectError):
        asyncio.run(dispatcher.send(RequestDescriptor.get("me")))

    assert refresher.calls == []


def test_default_config_does_not_retry_transport_errors() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) == 1:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, json=artist("a1"))

    dispatcher = make_dispatcher(handler, config=ApiConfig())

    with pytest.raises(httpx.ConnectError):
        asyncio.run(dispatcher.send(RequestDescriptor.get("me")))

    assert len(calls) == 1


def test_no_content_decodes_to_none() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    dispatcher = make_dispatcher(handler)

    assert asyncio.run(dispatcher.get_json(RequestDescriptor.get("me/player"))) is None


def test_concurrent_unauthorized_requests_share_one_refresh() -> None:
    stale_seen = 0
    both_stale = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        nonlocal stale_seen
        if bearer(request) == "initial-token":
            stale_seen += 1
            if stale_seen == 2:
                both_stale.set()
            await both_stale.wait()
            return httpx.Response(401)
        return httpx.Response(200, json=artist(endpoint(request).rsplit("/", 1)[-1]))

    refresher = FakeTokenRefresher()
    dispatcher = make_dispatcher(handler, refresher=refresher)

    async def run() -> list[Artist]:
        return list(
            await asyncio.gather(
                dispatcher.fetch(RequestDescriptor.get("artists/a1"), Artist),
                dispatcher.fetch(RequestDescriptor.get("artists/a2"), Artist),
            )
        )

    results = asyncio.run(run())

    assert [result.id for result in results] == ["a1", "a2"]
    assert refresher.calls == ["refresh-token"]
    assert dispatcher.session.refresh_count == 1


def test_rotated_refresh_token_is_adopted_only_when_enabled() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if bearer(request) == "initial-token":
            return httpx.Response(401)
        return httpx.Response(200, json={})

    kept = make_dispatcher(handler, refresher=FakeTokenRefresher(rotated_refresh_token="rotated"))
    adopted = make_dispatcher(
        handler,
        refresher=FakeTokenRefresher(rotated_refresh_token="rotated"),
        config=api_config(adopt_rotated_refresh_token=True),
    )

    asyncio.run(kept.send(RequestDescriptor.get("me")))
    asyncio.run(adopted.send(RequestDescriptor.get("me")))

    assert kept.session.refresh_token == "refresh-token"
    assert adopted.session.refresh_token == "rotated"


def test_closed_dispatcher_reopens_its_client() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={})

    dispatcher = make_dispatcher(handler)

    async def run() -> None:
        async with dispatcher:
            await dispatcher.send(RequestDescriptor.get("me"))
        await dispatcher.send(RequestDescriptor.get("me"))
        await dispatcher.aclose()

    asyncio.run(run())
