from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
import pytest

from spotwire.errors import PageNotBoundError, SpotifyStatusError
from spotwire.schema import Artist, CursorPage, Page
from tests.helpers.payloads import API, artist, cursor_page, page
from tests.helpers.spotify_api import make_dispatcher

if TYPE_CHECKING:
    from collections.abc import Callable

TRACKS_URL = f"{API}me/tracks"


def _offset_url(offset: int) -> str:
    return f"{TRACKS_URL}?offset={offset}&limit=3"


def _three_page_chain() -> dict[int, dict[str, object]]:
    """Pages of sizes 2, 3 and 2 linked through next/previous."""

    offsets = [0, 2, 5]
    items = [["a", "b"], ["c", "d", "e"], ["f", "g"]]
    chain: dict[int, dict[str, object]] = {}
    for index, offset in enumerate(offsets):
        chain[offset] = page(
            items[index],
            href=_offset_url(offset),
            offset=offset,
            total=7,
            next=_offset_url(offsets[index + 1]) if index + 1 < len(offsets) else None,
            previous=_offset_url(offsets[index - 1]) if index > 0 else None,
        )
    return chain


def _chain_handler(
    chain: dict[int, dict[str, object]], requested: list[int]
) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        offset = int(request.url.params["offset"])
        requested.append(offset)
        return httpx.Response(200, json=chain[offset])

    return handler


def test_all_items_from_middle_page_returns_full_collection_in_order() -> None:
    chain = _three_page_chain()
    requested: list[int] = []
    dispatcher = make_dispatcher(_chain_handler(chain, requested))
    middle = Page[str].model_validate(chain[2]).bind(dispatcher)

    items = asyncio.run(middle.all_items())

    assert items == ["a", "b", "c", "d", "e", "f", "g"]
    assert len(set(items)) == 7
    assert requested == [0, 5]


@pytest.mark.parametrize("start", [0, 5])
def test_all_items_from_either_end(start: int) -> None:
    chain = _three_page_chain()
    dispatcher = make_dispatcher(_chain_handler(chain, []))
    first_or_last = Page[str].model_validate(chain[start]).bind(dispatcher)

    assert asyncio.run(first_or_last.all_items()) == list("abcdefg")


def test_empty_intermediate_page_is_followed() -> None:
    chain = {
        0: page(["a"], offset=0, next=_offset_url(1)),
        1: page([], offset=1, next=_offset_url(2), previous=_offset_url(0)),
        2: page(["b"], offset=2, previous=_offset_url(1)),
    }
    dispatcher = make_dispatcher(_chain_handler(chain, []))
    first = Page[str].model_validate(chain[0]).bind(dispatcher)

    assert asyncio.run(first.all_items()) == ["a", "b"]


def test_iter_items_walks_forward_lazily() -> None:
    chain = _three_page_chain()
    requested: list[int] = []
    dispatcher = make_dispatcher(_chain_handler(chain, requested))
    first = Page[str].model_validate(chain[0]).bind(dispatcher)

    async def take(count: int) -> list[str]:
        taken: list[str] = []
        async for item in first.iter_items():
            taken.append(item)
            if len(taken) == count:
                break
        return taken

    assert asyncio.run(take(3)) == ["a", "b", "c"]
    assert requested == [2]


def test_single_page_needs_no_requests() -> None:
    lone = Page[str].model_validate(page(["x"]))

    assert not lone.is_bound
    assert asyncio.run(lone.all_items()) == ["x"]
    assert asyncio.run(lone.next_page()) is None


def test_traversal_on_unbound_page_raises() -> None:
    unbound = Page[str].model_validate(_three_page_chain()[0])

    with pytest.raises(PageNotBoundError):
        asyncio.run(unbound.next_page())


def test_failure_mid_traversal_fails_whole_call() -> None:
    chain = _three_page_chain()

    def handler(request: httpx.Request) -> httpx.Response:
        offset = int(request.url.params["offset"])
        if offset == 5:
            return httpx.Response(500)
        return httpx.Response(200, json=chain[offset])

    dispatcher = make_dispatcher(handler)
    first = Page[str].model_validate(chain[0]).bind(dispatcher)

    with pytest.raises(SpotifyStatusError):
        asyncio.run(first.all_items())


def test_cursor_page_follows_next_until_absent() -> None:
    first_items = [artist(f"a{index}") for index in range(5)]
    second_items = [artist(f"a{index}") for index in range(5, 10)]
    next_url = f"{API}me/following?type=artist&after=a4"

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["after"] == "a4"
        return httpx.Response(200, json=cursor_page(second_items, after=None))

    dispatcher = make_dispatcher(handler)
    first = CursorPage[Artist].model_validate(cursor_page(first_items, next=next_url, after="a4"))
    first.bind(dispatcher)

    artists = asyncio.run(first.all_items())

    assert first.after == "a4"
    assert [item.id for item in artists] == [f"a{index}" for index in range(10)]


def test_parser_unwraps_enveloped_adjacent_pages() -> None:
    second = page(["c"], offset=2, previous=_offset_url(0))

    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"albums": second})

    def parse(payload: object) -> Page[str]:
        assert isinstance(payload, dict)
        return Page[str].model_validate(payload["albums"])

    dispatcher = make_dispatcher(handler)
    first = Page[str].model_validate(page(["a", "b"], next=_offset_url(2))).bind(dispatcher, parse)

    following = asyncio.run(first.next_page())

    assert following is not None
    assert following.items == ["c"]
    assert following.is_bound
