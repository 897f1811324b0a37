"""Splitting oversized id lists into provider-sized batches."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

ALBUMS_PER_REQUEST: Final[int] = 20
ARTISTS_PER_REQUEST: Final[int] = 50
TRACKS_PER_REQUEST: Final[int] = 50
SHOWS_PER_REQUEST: Final[int] = 50
AUDIO_FEATURES_PER_REQUEST: Final[int] = 100
LIBRARY_IDS_PER_REQUEST: Final[int] = 50
FOLLOW_IDS_PER_REQUEST: Final[int] = 50
PLAYLIST_FOLLOWER_CHECKS_PER_REQUEST: Final[int] = 5
PLAYLIST_ITEMS_PER_REQUEST: Final[int] = 100


def split_chunks[T](items: Sequence[T], size: int) -> list[list[T]]:
    if size < 1:
        raise ValueError("Chunk size must be positive")
    return [list(items[start : start + size]) for start in range(0, len(items), size)]


async def chunked[T, R](
    items: Sequence[T],
    size: int,
    fetch: Callable[[list[T]], Awaitable[Sequence[R]]],
    *,
    concurrency: int = 1,
) -> list[R]:
    """Call ``fetch`` once per chunk and concatenate the results in chunk order.

    Input order and duplicates are preserved across chunk boundaries. With
    ``concurrency > 1`` up to that many chunks are in flight at once; the
    first failure cancels the chunks still pending and propagates; no partial
    result is returned.
    """

    batches = split_chunks(items, size)
    if concurrency <= 1 or len(batches) <= 1:
        results: list[R] = []
        for batch in batches:
            results.extend(await fetch(batch))
        return results

    semaphore = asyncio.Semaphore(concurrency)

    async def run(batch: list[T]) -> Sequence[R]:
        async with semaphore:
            return await fetch(batch)

    try:
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(run(batch)) for batch in batches]
    except ExceptionGroup as errors:
        raise errors.exceptions[0] from None
    return [item for task in tasks for item in task.result()]
