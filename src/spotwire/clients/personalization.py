"""The current user's top artists and tracks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from spotwire.dispatch.request import RequestDescriptor
from spotwire.schema import Artist, Page, Track

from .base import ResourceClient, paging_params


class TimeRange(StrEnum):
    SHORT_TERM = "short_term"
    MEDIUM_TERM = "medium_term"
    LONG_TERM = "long_term"


@dataclass(frozen=True, slots=True)
class GetTopItemsRequest:
    time_range: TimeRange = TimeRange.MEDIUM_TERM
    limit: int | None = None
    offset: int | None = None


class PersonalizationClient(ResourceClient):
    async def get_top_artists(self, request: GetTopItemsRequest | None = None) -> Page[Artist]:
        page = await self.dispatcher.fetch(self._descriptor("artists", request), Page[Artist])
        return self.bind_page(page)

    async def get_top_tracks(self, request: GetTopItemsRequest | None = None) -> Page[Track]:
        page = await self.dispatcher.fetch(self._descriptor("tracks", request), Page[Track])
        return self.bind_page(page)

    @staticmethod
    def _descriptor(kind: str, request: GetTopItemsRequest | None) -> RequestDescriptor:
        request = request or GetTopItemsRequest()
        return RequestDescriptor.get(
            f"me/top/{kind}",
            [*paging_params(request.limit, request.offset), ("time_range", request.time_range)],
        )
