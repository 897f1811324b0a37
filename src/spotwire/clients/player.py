"""Playback state and control for the current user's devices."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Final

from spotwire.dispatch.request import RequestDescriptor
from spotwire.schema import CurrentlyPlaying, CurrentlyPlayingContext, CursorPage, DevicesEnvelope, PlayHistory

from .base import MAX_PAGE_LIMIT, ResourceClient, datetime_to_epoch_ms

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from spotwire.dispatch.request import QueryValue
    from spotwire.schema import Device

log = getLogger(__name__)

ARTIST_URI_PREFIX: Final[str] = "spotify:artist:"


class RepeatState(StrEnum):
    TRACK = "track"
    CONTEXT = "context"
    OFF = "off"


@dataclass(frozen=True, slots=True)
class StartRequest:
    """Body of a start/resume call.

    Give ``context_uri`` (album, artist or playlist) or ``uris`` (tracks), not
    both; give neither to resume. Artist contexts cannot start at an offset, so
    ``offset_position``/``offset_uri`` are dropped for them.
    """

    context_uri: str | None = None
    uris: Sequence[str] | None = None
    offset_position: int | None = None
    offset_uri: str | None = None
    position_ms: int | None = None

    def __post_init__(self) -> None:
        if self.context_uri is not None and self.uris is not None:
            raise ValueError("Pass either context_uri or uris, not both")
        if self.offset_position is not None and self.offset_uri is not None:
            raise ValueError("Pass either offset_position or offset_uri, not both")
        if self.position_ms is not None and self.position_ms < 0:
            raise ValueError("position_ms must not be negative")

    @property
    def is_artist_context(self) -> bool:
        return self.context_uri is not None and self.context_uri.startswith(ARTIST_URI_PREFIX)

    def to_body(self) -> dict[str, object]:
        body: dict[str, object] = {}
        if self.context_uri is not None:
            body["context_uri"] = self.context_uri
        if self.uris is not None:
            body["uris"] = list(self.uris)

        offset: dict[str, object] | None = None
        if self.offset_position is not None:
            offset = {"position": self.offset_position}
        elif self.offset_uri is not None:
            offset = {"uri": self.offset_uri}
        if offset is not None:
            if self.is_artist_context:
                log.debug(f"Ignoring playback offset for artist context {self.context_uri}")
            else:
                body["offset"] = offset

        if self.position_ms is not None:
            body["position_ms"] = self.position_ms
        return body


@dataclass(frozen=True, slots=True)
class GetRecentlyPlayedRequest:
    """``after`` and ``before`` are mutually exclusive cursors."""

    limit: int | None = None
    after: datetime | None = None
    before: datetime | None = None

    def __post_init__(self) -> None:
        if self.after is not None and self.before is not None:
            raise ValueError("Pass either after or before, not both")


def _device_params(device_id: str | None) -> list[tuple[str, QueryValue]]:
    return [("device_id", device_id)]


class PlayerClient(ResourceClient):
    async def get_devices(self) -> list[Device]:
        envelope = await self.dispatcher.fetch(RequestDescriptor.get("me/player/devices"), DevicesEnvelope)
        return envelope.devices

    async def get_current_playback(self, market: str | None = None) -> CurrentlyPlayingContext | None:
        """Return ``None`` when no device is active."""

        payload = await self.dispatcher.get_json(
            RequestDescriptor.get("me/player", [("market", self.market(market))])
        )
        if payload is None:
            return None
        return CurrentlyPlayingContext.model_validate(payload)

    async def get_currently_playing(self, market: str | None = None) -> CurrentlyPlaying | None:
        payload = await self.dispatcher.get_json(
            RequestDescriptor.get("me/player/currently-playing", [("market", self.market(market))])
        )
        if payload is None:
            return None
        return CurrentlyPlaying.model_validate(payload)

    async def get_recently_played(
        self, request: GetRecentlyPlayedRequest | None = None
    ) -> CursorPage[PlayHistory]:
        request = request or GetRecentlyPlayedRequest()
        limit = request.limit if request.limit is not None and 1 <= request.limit <= MAX_PAGE_LIMIT else 20
        params: list[tuple[str, QueryValue]] = [("limit", limit)]
        if request.after is not None:
            params.append(("after", datetime_to_epoch_ms(request.after)))
        if request.before is not None:
            params.append(("before", datetime_to_epoch_ms(request.before)))
        descriptor = RequestDescriptor.get("me/player/recently-played", params)
        page = await self.dispatcher.fetch(descriptor, CursorPage[PlayHistory])
        return self.bind_page(page)

    async def start(self, request: StartRequest | None = None, *, device_id: str | None = None) -> None:
        body = request.to_body() if request is not None else None
        await self.dispatcher.send(
            RequestDescriptor.build("PUT", "me/player/play", _device_params(device_id), json=body or None)
        )

    async def pause(self, *, device_id: str | None = None) -> None:
        await self.dispatcher.send(RequestDescriptor.build("PUT", "me/player/pause", _device_params(device_id)))

    async def skip_next(self, *, device_id: str | None = None) -> None:
        await self.dispatcher.send(RequestDescriptor.build("POST", "me/player/next", _device_params(device_id)))

    async def skip_previous(self, *, device_id: str | None = None) -> None:
        await self.dispatcher.send(
            RequestDescriptor.build("POST", "me/player/previous", _device_params(device_id))
        )

    async def seek(self, position_ms: int, *, device_id: str | None = None) -> None:
        if position_ms < 0:
            raise ValueError("position_ms must not be negative")
        params = [("position_ms", position_ms), *_device_params(device_id)]
        await self.dispatcher.send(RequestDescriptor.build("PUT", "me/player/seek", params))

    async def set_repeat_mode(self, state: RepeatState, *, device_id: str | None = None) -> None:
        params = [("state", state), *_device_params(device_id)]
        await self.dispatcher.send(RequestDescriptor.build("PUT", "me/player/repeat", params))

    async def set_volume(self, volume_percent: int, *, device_id: str | None = None) -> None:
        if not 0 <= volume_percent <= 100:
            raise ValueError(f"volume_percent must be within 0..100, got {volume_percent}")
        params = [("volume_percent", volume_percent), *_device_params(device_id)]
        await self.dispatcher.send(RequestDescriptor.build("PUT", "me/player/volume", params))

    async def toggle_shuffle(self, state: bool, *, device_id: str | None = None) -> None:
        params = [("state", state), *_device_params(device_id)]
        await self.dispatcher.send(RequestDescriptor.build("PUT", "me/player/shuffle", params))

    async def transfer_playback(self, device_id: str, *, play: bool | None = None) -> None:
        body: dict[str, object] = {"device_ids": [device_id]}
        if play is not None:
            body["play"] = play
        await self.dispatcher.send(RequestDescriptor.build("PUT", "me/player", json=body))

    async def add_to_queue(self, uri: str, *, device_id: str | None = None) -> None:
        params = [("uri", uri), *_device_params(device_id)]
        await self.dispatcher.send(RequestDescriptor.build("POST", "me/player/queue", params))
