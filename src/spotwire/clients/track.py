"""Track and audio analysis endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from spotwire.dispatch.chunking import AUDIO_FEATURES_PER_REQUEST, TRACKS_PER_REQUEST
from spotwire.dispatch.request import RequestDescriptor
from spotwire.schema import (
    AudioAnalysis,
    AudioFeatures,
    AudioFeaturesEnvelope,
    Track,
    TracksEnvelope,
)

from .base import ResourceClient, join_ids

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True, slots=True)
class GetTrackRequest:
    id: str
    market: str | None = None


@dataclass(frozen=True, slots=True)
class GetTracksRequest:
    ids: Sequence[str]
    market: str | None = None


class TrackClient(ResourceClient):
    async def get_track(self, request: GetTrackRequest) -> Track:
        descriptor = RequestDescriptor.get(
            f"tracks/{request.id}", [("market", self.market(request.market))]
        )
        return await self.dispatcher.fetch(descriptor, Track)

    async def get_tracks(self, request: GetTracksRequest) -> list[Track | None]:
        """Fetch tracks 50 ids at a time; the result follows the order of ``ids``."""

        market = self.market(request.market)

        async def fetch(ids: list[str]) -> list[Track | None]:
            descriptor = RequestDescriptor.get("tracks", [("ids", join_ids(ids)), ("market", market)])
            envelope = await self.dispatcher.fetch(descriptor, TracksEnvelope)
            return envelope.tracks

        return await self.chunked(request.ids, TRACKS_PER_REQUEST, fetch)

    async def get_audio_feature(self, track_id: str) -> AudioFeatures:
        return await self.dispatcher.fetch(
            RequestDescriptor.get(f"audio-features/{track_id}"), AudioFeatures
        )

    async def get_audio_features(self, track_ids: Sequence[str]) -> list[AudioFeatures | None]:
        async def fetch(ids: list[str]) -> list[AudioFeatures | None]:
            descriptor = RequestDescriptor.get("audio-features", [("ids", join_ids(ids))])
            envelope = await self.dispatcher.fetch(descriptor, AudioFeaturesEnvelope)
            return envelope.audio_features

        return await self.chunked(track_ids, AUDIO_FEATURES_PER_REQUEST, fetch)

    async def get_audio_analysis(self, track_id: str) -> AudioAnalysis:
        return await self.dispatcher.fetch(
            RequestDescriptor.get(f"audio-analysis/{track_id}"), AudioAnalysis
        )
