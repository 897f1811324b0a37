from __future__ import annotations

import pydantic
import pytest

from spotwire.schema import (
    Album,
    AlbumsEnvelope,
    CurrentlyPlayingContext,
    Episode,
    Playlist,
    Recommendations,
    SimplifiedAlbum,
    Track,
)
from tests.helpers.payloads import episode, page, simplified_album, simplified_playlist, track


def test_unknown_fields_are_ignored_and_models_are_frozen() -> None:
    payload = {**track(), "brand_new_field": {"nested": True}}

    parsed = Track.model_validate(payload)

    assert parsed.id == "track-1"
    assert not hasattr(parsed, "brand_new_field")
    with pytest.raises(pydantic.ValidationError):
        parsed.name = "changed"  # type: ignore[misc]


def test_null_images_become_empty_list() -> None:
    album = SimplifiedAlbum.model_validate(simplified_album())

    assert album.images == []


def test_album_embeds_a_page_of_tracks() -> None:
    payload = {**simplified_album(), "tracks": page([track("t1"), track("t2")]), "label": "Label"}

    album = Album.model_validate(payload)

    assert album.tracks is not None
    assert [item.id for item in album.tracks.items] == ["t1", "t2"]
    assert album.label == "Label"


def test_batch_envelope_keeps_null_entries_in_place() -> None:
    envelope = AlbumsEnvelope.model_validate({"albums": [simplified_album("a"), None, simplified_album("b")]})

    assert [album.id if album else None for album in envelope.albums] == ["a", None, "b"]


def test_playlist_items_discriminate_tracks_and_episodes() -> None:
    items = [
        {"added_at": "2024-01-01T00:00:00Z", "is_local": False, "track": track("t1")},
        {"added_at": "2024-01-02T00:00:00Z", "is_local": False, "track": episode("e1")},
        {"added_at": None, "is_local": True, "track": None},
    ]
    payload = {**simplified_playlist(), "tracks": page(items), "followers": {"total": 3}}

    playlist = Playlist.model_validate(payload)

    assert playlist.tracks is not None
    first, second, third = playlist.tracks.items
    assert isinstance(first.track, Track)
    assert isinstance(second.track, Episode)
    assert third.track is None
    assert playlist.followers is not None
    assert playlist.followers.total == 3


def test_playback_state_with_episode_item() -> None:
    payload = {
        "device": {"id": "d1", "name": "Kitchen", "type": "Speaker", "volume_percent": 40},
        "repeat_state": "context",
        "shuffle_state": True,
        "timestamp": 1,
        "progress_ms": 1000,
        "is_playing": True,
        "item": episode(),
        "currently_playing_type": "episode",
    }

    state = CurrentlyPlayingContext.model_validate(payload)

    assert isinstance(state.item, Episode)
    assert state.device is not None
    assert state.device.volume_percent == 40
    assert state.shuffle_state


def test_recommendation_seeds_use_camel_case_aliases() -> None:
    payload = {
        "seeds": [
            {"id": "a1", "type": "ARTIST", "initialPoolSize": 250, "afterFilteringSize": 200, "afterRelinkingSize": 200}
        ],
        "tracks": [track()],
    }

    recommendations = Recommendations.model_validate(payload)

    assert recommendations.seeds[0].initial_pool_size == 250
    assert recommendations.seeds[0].after_filtering_size == 200
    assert recommendations.tracks[0].id == "track-1"
