"""Authenticated dispatch: session, request descriptors, retry policy, chunking."""

from __future__ import annotations

from spotwire.errors import (
    PageNotBoundError,
    ReauthenticationRequiredError,
    SpotifyError,
    SpotifyStatusError,
    TokenRefreshError,
)

from .chunking import chunked, split_chunks
from .dispatcher import SUCCESS_STATUSES, Dispatcher
from .request import RequestDescriptor, encode_params
from .session import Session

__all__ = [
    "SUCCESS_STATUSES",
    "Dispatcher",
    "PageNotBoundError",
    "ReauthenticationRequiredError",
    "RequestDescriptor",
    "Session",
    "SpotifyError",
    "SpotifyStatusError",
    "TokenRefreshError",
    "chunked",
    "encode_params",
    "split_chunks",
]
