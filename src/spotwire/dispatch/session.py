"""Token state owned by a dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Session:
    access_token: str = field(repr=False)
    refresh_token: str = field(repr=False)
    refresh_count: int = 0
