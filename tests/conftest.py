from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

SPOTIFY_ENV = {
    "SPOTIFY_CLIENT_ID": "env-client-id",
    "SPOTIFY_CLIENT_SECRET": "env-client-secret",
    "SPOTIFY_REDIRECT_URI": "http://localhost:8888/callback",
}


@pytest.fixture
def isolated_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run from an empty directory so no stray ``.env`` file is picked up."""

    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def spotify_env(monkeypatch: pytest.MonkeyPatch, isolated_cwd: Path) -> dict[str, str]:
    del isolated_cwd
    for name, value in SPOTIFY_ENV.items():
        monkeypatch.setenv(name, value)
    return SPOTIFY_ENV


@pytest.fixture
def no_spotify_env(monkeypatch: pytest.MonkeyPatch, isolated_cwd: Path) -> None:
    del isolated_cwd
    for name in SPOTIFY_ENV:
        monkeypatch.delenv(name, raising=False)
