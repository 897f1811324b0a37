"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from dotenv import find_dotenv, load_dotenv

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def require_env_vars(
    names: Sequence[str],
    *,
    environ: Mapping[str, str] | None = None,
    load_env_file: bool = False,
) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank.

    ``load_env_file`` reads a ``.env`` file from the working directory first,
    without overriding variables that are already set.
    """

    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True), override=False)
    source = os.environ if environ is None else environ

    missing: list[str] = []
    values: dict[str, str] = {}
    for name in names:
        value = source.get(name)
        if value is None or not value.strip():
            missing.append(name)
            continue
        values[name] = value.strip()

    if missing:
        raise MissingConfigurationError(tuple(sorted(missing)))

    return values


def require_env_var(name: str, *, environ: Mapping[str, str] | None = None) -> str:
    """Return a required environment variable by name."""

    return require_env_vars((name,), environ=environ)[name]
