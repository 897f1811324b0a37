from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from spotwire.config import MissingConfigurationError, require_env_var, require_env_vars

if TYPE_CHECKING:
    from pathlib import Path


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_strips_whitespace(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  value \n")

    assert require_env_var("EXAMPLE_VAR") == "value"


def test_require_env_vars_reports_every_missing_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_B", raising=False)
    monkeypatch.delenv("MISSING_A", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_B", "MISSING_A"])

    assert exc.value.missing == ("MISSING_A", "MISSING_B")
    assert "MISSING_A, MISSING_B" in str(exc.value)


def test_require_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_var("EXAMPLE_VAR")


def test_require_env_vars_reads_explicit_mapping() -> None:
    result = require_env_vars(["ONLY_IN_MAPPING"], environ={"ONLY_IN_MAPPING": "x"})

    assert result == {"ONLY_IN_MAPPING": "x"}
    assert os.getenv("ONLY_IN_MAPPING") is None


def test_require_env_vars_loads_dotenv_without_overriding(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("DOTENV_ONLY=from-file\nDOTENV_SHARED=from-file\n")
    monkeypatch.delenv("DOTENV_ONLY", raising=False)
    monkeypatch.setenv("DOTENV_SHARED", "from-env")

    try:
        result = require_env_vars(["DOTENV_ONLY", "DOTENV_SHARED"], load_env_file=True)
    finally:
        os.environ.pop("DOTENV_ONLY", None)

    assert result == {"DOTENV_ONLY": "from-file", "DOTENV_SHARED": "from-env"}
