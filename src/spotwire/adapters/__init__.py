"""HTTP adapters."""

from __future__ import annotations

from .http_resilience import ResilientClient

__all__ = ["ResilientClient"]
