"""Re-issuable description of a single API call."""

from __future__ import annotations

import copy
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

type QueryValue = str | int | float | bool | Enum | None
type QueryPairs = tuple[tuple[str, str], ...]


def _format_query_value(value: str | int | float | bool | Enum) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def encode_params(pairs: Iterable[tuple[str, QueryValue]]) -> QueryPairs:
    """Stringify query pairs in order, dropping ``None`` values and keeping duplicate keys."""

    return tuple((key, _format_query_value(value)) for key, value in pairs if value is not None)


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Method, URL, ordered query pairs and optional JSON body.

    Descriptors are immutable; the dispatcher sends a fresh clone on every
    attempt so a single logical call can be replayed after a token refresh.
    ``url`` is either relative to the API base URL or absolute (paging links).
    """

    method: str
    url: str
    params: QueryPairs = ()
    json: object | None = None

    @classmethod
    def build(
        cls,
        method: str,
        url: str,
        params: Iterable[tuple[str, QueryValue]] = (),
        *,
        json: object | None = None,
    ) -> RequestDescriptor:
        return cls(method=method.upper(), url=url, params=encode_params(params), json=json)

    @classmethod
    def get(cls, url: str, params: Iterable[tuple[str, QueryValue]] = ()) -> RequestDescriptor:
        return cls.build("GET", url, params)

    def clone(self) -> RequestDescriptor:
        return replace(self, json=copy.deepcopy(self.json))

    def with_params(self, *pairs: tuple[str, QueryValue]) -> RequestDescriptor:
        return replace(self, params=self.params + encode_params(pairs))

    def param_values(self, name: str) -> list[str]:
        return [value for key, value in self.params if key == name]
