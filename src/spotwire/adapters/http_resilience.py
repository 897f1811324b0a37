"""httpx client with a backoff policy for transient failures."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, TypedDict, Unpack

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from httpx._client import UseClientDefault
    from httpx._types import (
        AuthTypes,
        HeaderTypes,
        QueryParamTypes,
        RequestContent,
        RequestData,
        TimeoutTypes,
        URLTypes,
    )

    from spotwire.config.http_resilience import ResilienceConfig, ResponseHook, RetryPolicy

log = getLogger(__name__)


class RequestOptions(TypedDict, total=False):
    content: RequestContent | None
    data: RequestData | None
    json: object
    params: QueryParamTypes | None
    headers: HeaderTypes | None
    auth: AuthTypes | UseClientDefault | None
    timeout: TimeoutTypes | UseClientDefault


class AsyncClientOptions(TypedDict, total=False):
    base_url: str
    timeout: TimeoutTypes
    headers: HeaderTypes
    event_hooks: dict[str, list[ResponseHook]]
    transport: httpx.AsyncBaseTransport


def retry_after_seconds(response: httpx.Response) -> float | None:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return max(float(value), 0.0)
    except ValueError:
        return None


def build_wait(policy: RetryPolicy) -> Callable[[RetryCallState], float]:
    """Exponential backoff with jitter, or the server's ``Retry-After`` when it sends one."""

    backoff = wait_exponential(multiplier=policy.backoff_factor, max=policy.max_backoff_wait) + wait_random(
        0, policy.backoff_jitter
    )

    def wait(retry_state: RetryCallState) -> float:
        outcome = retry_state.outcome
        if policy.respect_retry_after_header and outcome is not None and not outcome.failed:
            retry_after = retry_after_seconds(outcome.result())
            if retry_after is not None:
                return min(retry_after, policy.max_backoff_wait)
        return backoff(retry_state)

    return wait


def build_retrying(policy: RetryPolicy, *, name: str) -> AsyncRetrying:
    def should_retry_response(response: httpx.Response) -> bool:
        return response.status_code in policy.status_forcelist

    def before_sleep(retry_state: RetryCallState) -> None:
        outcome = retry_state.outcome
        if outcome is None:
            return
        reason = repr(outcome.exception()) if outcome.failed else f"HTTP {outcome.result().status_code}"
        log.warning(f"[{name}] attempt {retry_state.attempt_number} failed ({reason}); retrying")

    return AsyncRetrying(
        stop=stop_after_attempt(policy.total + 1),
        wait=build_wait(policy),
        retry=retry_if_exception_type(policy.retry_on_exceptions) | retry_if_result(should_retry_response),
        before_sleep=before_sleep,
        # hand back the last response (or raise the last error) once attempts run out
        retry_error_callback=lambda retry_state: retry_state.outcome.result() if retry_state.outcome else None,
    )


class ResilientClient:
    """Async httpx client that retries transient failures with backoff.

    Only methods in ``RetryPolicy.allowed_methods`` are retried. ``transport``
    replaces the network transport; tests pass an ``httpx.MockTransport`` here.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config

        headers = dict(config.default_headers) if config.default_headers else None
        event_hooks = {"response": list(config.response_hooks)} if config.response_hooks else None

        client_kwargs: AsyncClientOptions = {"timeout": config.timeout_seconds}
        if transport is not None:
            client_kwargs["transport"] = transport
        if config.base_url is not None:
            client_kwargs["base_url"] = config.base_url
        if headers is not None:
            client_kwargs["headers"] = headers
        if event_hooks is not None:
            client_kwargs["event_hooks"] = event_hooks

        self._client = httpx.AsyncClient(**client_kwargs)

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        policy = self.config.retry
        log.debug(f"[{self.config.name}] {method} {url}")
        if policy.total <= 0 or method.upper() not in policy.allowed_methods:
            return await self._client.request(method, url, **kwargs)
        retrying = build_retrying(policy, name=self.config.name)
        return await retrying(self._client.request, method, url, **kwargs)

    async def get(
        self,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(
        self,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        return await self.request("POST", url, **kwargs)
