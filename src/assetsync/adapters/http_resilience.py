"""Async httpx client with retries, throttling and an optional sqlite response cache."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING, TypedDict, Unpack

import httpx
from aiolimiter import AsyncLimiter
from hishel import AsyncSqliteStorage, FilterPolicy
from hishel import Response as HishelCacheResponse
from hishel._policies import BaseFilter
from hishel.httpx import AsyncCacheClient
from httpx_retries import Retry, RetryTransport

from assetsync.common.storage import get_http_cache_path

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from types import TracebackType

    from httpx._client import UseClientDefault
    from httpx._types import AuthTypes, QueryParamTypes, TimeoutTypes, URLTypes

    from assetsync.config.http_resilience import (
        CacheConfig,
        ResilienceConfig,
        RetryPolicy,
        ShouldCacheHook,
    )

log = getLogger(__name__)

type EventHook = Callable[[httpx.Response], Awaitable[None]]


class RequestOptions(TypedDict, total=False):
    json: object
    params: QueryParamTypes | None
    timeout: TimeoutTypes | UseClientDefault


class AsyncClientOptions(TypedDict, total=False):
    base_url: str
    timeout: TimeoutTypes
    headers: dict[str, str]
    auth: AuthTypes
    event_hooks: dict[str, list[EventHook]]
    transport: httpx.AsyncBaseTransport


def build_retry(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.attempts,
        backoff_factor=policy.backoff_factor,
        max_backoff_wait=policy.max_backoff_seconds,
        allowed_methods=sorted(policy.methods),
        status_forcelist=sorted(policy.statuses),
        retry_on_exceptions=policy.exceptions,
    )


async def _log_response(response: httpx.Response) -> None:
    log.debug(
        "%s %s -> %s", response.request.method, response.request.url, response.status_code
    )


def build_async_client(config: ResilienceConfig) -> httpx.AsyncClient:
    """Assemble the httpx client for ``config``; cached when a cache is configured."""

    options: AsyncClientOptions = {
        "base_url": config.base_url,
        "timeout": config.timeout_seconds,
        "headers": dict(config.default_headers),
        "event_hooks": {"response": [_log_response]},
        "transport": RetryTransport(retry=build_retry(config.retry)),
    }
    if config.basic_auth is not None:
        options["auth"] = httpx.BasicAuth(*config.basic_auth)

    if config.cache is None:
        return httpx.AsyncClient(**options)
    storage, policy = _cache_components(config.cache)
    return AsyncCacheClient(**options, storage=storage, policy=policy)


class ResilientClient:
    """Short-lived client wrapping one gateway call in ``async with``."""

    def __init__(self, config: ResilienceConfig) -> None:
        self.config = config
        self._limiter = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit is not None
            else None
        )
        self._client = build_async_client(config)

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
        if self._limiter is not None:
            await self._limiter.acquire()
        return await self._client.request(method, url, **kwargs)


class _JsonPayloadFilter(BaseFilter[HishelCacheResponse]):
    """Store a response only when its decoded JSON body satisfies the predicate."""

    def __init__(self, predicate: ShouldCacheHook) -> None:
        self._predicate = predicate

    def needs_body(self) -> bool:
        return True

    def apply(self, item: HishelCacheResponse, body: bytes | None) -> bool:  # noqa: ARG002
        if not body:
            return False
        try:
            payload = json.loads(body)
        except (UnicodeDecodeError, json.JSONDecodeError):
            return False
        return bool(self._predicate(payload))


def _cache_components(config: CacheConfig) -> tuple[AsyncSqliteStorage, FilterPolicy | None]:
    database_path = config.sqlite_path or get_http_cache_path()
    storage = AsyncSqliteStorage(
        database_path=str(database_path),
        default_ttl=config.ttl_seconds,
    )
    if config.should_cache is None:
        return storage, None
    return storage, FilterPolicy(response_filters=[_JsonPayloadFilter(config.should_cache)])
