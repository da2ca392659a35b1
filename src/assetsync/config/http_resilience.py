"""Settings for the resilient HTTP transport behind the Assets gateway."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path  # noqa: TC003
from typing import Final

import httpx

ShouldCacheHook = Callable[[object], bool]

IDEMPOTENT_METHODS: Final = frozenset({"DELETE", "GET", "HEAD", "OPTIONS", "PUT"})
TRANSIENT_STATUSES: Final = frozenset({429, 500, 502, 503, 504})


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """Retry budget for transient failures.

    Creating an object is not idempotent, so POST is never in ``methods``.
    """

    attempts: int = 4
    backoff_factor: float = 0.5
    max_backoff_seconds: float = 60.0
    methods: frozenset[str] = IDEMPOTENT_METHODS
    statuses: frozenset[int] = TRANSIENT_STATUSES
    exceptions: tuple[type[httpx.HTTPError], ...] = (
        httpx.TimeoutException,
        httpx.NetworkError,
        httpx.RemoteProtocolError,
    )


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


@dataclass(slots=True, frozen=True)
class CacheConfig:
    """sqlite response cache; only JSON payloads accepted by ``should_cache`` are stored."""

    ttl_seconds: float
    sqlite_path: Path | None = None
    should_cache: ShouldCacheHook | None = None


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    base_url: str
    timeout_seconds: float = 30.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    ratelimit: RateLimit | None = None
    cache: CacheConfig | None = None
    default_headers: dict[str, str] = field(default_factory=dict[str, str])
    basic_auth: tuple[str, str] | None = field(default=None, repr=False)
