"""Rate limiters for outgoing Integration API requests.

Queries and commands are limited independently. Each channel is a token
bucket backed by throttled-py; a request that would exceed the quota waits
until the bucket refills instead of failing.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from throttled import RateLimiterType, Throttled, rate_limiter, store

logger = logging.getLogger(__name__)

# Lower bound for a single wait, so a zero retry_after cannot spin the loop
MIN_WAIT_SECONDS = 0.01


@dataclass(frozen=True)
class RateLimitPreset:
    """Quota settings for the query and command channels."""

    query_per_sec: int
    query_burst: int
    command_per_min: int
    command_burst: int


RATE_LIMIT_PRESETS: dict[str, RateLimitPreset] = {
    "dev": RateLimitPreset(query_per_sec=1, query_burst=10, command_per_min=30, command_burst=10),
    "prod": RateLimitPreset(query_per_sec=5, query_burst=50, command_per_min=120, command_burst=20),
}


class ApiRateLimiter:
    """Rate limiter for one channel of outgoing API requests.

    Async-safe using asyncio.Lock; the throttled memory store is thread-safe.
    """

    def __init__(self, api_name: str, throttle: Any) -> None:
        """Initialize the rate limiter.

        Args:
            api_name: Name of the channel (for logging and as limiter key).
            throttle: Object with a throttled-py style ``limit()`` method.
        """
        self.api_name = api_name
        self._throttle = throttle
        self._lock = asyncio.Lock()

    @classmethod
    def token_bucket(cls, api_name: str, quota: Any) -> ApiRateLimiter:
        """Create a token bucket limiter with its own in-memory store."""
        throttle = Throttled(
            key=api_name,
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=quota,
            store=store.MemoryStore(),
        )
        return cls(api_name, throttle)

    @staticmethod
    def _extract_retry_after(result: Any) -> float:
        """Extract retry_after value from rate limit result."""
        retry_after: float = 1.0
        if hasattr(result, "state"):
            state = getattr(result, "state", None)
            if state and hasattr(state, "retry_after"):
                retry_after = float(getattr(state, "retry_after", 1.0))
        elif hasattr(result, "retry_after"):
            retry_after = float(getattr(result, "retry_after", 1.0))
        return retry_after

    async def acquire(self) -> None:
        """Acquire permission to make a request.

        Blocks until the quota allows one more request.
        """
        async with self._lock:
            while True:
                result = self._throttle.limit()
                if not result.limited:
                    return
                wait_time = max(MIN_WAIT_SECONDS, self._extract_retry_after(result))
                logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s before next request")
                await asyncio.sleep(wait_time)

    async def __aenter__(self) -> ApiRateLimiter:
        """Context manager entry - acquire rate limit."""
        await self.acquire()
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object
    ) -> None:
        """Context manager exit - nothing to do."""


@dataclass(frozen=True)
class RateLimiters:
    """The pair of independent limiters used by the Integration API client."""

    query: ApiRateLimiter
    command: ApiRateLimiter


def build_rate_limiters(profile: str) -> RateLimiters:
    """Build query and command limiters for a 'dev' or 'prod' profile."""
    try:
        preset = RATE_LIMIT_PRESETS[profile]
    except KeyError:
        raise ValueError(f"Unknown rate limit profile: {profile}") from None

    logger.info(
        f"Rate limiting ({profile}): queries {preset.query_per_sec}/s burst {preset.query_burst}, "
        f"commands {preset.command_per_min}/min burst {preset.command_burst}"
    )
    return RateLimiters(
        query=ApiRateLimiter.token_bucket(
            "query", rate_limiter.per_sec(preset.query_per_sec, burst=preset.query_burst)
        ),
        command=ApiRateLimiter.token_bucket(
            "command", rate_limiter.per_min(preset.command_per_min, burst=preset.command_burst)
        ),
    )
