"""Integration API client.

Authenticates with OAuth2 client credentials and sends every query through
the query rate limiter and every update through the command rate limiter.
"""

import asyncio
import logging
import time
from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any

import aiohttp

from listing_likes.adapters.api_rate_limiter import ApiRateLimiter, RateLimiters
from listing_likes.adapters.api_request_logger import log_api_request
from listing_likes.adapters.sharetribe_api.constants import (
    AUTH_SCOPE,
    AUTH_TOKEN_PATH,
    EVENTS_QUERY_PATH,
    LISTINGS_QUERY_PATH,
    LISTINGS_UPDATE_PATH,
    TOKEN_EXPIRY_LEEWAY_SECONDS,
)
from listing_likes.adapters.sharetribe_api.errors import MarketplaceApiError
from listing_likes.adapters.sharetribe_api.response_parser import (
    parse_event_page,
    parse_listing,
)
from listing_likes.domain.models.event_page import EventPage
from listing_likes.domain.models.listing import Listing
from listing_likes.domain.ports.marketplace_api import MarketplaceApi

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

    from listing_likes.adapters.config.app_config import AppConfig


class SharetribeIntegrationClient(MarketplaceApi):
    """Adapter for the Sharetribe Integration API."""

    def __init__(
        self,
        session: "ClientSession",
        config: "AppConfig",
        rate_limiters: RateLimiters,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp session used for all requests.
            config: Application configuration with credentials and base URL.
            rate_limiters: Query and command channel limiters.
        """
        self._session = session
        self._base_url = config.sharetribe_integration_base_url.rstrip("/")
        self._client_id = config.like_listing_client_id
        self._client_secret = config.like_listing_client_secret
        self._timeout = aiohttp.ClientTimeout(total=config.api_timeout)
        self._rate_limiters = rate_limiters
        self._access_token: str | None = None
        self._token_expires_at: float = 0.0
        self._token_lock = asyncio.Lock()

    async def _fetch_access_token(self) -> str:
        """Request a new access token with the client credentials grant."""
        url = f"{self._base_url}{AUTH_TOKEN_PATH}"
        form = {
            "client_id": self._client_id,
            "client_secret": self._client_secret,
            "grant_type": "client_credentials",
            "scope": AUTH_SCOPE,
        }
        log_api_request("POST", url, payload=form)

        async with self._session.post(url, data=form, timeout=self._timeout) as response:
            if response.status != 200:
                body = await response.text()
                raise MarketplaceApiError("POST", AUTH_TOKEN_PATH, response.status, body)
            data = await response.json()

        token = data.get("access_token")
        if not token:
            raise MarketplaceApiError("POST", AUTH_TOKEN_PATH, response.status, "no access_token")
        expires_in = float(data.get("expires_in") or 0)
        self._token_expires_at = time.monotonic() + max(
            0.0, expires_in - TOKEN_EXPIRY_LEEWAY_SECONDS
        )
        logger.info(f"Obtained Integration API access token (expires in {expires_in:.0f}s)")
        return str(token)

    async def _get_access_token(self) -> str:
        """Return a cached access token, fetching a new one when needed."""
        async with self._token_lock:
            if self._access_token is None or time.monotonic() >= self._token_expires_at:
                self._access_token = await self._fetch_access_token()
            return self._access_token

    def _invalidate_token(self, token: str) -> None:
        """Drop the cached token if it is still the one that was rejected."""
        if self._access_token == token:
            self._access_token = None

    async def _handle_response(
        self, method: str, path: str, response: "ClientResponse"
    ) -> dict[str, Any]:
        """Return the JSON body of a successful response, raise otherwise."""
        if response.status != 200:
            body = await response.text()
            raise MarketplaceApiError(method, path, response.status, body)
        data = await response.json()
        if not isinstance(data, dict):
            raise MarketplaceApiError(method, path, response.status, "response is not an object")
        return data

    async def _send(
        self,
        limiter: ApiRateLimiter,
        method: str,
        path: str,
        params: dict[str, str] | None,
        payload: dict[str, Any] | None,
        token: str,
    ) -> dict[str, Any] | None:
        """Send one authenticated request; None means the token was rejected."""
        url = f"{self._base_url}{path}"
        headers = {"Authorization": f"Bearer {token}", "Accept": "application/json"}
        await limiter.acquire()
        log_api_request(method, url, params=params, headers=headers, payload=payload)

        async with self._session.request(
            method,
            url,
            params=params,
            json=payload,
            headers=headers,
            timeout=self._timeout,
        ) as response:
            if response.status == 401:
                return None
            return await self._handle_response(method, path, response)

    async def _request(
        self,
        limiter: ApiRateLimiter,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send an authenticated request through a rate limiter.

        A 401 answer drops the cached token and the request is sent once more
        with a fresh token.
        """
        token = await self._get_access_token()
        body = await self._send(limiter, method, path, params, payload, token)
        if body is not None:
            return body

        logger.info(f"{method} {path}: access token rejected, re-authenticating")
        self._invalidate_token(token)
        token = await self._get_access_token()
        body = await self._send(limiter, method, path, params, payload, token)
        if body is None:
            raise MarketplaceApiError(method, path, 401, "access token rejected after refresh")
        return body

    async def query_events(
        self,
        event_types: str,
        start_after_sequence_id: int | None = None,
        created_at_start: datetime | None = None,
    ) -> EventPage:
        """Query events after a sequence ID, or created at/after a timestamp.

        Exactly one of start_after_sequence_id and created_at_start must be given.
        """
        if (start_after_sequence_id is None) == (created_at_start is None):
            raise ValueError("Pass exactly one of start_after_sequence_id and created_at_start")

        params = {"eventTypes": event_types}
        if start_after_sequence_id is not None:
            params["startAfterSequenceId"] = str(start_after_sequence_id)
        elif created_at_start is not None:
            params["createdAtStart"] = created_at_start.isoformat()

        body = await self._request(self._rate_limiters.query, "GET", EVENTS_QUERY_PATH, params)
        page = parse_event_page(body)
        logger.debug(f"Fetched {len(page.events)} events (perPage {page.per_page})")
        return page

    async def query_listing(self, listing_id: str) -> Listing | None:
        """Fetch one listing by ID, or None when no such listing exists."""
        body = await self._request(
            self._rate_limiters.query, "GET", LISTINGS_QUERY_PATH, {"ids": listing_id}
        )
        listings = body.get("data") or []
        if not listings:
            return None
        return parse_listing(listings[0])

    async def update_listing(self, listing_id: str, public_data: Mapping[str, Any]) -> Listing:
        """Merge public data into a listing and return the expanded updated listing."""
        body = await self._request(
            self._rate_limiters.command,
            "POST",
            LISTINGS_UPDATE_PATH,
            params={"expand": "true"},
            payload={"id": listing_id, "publicData": dict(public_data)},
        )
        return parse_listing(body.get("data") or {})
