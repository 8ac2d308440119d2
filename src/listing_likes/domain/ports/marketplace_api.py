"""Marketplace API port."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Protocol

from listing_likes.domain.models.event_page import EventPage
from listing_likes.domain.models.listing import Listing


class MarketplaceApi(Protocol):
    """Port for the marketplace query and command endpoints."""

    async def query_events(
        self,
        event_types: str,
        start_after_sequence_id: int | None = None,
        created_at_start: datetime | None = None,
    ) -> EventPage:
        """Query events after a sequence id, or created at/after a timestamp."""
        ...

    async def query_listing(self, listing_id: str) -> Listing | None:
        """Fetch one listing, or None when it does not exist."""
        ...

    async def update_listing(self, listing_id: str, public_data: Mapping[str, Any]) -> Listing:
        """Merge the given public data into a listing and return the updated listing."""
        ...
