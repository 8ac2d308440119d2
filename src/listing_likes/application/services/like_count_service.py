"""Like count service."""

import logging

from listing_likes.domain.models.listing import Listing
from listing_likes.domain.ports.marketplace_api import MarketplaceApi

logger = logging.getLogger(__name__)


class LikeCountService:
    """Applies like deltas to the like count stored in listing public data.

    The update is a read-modify-write over two remote calls and is not atomic:
    a concurrent writer of the same listing can lose an update.
    """

    def __init__(self, marketplace_api: MarketplaceApi) -> None:
        """Initialize with a marketplace API."""
        self._marketplace_api = marketplace_api

    async def apply_delta(self, listing_id: str, delta: int) -> Listing | None:
        """Add delta to the listing's like count and return the updated listing."""
        listing = await self._marketplace_api.query_listing(listing_id)
        if listing is None:
            logger.warning(f"Listing {listing_id} not found, dropping like delta {delta:+d}")
            return None

        new_likes = listing.likes + delta
        logger.debug(f"Listing {listing_id}: likes {listing.likes} -> {new_likes}")
        return await self._marketplace_api.update_listing(listing_id, {"likes": new_likes})
