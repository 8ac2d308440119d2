"""Like count updater port."""

from typing import Protocol

from listing_likes.domain.models.listing import Listing


class LikeCountUpdater(Protocol):
    """Port for applying a like delta to a listing's stored like count."""

    async def apply_delta(self, listing_id: str, delta: int) -> Listing | None:
        """Add delta to the listing's like count. Returns None if the listing is gone."""
        ...
