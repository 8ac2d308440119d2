"""Event pollers."""

from listing_likes.adapters.pollers.like_event_poller import (
    LikeEventPoller,
    LikeEventPollerServices,
    PollerSettings,
)

__all__ = ["LikeEventPoller", "LikeEventPollerServices", "PollerSettings"]
