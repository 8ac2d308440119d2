"""Ports (interfaces) for the ports-and-adapters architecture."""

from listing_likes.domain.ports.cursor_store import CursorStore
from listing_likes.domain.ports.like_aggregator import LikeAggregator
from listing_likes.domain.ports.like_count_updater import LikeCountUpdater
from listing_likes.domain.ports.marketplace_api import MarketplaceApi

__all__ = [
    "CursorStore",
    "LikeAggregator",
    "LikeCountUpdater",
    "MarketplaceApi",
]
