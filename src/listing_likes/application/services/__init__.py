"""Application services (use cases)."""

from listing_likes.application.services.like_aggregation_service import LikeAggregationService
from listing_likes.application.services.like_count_service import LikeCountService

__all__ = ["LikeAggregationService", "LikeCountService"]
