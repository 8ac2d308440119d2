"""Like aggregator port."""

from collections.abc import Sequence
from typing import Protocol

from listing_likes.domain.models.event import Event
from listing_likes.domain.models.like_change import LikeAggregate


class LikeAggregator(Protocol):
    """Port for turning a batch of user events into per-listing like deltas."""

    def aggregate(self, events: Sequence[Event]) -> LikeAggregate:
        """Aggregate like deltas of a batch of events."""
        ...
