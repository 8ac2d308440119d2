"""Domain models for listing like synchronisation."""

from listing_likes.domain.models.error_details import ErrorDetails
from listing_likes.domain.models.event import Event
from listing_likes.domain.models.event_page import EventPage
from listing_likes.domain.models.like_change import LikeAggregate, LikeChange, LikeChangeOutcome
from listing_likes.domain.models.listing import Listing
from listing_likes.domain.models.poll_cycle_report import PollCycleReport

__all__ = [
    "ErrorDetails",
    "Event",
    "EventPage",
    "LikeAggregate",
    "LikeChange",
    "LikeChangeOutcome",
    "Listing",
    "PollCycleReport",
]
