"""Event page domain model."""

from dataclasses import dataclass, field

from listing_likes.domain.models.event import Event


@dataclass(frozen=True)
class EventPage:
    """One response to an event query, bounded by the server page size."""

    events: list[Event] = field(default_factory=list)
    per_page: int = 0

    @property
    def is_full(self) -> bool:
        """Whether the page was filled up, meaning more events are likely pending."""
        return self.per_page > 0 and len(self.events) == self.per_page

    @property
    def last_sequence_id(self) -> int | None:
        """Sequence id of the last event in the page, if any."""
        if not self.events:
            return None
        return self.events[-1].sequence_id
