"""Poll cycle report domain model."""

from dataclasses import dataclass, field

from listing_likes.domain.models.listing import Listing


@dataclass(frozen=True)
class PollCycleReport:
    """Outcome of one poll cycle."""

    cursor_before: int | None
    cursor_after: int | None
    events_fetched: int
    full_page: bool
    delay_seconds: float
    updated_listings: list[Listing] = field(default_factory=list)
    skipped_listings: list[str] = field(default_factory=list)
    ignored_events: int = 0
    ambiguous_events: int = 0
