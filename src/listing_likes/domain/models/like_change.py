"""Like change domain models."""

from dataclasses import dataclass, field
from enum import StrEnum


class LikeChangeOutcome(StrEnum):
    """How a single event was classified by the like differ."""

    CHANGED = "changed"
    UNCHANGED = "unchanged"
    IGNORED = "ignored"  # not a likedListings change, or malformed
    AMBIGUOUS = "ambiguous"  # more than one listing toggled in one event


@dataclass(frozen=True)
class LikeChange:
    """Classification of one event's effect on liked listings."""

    sequence_id: int
    outcome: LikeChangeOutcome
    listing_id: str | None = None
    delta: int = 0
    reason: str | None = None


@dataclass
class LikeAggregate:
    """Net like deltas of one poll batch, keyed by listing id."""

    deltas: dict[str, int] = field(default_factory=dict)
    changes: list[LikeChange] = field(default_factory=list)

    def count(self, outcome: LikeChangeOutcome) -> int:
        """Number of events classified with the given outcome."""
        return sum(1 for change in self.changes if change.outcome is outcome)
