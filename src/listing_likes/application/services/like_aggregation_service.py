"""Like aggregation service (event differ)."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from listing_likes.domain.models.event import Event
from listing_likes.domain.models.like_change import LikeAggregate, LikeChange, LikeChangeOutcome

logger = logging.getLogger(__name__)

LIKED_LISTINGS_KEY = "likedListings"

# Sentinel for "the key is not there at all", as opposed to a null value
_MISSING = object()


def _private_data(entity: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
    """Return attributes.profile.privateData of a user entity, if it is a mapping."""
    node: Any = entity
    for key in ("attributes", "profile", "privateData"):
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node if isinstance(node, Mapping) else None


def _liked_listings(entity: Mapping[str, Any] | None) -> Any:
    """Return the likedListings value of a user entity, or _MISSING."""
    private_data = _private_data(entity)
    if private_data is None:
        return _MISSING
    return private_data.get(LIKED_LISTINGS_KEY, _MISSING)


def _as_id_list(value: Any) -> list[str] | None:
    """Normalize a likedListings value to a list of ids (None stays None)."""
    if value is None or value is _MISSING:
        return None
    if not isinstance(value, list):
        raise TypeError(f"likedListings must be a list, got {type(value).__name__}")
    return [str(item) for item in value]


def _difference(first: list[str], second: list[str]) -> list[str]:
    """Elements of first that are not in second, keeping order and dropping repeats."""
    exclude = set(second)
    result: list[str] = []
    for item in first:
        if item not in exclude and item not in result:
            result.append(item)
    return result


class LikeAggregationService:
    """Derives per-listing like deltas from user/updated events.

    Each relevant event is expected to toggle exactly one listing in the
    user's liked listings. Events that toggle several listings at once are
    classified as ambiguous and left out of the aggregate.
    """

    def diff_event(self, event: Event) -> LikeChange:
        """Classify a single event and compute its like delta."""
        previous_raw = _liked_listings(event.previous_values)
        if previous_raw is _MISSING:
            return LikeChange(
                sequence_id=event.sequence_id,
                outcome=LikeChangeOutcome.IGNORED,
                reason="previous values carry no likedListings",
            )

        try:
            previous = _as_id_list(previous_raw)
            current = _as_id_list(_liked_listings(event.resource))
        except TypeError as e:
            return LikeChange(
                sequence_id=event.sequence_id,
                outcome=LikeChangeOutcome.IGNORED,
                reason=str(e),
            )

        added = _difference(current or [], previous or [])
        removed = _difference(previous or [], current or [])

        if not added and not removed:
            return LikeChange(sequence_id=event.sequence_id, outcome=LikeChangeOutcome.UNCHANGED)

        if len(added) == 1 and not removed:
            return LikeChange(
                sequence_id=event.sequence_id,
                outcome=LikeChangeOutcome.CHANGED,
                listing_id=added[0],
                delta=1,
            )

        if len(removed) == 1 and not added:
            return LikeChange(
                sequence_id=event.sequence_id,
                outcome=LikeChangeOutcome.CHANGED,
                listing_id=removed[0],
                delta=-1,
            )

        return LikeChange(
            sequence_id=event.sequence_id,
            outcome=LikeChangeOutcome.AMBIGUOUS,
            reason=f"added {added}, removed {removed}",
        )

    def aggregate(self, events: Sequence[Event]) -> LikeAggregate:
        """Sum like deltas per listing over a batch, in event order."""
        result = LikeAggregate()

        for event in events:
            change = self.diff_event(event)
            result.changes.append(change)

            if change.outcome is LikeChangeOutcome.AMBIGUOUS:
                logger.warning(
                    f"Event {change.sequence_id} toggles more than one liked listing "
                    f"({change.reason}), not counted"
                )
                continue
            if change.outcome is LikeChangeOutcome.IGNORED:
                logger.debug(f"Ignoring event {change.sequence_id}: {change.reason}")
                continue
            if change.outcome is not LikeChangeOutcome.CHANGED or change.listing_id is None:
                continue

            result.deltas[change.listing_id] = result.deltas.get(change.listing_id, 0) + change.delta

        # Likes and unlikes that cancel out within one batch need no write
        for listing_id in [k for k, v in result.deltas.items() if v == 0]:
            del result.deltas[listing_id]

        logger.debug(
            f"Aggregated {len(events)} events into {len(result.deltas)} listing updates"
        )
        return result
