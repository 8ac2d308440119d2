"""Parsers from Integration API JSON responses to domain models."""

import logging
from datetime import UTC, datetime
from typing import Any

from listing_likes.domain.models.event import Event
from listing_likes.domain.models.event_page import EventPage
from listing_likes.domain.models.listing import Listing

logger = logging.getLogger(__name__)


def _parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO 8601 timestamp, returning None for missing or invalid values."""
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"Unparsable timestamp: {value}")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _resource_id(value: Any) -> str | None:
    """Extract an id that is either a plain string or a {"uuid": ...} object."""
    if isinstance(value, dict):
        value = value.get("uuid")
    return str(value) if value else None


def parse_event(data: dict[str, Any]) -> Event:
    """Parse one event resource.

    Raises ValueError when the event has no sequence ID, since ordering
    cannot be preserved without it.
    """
    attributes = data.get("attributes") or {}
    sequence_id = attributes.get("sequenceId")
    if isinstance(sequence_id, bool) or not isinstance(sequence_id, int):
        raise ValueError(f"Event {data.get('id')} has no integer sequenceId: {sequence_id!r}")

    return Event(
        sequence_id=sequence_id,
        event_type=str(attributes.get("eventType", "")),
        created_at=_parse_timestamp(attributes.get("createdAt")),
        resource_id=_resource_id(attributes.get("resourceId")),
        resource=attributes.get("resource"),
        previous_values=attributes.get("previousValues"),
    )


def parse_event_page(body: dict[str, Any]) -> EventPage:
    """Parse an events/query response body."""
    events_data = body.get("data") or []
    meta = body.get("meta") or {}
    events = [parse_event(event_data) for event_data in events_data]
    return EventPage(events=events, per_page=int(meta.get("perPage") or 0))


def parse_listing(data: dict[str, Any]) -> Listing:
    """Parse one listing resource."""
    listing_id = _resource_id(data.get("id"))
    if listing_id is None:
        raise ValueError("Listing resource has no id")
    attributes = data.get("attributes") or {}
    return Listing(id=listing_id, public_data=attributes.get("publicData") or {})
