"""Tests for Integration API response parsing."""

from datetime import UTC, datetime

import pytest

from listing_likes.adapters.sharetribe_api.errors import error_details_for_status
from listing_likes.adapters.sharetribe_api.response_parser import (
    parse_event,
    parse_event_page,
    parse_listing,
)


def test_parse_event_reads_attributes() -> None:
    """Given an event resource, when parsing, then sequence ID and values are taken over."""
    event = parse_event(
        {
            "id": "e1",
            "type": "event",
            "attributes": {
                "sequenceId": 1234,
                "eventType": "user/updated",
                "createdAt": "2026-10-19T08:30:00.000Z",
                "resourceId": {"uuid": "user-1"},
                "resource": {"id": "user-1"},
                "previousValues": {"attributes": {}},
            },
        }
    )

    assert event.sequence_id == 1234
    assert event.event_type == "user/updated"
    assert event.created_at == datetime(2026, 10, 19, 8, 30, tzinfo=UTC)
    assert event.resource_id == "user-1"
    assert event.resource == {"id": "user-1"}
    assert event.previous_values == {"attributes": {}}


def test_parse_event_without_sequence_id_raises() -> None:
    """Given an event without sequenceId, when parsing, then ValueError is raised."""
    with pytest.raises(ValueError, match="sequenceId"):
        parse_event({"id": "e1", "attributes": {"eventType": "user/updated"}})


def test_parse_event_tolerates_missing_optional_fields() -> None:
    """Given an event with only a sequence ID, when parsing, then optional fields are None."""
    event = parse_event({"attributes": {"sequenceId": 5, "createdAt": "yesterday"}})

    assert event.created_at is None
    assert event.resource is None
    assert event.previous_values is None


def test_parse_event_page_reads_per_page() -> None:
    """Given an events/query body, when parsing, then events and perPage are read."""
    page = parse_event_page(
        {
            "data": [{"attributes": {"sequenceId": 1}}, {"attributes": {"sequenceId": 2}}],
            "meta": {"perPage": 2, "page": 1},
        }
    )

    assert [e.sequence_id for e in page.events] == [1, 2]
    assert page.per_page == 2


def test_parse_listing_reads_public_data() -> None:
    """Given a listing resource, when parsing, then id and public data are read."""
    listing = parse_listing(
        {"id": {"uuid": "L1"}, "type": "listing", "attributes": {"publicData": {"likes": 3}}}
    )

    assert listing.id == "L1"
    assert listing.likes == 3


def test_parse_listing_without_id_raises() -> None:
    """Given a listing without id, when parsing, then ValueError is raised."""
    with pytest.raises(ValueError):
        parse_listing({"attributes": {}})


@pytest.mark.parametrize(
    ("status", "reason"),
    [
        (429, "Rate limit exceeded"),
        (502, "Bad gateway (server error)"),
        (503, "Service unavailable"),
        (504, "Gateway timeout"),
        (400, "HTTP 400"),
        (None, "Unknown error"),
    ],
)
def test_error_details_for_status(status: int | None, reason: str) -> None:
    """Given a status code, when mapping it, then a readable reason is returned."""
    details = error_details_for_status(status)

    assert details.status_code == status
    assert details.reason == reason
