"""Marketplace event domain model."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Event:
    """A single event from the marketplace event stream.

    ``resource`` is the entity after the change, ``previous_values`` holds the
    subset of its fields as they were before the change.
    """

    sequence_id: int
    event_type: str
    created_at: datetime | None = None
    resource_id: str | None = None
    resource: Mapping[str, Any] | None = None
    previous_values: Mapping[str, Any] | None = None
