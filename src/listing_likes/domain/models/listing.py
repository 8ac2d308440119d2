"""Listing domain model."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Listing:
    """A marketplace listing, reduced to the fields this service touches."""

    id: str
    public_data: Mapping[str, Any] = field(default_factory=dict)

    @property
    def likes(self) -> int:
        """Like count stored in public data (0 when never set)."""
        return int(self.public_data.get("likes") or 0)
