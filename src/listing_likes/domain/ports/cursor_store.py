"""Cursor store port."""

from typing import Protocol


class CursorStore(Protocol):
    """Port for persisting the last processed event sequence id."""

    def load(self) -> int | None:
        """Return the stored cursor, or None when there is no usable state."""
        ...

    def save(self, cursor: int) -> None:
        """Overwrite the stored cursor. Raises if the write cannot be completed."""
        ...
