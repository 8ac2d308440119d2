"""Protocol for event polling."""

from typing import Protocol


class EventPollerProtocol(Protocol):
    """Protocol for polling the event stream and applying derived updates."""

    async def start(self) -> None:
        """Start the event poller."""
        ...

    async def stop(self) -> None:
        """Stop the event poller."""
        ...
