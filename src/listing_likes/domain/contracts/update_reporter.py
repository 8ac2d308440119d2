"""Protocol for reporting progress to the operator."""

from typing import Protocol

from listing_likes.domain.models.listing import Listing


class UpdateReporterProtocol(Protocol):
    """Protocol for reporting startup state and listing updates."""

    def report_startup(self, cursor: int | None) -> None:
        """Report whether polling resumes from a stored cursor or starts fresh."""
        ...

    def report_listing_updated(self, listing: Listing) -> None:
        """Report a listing whose like count was updated."""
        ...
