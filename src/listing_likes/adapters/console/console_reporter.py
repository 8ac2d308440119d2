"""Console reporter printing progress lines to stdout."""

import sys
from typing import TextIO

from listing_likes.domain.contracts.update_reporter import UpdateReporterProtocol
from listing_likes.domain.models.listing import Listing


class ConsoleReporter(UpdateReporterProtocol):
    """Prints startup state and listing updates for the operator."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize with an output stream (defaults to stdout)."""
        self._stream = stream

    def _print(self, line: str) -> None:
        print(line, file=self._stream or sys.stdout, flush=True)

    def report_startup(self, cursor: int | None) -> None:
        """Print whether polling resumes from a stored cursor or starts from now."""
        self._print("Press <CTRL>+C to quit.")
        if cursor is not None:
            self._print(
                f"Resuming event polling from last seen event with sequence ID {cursor}"
            )
        else:
            self._print("No state found or failed to load state.")
            self._print("Starting event polling from current time.")

    def report_listing_updated(self, listing: Listing) -> None:
        """Print one line for a listing whose like count was updated."""
        self._print(f"listing ID {listing.id} updated. It has now {listing.likes} likes")
