"""Console output adapters."""

from listing_likes.adapters.console.console_reporter import ConsoleReporter

__all__ = ["ConsoleReporter"]
