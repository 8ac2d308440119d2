"""Adapters layer - external system integrations."""

from listing_likes.adapters.config import AppConfig
from listing_likes.adapters.console import ConsoleReporter
from listing_likes.adapters.sharetribe_api import SharetribeIntegrationClient
from listing_likes.adapters.state import FileCursorStore

__all__ = [
    "AppConfig",
    "ConsoleReporter",
    "FileCursorStore",
    "SharetribeIntegrationClient",
]
