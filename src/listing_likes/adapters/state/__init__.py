"""State persistence adapters."""

from listing_likes.adapters.state.file_cursor_store import FileCursorStore

__all__ = ["FileCursorStore"]
