"""File-based cursor store.

Keeps the sequence ID of the last processed event in a plain-text file so
that event processing continues from the correct point on the next run.
"""

import logging
import os
from pathlib import Path

from listing_likes.domain.ports.cursor_store import CursorStore

logger = logging.getLogger(__name__)


class FileCursorStore(CursorStore):
    """Stores the cursor as a decimal string in a single file."""

    def __init__(self, path: str | Path) -> None:
        """Initialize with the path of the state file."""
        self.path = Path(path)

    def load(self) -> int | None:
        """Load the stored cursor.

        A missing, unreadable or unparsable file means there is no state to
        resume from, so None is returned instead of raising.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info(f"No state file at {self.path}")
            return None
        except OSError as e:
            logger.warning(f"Failed to read state file {self.path}: {e}")
            return None

        try:
            return int(text.strip(), 10)
        except ValueError:
            logger.warning(f"State file {self.path} does not contain a sequence ID: {text[:50]!r}")
            return None

    def save(self, cursor: int) -> None:
        """Overwrite the stored cursor.

        Written to a sibling temp file first and then moved into place, so the
        state file is never left half-written. Errors propagate.
        """
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        tmp_path.write_text(str(cursor), encoding="utf-8")
        os.replace(tmp_path, self.path)
        logger.debug(f"Saved cursor {cursor} to {self.path}")
