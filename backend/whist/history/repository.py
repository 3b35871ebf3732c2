"""History collection stored as one JSON array under a single storage key."""

import structlog

from shared.storage import KeyValueStorage
from whist.history.codec import entries_from_json, entries_to_json
from whist.history.models import HistoryEntry

logger = structlog.get_logger()

DEFAULT_HISTORY_KEY = "ouiste-history"


class HistoryRepository:
    """
    Read-then-replace access to the saved games collection, newest first.

    The whole collection is loaded before every change and written back in
    full afterwards. Entries are only ever added at the front.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_HISTORY_KEY) -> None:
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[HistoryEntry]:
        """Return all saved entries. A missing or unreadable collection is empty."""
        try:
            content = self._storage.read(self._key)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "history document is unreadable, starting empty",
                key=self._key,
                error=type(exc).__name__,
            )
            return []
        if content is None:
            return []
        return entries_from_json(content)

    def prepend(self, entry: HistoryEntry) -> list[HistoryEntry]:
        """Add entry at the front of the collection and return the new collection."""
        entries = [entry, *self.load()]
        self._storage.write(self._key, entries_to_json(entries))
        logger.info(
            "history entry saved",
            key=self._key,
            game_name=entry.game_name,
            in_progress=entry.in_progress,
            total_entries=len(entries),
        )
        return entries
