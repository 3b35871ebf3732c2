"""Save, list and resume games for the presentation layer."""

from datetime import datetime

import structlog

from whist.history.codec import from_history_entry, to_history_entry
from whist.history.models import HistoryEntry
from whist.history.repository import HistoryRepository
from whist.logic.state import GameSession

logger = structlog.get_logger()


class HistoryService:
    """
    Entry point for everything that touches saved games.

    Each save adds a new timestamped snapshot; saving the same session twice
    yields two entries.
    """

    def __init__(self, repository: HistoryRepository) -> None:
        self._repository = repository

    def save_session(
        self,
        session: GameSession,
        game_name: str | None = None,
        *,
        now: datetime | None = None,
    ) -> HistoryEntry:
        """Snapshot session, add it to the front of the history and return the entry."""
        entry = to_history_entry(session, game_name, now=now)
        self._repository.prepend(entry)
        return entry

    def list_history(self) -> list[HistoryEntry]:
        """Return all saved games, most recently saved first."""
        return self._repository.load()

    def resume_from_history(self, entry: HistoryEntry) -> GameSession:
        """Rebuild a playable session from a saved entry."""
        session = from_history_entry(entry)
        logger.info(
            "game resumed",
            game_name=entry.game_name,
            saved_at=entry.date.isoformat(),
            round_number=session.round_number,
            phase=session.phase,
        )
        return session

    def latest_in_progress(self) -> HistoryEntry | None:
        """
        Return the unfinished entry with the most recent date.

        When several share that date, the one nearest the front of the
        collection (the most recently saved) wins.
        """
        latest: HistoryEntry | None = None
        for entry in self._repository.load():
            if entry.in_progress and (latest is None or entry.date > latest.date):
                latest = entry
        return latest

    def resume_latest(self) -> GameSession | None:
        """Resume the most recent unfinished game, or return None if there is none."""
        entry = self.latest_in_progress()
        if entry is None:
            return None
        return self.resume_from_history(entry)
