"""Wire settings, logging and storage into a ready-to-use history service."""

import structlog

from shared.logging import setup_logging
from shared.storage import LocalKeyValueStorage
from whist.history.repository import HistoryRepository
from whist.history.service import HistoryService
from whist.settings import WhistSettings

logger = structlog.get_logger()


def create_history_service(settings: WhistSettings | None = None) -> HistoryService:
    """Build the history service backed by local file storage."""
    settings = settings or WhistSettings()
    setup_logging(log_dir=settings.log_dir, level=settings.log_level, log_format=settings.log_format)

    storage = LocalKeyValueStorage(settings.history_dir)
    repository = HistoryRepository(storage, key=settings.history_key)
    logger.info("history storage ready", history_dir=settings.history_dir, key=settings.history_key)
    return HistoryService(repository)
