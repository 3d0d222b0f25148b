"""
FamilyTracker bootstrap
Configures logging, opens the local database and seeds default members.
"""

import logging

from app.config import settings
from domain.models import StorageHandle, acquire, release
from services import FamilyService

_logger = logging.getLogger("familytracker.main")


def configure_logging() -> None:
    """Setup logging with configured level and format"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )


def bootstrap() -> StorageHandle:
    """
    Prepare the persistence layer for a host process.

    Returns:
        The shared storage handle

    Raises:
        StorageUnavailableError: If the database file cannot be opened; not retried
    """
    configure_logging()
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

    try:
        handle = acquire()
    except Exception:
        _logger.error("Database initialization failed")
        raise
    _logger.info("Database initialization succeeded")

    if settings.seed_on_startup:
        with handle.session() as db:
            FamilyService.seed_defaults(db)

    return handle


def shutdown() -> None:
    _logger.info(f"Shutting down {settings.app_name}")
    release()


if __name__ == "__main__":
    bootstrap()
    shutdown()
