"""
Database configuration and session management.

One StorageHandle owns the SQLAlchemy engine for the tracker's SQLite file.
acquire() opens it lazily and hands the same instance to every caller for the
lifetime of the process.
"""

import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import DatabaseError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.exceptions import StorageUnavailableError

logger = logging.getLogger("familytracker.database")

# Create SQLAlchemy Base
Base = declarative_base()


class StorageHandle:
    """Engine and session factory for one SQLite database"""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        url = make_url(database_url)
        is_sqlite = url.get_backend_name() == "sqlite"
        in_memory = is_sqlite and url.database in (None, "", ":memory:")

        try:
            if is_sqlite and not in_memory:
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailableError(
                f"Cannot create directory for {url.database}: {e}",
                code="STORAGE_UNAVAILABLE",
            ) from e

        engine_kwargs = {"echo": echo, "future": True}
        if is_sqlite:
            # sessions are handed to worker threads by invoke_async
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        if in_memory:
            # every session must see the same in-memory database
            engine_kwargs["poolclass"] = StaticPool
        self.engine = create_engine(database_url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            bind=self.engine, autoflush=False, expire_on_commit=False, future=True
        )
        self.init_schema()

    def init_schema(self) -> None:
        """Create the tables and indexes that do not exist yet"""
        try:
            with self.engine.begin() as conn:
                Base.metadata.create_all(bind=conn)
        except DatabaseError as e:
            self.engine.dispose()
            logger.error("Could not open database %s: %s", self.database_url, e)
            raise StorageUnavailableError(
                f"Cannot open database {self.database_url}: {e.orig or e}",
                code="STORAGE_UNAVAILABLE",
            ) from e
        logger.info("Database schema ensured at %s", self.database_url)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Short-lived session; rolled back on error and always closed"""
        db = self.SessionLocal()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def dispose(self) -> None:
        self.engine.dispose()


_handle: Optional[StorageHandle] = None
_handle_lock = threading.Lock()


def acquire(database_url: Optional[str] = None) -> StorageHandle:
    """
    Return the process-wide storage handle, opening it on first use.

    Args:
        database_url: URL used only when the handle is not open yet;
            defaults to settings.resolved_database_url

    Raises:
        StorageUnavailableError: If the SQLite file cannot be opened or created
    """
    global _handle
    if _handle is not None:
        return _handle
    with _handle_lock:
        if _handle is None:
            _handle = StorageHandle(
                database_url or settings.resolved_database_url,
                echo=settings.db_echo or settings.debug,
            )
    return _handle


def release() -> None:
    """Dispose the shared handle; the next acquire() opens a new one"""
    global _handle
    with _handle_lock:
        if _handle is not None:
            _handle.dispose()
            logger.info("Database handle released")
        _handle = None


def get_db_session() -> Generator[Session, None, None]:
    """Session from the shared handle (for dependency injection by a host)"""
    with acquire().session() as db:
        yield db
