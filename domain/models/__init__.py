"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    StorageHandle,
    acquire,
    release,
    get_db_session,
)
from domain.models.family import FamilyMember, TrackedItem, DietEntry

__all__ = [
    # Database
    "Base",
    "StorageHandle",
    "acquire",
    "release",
    "get_db_session",
    # Family models
    "FamilyMember",
    "TrackedItem",
    "DietEntry",
]
