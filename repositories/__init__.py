"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.family_member_repository import FamilyMemberRepository
from repositories.tracked_item_repository import TrackedItemRepository
from repositories.diet_entry_repository import DietEntryRepository

__all__ = [
    "BaseRepository",
    "FamilyMemberRepository",
    "TrackedItemRepository",
    "DietEntryRepository",
]
