"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.family_schemas import (
    FamilyMemberIdRequest,
    FamilyMemberCreate,
    FamilyMemberUpdate,
    FamilyMemberDelete,
    FamilyMemberResponse,
)
from domain.schemas.tracking_schemas import (
    TrackedItemIdRequest,
    TrackedItemFilter,
    TrackedItemCreate,
    TrackedItemUpdate,
    TrackedItemResponse,
)
from domain.schemas.diet_schemas import (
    DietEntryIdRequest,
    DietEntryFilter,
    DietEntryCreate,
    DietEntryUpdate,
    DietEntryResponse,
)

__all__ = [
    # Family schemas
    "FamilyMemberIdRequest",
    "FamilyMemberCreate",
    "FamilyMemberUpdate",
    "FamilyMemberDelete",
    "FamilyMemberResponse",
    # Tracking schemas
    "TrackedItemIdRequest",
    "TrackedItemFilter",
    "TrackedItemCreate",
    "TrackedItemUpdate",
    "TrackedItemResponse",
    # Diet schemas
    "DietEntryIdRequest",
    "DietEntryFilter",
    "DietEntryCreate",
    "DietEntryUpdate",
    "DietEntryResponse",
]
