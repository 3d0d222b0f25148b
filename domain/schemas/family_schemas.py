from pydantic import BaseModel, Field
from datetime import datetime


class FamilyMemberIdRequest(BaseModel):
    """Schema addressing a single family member"""

    id: int

    model_config = {"extra": "forbid"}


class FamilyMemberCreate(BaseModel):
    """Schema for creating a family member"""

    name: str = Field(..., min_length=1, description="Display name, e.g. 'Mom'")
    icon: str = Field(..., description="Emoji or glyph label, e.g. '👩'")

    model_config = {"extra": "forbid"}


class FamilyMemberUpdate(BaseModel):
    """Schema for replacing a family member's name and icon"""

    id: int
    name: str = Field(..., min_length=1)
    icon: str

    model_config = {"extra": "forbid"}


class FamilyMemberDelete(BaseModel):
    """Schema for deleting a family member"""

    id: int
    cascade: bool = Field(
        default=False,
        description="Also delete the member's tracked items and diet entries",
    )

    model_config = {"extra": "forbid"}


class FamilyMemberResponse(BaseModel):
    """Schema for family member response"""

    id: int
    name: str
    icon: str
    created_at: datetime

    model_config = {"from_attributes": True}
