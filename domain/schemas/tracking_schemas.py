from pydantic import AliasChoices, BaseModel, Field
from typing import Optional
from datetime import datetime


class TrackedItemIdRequest(BaseModel):
    """Schema addressing a single tracked item"""

    id: int

    model_config = {"extra": "forbid"}


class TrackedItemFilter(BaseModel):
    """Schema for listing tracked items, optionally for one member"""

    member_id: Optional[int] = None

    model_config = {"extra": "forbid"}


class TrackedItemCreate(BaseModel):
    """Schema for creating a tracked item"""

    family_member_id: int = Field(
        ..., validation_alias=AliasChoices("family_member_id", "member_id")
    )
    name: str = Field(..., min_length=1, description="What was tracked, e.g. 'Weight'")
    category: Optional[str] = Field(None, description="Free-form grouping, e.g. 'health'")
    value: Optional[float] = Field(None, description="Numeric measurement")
    notes: Optional[str] = None
    tracked_at: Optional[datetime] = Field(
        None,
        description="When it was tracked; offsets are converted to UTC, "
        "the store's current time if omitted",
    )

    model_config = {"extra": "forbid"}


class TrackedItemUpdate(BaseModel):
    """Schema for replacing a tracked item; omitted optionals are cleared"""

    id: int
    name: str = Field(..., min_length=1)
    category: Optional[str] = None
    value: Optional[float] = None
    notes: Optional[str] = None

    model_config = {"extra": "forbid"}


class TrackedItemResponse(BaseModel):
    """Schema for tracked item response"""

    id: int
    family_member_id: int
    name: str
    category: Optional[str]
    value: Optional[float]
    notes: Optional[str]
    tracked_at: datetime

    model_config = {"from_attributes": True}
