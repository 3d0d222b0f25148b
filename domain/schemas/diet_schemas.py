from pydantic import AliasChoices, BaseModel, Field
from typing import Optional

from domain.enums import MealType


class DietEntryIdRequest(BaseModel):
    """Schema addressing a single diet entry"""

    id: int

    model_config = {"extra": "forbid"}


class DietEntryFilter(BaseModel):
    """Filter criteria for listing diet entries; absent fields do not filter"""

    member_id: Optional[int] = None
    start_date: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("start_date", "start"),
        description="Inclusive lower bound on timestamp (ISO-8601)",
    )
    end_date: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("end_date", "end"),
        description="Inclusive upper bound on timestamp (ISO-8601)",
    )

    model_config = {"extra": "forbid"}


class DietEntryCreate(BaseModel):
    """Schema for creating a diet entry"""

    member_id: int
    timestamp: str = Field(..., min_length=1, description="ISO-8601 instant")
    meal_type: MealType
    description: str = Field(..., min_length=1, description="What was eaten")
    calories: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None

    model_config = {"extra": "forbid"}


class DietEntryUpdate(BaseModel):
    """
    Schema for a partial diet entry update.

    Only fields present in the payload are changed; an explicit null clears
    calories or notes. A misspelled field name is rejected rather than ignored.
    """

    id: int
    member_id: Optional[int] = None
    timestamp: Optional[str] = Field(None, min_length=1)
    meal_type: Optional[MealType] = None
    description: Optional[str] = Field(None, min_length=1)
    calories: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None

    model_config = {"extra": "forbid"}

    def changes(self) -> dict:
        """Fields explicitly supplied by the caller, excluding id"""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class DietEntryResponse(BaseModel):
    """Schema for diet entry response"""

    id: int
    member_id: int
    timestamp: str
    meal_type: MealType
    description: str
    calories: Optional[int]
    notes: Optional[str]

    model_config = {"from_attributes": True}
