"""
Family members and their per-member records.

member references on tracked_items and diet_entries are plain integers with no
foreign key constraint; rows may outlive the member they point to.
"""

from sqlalchemy import (
    Column,
    Integer,
    Float,
    Text,
    TIMESTAMP,
    CheckConstraint,
    Index,
    Enum as SQLEnum,
)
from sqlalchemy.sql import func

from domain.models.database import Base
from domain.enums import MealType


class FamilyMember(Base):
    """Household member"""

    __tablename__ = "family_members"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    icon = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())

    __table_args__ = ({"sqlite_autoincrement": True},)

    def __repr__(self) -> str:
        return f"<FamilyMember id={self.id} name={self.name!r}>"


class TrackedItem(Base):
    """Generic time-stamped measurement or note for a member"""

    __tablename__ = "tracked_items"

    id = Column(Integer, primary_key=True)
    family_member_id = Column(Integer, nullable=False)
    name = Column(Text, nullable=False)
    category = Column(Text)
    value = Column(Float)
    notes = Column(Text)
    tracked_at = Column(TIMESTAMP, nullable=False, server_default=func.now())

    __table_args__ = (
        Index("idx_tracked_items_member_id", "family_member_id"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<TrackedItem id={self.id} member={self.family_member_id} name={self.name!r}>"


class DietEntry(Base):
    """Meal eaten by a member at an ISO-8601 timestamp"""

    __tablename__ = "diet_entries"

    id = Column(Integer, primary_key=True)
    member_id = Column(Integer, nullable=False)
    timestamp = Column(Text, nullable=False)
    meal_type = Column(
        SQLEnum(
            MealType,
            name="meal_type",
            native_enum=False,
            create_constraint=True,
            validate_strings=True,
            length=16,
            values_callable=lambda enum_cls: [m.value for m in enum_cls],
        ),
        nullable=False,
    )
    description = Column(Text, nullable=False)
    calories = Column(Integer)
    notes = Column(Text)

    __table_args__ = (
        CheckConstraint(
            "calories IS NULL OR calories >= 0", name="ck_diet_calories_nonneg"
        ),
        Index("idx_diet_entries_member_id", "member_id"),
        Index("idx_diet_entries_timestamp", "timestamp"),
        Index("idx_diet_entries_member_timestamp", "member_id", "timestamp"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<DietEntry id={self.id} member={self.member_id} {self.meal_type} at {self.timestamp}>"
