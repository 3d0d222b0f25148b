"""
Diet Entry Repository - Data access layer for meal records

Unlike the family member and tracked item repositories, every write here is
strict: updating or deleting a missing id raises NotFoundError, and updates
only touch the fields the caller supplied.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from repositories.base import BaseRepository, require_text
from domain.enums import MealType
from domain.models import DietEntry
from app.exceptions import NotFoundError, ServiceValidationError

UPDATABLE_FIELDS = frozenset(
    {"member_id", "timestamp", "meal_type", "description", "calories", "notes"}
)
REQUIRED_FIELDS = frozenset({"member_id", "timestamp", "meal_type", "description"})


def parse_meal_type(value: Any) -> MealType:
    """Exact, case-sensitive match against the MealType literals"""
    if isinstance(value, MealType):
        return value
    try:
        return MealType(value)
    except ValueError:
        raise ServiceValidationError(
            f"Unknown meal type: {value}",
            details={"meal_type": value, "allowed": MealType.values()},
            code="INVALID_MEAL_TYPE",
        )


def validate_timestamp(value: Any) -> str:
    """Accept ISO-8601 date or datetime strings, basic or extended, with or without offset"""
    require_text(value, "timestamp")
    try:
        datetime.fromisoformat(value)
    except ValueError:
        raise ServiceValidationError(
            f"timestamp is not ISO-8601: {value}",
            details={"timestamp": value},
            code="INVALID_TIMESTAMP",
        )
    return value


def validate_calories(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ServiceValidationError(
            f"calories must be a non-negative integer, got {value!r}",
            details={"calories": value},
            code="INVALID_CALORIES",
        )
    return value


class DietEntryRepository(BaseRepository[DietEntry]):
    """Repository for diet entry data access"""

    def __init__(self, db: Session):
        super().__init__(db, DietEntry)

    def create_entry(
        self,
        member_id: int,
        timestamp: str,
        meal_type: Any,
        description: str,
        calories: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> DietEntry:
        """
        Create a diet entry.

        Args:
            member_id: Owning family member (not checked for existence)
            timestamp: ISO-8601 instant
            meal_type: MealType or one of its exact string values
            description: What was eaten, non-empty
            calories: Optional non-negative integer
            notes: Optional free text

        Returns:
            The stored DietEntry including its assigned id

        Raises:
            ServiceValidationError: On any invalid field; nothing is written
        """
        entry = DietEntry(
            member_id=member_id,
            timestamp=validate_timestamp(timestamp),
            meal_type=parse_meal_type(meal_type),
            description=require_text(description, "description"),
            calories=validate_calories(calories),
            notes=notes,
        )
        return self.add(entry)

    def list_entries(
        self,
        member_id: Optional[int] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> List[DietEntry]:
        """
        Entries ordered by timestamp, newest first.

        Each filter that is given narrows the result (AND). start and end are
        inclusive bounds compared against the stored ISO-8601 strings.
        """
        query = self.db.query(DietEntry)
        if member_id is not None:
            query = query.filter(DietEntry.member_id == member_id)
        if start is not None:
            query = query.filter(DietEntry.timestamp >= start)
        if end is not None:
            query = query.filter(DietEntry.timestamp <= end)
        return query.order_by(DietEntry.timestamp.desc(), DietEntry.id.desc()).all()

    def update_entry(self, entry_id: int, **changes: Any) -> DietEntry:
        """
        Apply a partial update; omitted fields keep their stored values.

        Passing calories=None or notes=None clears that field.

        Raises:
            NotFoundError: If no entry has this id
            ServiceValidationError: On unknown or invalid fields; nothing is written
        """
        entry = self.get_by_id(entry_id)
        if entry is None:
            raise NotFoundError(
                f"Diet entry with id {entry_id} not found",
                details={"id": entry_id},
                code="DIET_ENTRY_NOT_FOUND",
            )

        values = self._validate_changes(changes)
        for field, value in values.items():
            setattr(entry, field, value)
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def delete_entry(self, entry_id: int) -> None:
        """
        Delete an entry.

        Raises:
            NotFoundError: If no entry has this id
        """
        if not self.exists(entry_id):
            raise NotFoundError(
                f"Diet entry with id {entry_id} not found",
                details={"id": entry_id},
                code="DIET_ENTRY_NOT_FOUND",
            )
        self.db.query(DietEntry).filter(DietEntry.id == entry_id).delete()
        self.db.commit()

    def delete_by_member_id(self, member_id: int) -> int:
        """Delete all entries owned by a member (transaction controlled by service)"""
        count = (
            self.db.query(DietEntry).filter(DietEntry.member_id == member_id).delete()
        )
        self.db.flush()
        return count

    @staticmethod
    def _validate_changes(changes: Dict[str, Any]) -> Dict[str, Any]:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ServiceValidationError(
                f"Cannot update fields: {', '.join(sorted(unknown))}",
                details={"fields": sorted(unknown)},
                code="UNKNOWN_FIELD",
            )
        nulled = sorted(f for f in REQUIRED_FIELDS & set(changes) if changes[f] is None)
        if nulled:
            raise ServiceValidationError(
                f"Required fields cannot be null: {', '.join(nulled)}",
                details={"fields": nulled},
                code="NULL_REQUIRED_FIELD",
            )

        values = dict(changes)
        if "timestamp" in values:
            values["timestamp"] = validate_timestamp(values["timestamp"])
        if "meal_type" in values:
            values["meal_type"] = parse_meal_type(values["meal_type"])
        if "description" in values:
            require_text(values["description"], "description")
        if "calories" in values:
            values["calories"] = validate_calories(values["calories"])
        return values
