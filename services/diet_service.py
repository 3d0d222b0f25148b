from typing import Any, List, Optional
from sqlalchemy.orm import Session
import logging

from domain.models import DietEntry
from repositories import DietEntryRepository
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("familytracker.diet")


class DietService:
    """Business logic for diet entries"""

    @staticmethod
    def create_entry(
        db: Session,
        member_id: int,
        timestamp: str,
        meal_type: Any,
        description: str,
        calories: Optional[int] = None,
        notes: Optional[str] = None,
    ) -> DietEntry:
        """
        Record a meal for a member.

        Raises:
            ServiceValidationError: Unknown meal type, empty description,
                negative calories or a malformed timestamp
        """
        try:
            entry = DietEntryRepository(db).create_entry(
                member_id,
                timestamp,
                meal_type,
                description,
                calories=calories,
                notes=notes,
            )
        except ServiceValidationError as e:
            logger.warning(f"diet_entry_rejected member_id={member_id} reason={e.code}")
            raise
        logger.info(
            f"diet_entry_created id={entry.id} member_id={member_id} "
            f"meal_type={entry.meal_type.value}"
        )
        return entry

    @staticmethod
    def list_entries(
        db: Session,
        member_id: Optional[int] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> List[DietEntry]:
        return DietEntryRepository(db).list_entries(member_id, start=start, end=end)

    @staticmethod
    def get_entry(db: Session, entry_id: int) -> Optional[DietEntry]:
        return DietEntryRepository(db).get_by_id(entry_id)

    @staticmethod
    def update_entry(db: Session, entry_id: int, **changes: Any) -> DietEntry:
        """
        Partially update an entry; only the given keyword fields change.

        Raises:
            NotFoundError: If the entry does not exist
            ServiceValidationError: If any supplied field is invalid
        """
        try:
            entry = DietEntryRepository(db).update_entry(entry_id, **changes)
        except NotFoundError:
            logger.warning(f"diet_entry_not_found id={entry_id} op=update")
            raise
        logger.info(f"diet_entry_updated id={entry_id} fields={sorted(changes)}")
        return entry

    @staticmethod
    def delete_entry(db: Session, entry_id: int) -> None:
        """
        Raises:
            NotFoundError: If the entry does not exist
        """
        try:
            DietEntryRepository(db).delete_entry(entry_id)
        except NotFoundError:
            logger.warning(f"diet_entry_not_found id={entry_id} op=delete")
            raise
        logger.info(f"diet_entry_deleted id={entry_id}")
