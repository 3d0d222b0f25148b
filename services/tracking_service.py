from typing import List, Optional
from datetime import datetime
from sqlalchemy.orm import Session
import logging

from domain.models import TrackedItem
from repositories import TrackedItemRepository

logger = logging.getLogger("familytracker.tracking")


class TrackingService:
    """Business logic for tracked items"""

    @staticmethod
    def list_items(db: Session, member_id: Optional[int] = None) -> List[TrackedItem]:
        return TrackedItemRepository(db).list_items(member_id)

    @staticmethod
    def get_item(db: Session, item_id: int) -> Optional[TrackedItem]:
        return TrackedItemRepository(db).get_by_id(item_id)

    @staticmethod
    def create_item(
        db: Session,
        family_member_id: int,
        name: str,
        category: Optional[str] = None,
        value: Optional[float] = None,
        notes: Optional[str] = None,
        tracked_at: Optional[datetime] = None,
    ) -> int:
        item_id = TrackedItemRepository(db).create_item(
            family_member_id,
            name,
            category=category,
            value=value,
            notes=notes,
            tracked_at=tracked_at,
        )
        logger.info(
            f"tracked_item_created id={item_id} member_id={family_member_id} name={name!r}"
        )
        return item_id

    @staticmethod
    def update_item(
        db: Session,
        item_id: int,
        name: str,
        category: Optional[str] = None,
        value: Optional[float] = None,
        notes: Optional[str] = None,
    ) -> None:
        """Full replace; category, value and notes not given are cleared"""
        TrackedItemRepository(db).update_item(
            item_id, name, category=category, value=value, notes=notes
        )
        logger.info(f"tracked_item_updated id={item_id}")

    @staticmethod
    def delete_item(db: Session, item_id: int) -> None:
        TrackedItemRepository(db).delete_item(item_id)
        logger.info(f"tracked_item_deleted id={item_id}")
