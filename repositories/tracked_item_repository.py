"""
Tracked Item Repository - Data access layer for generic per-member records
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from repositories.base import BaseRepository, require_text
from domain.models import TrackedItem


class TrackedItemRepository(BaseRepository[TrackedItem]):
    """Repository for tracked item data access"""

    def __init__(self, db: Session):
        super().__init__(db, TrackedItem)

    def list_items(self, member_id: Optional[int] = None) -> List[TrackedItem]:
        """Items for one member, or for everyone, most recent first"""
        query = self.db.query(TrackedItem)
        if member_id is not None:
            query = query.filter(TrackedItem.family_member_id == member_id)
        return query.order_by(TrackedItem.tracked_at.desc(), TrackedItem.id.desc()).all()

    def create_item(
        self,
        family_member_id: int,
        name: str,
        category: Optional[str] = None,
        value: Optional[float] = None,
        notes: Optional[str] = None,
        tracked_at: Optional[datetime] = None,
    ) -> int:
        """
        Create a tracked item and return its new id.

        Absent optionals are stored as NULL. tracked_at falls back to the
        store's current time (UTC). An aware tracked_at is converted to UTC and
        stored naive, so items with different offsets still sort by instant.
        """
        require_text(name, "name")
        item = TrackedItem(
            family_member_id=family_member_id,
            name=name,
            category=category,
            value=value,
            notes=notes,
        )
        if tracked_at is not None:
            if tracked_at.tzinfo is not None:
                tracked_at = tracked_at.astimezone(timezone.utc).replace(tzinfo=None)
            item.tracked_at = tracked_at
        return self.add(item).id

    def update_item(
        self,
        item_id: int,
        name: str,
        category: Optional[str] = None,
        value: Optional[float] = None,
        notes: Optional[str] = None,
    ) -> None:
        """
        Replace name, category, value and notes in a single statement.

        Optionals not passed are cleared to NULL. A missing id is not reported.
        """
        require_text(name, "name")
        self.db.query(TrackedItem).filter(TrackedItem.id == item_id).update(
            {
                TrackedItem.name: name,
                TrackedItem.category: category,
                TrackedItem.value: value,
                TrackedItem.notes: notes,
            }
        )
        self.db.commit()

    def delete_item(self, item_id: int) -> None:
        """Delete an item; a missing id is not reported"""
        self.db.query(TrackedItem).filter(TrackedItem.id == item_id).delete()
        self.db.commit()

    def delete_by_member_id(self, member_id: int) -> int:
        """Delete all items owned by a member (transaction controlled by service)"""
        count = (
            self.db.query(TrackedItem)
            .filter(TrackedItem.family_member_id == member_id)
            .delete()
        )
        self.db.flush()
        return count
