from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from domain.models import FamilyMember
from repositories import (
    FamilyMemberRepository,
    TrackedItemRepository,
    DietEntryRepository,
)

logger = logging.getLogger("familytracker.family")


class FamilyService:
    """Business logic for household members"""

    @staticmethod
    def list_members(db: Session) -> List[FamilyMember]:
        return FamilyMemberRepository(db).list_all()

    @staticmethod
    def get_member(db: Session, member_id: int) -> Optional[FamilyMember]:
        """Retrieve a member; None when the id is unknown"""
        member = FamilyMemberRepository(db).get_by_id(member_id)
        if member is None:
            logger.debug(f"family_member_not_found id={member_id}")
        return member

    @staticmethod
    def create_member(db: Session, name: str, icon: str) -> int:
        member_id = FamilyMemberRepository(db).create_member(name, icon)
        logger.info(f"family_member_created id={member_id} name={name!r}")
        return member_id

    @staticmethod
    def update_member(db: Session, member_id: int, name: str, icon: str) -> None:
        FamilyMemberRepository(db).update_member(member_id, name, icon)
        logger.info(f"family_member_updated id={member_id}")

    @staticmethod
    def delete_member(db: Session, member_id: int, cascade: bool = False) -> None:
        """
        Delete a member.

        References from tracked items and diet entries are advisory, so by
        default the member's records stay behind as orphans. With cascade=True
        they are deleted in the same transaction as the member.

        Args:
            db: Database session
            member_id: Member to delete; unknown ids are a silent no-op
            cascade: Also delete the member's tracked items and diet entries
        """
        try:
            if cascade:
                items = TrackedItemRepository(db).delete_by_member_id(member_id)
                entries = DietEntryRepository(db).delete_by_member_id(member_id)
                logger.info(
                    f"family_member_cascade id={member_id} "
                    f"tracked_items={items} diet_entries={entries}"
                )
            FamilyMemberRepository(db).delete_member(member_id)
        except Exception:
            db.rollback()
            logger.exception("Error deleting family member %s", member_id)
            raise
        logger.info(f"family_member_deleted id={member_id} cascade={cascade}")

    @staticmethod
    def seed_defaults(db: Session) -> None:
        """Insert the default members when there are none"""
        if FamilyMemberRepository(db).seed_defaults():
            logger.info("family_members_seeded count=3")
        else:
            logger.debug("family_members_seed_skipped")
