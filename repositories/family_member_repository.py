"""
Family Member Repository - Data access layer for household members

update_member() and delete_member() are lenient: a missing id affects zero rows
and is not reported.
"""

from typing import List

from sqlalchemy.orm import Session

from repositories.base import BaseRepository, require_text
from domain.models import FamilyMember

DEFAULT_MEMBERS = (
    ("Mom", "👩"),
    ("Dad", "👨"),
    ("Child", "🧒"),
)


class FamilyMemberRepository(BaseRepository[FamilyMember]):
    """Repository for family member data access"""

    def __init__(self, db: Session):
        super().__init__(db, FamilyMember)

    def list_all(self) -> List[FamilyMember]:
        """All members ordered by name"""
        return self.db.query(FamilyMember).order_by(FamilyMember.name.asc()).all()

    def create_member(self, name: str, icon: str) -> int:
        """Create a member and return its new id"""
        require_text(name, "name")
        member = self.add(FamilyMember(name=name, icon=icon))
        return member.id

    def update_member(self, member_id: int, name: str, icon: str) -> None:
        """Replace name and icon in a single statement"""
        require_text(name, "name")
        self.db.query(FamilyMember).filter(FamilyMember.id == member_id).update(
            {FamilyMember.name: name, FamilyMember.icon: icon}
        )
        self.db.commit()

    def delete_member(self, member_id: int) -> None:
        """Delete a member; owned records are left in place"""
        self.db.query(FamilyMember).filter(FamilyMember.id == member_id).delete()
        self.db.commit()

    def seed_defaults(self) -> bool:
        """
        Create the default members when the table is empty.

        Returns:
            True if the defaults were inserted, False if members already existed
        """
        if self.list_all():
            return False
        for name, icon in DEFAULT_MEMBERS:
            self.create_member(name, icon)
        return True
