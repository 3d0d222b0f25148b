"""
Tests for the service layer with real database operations.

- FamilyService: seeding, member delete policy (orphan vs cascade)
- TrackingService: create/list/update/delete round trips
- DietService: the end-to-end meal logging scenario
"""

import logging

import pytest
from datetime import datetime
from sqlalchemy.orm import Session

from test_fixtures import storage, db_session
from services import FamilyService, TrackingService, DietService
from app.exceptions import NotFoundError, ServiceValidationError
from domain.models import StorageHandle


# =============================================================================
# FAMILY SERVICE TESTS
# =============================================================================


def test_family_service_seed_twice_keeps_three_members(db_session: Session):
    FamilyService.seed_defaults(db_session)
    FamilyService.seed_defaults(db_session)

    assert len(FamilyService.list_members(db_session)) == 3


def test_family_service_get_member_missing_returns_none(db_session: Session):
    assert FamilyService.get_member(db_session, 7) is None


def test_family_service_delete_member_leaves_orphans_by_default(db_session: Session):
    """
    Verifies:
    - deleting a member without cascade keeps its tracked items and diet entries
    - the orphaned rows still carry the old member id
    """
    member_id = FamilyService.create_member(db_session, "Dad", "👨")
    TrackingService.create_item(db_session, member_id, "Weight", value=80.0)
    DietService.create_entry(db_session, member_id, "2024-01-01T12:00:00Z", "Lunch", "Sandwich")

    FamilyService.delete_member(db_session, member_id)

    assert FamilyService.get_member(db_session, member_id) is None
    assert len(TrackingService.list_items(db_session, member_id)) == 1
    assert len(DietService.list_entries(db_session, member_id=member_id)) == 1


def test_family_service_delete_member_cascade(db_session: Session):
    """
    Verifies:
    - cascade=True removes the member's tracked items and diet entries
    - records of other members are untouched
    """
    mom = FamilyService.create_member(db_session, "Mom", "👩")
    kid = FamilyService.create_member(db_session, "Child", "🧒")
    TrackingService.create_item(db_session, mom, "Steps", value=10000.0)
    TrackingService.create_item(db_session, kid, "Height", value=120.0)
    DietService.create_entry(db_session, mom, "2024-01-01T08:00:00Z", "Breakfast", "Eggs")
    DietService.create_entry(db_session, kid, "2024-01-01T08:05:00Z", "Breakfast", "Cereal")

    FamilyService.delete_member(db_session, mom, cascade=True)

    assert FamilyService.get_member(db_session, mom) is None
    assert TrackingService.list_items(db_session, mom) == []
    assert DietService.list_entries(db_session, member_id=mom) == []
    assert len(TrackingService.list_items(db_session, kid)) == 1
    assert len(DietService.list_entries(db_session, member_id=kid)) == 1


def test_family_service_cascade_on_missing_member_is_silent(db_session: Session):
    FamilyService.delete_member(db_session, 404, cascade=True)

    assert FamilyService.list_members(db_session) == []


def test_family_service_logs_creation(db_session: Session, caplog):
    with caplog.at_level(logging.INFO, logger="familytracker.family"):
        member_id = FamilyService.create_member(db_session, "Mom", "👩")

    assert f"family_member_created id={member_id}" in caplog.text


# =============================================================================
# TRACKING SERVICE TESTS
# =============================================================================


def test_tracking_service_round_trip(db_session: Session):
    member_id = FamilyService.create_member(db_session, "Child", "🧒")
    item_id = TrackingService.create_item(
        db_session,
        member_id,
        "Temperature",
        category="health",
        value=37.8,
        notes="evening",
        tracked_at=datetime(2024, 2, 10, 20, 0),
    )

    TrackingService.update_item(db_session, item_id, "Temperature", value=37.2)
    item = TrackingService.get_item(db_session, item_id)

    assert item.value == 37.2
    assert item.category is None
    assert item.notes is None

    TrackingService.delete_item(db_session, item_id)
    assert TrackingService.get_item(db_session, item_id) is None


def test_tracking_service_writes_visible_to_new_session(storage: StorageHandle):
    with storage.session() as db:
        item_id = TrackingService.create_item(db, 1, "Medication", category="meds")

    with storage.session() as db:
        item = TrackingService.get_item(db, item_id)
        assert item is not None
        assert item.category == "meds"


# =============================================================================
# DIET SERVICE TESTS
# =============================================================================


def test_diet_service_meal_logging_scenario(db_session: Session):
    """
    Verifies the full meal logging flow:
    - member and entry both get id 1 in a fresh store
    - list by member returns exactly the new entry
    - a description-only update keeps calories
    - delete succeeds once, then raises NotFoundError
    """
    member_id = FamilyService.create_member(db_session, "Mom", "👩")
    assert member_id == 1

    entry = DietService.create_entry(
        db_session,
        member_id=1,
        timestamp="2024-01-01T08:00:00Z",
        meal_type="Breakfast",
        description="Oatmeal",
        calories=300,
    )
    assert entry.id == 1
    assert entry.notes is None

    entries = DietService.list_entries(db_session, member_id=1)
    assert [e.id for e in entries] == [1]

    updated = DietService.update_entry(db_session, 1, description="Oatmeal with fruit")
    assert updated.description == "Oatmeal with fruit"
    assert updated.calories == 300

    DietService.delete_entry(db_session, 1)
    assert DietService.list_entries(db_session, member_id=1) == []

    with pytest.raises(NotFoundError):
        DietService.delete_entry(db_session, 1)


def test_diet_service_rejects_unknown_meal_type(db_session: Session):
    with pytest.raises(ServiceValidationError) as exc_info:
        DietService.create_entry(db_session, 1, "2024-01-01T08:00:00Z", "Brunch", "Waffles")

    assert exc_info.value.code == "INVALID_MEAL_TYPE"
    assert DietService.list_entries(db_session) == []


def test_diet_service_update_missing_entry_logs_warning(db_session: Session, caplog):
    with caplog.at_level(logging.WARNING, logger="familytracker.diet"):
        with pytest.raises(NotFoundError):
            DietService.update_entry(db_session, 99, notes="late")

    assert "diet_entry_not_found id=99 op=update" in caplog.text
