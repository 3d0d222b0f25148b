"""
Command boundary for the host UI.

Each operation is a named command taking a payload mapping. Payloads are
validated with the request schemas before any service runs; results come back
as response schemas (or ids / None). Errors propagate as the exceptions in
app.exceptions.
"""

import functools
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Type
from uuid import uuid4

import anyio
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, ServiceValidationError
from domain.models import StorageHandle, acquire
from domain.schemas import (
    FamilyMemberIdRequest,
    FamilyMemberCreate,
    FamilyMemberUpdate,
    FamilyMemberDelete,
    FamilyMemberResponse,
    TrackedItemIdRequest,
    TrackedItemFilter,
    TrackedItemCreate,
    TrackedItemUpdate,
    TrackedItemResponse,
    DietEntryIdRequest,
    DietEntryFilter,
    DietEntryCreate,
    DietEntryUpdate,
    DietEntryResponse,
)
from services import FamilyService, TrackingService, DietService

logger = logging.getLogger("familytracker.commands")


class EmptyRequest(BaseModel):
    """Payload for commands without inputs"""

    model_config = {"extra": "forbid"}


@dataclass(frozen=True)
class Command:
    request_model: Type[BaseModel]
    handler: Callable[[Session, Any], Any]


# ============================================================================
# Family members
# ============================================================================


def _get_family_members(db: Session, _: EmptyRequest):
    return [FamilyMemberResponse.model_validate(m) for m in FamilyService.list_members(db)]


def _get_family_member(db: Session, req: FamilyMemberIdRequest):
    member = FamilyService.get_member(db, req.id)
    return FamilyMemberResponse.model_validate(member) if member else None


def _create_family_member(db: Session, req: FamilyMemberCreate):
    return FamilyService.create_member(db, req.name, req.icon)


def _update_family_member(db: Session, req: FamilyMemberUpdate):
    FamilyService.update_member(db, req.id, req.name, req.icon)


def _delete_family_member(db: Session, req: FamilyMemberDelete):
    FamilyService.delete_member(db, req.id, cascade=req.cascade)


def _seed_default_family_members(db: Session, _: EmptyRequest):
    FamilyService.seed_defaults(db)


# ============================================================================
# Tracked items
# ============================================================================


def _get_tracked_items(db: Session, req: TrackedItemFilter):
    items = TrackingService.list_items(db, req.member_id)
    return [TrackedItemResponse.model_validate(i) for i in items]


def _get_tracked_item(db: Session, req: TrackedItemIdRequest):
    item = TrackingService.get_item(db, req.id)
    return TrackedItemResponse.model_validate(item) if item else None


def _create_tracked_item(db: Session, req: TrackedItemCreate):
    return TrackingService.create_item(
        db,
        req.family_member_id,
        req.name,
        category=req.category,
        value=req.value,
        notes=req.notes,
        tracked_at=req.tracked_at,
    )


def _update_tracked_item(db: Session, req: TrackedItemUpdate):
    TrackingService.update_item(
        db, req.id, req.name, category=req.category, value=req.value, notes=req.notes
    )


def _delete_tracked_item(db: Session, req: TrackedItemIdRequest):
    TrackingService.delete_item(db, req.id)


# ============================================================================
# Diet entries
# ============================================================================


def _create_diet_entry(db: Session, req: DietEntryCreate):
    entry = DietService.create_entry(
        db,
        req.member_id,
        req.timestamp,
        req.meal_type,
        req.description,
        calories=req.calories,
        notes=req.notes,
    )
    return DietEntryResponse.model_validate(entry)


def _get_diet_entries(db: Session, req: DietEntryFilter):
    entries = DietService.list_entries(
        db, req.member_id, start=req.start_date, end=req.end_date
    )
    return [DietEntryResponse.model_validate(e) for e in entries]


def _update_diet_entry(db: Session, req: DietEntryUpdate):
    entry = DietService.update_entry(db, req.id, **req.changes())
    return DietEntryResponse.model_validate(entry)


def _delete_diet_entry(db: Session, req: DietEntryIdRequest):
    DietService.delete_entry(db, req.id)


COMMANDS: Dict[str, Command] = {
    "get_family_members": Command(EmptyRequest, _get_family_members),
    "get_family_member": Command(FamilyMemberIdRequest, _get_family_member),
    "create_family_member": Command(FamilyMemberCreate, _create_family_member),
    "update_family_member": Command(FamilyMemberUpdate, _update_family_member),
    "delete_family_member": Command(FamilyMemberDelete, _delete_family_member),
    "seed_default_family_members": Command(EmptyRequest, _seed_default_family_members),
    "get_tracked_items": Command(TrackedItemFilter, _get_tracked_items),
    "get_tracked_item": Command(TrackedItemIdRequest, _get_tracked_item),
    "create_tracked_item": Command(TrackedItemCreate, _create_tracked_item),
    "update_tracked_item": Command(TrackedItemUpdate, _update_tracked_item),
    "delete_tracked_item": Command(TrackedItemIdRequest, _delete_tracked_item),
    "create_diet_entry": Command(DietEntryCreate, _create_diet_entry),
    "get_diet_entries": Command(DietEntryFilter, _get_diet_entries),
    "update_diet_entry": Command(DietEntryUpdate, _update_diet_entry),
    "delete_diet_entry": Command(DietEntryIdRequest, _delete_diet_entry),
}


def _parse_request(name: str, command: Command, payload: Mapping[str, Any]) -> BaseModel:
    try:
        return command.request_model.model_validate(dict(payload))
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False)
        logger.warning(f"Validation error on {name}: {errors}")
        raise ServiceValidationError(
            "Request validation failed",
            details={"errors": errors},
            code="VALIDATION_ERROR",
        ) from exc


def invoke(
    name: str,
    payload: Optional[Mapping[str, Any]] = None,
    handle: Optional[StorageHandle] = None,
) -> Any:
    """
    Run one command to completion.

    Args:
        name: Command name, e.g. "create_diet_entry"
        payload: Command inputs; optional inputs may be omitted or null
        handle: Storage to use; the shared handle when omitted

    Raises:
        NotFoundError: Unknown command, or a strict operation on a missing id
        ServiceValidationError: Malformed payload or invalid field values
        StorageUnavailableError: The database cannot be opened
    """
    command = COMMANDS.get(name)
    if command is None:
        raise NotFoundError(
            f"Unknown command: {name}", details={"command": name}, code="UNKNOWN_COMMAND"
        )

    request_id = str(uuid4())
    request = _parse_request(name, command, payload or {})
    storage = handle or acquire()

    logger.debug("Command started", extra={"request_id": request_id, "command": name})
    start_time = time.time()
    try:
        with storage.session() as db:
            result = command.handler(db, request)
    except (ServiceValidationError, NotFoundError) as exc:
        logger.info(
            "Command rejected",
            extra={
                "request_id": request_id,
                "command": name,
                "error": exc.code,
                "process_time": f"{time.time() - start_time:.4f}s",
            },
        )
        raise
    except Exception as exc:
        logger.error(
            "Command failed",
            extra={
                "request_id": request_id,
                "command": name,
                "error": str(exc),
                "process_time": f"{time.time() - start_time:.4f}s",
            },
            exc_info=True,
        )
        raise

    logger.debug(
        "Command completed",
        extra={
            "request_id": request_id,
            "command": name,
            "process_time": f"{time.time() - start_time:.4f}s",
        },
    )
    return result


async def invoke_async(
    name: str,
    payload: Optional[Mapping[str, Any]] = None,
    handle: Optional[StorageHandle] = None,
) -> Any:
    """Same as invoke(), run on a worker thread so the calling task can yield"""
    return await anyio.to_thread.run_sync(functools.partial(invoke, name, payload, handle))
