"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from typing import Any, Generic, TypeVar, Optional, Type
from sqlalchemy.orm import Session
from abc import ABC

from app.exceptions import ServiceValidationError

ModelType = TypeVar("ModelType")


def require_text(value: Any, field: str) -> str:
    """Reject missing or blank required text before anything is written"""
    if not isinstance(value, str) or not value.strip():
        raise ServiceValidationError(
            f"{field} must be a non-empty string",
            details={"field": field},
            code="EMPTY_FIELD",
        )
    return value


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing the lookups shared by every table.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """
        Get entity by its surrogate integer id.

        Returns:
            Entity or None if not found
        """
        return self.db.get(self.model, entity_id, populate_existing=True)

    def exists(self, entity_id: int) -> bool:
        """Check if entity exists"""
        return self.get_by_id(entity_id) is not None

    def add(self, entity: ModelType) -> ModelType:
        """Insert entity and reload store-assigned columns (id, defaults)"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity
