"""Services package - Business logic layer"""

from services.family_service import FamilyService
from services.tracking_service import TrackingService
from services.diet_service import DietService

__all__ = [
    "FamilyService",
    "TrackingService",
    "DietService",
]
