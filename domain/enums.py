"""
Domain enums for FamilyTracker.
Contains all enumeration types used across the domain models.
"""

import enum


class MealType(str, enum.Enum):
    """Meal categories for diet entries (exact, case-sensitive literals)"""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"
    OTHER = "Other"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]
