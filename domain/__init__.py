"""
Domain layer - meal types, ORM tables and command schemas.
"""

from domain import enums, models, schemas

__all__ = ["enums", "models", "schemas"]
