"""
Domain layer - Business entities, models, schemas, enums and clock helpers.
"""

from domain import clock, enums, models, schemas

__all__ = ["clock", "enums", "models", "schemas"]
