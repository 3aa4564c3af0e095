"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    NourishHubError,
    ServiceValidationError,
    NotFoundError,
    StoreError,
)

__all__ = [
    "settings",
    "NourishHubError",
    "ServiceValidationError",
    "NotFoundError",
    "StoreError",
]
