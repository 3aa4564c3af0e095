"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    make_engine,
    init_database,
    get_db_session,
)
from domain.models.student import Student
from domain.models.dining import MealPreference, Menu, Feedback
from domain.models.voting import WeeklyMenuOption, WeeklyVote

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "make_engine",
    "init_database",
    "get_db_session",
    # Registry
    "Student",
    # Daily dining
    "MealPreference",
    "Menu",
    "Feedback",
    # Weekly voting
    "WeeklyMenuOption",
    "WeeklyVote",
]
