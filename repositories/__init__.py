"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.student_repository import StudentRepository
from repositories.preference_repository import PreferenceRepository
from repositories.menu_repository import MenuRepository
from repositories.voting_repository import WeeklyOptionRepository, WeeklyVoteRepository
from repositories.feedback_repository import FeedbackRepository

__all__ = [
    "BaseRepository",
    "StudentRepository",
    "PreferenceRepository",
    "MenuRepository",
    "WeeklyOptionRepository",
    "WeeklyVoteRepository",
    "FeedbackRepository",
]
