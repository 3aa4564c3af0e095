"""Services package - Business logic layer"""

from services.student_service import StudentService
from services.preference_service import PreferenceService
from services.voting_service import VotingService
from services.menu_service import MenuService
from services.feedback_service import FeedbackService
from services.metrics_service import MetricsService
from services.seed_service import SeedService

__all__ = [
    "StudentService",
    "PreferenceService",
    "VotingService",
    "MenuService",
    "FeedbackService",
    "MetricsService",
    "SeedService",
]
