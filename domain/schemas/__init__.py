"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.dining_schemas import (
    PreferenceCreate,
    PreferenceResponse,
    PortionCounts,
    MealStats,
    DailyStats,
    MenuSetRequest,
    MenuEntry,
    FeedbackCreate,
    FeedbackItem,
    MetricCard,
    DashboardMetrics,
)
from domain.schemas.voting_schemas import DayOptions, VoteCreate, VotingWeek
from domain.schemas.student_schemas import StudentCreate, StudentResponse

__all__ = [
    "PreferenceCreate",
    "PreferenceResponse",
    "PortionCounts",
    "MealStats",
    "DailyStats",
    "MenuSetRequest",
    "MenuEntry",
    "FeedbackCreate",
    "FeedbackItem",
    "MetricCard",
    "DashboardMetrics",
    "DayOptions",
    "VoteCreate",
    "VotingWeek",
    "StudentCreate",
    "StudentResponse",
]
