"""API routes package"""

from . import health, menu, preferences, voting, stats, feedback, metrics, students

__all__ = [
    "health",
    "menu",
    "preferences",
    "voting",
    "stats",
    "feedback",
    "metrics",
    "students",
]
