"""
Shared test helpers and realistic sample data for the NourishHub test suite.
"""

from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from domain.clock import today, utc_now
from domain.models import Feedback, Student
from repositories import FeedbackRepository, StudentRepository


# Realistic students, matching the sample registry
REALISTIC_STUDENTS = {
    "rahul": ("STU001", "Rahul Kumar", "rahul@example.com"),
    "priya": ("STU002", "Priya Sharma", "priya@example.com"),
    "amit": ("STU003", "Amit Patel", "amit@example.com"),
}

LUNCH_MENU = ["Dal Tadka + Jeera Rice", "Mixed Veg Curry + Raita + Papad", "Gulab Jamun"]

WEEKLY_OPTIONS = {
    "Monday": {"lunch": ["Rajma Chawal", "Veg Biryani"], "dinner": ["Pav Bhaji"]},
    "Friday": {"lunch": ["Chole Bhature"], "dinner": ["Dal Makhani + Naan", "Pav Bhaji"]},
}


def make_student(db: Session, profile: str = "rahul") -> Student:
    """Register one of the realistic students and commit"""
    student_id, name, email = REALISTIC_STUDENTS[profile]
    student = StudentRepository(db).create_student(student_id, name=name, email=email)
    db.commit()
    return student


def make_feedback(
    db: Session,
    student_id: str,
    rating: int = 4,
    text: str = "Dal was great today",
    created_at: Optional[datetime] = None,
    meal_type: str = "lunch",
) -> Feedback:
    """Insert feedback with an explicit creation time (student must exist)"""
    created_at = created_at or utc_now()
    feedback = FeedbackRepository(db).create_feedback(
        student_id=student_id,
        feedback_text=text,
        rating=rating,
        meal_type=meal_type,
        date=created_at.date(),
        created_at=created_at,
    )
    db.commit()
    return feedback


def hours_ago(hours: float) -> datetime:
    return utc_now() - timedelta(hours=hours)


def last_week():
    return today() - timedelta(days=7)
