from datetime import datetime
from typing import Dict, Any, List, Optional
from sqlalchemy.orm import Session
import logging

from app.config import settings
from app.exceptions import ServiceValidationError
from domain.clock import time_ago, today, utc_now
from domain.enums import FeedbackTopic
from repositories import FeedbackRepository
from services.base import unit_of_work, coerce_enum, kv
from services.student_service import StudentService

logger = logging.getLogger("nourishhub.feedback")

MIN_RATING = 1
MAX_RATING = 5


def parse_rating(value) -> int:
    """
    Parse a star rating into an int in [1, 5].

    Accepts ints and integral strings ("4", " 5 "). Booleans, fractional
    numbers and anything non-numeric are rejected.
    """
    rating: Optional[int] = None
    if isinstance(value, bool):
        rating = None
    elif isinstance(value, int):
        rating = value
    elif isinstance(value, float) and value.is_integer():
        rating = int(value)
    elif isinstance(value, str):
        try:
            rating = int(value.strip())
        except ValueError:
            rating = None

    if rating is None or not MIN_RATING <= rating <= MAX_RATING:
        raise ServiceValidationError(
            f"Rating must be a whole number between {MIN_RATING} and {MAX_RATING}",
            details={"field": "rating"},
            code="INVALID_RATING",
        )
    return rating


def student_label(student_id: str, name: Optional[str]) -> str:
    return name or f"Student #{student_id}"


class FeedbackService:
    @staticmethod
    def submit_feedback(
        db: Session,
        student_id: str,
        rating,
        feedback_text: Optional[str] = None,
        meal_type=None,
    ) -> Dict[str, Any]:
        """
        Store a piece of feedback.

        The rating is checked before anything is written. A missing comment
        becomes "<rating>-star rating"; a missing or blank meal type
        becomes "general".

        Raises:
            ServiceValidationError: If the rating is out of range or not a number
            NotFoundError: If the student is unknown and auto-registration is off
        """
        rating = parse_rating(rating)
        text = (feedback_text or "").strip() or f"{rating}-star rating"
        topic = (
            coerce_enum(FeedbackTopic, meal_type, "meal_type")
            if meal_type is not None and str(meal_type).strip()
            else FeedbackTopic.GENERAL
        )

        with unit_of_work(db, "save_feedback"):
            student_id = StudentService.ensure_student(db, student_id)
            feedback = FeedbackRepository(db).create_feedback(
                student_id=student_id,
                feedback_text=text,
                rating=rating,
                meal_type=topic.value,
                date=today(),
                created_at=utc_now(),
            )
            feedback_id = feedback.id

        logger.info(
            f"feedback_saved {kv(id=feedback_id, student_id=student_id, rating=rating, meal_type=topic.value)}"
        )
        return {
            "success": True,
            "id": feedback_id,
            "message": "Feedback submitted successfully",
        }

    @staticmethod
    def get_recent_feedback(
        db: Session, limit: int = 10, now: Optional[datetime] = None
    ) -> List[Dict[str, Any]]:
        """
        Most recent feedback first, labelled with the student's name and a
        coarse age ("3d ago", "5h ago", "Just now").
        """
        if not 1 <= limit <= settings.feedback_recent_max:
            raise ServiceValidationError(
                f"limit must be between 1 and {settings.feedback_recent_max}",
                details={"field": "limit"},
            )

        now = now or utc_now()
        return [
            {
                "id": feedback.id,
                "name": student_label(feedback.student_id, name),
                "feedback": feedback.feedback_text,
                "rating": feedback.rating,
                "meal_type": feedback.meal_type,
                "time": time_ago(feedback.created_at, now),
            }
            for feedback, name in FeedbackRepository(db).get_recent_with_names(limit)
        ]
