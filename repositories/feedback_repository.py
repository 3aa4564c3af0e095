"""
Feedback Repository - Data access layer for student feedback
"""

from datetime import datetime
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy import func

from repositories.base import BaseRepository
from domain.models import Feedback, Student


class FeedbackRepository(BaseRepository[Feedback]):
    """Repository for feedback data access"""

    def __init__(self, db: Session):
        super().__init__(db, Feedback)

    def create_feedback(self, **fields) -> Feedback:
        return self.add(Feedback(**fields))

    def get_recent_with_names(self, limit: int) -> List[Tuple[Feedback, Optional[str]]]:
        """Newest feedback first, each paired with the student's name (or None)"""
        return (
            self.db.query(Feedback, Student.name)
            .outerjoin(Student, Student.student_id == Feedback.student_id)
            .order_by(Feedback.created_at.desc(), Feedback.id.desc())
            .limit(limit)
            .all()
        )

    def get_rating_summary(
        self, start: datetime, end: Optional[datetime] = None
    ) -> Tuple[Optional[float], int]:
        """Average rating and sample count for feedback created in [start, end)"""
        query = self.db.query(
            func.avg(Feedback.rating), func.count(Feedback.id)
        ).filter(Feedback.created_at >= start)
        if end is not None:
            query = query.filter(Feedback.created_at < end)
        avg_rating, count = query.one()
        return (float(avg_rating) if avg_rating is not None else None), count
