"""
Preference Repository - Data access layer for daily meal preferences
"""

from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from repositories.base import BaseRepository
from domain.clock import utc_now
from domain.enums import EatingStatus
from domain.models import MealPreference


class PreferenceRepository(BaseRepository[MealPreference]):
    """Repository for meal preference data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealPreference)

    def upsert(
        self,
        student_id: str,
        meal_type: str,
        on_date: date,
        eating_status: str,
        portion_size: str,
    ) -> int:
        """Insert or replace the preference for (student, meal, date).

        A single INSERT .. ON CONFLICT DO UPDATE keyed on the unique constraint,
        so concurrent submissions can never leave zero or two rows.
        Returns the row id.
        """
        stmt = sqlite_insert(MealPreference).values(
            student_id=student_id,
            meal_type=meal_type,
            date=on_date,
            eating_status=eating_status,
            portion_size=portion_size,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["student_id", "meal_type", "date"],
            set_={
                "eating_status": stmt.excluded["eating_status"],
                "portion_size": stmt.excluded["portion_size"],
                "updated_at": utc_now(),
            },
        ).returning(MealPreference.id)
        return self.db.execute(stmt).scalar_one()

    def get_by_key(
        self, student_id: str, meal_type: str, on_date: date
    ) -> Optional[MealPreference]:
        return (
            self.db.query(MealPreference)
            .filter(
                MealPreference.student_id == student_id,
                MealPreference.meal_type == meal_type,
                MealPreference.date == on_date,
            )
            .first()
        )

    def get_by_student_and_date(
        self, student_id: str, on_date: date
    ) -> List[MealPreference]:
        return (
            self.db.query(MealPreference)
            .filter(
                MealPreference.student_id == student_id,
                MealPreference.date == on_date,
            )
            .order_by(MealPreference.meal_type)
            .all()
        )

    def get_grouped_counts(self, on_date: date) -> List[dict]:
        """Counts for a date grouped by (meal_type, eating_status, portion_size)"""
        results = (
            self.db.query(
                MealPreference.meal_type,
                MealPreference.eating_status,
                MealPreference.portion_size,
                func.count(MealPreference.id).label("count"),
            )
            .filter(MealPreference.date == on_date)
            .group_by(
                MealPreference.meal_type,
                MealPreference.eating_status,
                MealPreference.portion_size,
            )
            .all()
        )

        return [
            {
                "meal_type": r.meal_type,
                "eating_status": r.eating_status,
                "portion_size": r.portion_size,
                "count": r.count,
            }
            for r in results
        ]

    def count_attending(self, on_date: date) -> int:
        """Number of preferences for a date whose status is not skip"""
        return (
            self.db.query(func.count(MealPreference.id))
            .filter(
                MealPreference.date == on_date,
                MealPreference.eating_status != EatingStatus.SKIP.value,
            )
            .scalar()
        )

    def count_for_date(self, on_date: date) -> int:
        return (
            self.db.query(func.count(MealPreference.id))
            .filter(MealPreference.date == on_date)
            .scalar()
        )
