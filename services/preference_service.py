from datetime import date
from typing import Dict, Any, List, Optional
from sqlalchemy.orm import Session
import logging

from domain.clock import today
from domain.enums import EatingStatus, MealType, PortionSize
from domain.models import MealPreference
from repositories import PreferenceRepository
from services.base import unit_of_work, coerce_enum, kv
from services.student_service import StudentService

logger = logging.getLogger("nourishhub.preferences")


def empty_meal_stats() -> Dict[str, Any]:
    stats: Dict[str, Any] = {"total": 0}
    for status in EatingStatus:
        stats[status.value] = 0
    stats["portions"] = {size.value: 0 for size in PortionSize}
    return stats


class PreferenceService:
    @staticmethod
    def submit_preference(
        db: Session,
        student_id: str,
        meal_type,
        eating_status,
        portion_size,
        on_date: Optional[date] = None,
    ) -> Dict[str, Any]:
        """
        Record a student's attendance intent and portion for one meal.

        Exactly one row exists per (student, meal, date): a resubmission
        replaces the previous values through a single upsert, in one
        transaction together with any student auto-registration.

        Args:
            db: Database session
            student_id: Client-generated student id (e.g. STU042)
            meal_type: lunch or dinner
            eating_status: yes, limited, tiffin or skip
            portion_size: small, medium or large
            on_date: Date the preference applies to (default: today)

        Returns:
            Dict with success flag, row id and message

        Raises:
            ServiceValidationError: If a field is missing or outside its domain
            NotFoundError: If the student is unknown and auto-registration is off
        """
        meal = coerce_enum(MealType, meal_type, "meal_type")
        status = coerce_enum(EatingStatus, eating_status, "eating_status")
        portion = coerce_enum(PortionSize, portion_size, "portion_size")
        on_date = on_date or today()

        with unit_of_work(db, "save_preference"):
            student_id = StudentService.ensure_student(db, student_id)
            preference_id = PreferenceRepository(db).upsert(
                student_id, meal.value, on_date, status.value, portion.value
            )

        logger.info(
            "preference_saved "
            + kv(
                id=preference_id,
                student_id=student_id,
                meal_type=meal.value,
                date=on_date,
                eating_status=status.value,
                portion_size=portion.value,
            )
        )
        return {
            "success": True,
            "id": preference_id,
            "message": "Preference saved successfully",
        }

    @staticmethod
    def get_stats_for_date(db: Session, on_date: date) -> Dict[str, Dict[str, Any]]:
        """
        Tally preferences for a date per meal.

        Each meal gets a total, a count per eating status and, for students who
        are not skipping, a count per portion size. Both meals are always
        present, zeroed when nobody has responded.
        """
        stats = {meal.value: empty_meal_stats() for meal in MealType}

        for row in PreferenceRepository(db).get_grouped_counts(on_date):
            meal = stats.get(row["meal_type"])
            if meal is None:
                continue
            meal["total"] += row["count"]
            meal[row["eating_status"]] += row["count"]
            if row["eating_status"] != EatingStatus.SKIP.value:
                meal["portions"][row["portion_size"]] += row["count"]

        return stats

    @staticmethod
    def get_student_preferences(
        db: Session, student_id: str, on_date: Optional[date] = None
    ) -> List[MealPreference]:
        """Current preferences of one student for a date (default: today)"""
        return PreferenceRepository(db).get_by_student_and_date(
            student_id, on_date or today()
        )
