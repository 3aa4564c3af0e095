from typing import Dict, Any, List, Mapping
from sqlalchemy.orm import Session
from pydantic import BaseModel
import logging

from app.config import settings
from app.exceptions import ServiceValidationError
from domain.clock import next_week_start
from domain.enums import MealType, Weekday
from repositories import WeeklyOptionRepository, WeeklyVoteRepository
from services.base import unit_of_work, coerce_enum, require_text, kv
from services.student_service import StudentService

logger = logging.getLogger("nourishhub.voting")


def result_key(day: str, meal_type: str) -> str:
    return f"{day}_{meal_type}"


def parse_day(value) -> Weekday:
    raw = require_text(value.value if isinstance(value, Weekday) else value, "day")
    try:
        return Weekday.parse(raw)
    except ValueError:
        raise ServiceValidationError(
            f"Invalid day '{raw}'. Allowed: {', '.join(d.value for d in Weekday)}",
            details={"field": "day"},
            code="INVALID_CHOICE",
        )


class VotingService:
    @staticmethod
    def normalize_week_map(week_map: Mapping[str, Any]) -> List[Dict[str, str]]:
        """
        Flatten a day -> {lunch: [...], dinner: [...]} mapping into option rows.

        Day names are case-insensitive. Option strings are trimmed; blanks are
        dropped and repeats within one day/meal collapse to the first one.

        Raises:
            ServiceValidationError: On unknown days, unknown meals or non-list values
        """
        if not isinstance(week_map, Mapping):
            raise ServiceValidationError("Weekly options must be a mapping of day to meals")

        rows: List[Dict[str, str]] = []
        seen = set()
        for day_name, meals in week_map.items():
            day = parse_day(day_name)
            if isinstance(meals, BaseModel):
                meals = meals.model_dump()
            if not isinstance(meals, Mapping):
                raise ServiceValidationError(
                    f"Options for {day.value} must map meal type to a list",
                    details={"field": day.value},
                )

            for meal_name, options in meals.items():
                meal = coerce_enum(MealType, meal_name, "meal_type")
                if options is None:
                    continue
                if not isinstance(options, (list, tuple)):
                    raise ServiceValidationError(
                        f"Options for {day.value} {meal.value} must be a list",
                        details={"field": result_key(day.value, meal.value)},
                    )
                for option in options:
                    if not isinstance(option, str):
                        continue
                    text = option.strip()
                    key = (day.value, meal.value, text)
                    if not text or key in seen:
                        continue
                    seen.add(key)
                    rows.append(
                        {"day": day.value, "meal_type": meal.value, "option_text": text}
                    )
        return rows

    @staticmethod
    def set_weekly_options(db: Session, week_map: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Replace the whole weekly option set.

        Clear-all and re-insert happen in one transaction, so readers see either
        the old set or the new one. Days missing from ``week_map`` end up with
        no options. Existing votes are left untouched.
        """
        rows = VotingService.normalize_week_map(week_map)
        repo = WeeklyOptionRepository(db)

        with unit_of_work(db, "save_weekly_options"):
            removed = repo.delete_all()
            inserted = repo.bulk_create(rows)

        logger.info(f"weekly_options_replaced {kv(removed=removed, inserted=inserted)}")
        return {
            "success": True,
            "message": "Weekly voting options updated",
            "count": inserted,
        }

    @staticmethod
    def get_weekly_options(db: Session) -> Dict[str, Dict[str, List[str]]]:
        """Configured options as day -> {lunch: [...], dinner: [...]}, Monday first"""
        options: Dict[str, Dict[str, List[str]]] = {}
        for row in WeeklyOptionRepository(db).get_all_ordered():
            day = options.setdefault(row.day, {meal.value: [] for meal in MealType})
            day.setdefault(row.meal_type, []).append(row.option_text)

        return dict(sorted(options.items(), key=lambda item: Weekday(item[0]).position))

    @staticmethod
    def submit_vote(
        db: Session, student_id: str, day, meal_type, option_text: str
    ) -> Dict[str, Any]:
        """
        Record a student's choice for a weekday meal.

        One upsert keyed on (student, day, meal): voting again overwrites the
        previous choice. With ``validate_vote_options`` enabled the option must
        currently be configured for that day and meal.

        Raises:
            ServiceValidationError: On missing/invalid fields or an unknown option
            NotFoundError: If the student is unknown and auto-registration is off
        """
        day = parse_day(day)
        meal = coerce_enum(MealType, meal_type, "meal_type")
        option_text = require_text(option_text, "option_text")

        with unit_of_work(db, "save_vote"):
            student_id = StudentService.ensure_student(db, student_id)
            if settings.validate_vote_options and not WeeklyOptionRepository(
                db
            ).option_exists(day.value, meal.value, option_text):
                logger.warning(
                    "vote_rejected "
                    + kv(student_id=student_id, day=day.value, meal_type=meal.value)
                )
                raise ServiceValidationError(
                    f"'{option_text}' is not an option for {day.value} {meal.value}",
                    details={"field": "option_text"},
                    code="UNKNOWN_OPTION",
                )
            vote_id = WeeklyVoteRepository(db).upsert(
                student_id, day.value, meal.value, option_text
            )

        logger.info(
            "vote_saved "
            + kv(id=vote_id, student_id=student_id, day=day.value, meal_type=meal.value)
        )
        return {"success": True, "id": vote_id, "message": "Vote recorded"}

    @staticmethod
    def get_weekly_results(db: Session) -> Dict[str, Dict[str, int]]:
        """Vote counts keyed "{day}_{meal_type}" -> {option_text: count}"""
        results: Dict[str, Dict[str, int]] = {}
        for row in WeeklyVoteRepository(db).get_tally():
            key = result_key(row["day"], row["meal_type"])
            results.setdefault(key, {})[row["option_text"]] = row["count"]
        return results

    @staticmethod
    def get_student_votes(db: Session, student_id: str) -> Dict[str, str]:
        return {
            result_key(vote.day, vote.meal_type): vote.option_text
            for vote in WeeklyVoteRepository(db).get_by_student(student_id)
        }

    @staticmethod
    def get_voting_week() -> Dict[str, Any]:
        """The week the options apply to, starting next Monday"""
        return {"week_start": next_week_start()}
