from typing import Dict, Optional
from sqlalchemy.orm import Session
import logging
import random

from domain.clock import today
from domain.enums import EatingStatus, MealType, PortionSize, Weekday
from repositories import (
    MenuRepository,
    PreferenceRepository,
    StudentRepository,
    WeeklyOptionRepository,
)
from services.base import unit_of_work, kv

logger = logging.getLogger("nourishhub.seed")

SAMPLE_STUDENTS = [
    ("STU001", "Rahul Kumar", "rahul@example.com"),
    ("STU002", "Priya Sharma", "priya@example.com"),
    ("STU003", "Amit Patel", "amit@example.com"),
]

SAMPLE_MENU = {
    MealType.LUNCH: [
        "Dal Tadka + Jeera Rice",
        "Mixed Veg Curry + Raita + Papad",
        "Gulab Jamun",
    ],
    MealType.DINNER: [
        "Paneer Butter Masala + Roti",
        "Dal Fry + Aloo Sabzi + Salad",
        "Ice Cream",
    ],
}

SAMPLE_WEEKLY_OPTIONS = {
    MealType.LUNCH: ["Rajma Chawal", "Veg Biryani", "Chole Bhature", "South Indian Meals"],
    MealType.DINNER: [
        "Paneer Tikka + Roti",
        "Veg Fried Rice + Manchurian",
        "Dal Makhani + Naan",
        "Pav Bhaji",
    ],
}

# Demo respondents per meal, drawn from STU001..STU500
DEMO_RESPONSES = {MealType.LUNCH: 200, MealType.DINNER: 230}
DEMO_POPULATION = 500


class SeedService:
    @staticmethod
    def seed_sample_data(
        db: Session,
        include_demo_preferences: bool = False,
        rng: Optional[random.Random] = None,
    ) -> Dict[str, int]:
        """
        Insert sample data that is missing; safe to run on every startup.

        - sample students STU001..STU003
        - today's lunch and dinner menu, unless one is already set
        - a default weekly option set, unless options are configured
        - optionally random demo preferences for today, unless some exist

        Returns:
            Dict with the number of rows created per kind
        """
        on_date = today()
        created = {"students": 0, "menus": 0, "options": 0, "preferences": 0}

        students = StudentRepository(db)
        menus = MenuRepository(db)
        options = WeeklyOptionRepository(db)
        preferences = PreferenceRepository(db)

        with unit_of_work(db, "seed_sample_data"):
            for student_id, name, email in SAMPLE_STUDENTS:
                created["students"] += int(students.create_if_missing(student_id, name, email))

            existing_meals = {menu.meal_type for menu in menus.get_by_date(on_date)}
            for meal, items in SAMPLE_MENU.items():
                if meal.value not in existing_meals:
                    menus.upsert(on_date, meal.value, items)
                    created["menus"] += 1

            if options.count() == 0:
                rows = [
                    {"day": day.value, "meal_type": meal.value, "option_text": text}
                    for day in Weekday
                    for meal, texts in SAMPLE_WEEKLY_OPTIONS.items()
                    for text in texts
                ]
                created["options"] = options.bulk_create(rows)

            if include_demo_preferences and preferences.count_for_date(on_date) == 0:
                created["preferences"] = SeedService._seed_demo_preferences(
                    db, on_date, rng or random.Random()
                )

        logger.info(f"sample_data_seeded {kv(**created)}")
        return created

    @staticmethod
    def _seed_demo_preferences(db: Session, on_date, rng: random.Random) -> int:
        students = StudentRepository(db)
        preferences = PreferenceRepository(db)
        statuses = list(EatingStatus)
        portions = list(PortionSize)
        inserted = 0

        for meal, responses in DEMO_RESPONSES.items():
            for number in rng.sample(range(1, DEMO_POPULATION + 1), responses):
                student_id = f"STU{number:03d}"
                students.create_if_missing(student_id)
                preferences.upsert(
                    student_id,
                    meal.value,
                    on_date,
                    rng.choice(statuses).value,
                    rng.choice(portions).value,
                )
                inserted += 1
        return inserted
