"""
Daily dining models: attendance preferences, today's menu and feedback.
"""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    Date,
    DateTime,
    ForeignKey,
    JSON,
    CheckConstraint,
    UniqueConstraint,
    Index,
)

from domain.clock import utc_now
from domain.enums import EatingStatus, MealType, PortionSize, enum_values
from domain.models.database import Base


def _in_check(column: str, enum_cls) -> str:
    values = ", ".join(f"'{v}'" for v in enum_values(enum_cls))
    return f"{column} IN ({values})"


class MealPreference(Base):
    """A student's attendance intent and portion for one meal on one date"""

    __tablename__ = "meal_preferences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(
        Text,
        ForeignKey("students.student_id", ondelete="CASCADE"),
        nullable=False,
    )
    meal_type = Column(Text, nullable=False)
    date = Column(Date, nullable=False)
    eating_status = Column(Text, nullable=False)
    portion_size = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "student_id", "meal_type", "date", name="uq_preference_student_meal_date"
        ),
        CheckConstraint(_in_check("meal_type", MealType), name="ck_preference_meal_type"),
        CheckConstraint(
            _in_check("eating_status", EatingStatus), name="ck_preference_eating_status"
        ),
        CheckConstraint(
            _in_check("portion_size", PortionSize), name="ck_preference_portion_size"
        ),
        Index("ix_preference_date", "date"),
    )


class Menu(Base):
    """Menu items served for one meal on one date"""

    __tablename__ = "menu"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False)
    meal_type = Column(Text, nullable=False)
    items = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    __table_args__ = (
        UniqueConstraint("date", "meal_type", name="uq_menu_date_meal"),
        CheckConstraint(_in_check("meal_type", MealType), name="ck_menu_meal_type"),
    )


class Feedback(Base):
    """Star-rated feedback; append-only"""

    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(
        Text,
        ForeignKey("students.student_id", ondelete="CASCADE"),
        nullable=False,
    )
    feedback_text = Column(Text, nullable=False, default="")
    rating = Column(Integer, nullable=False)
    meal_type = Column(Text, nullable=False, default="general")
    date = Column(Date, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)

    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_feedback_rating_range"),
        Index("ix_feedback_created_at", "created_at"),
    )
