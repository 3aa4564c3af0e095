"""
Weekly menu voting models.
"""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    DateTime,
    ForeignKey,
    UniqueConstraint,
)

from domain.clock import utc_now
from domain.models.database import Base


class WeeklyMenuOption(Base):
    """A manager-configured option for one weekday and meal"""

    __tablename__ = "weekly_menu_options"

    id = Column(Integer, primary_key=True, autoincrement=True)
    day = Column(Text, nullable=False)
    meal_type = Column(Text, nullable=False)
    option_text = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "day", "meal_type", "option_text", name="uq_option_day_meal_text"
        ),
        # ids order options by insertion; never reuse them after a replace-all
        {"sqlite_autoincrement": True},
    )


class WeeklyVote(Base):
    """A student's choice for one weekday and meal; last write wins"""

    __tablename__ = "weekly_votes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(
        Text,
        ForeignKey("students.student_id", ondelete="CASCADE"),
        nullable=False,
    )
    day = Column(Text, nullable=False)
    meal_type = Column(Text, nullable=False)
    option_text = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "student_id", "day", "meal_type", name="uq_vote_student_day_meal"
        ),
    )
