"""
Voting Repositories - Data access layer for weekly options and votes
"""

from typing import Dict, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func, insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from repositories.base import BaseRepository
from domain.clock import utc_now
from domain.models import WeeklyMenuOption, WeeklyVote


class WeeklyOptionRepository(BaseRepository[WeeklyMenuOption]):
    """Repository for manager-configured weekly options"""

    def __init__(self, db: Session):
        super().__init__(db, WeeklyMenuOption)

    def get_all_ordered(self) -> List[WeeklyMenuOption]:
        """All options in insertion order"""
        return self.db.query(WeeklyMenuOption).order_by(WeeklyMenuOption.id).all()

    def delete_all(self) -> int:
        count = self.db.query(WeeklyMenuOption).delete(synchronize_session="fetch")
        self.db.flush()
        return count

    def bulk_create(self, rows: List[dict]) -> int:
        """Insert option rows ({day, meal_type, option_text}) in order"""
        if rows:
            self.db.execute(insert(WeeklyMenuOption), rows)
        return len(rows)

    def option_exists(self, day: str, meal_type: str, option_text: str) -> bool:
        return (
            self.db.query(WeeklyMenuOption.id)
            .filter(
                WeeklyMenuOption.day == day,
                WeeklyMenuOption.meal_type == meal_type,
                WeeklyMenuOption.option_text == option_text,
            )
            .first()
            is not None
        )


class WeeklyVoteRepository(BaseRepository[WeeklyVote]):
    """Repository for student weekly votes"""

    def __init__(self, db: Session):
        super().__init__(db, WeeklyVote)

    def upsert(self, student_id: str, day: str, meal_type: str, option_text: str) -> int:
        """Insert the vote or replace the option of the existing one; returns row id"""
        stmt = sqlite_insert(WeeklyVote).values(
            student_id=student_id,
            day=day,
            meal_type=meal_type,
            option_text=option_text,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["student_id", "day", "meal_type"],
            set_={"option_text": stmt.excluded["option_text"], "updated_at": utc_now()},
        ).returning(WeeklyVote.id)
        return self.db.execute(stmt).scalar_one()

    def get_by_key(
        self, student_id: str, day: str, meal_type: str
    ) -> Optional[WeeklyVote]:
        return (
            self.db.query(WeeklyVote)
            .filter(
                WeeklyVote.student_id == student_id,
                WeeklyVote.day == day,
                WeeklyVote.meal_type == meal_type,
            )
            .first()
        )

    def get_by_student(self, student_id: str) -> List[WeeklyVote]:
        return (
            self.db.query(WeeklyVote)
            .filter(WeeklyVote.student_id == student_id)
            .order_by(WeeklyVote.id)
            .all()
        )

    def get_tally(self) -> List[Dict]:
        """Vote counts grouped by (day, meal_type, option_text)"""
        results = (
            self.db.query(
                WeeklyVote.day,
                WeeklyVote.meal_type,
                WeeklyVote.option_text,
                func.count(WeeklyVote.id).label("count"),
            )
            .group_by(WeeklyVote.day, WeeklyVote.meal_type, WeeklyVote.option_text)
            .order_by(func.count(WeeklyVote.id).desc(), WeeklyVote.option_text)
            .all()
        )

        return [
            {
                "day": r.day,
                "meal_type": r.meal_type,
                "option_text": r.option_text,
                "count": r.count,
            }
            for r in results
        ]
