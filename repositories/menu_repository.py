"""
Menu Repository - Data access layer for daily menus
"""

from datetime import date
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from repositories.base import BaseRepository
from domain.clock import utc_now
from domain.models import Menu


class MenuRepository(BaseRepository[Menu]):
    """Repository for menu data access"""

    def __init__(self, db: Session):
        super().__init__(db, Menu)

    def upsert(self, on_date: date, meal_type: str, items: List[str]) -> int:
        """Replace the single menu row for (date, meal_type); returns its id"""
        stmt = sqlite_insert(Menu).values(date=on_date, meal_type=meal_type, items=items)
        stmt = stmt.on_conflict_do_update(
            index_elements=["date", "meal_type"],
            set_={"items": stmt.excluded["items"], "updated_at": utc_now()},
        ).returning(Menu.id)
        return self.db.execute(stmt).scalar_one()

    def get_by_date(self, on_date: date) -> List[Menu]:
        return (
            self.db.query(Menu)
            .filter(Menu.date == on_date)
            .order_by(Menu.meal_type)
            .all()
        )
