from typing import Dict, Any, List
from sqlalchemy.orm import Session
import logging

from app.exceptions import ServiceValidationError
from domain.clock import today
from domain.enums import MealType
from repositories import MenuRepository
from services.base import unit_of_work, coerce_enum, kv

logger = logging.getLogger("nourishhub.menu")


class MenuService:
    @staticmethod
    def clean_items(items) -> List[str]:
        """Trim menu items and drop blanks; at least one item must remain"""
        if not isinstance(items, (list, tuple)):
            raise ServiceValidationError(
                "items must be a list", details={"field": "items"}, code="MISSING_FIELD"
            )
        cleaned = [item.strip() for item in items if isinstance(item, str) and item.strip()]
        if not cleaned:
            raise ServiceValidationError(
                "items must contain at least one menu item",
                details={"field": "items"},
                code="MISSING_FIELD",
            )
        return cleaned

    @staticmethod
    def set_menu(db: Session, meal_type, items) -> Dict[str, Any]:
        """Replace today's menu for one meal; no history is kept"""
        meal = coerce_enum(MealType, meal_type, "meal_type")
        cleaned = MenuService.clean_items(items)
        on_date = today()

        with unit_of_work(db, "update_menu"):
            menu_id = MenuRepository(db).upsert(on_date, meal.value, cleaned)

        logger.info(
            f"menu_updated {kv(id=menu_id, date=on_date, meal_type=meal.value, items=len(cleaned))}"
        )
        return {"success": True, "message": "Menu updated successfully"}

    @staticmethod
    def get_today_menu(db: Session) -> Dict[str, Dict[str, Any]]:
        """Today's menus as meal_type -> {items, date}; empty when nothing is set"""
        return {
            row.meal_type: {"items": list(row.items), "date": row.date}
            for row in MenuRepository(db).get_by_date(today())
        }
