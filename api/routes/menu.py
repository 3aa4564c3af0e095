"""Today's menu routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Dict
import logging

from api.dependencies import get_db
from api.responses import AckResponse, ERROR_RESPONSES
from domain.schemas import MenuEntry, MenuSetRequest
from services import MenuService

router = APIRouter(prefix="/menu", tags=["Menu"])
logger = logging.getLogger("nourishhub.api.menu")


@router.get("/today", response_model=Dict[str, MenuEntry])
def get_today_menu(db: Session = Depends(get_db)):
    """Today's menu per meal; an empty object when nothing has been set"""
    return MenuService.get_today_menu(db)


@router.post("/set", response_model=AckResponse, response_model_exclude_none=True, responses=ERROR_RESPONSES)
def set_menu(payload: MenuSetRequest, db: Session = Depends(get_db)):
    """Mess manager replaces today's lunch or dinner menu"""
    return MenuService.set_menu(db, payload.meal_type, payload.items)
