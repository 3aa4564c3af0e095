"""Meal preference routes"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Dict, Optional
from datetime import date
import logging

from api.dependencies import get_db
from api.responses import AckResponse, ERROR_RESPONSES
from domain.schemas import PreferenceCreate, PreferenceResponse
from services import PreferenceService

router = APIRouter(prefix="/preferences", tags=["Preferences"])
logger = logging.getLogger("nourishhub.api.preferences")


@router.post("", response_model=AckResponse, response_model_exclude_none=True, responses=ERROR_RESPONSES)
def submit_preference(payload: PreferenceCreate, db: Session = Depends(get_db)):
    """
    Submit (or change) today's attendance intent and portion for one meal.

    Resubmitting for the same meal replaces the earlier answer.
    """
    return PreferenceService.submit_preference(
        db,
        payload.student_id,
        payload.meal_type,
        payload.eating_status,
        payload.portion_size,
    )


@router.get("/{student_id}", response_model=Dict[str, PreferenceResponse])
def get_student_preferences(
    student_id: str,
    on_date: Optional[date] = Query(None, alias="date", description="Defaults to today"),
    db: Session = Depends(get_db),
):
    """A student's current answers keyed by meal type"""
    rows = PreferenceService.get_student_preferences(db, student_id, on_date)
    return {row.meal_type: PreferenceResponse.model_validate(row) for row in rows}
