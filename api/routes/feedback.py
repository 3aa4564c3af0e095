"""Feedback routes"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List
import logging

from api.dependencies import get_db
from api.responses import AckResponse, ERROR_RESPONSES
from domain.schemas import FeedbackCreate, FeedbackItem
from services import FeedbackService

router = APIRouter(prefix="/feedback", tags=["Feedback"])
logger = logging.getLogger("nourishhub.api.feedback")


@router.post("", response_model=AckResponse, response_model_exclude_none=True, responses=ERROR_RESPONSES)
def submit_feedback(payload: FeedbackCreate, db: Session = Depends(get_db)):
    """Submit a 1-5 star rating with an optional comment"""
    return FeedbackService.submit_feedback(
        db,
        payload.student_id,
        payload.rating,
        feedback_text=payload.feedback_text,
        meal_type=payload.meal_type,
    )


@router.get("/recent", response_model=List[FeedbackItem])
def get_recent_feedback(
    limit: int = Query(10, description="Number of entries, newest first"),
    db: Session = Depends(get_db),
):
    """Feedback feed for the manager dashboard"""
    return FeedbackService.get_recent_feedback(db, limit)
