"""Weekly menu voting routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Dict, List
import logging

from api.dependencies import get_db
from api.responses import AckResponse, ERROR_RESPONSES
from domain.schemas import DayOptions, VoteCreate, VotingWeek
from services import VotingService

router = APIRouter(prefix="/voting", tags=["Voting"])
logger = logging.getLogger("nourishhub.api.voting")


@router.get("/weekly-options", response_model=Dict[str, Dict[str, List[str]]])
def get_weekly_options(db: Session = Depends(get_db)):
    """Configured options per weekday: {"Monday": {"lunch": [...], "dinner": [...]}}"""
    return VotingService.get_weekly_options(db)


@router.post("/weekly-options", response_model=AckResponse, response_model_exclude_none=True, responses=ERROR_RESPONSES)
def set_weekly_options(payload: Dict[str, DayOptions], db: Session = Depends(get_db)):
    """
    Replace the entire weekly option set.

    Days left out of the payload lose all their options.
    """
    return VotingService.set_weekly_options(db, payload)


@router.post("/weekly-vote", response_model=AckResponse, response_model_exclude_none=True, responses=ERROR_RESPONSES)
def submit_vote(payload: VoteCreate, db: Session = Depends(get_db)):
    """Vote for one option of a weekday meal; voting again replaces the vote"""
    return VotingService.submit_vote(
        db, payload.student_id, payload.day, payload.meal_type, payload.option_text
    )


@router.get("/weekly-results", response_model=Dict[str, Dict[str, int]])
def get_weekly_results(db: Session = Depends(get_db)):
    """Tallies keyed "{day}_{meal_type}" -> {option_text: count}"""
    return VotingService.get_weekly_results(db)


@router.get("/week", response_model=VotingWeek)
def get_voting_week():
    """Start date (next Monday) of the week being voted on"""
    return VotingService.get_voting_week()


@router.get("/votes/{student_id}", response_model=Dict[str, str])
def get_student_votes(student_id: str, db: Session = Depends(get_db)):
    """A student's current votes keyed "{day}_{meal_type}" """
    return VotingService.get_student_votes(db, student_id)
