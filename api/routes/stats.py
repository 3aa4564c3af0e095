"""Preference statistics routes"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from datetime import date
import logging

from api.dependencies import get_db
from domain.clock import today
from domain.schemas import DailyStats
from services import PreferenceService

router = APIRouter(prefix="/stats", tags=["Statistics"])
logger = logging.getLogger("nourishhub.api.stats")


@router.get("/today", response_model=DailyStats)
def get_today_stats(db: Session = Depends(get_db)):
    """Per-meal totals, status counts and portion counts for today"""
    return PreferenceService.get_stats_for_date(db, today())


@router.get("", response_model=DailyStats)
def get_stats_for_date(
    on_date: date = Query(..., alias="date", description="YYYY-MM-DD"),
    db: Session = Depends(get_db),
):
    """Same tallies as /stats/today for any date"""
    return PreferenceService.get_stats_for_date(db, on_date)
