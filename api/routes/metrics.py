"""Dashboard metrics routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from domain.schemas import DashboardMetrics
from services import MetricsService

router = APIRouter(tags=["Metrics"])
logger = logging.getLogger("nourishhub.api.metrics")


@router.get("/metrics", response_model=DashboardMetrics, response_model_by_alias=True)
def get_metrics(db: Session = Depends(get_db)):
    """
    Manager dashboard tiles.

    confirmationRate and avgSatisfaction are computed from stored data;
    wasteReduction and costSavings come from configuration
    (``source: "configured"``) and are null when not set.
    """
    return MetricsService.get_metrics(db)
