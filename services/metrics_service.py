from datetime import datetime, timedelta
from typing import Optional
from sqlalchemy.orm import Session
import logging

from app.config import settings
from domain.clock import utc_now
from domain.schemas import DashboardMetrics, MetricCard
from repositories import FeedbackRepository, PreferenceRepository

logger = logging.getLogger("nourishhub.metrics")

WINDOW = timedelta(days=7)


class MetricsService:
    @staticmethod
    def confirmation_rate(today_count: int, last_week_count: int) -> MetricCard:
        rate = round(today_count / settings.expected_daily_headcount * 100)
        improving = today_count >= last_week_count
        return MetricCard(
            value=f"{rate}%",
            change=(
                f"{'↑' if improving else '↓'} {today_count} confirmed vs "
                f"{last_week_count} last week"
            ),
            trend="up" if improving else "down",
        )

    @staticmethod
    def satisfaction(
        avg_rating: Optional[float], count: int, previous_avg: Optional[float]
    ) -> MetricCard:
        if avg_rating is None:
            return MetricCard(value=None, change="No ratings in the last 7 days", trend="flat")

        if previous_avg is None:
            trend = "flat"
        else:
            trend = "up" if avg_rating >= previous_avg else "down"
        return MetricCard(
            value=f"{avg_rating:.1f}/5",
            change=f"Based on {count} responses",
            trend=trend,
        )

    @staticmethod
    def configured_card(value: Optional[str]) -> MetricCard:
        # Reported by the mess manager through settings; nothing here is measured
        if value is None:
            return MetricCard(value=None, change="Not measured", trend="flat", source="configured")
        return MetricCard(
            value=value, change="Reported by mess manager", trend="flat", source="configured"
        )

    @staticmethod
    def get_metrics(db: Session, now: Optional[datetime] = None) -> DashboardMetrics:
        """
        Build the manager dashboard tiles.

        Computed:
        - confirmation rate: today's non-skip preferences over the expected
          headcount, trending against the same weekday last week
        - average satisfaction: mean rating over the last 7 days with its
          sample count, trending against the 7 days before that

        Waste reduction and cost savings are not derived from data; they are
        passed through from configuration and marked ``source="configured"``.
        """
        now = now or utc_now()
        today = now.date()
        preferences = PreferenceRepository(db)
        feedback = FeedbackRepository(db)

        today_count = preferences.count_attending(today)
        last_week_count = preferences.count_attending(today - WINDOW)
        avg_rating, rating_count = feedback.get_rating_summary(now - WINDOW)
        previous_avg, _ = feedback.get_rating_summary(now - 2 * WINDOW, now - WINDOW)

        waste = settings.metrics_waste_reduction_pct
        savings = settings.metrics_cost_savings

        metrics = DashboardMetrics(
            confirmation_rate=MetricsService.confirmation_rate(today_count, last_week_count),
            avg_satisfaction=MetricsService.satisfaction(avg_rating, rating_count, previous_avg),
            waste_reduction=MetricsService.configured_card(
                f"{waste:g}%" if waste is not None else None
            ),
            cost_savings=MetricsService.configured_card(
                f"₹{round(savings / 1000)}k" if savings is not None else None
            ),
        )
        logger.debug(
            f"metrics today_count={today_count} last_week_count={last_week_count} "
            f"ratings={rating_count}"
        )
        return metrics
