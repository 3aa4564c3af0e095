from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel
from typing import List, Optional, Union
from datetime import date, datetime

from domain.enums import EatingStatus, MealType, PortionSize


class PreferenceCreate(BaseModel):
    """Schema for submitting a meal preference for today"""

    student_id: str = Field(..., min_length=1, description="Student id, e.g. STU042")
    meal_type: MealType
    eating_status: EatingStatus
    portion_size: PortionSize


class PreferenceResponse(BaseModel):
    """A stored meal preference"""

    id: int
    student_id: str
    meal_type: MealType
    date: date
    eating_status: EatingStatus
    portion_size: PortionSize
    updated_at: datetime

    model_config = {"from_attributes": True}


class PortionCounts(BaseModel):
    small: int = 0
    medium: int = 0
    large: int = 0


class MealStats(BaseModel):
    """Grouped preference counts for one meal"""

    total: int = 0
    yes: int = 0
    limited: int = 0
    tiffin: int = 0
    skip: int = 0
    portions: PortionCounts = Field(default_factory=PortionCounts)


class DailyStats(BaseModel):
    lunch: MealStats = Field(default_factory=MealStats)
    dinner: MealStats = Field(default_factory=MealStats)


class MenuSetRequest(BaseModel):
    """Schema for the manager replacing today's menu for one meal"""

    meal_type: MealType
    items: List[str] = Field(..., min_length=1, description="Menu items, in serving order")


class MenuEntry(BaseModel):
    items: List[str]
    date: date


class FeedbackCreate(BaseModel):
    """Schema for submitting feedback; rating is parsed by the service"""

    student_id: str = Field(..., min_length=1)
    feedback_text: Optional[str] = Field(None, description="Free-text comment")
    # Strict members keep JSON booleans from being coerced to 1
    rating: Union[StrictInt, StrictFloat, StrictStr] = Field(
        ..., description="Star rating from 1 to 5"
    )
    meal_type: Optional[str] = Field(
        None, description="lunch, dinner or general; blank means general"
    )


class FeedbackItem(BaseModel):
    """One entry of the recent feedback feed"""

    id: int
    name: str
    feedback: str
    rating: int
    meal_type: str
    time: str


class MetricCard(BaseModel):
    """A dashboard tile"""

    value: Optional[str] = None
    change: str
    trend: str = Field(..., description="up, down or flat")
    source: str = Field("computed", description="computed or configured")


class DashboardMetrics(BaseModel):
    """Fixed-shape dashboard metrics (serialized with camelCase keys)"""

    confirmation_rate: MetricCard
    avg_satisfaction: MetricCard
    waste_reduction: MetricCard
    cost_savings: MetricCard

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
