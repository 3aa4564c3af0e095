from pydantic import BaseModel, ConfigDict, Field
from typing import List
from datetime import date

from domain.enums import MealType


class DayOptions(BaseModel):
    """Options for one weekday; unknown meal keys are rejected"""

    lunch: List[str] = Field(default_factory=list)
    dinner: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class VoteCreate(BaseModel):
    """Schema for a student's weekly vote"""

    student_id: str = Field(..., min_length=1)
    day: str = Field(..., min_length=1, description="Weekday name, e.g. Friday")
    meal_type: MealType
    option_text: str = Field(..., min_length=1)


class VotingWeek(BaseModel):
    week_start: date
