from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class StudentCreate(BaseModel):
    student_id: str = Field(..., min_length=1, description="Student id, e.g. STU042")
    name: Optional[str] = None
    email: Optional[str] = None


class StudentResponse(BaseModel):
    student_id: str
    name: Optional[str]
    email: Optional[str]
    created_at: datetime

    model_config = {"from_attributes": True}
