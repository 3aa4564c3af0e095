"""
Student registry model.
"""

from sqlalchemy import Column, Integer, Text, DateTime

from domain.clock import utc_now
from domain.models.database import Base


class Student(Base):
    """A student known to the mess, identified by an opaque ``STU###`` id"""

    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Text, unique=True, nullable=False)
    name = Column(Text)
    email = Column(Text)
    created_at = Column(DateTime, default=utc_now, nullable=False)
