"""
Student Repository - Data access layer for the student registry
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from repositories.base import BaseRepository
from domain.models import Student


class StudentRepository(BaseRepository[Student]):
    """Repository for student data access"""

    def __init__(self, db: Session):
        super().__init__(db, Student)

    def get_by_student_id(self, student_id: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.student_id == student_id).first()

    def create_student(
        self, student_id: str, name: str = None, email: str = None
    ) -> Student:
        """Create a new student (flushed, not committed)"""
        return self.add(Student(student_id=student_id, name=name, email=email))

    def create_if_missing(
        self, student_id: str, name: str = None, email: str = None
    ) -> bool:
        """Insert the student unless the id is already registered.

        Returns True when a row was created.
        """
        stmt = (
            sqlite_insert(Student.__table__)
            .values(student_id=student_id, name=name, email=email)
            .on_conflict_do_nothing(index_elements=["student_id"])
        )
        return self.db.execute(stmt).rowcount == 1
