from typing import Optional, Tuple
from sqlalchemy.orm import Session
import logging

from domain.models import Student
from repositories import StudentRepository
from app.config import settings
from app.exceptions import NotFoundError
from services.base import unit_of_work, validate_student_id, kv

logger = logging.getLogger("nourishhub.students")


class StudentService:
    @staticmethod
    def ensure_student(db: Session, student_id: str) -> str:
        """
        Resolve a caller-supplied student id against the registry.

        Must be called inside the caller's transaction: an unknown id is
        registered in that same transaction when ``auto_register_students`` is
        enabled, so a rejected submission leaves no orphan student behind.

        Returns:
            The validated student id

        Raises:
            ServiceValidationError: If the id is blank or malformed
            NotFoundError: If the id is unknown and auto-registration is off
        """
        student_id = validate_student_id(student_id)
        repo = StudentRepository(db)
        if not settings.auto_register_students:
            if repo.get_by_student_id(student_id) is None:
                logger.warning(f"unknown student rejected {kv(student_id=student_id)}")
                raise NotFoundError(f"Student {student_id} not found")
            return student_id

        # Concurrent first submissions for one id both land on the same row
        if repo.create_if_missing(student_id):
            logger.info(f"student auto_registered {kv(student_id=student_id)}")
        return student_id

    @staticmethod
    def register_student(
        db: Session,
        student_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Tuple[Student, bool]:
        """Create a student, or fill in name/email of an existing one.

        Returns:
            The student and whether it was newly created
        """
        student_id = validate_student_id(student_id)
        repo = StudentRepository(db)

        with unit_of_work(db, "register_student"):
            student = repo.get_by_student_id(student_id)
            if student is None:
                student = repo.create_student(student_id, name=name, email=email)
                created = True
            else:
                if name is not None:
                    student.name = name
                if email is not None:
                    student.email = email
                created = False

        db.refresh(student)
        logger.info(f"student registered {kv(student_id=student_id, created=created)}")
        return student, created

    @staticmethod
    def get_student(db: Session, student_id: str) -> Student:
        student = StudentRepository(db).get_by_student_id(student_id)
        if student is None:
            raise NotFoundError(f"Student {student_id} not found")
        return student
