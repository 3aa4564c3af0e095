"""Student registry routes"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from api.responses import ERROR_RESPONSES
from domain.schemas import StudentCreate, StudentResponse
from services import StudentService

router = APIRouter(prefix="/students", tags=["Students"])
logger = logging.getLogger("nourishhub.api.students")


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED, responses=ERROR_RESPONSES)
def register_student(
    payload: StudentCreate, response: Response, db: Session = Depends(get_db)
):
    """Register a student (201), or update the name/email of a known one (200)"""
    student, created = StudentService.register_student(
        db, payload.student_id, name=payload.name, email=payload.email
    )
    if not created:
        response.status_code = status.HTTP_200_OK
    return StudentResponse.model_validate(student)


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(student_id: str, db: Session = Depends(get_db)):
    """Look up a registered student"""
    return StudentResponse.model_validate(StudentService.get_student(db, student_id))
