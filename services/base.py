"""
Shared helpers for the service layer.
Services orchestrate business operations using repositories; each mutating
operation runs inside exactly one transaction.
"""

from contextlib import contextmanager
from typing import Iterator
import logging
import re

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import ServiceValidationError, StoreError

logger = logging.getLogger("nourishhub.services")


def kv(**kwargs) -> str:
    """Render structured log data as ``key=value`` pairs"""
    return " ".join(f"{k}={v}" for k, v in kwargs.items())


@contextmanager
def unit_of_work(db: Session, operation: str) -> Iterator[Session]:
    """
    Run one logical operation in a single transaction.

    Commits when the block succeeds. Any error rolls the whole operation back;
    database errors are logged with detail and re-raised as StoreError so the
    API can answer with a generic message.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.error(f"{operation} violated a constraint: {e.orig}")
        raise StoreError(f"Failed to {operation.replace('_', ' ')}") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"{operation} failed in the database: {e}")
        raise StoreError(f"Failed to {operation.replace('_', ' ')}") from e
    except Exception:
        db.rollback()
        raise


def require_text(value, field: str) -> str:
    """Return the stripped value or raise when it is missing or blank"""
    if value is None or not str(value).strip():
        raise ServiceValidationError(
            f"{field} is required", details={"field": field}, code="MISSING_FIELD"
        )
    return str(value).strip()


def coerce_enum(enum_cls, value, field: str):
    """Map a raw value onto ``enum_cls`` or raise ServiceValidationError"""
    raw = require_text(value.value if isinstance(value, enum_cls) else value, field)
    try:
        return enum_cls(raw.lower())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ServiceValidationError(
            f"Invalid {field} '{raw}'. Allowed: {allowed}",
            details={"field": field, "allowed": [m.value for m in enum_cls]},
            code="INVALID_CHOICE",
        )


def validate_student_id(student_id) -> str:
    student_id = require_text(student_id, "student_id")
    if not re.match(settings.student_id_pattern, student_id):
        raise ServiceValidationError(
            f"Invalid student_id '{student_id}'",
            details={"field": "student_id", "pattern": settings.student_id_pattern},
            code="INVALID_STUDENT_ID",
        )
    return student_id
