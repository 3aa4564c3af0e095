"""
Tests for pure helpers: clock arithmetic, enum parsing and input validators.
"""

import pytest
from datetime import date, datetime, timedelta

from app.exceptions import ServiceValidationError
from domain.clock import next_week_start, time_ago
from domain.enums import EatingStatus, MealType, Weekday
from services.base import coerce_enum, require_text, validate_student_id
from services.feedback_service import parse_rating


# =============================================================================
# CLOCK
# =============================================================================


@pytest.mark.parametrize(
    "reference, expected",
    [
        (date(2026, 10, 17), date(2026, 10, 19)),  # Saturday
        (date(2026, 10, 18), date(2026, 10, 19)),  # Sunday rolls to tomorrow
        (date(2026, 10, 19), date(2026, 10, 26)),  # Monday rolls a full week
        (date(2026, 10, 21), date(2026, 10, 26)),  # Wednesday
    ],
)
def test_next_week_start_is_next_monday(reference, expected):
    result = next_week_start(reference)
    assert result == expected
    assert result.weekday() == 0


def test_time_ago_is_coarse():
    """
    Verifies:
    - whole days win over hours
    - whole hours below one day
    - anything under an hour is "Just now" (no minutes)
    """
    now = datetime(2026, 10, 17, 12, 0, 0)

    assert time_ago(now - timedelta(days=2, hours=3), now) == "2d ago"
    assert time_ago(now - timedelta(days=1), now) == "1d ago"
    assert time_ago(now - timedelta(hours=5, minutes=59), now) == "5h ago"
    assert time_ago(now - timedelta(minutes=59), now) == "Just now"
    assert time_ago(now, now) == "Just now"


def test_time_ago_future_timestamp_is_just_now():
    now = datetime(2026, 10, 17, 12, 0, 0)
    assert time_ago(now + timedelta(minutes=5), now) == "Just now"


# =============================================================================
# ENUMS & VALIDATORS
# =============================================================================


def test_weekday_parse_is_case_insensitive():
    assert Weekday.parse("friday") is Weekday.FRIDAY
    assert Weekday.parse("  MONDAY ") is Weekday.MONDAY
    assert Weekday.parse(Weekday.SUNDAY) is Weekday.SUNDAY

    with pytest.raises(ValueError):
        Weekday.parse("Funday")


def test_coerce_enum_accepts_values_and_members():
    assert coerce_enum(MealType, "LUNCH", "meal_type") is MealType.LUNCH
    assert coerce_enum(EatingStatus, EatingStatus.TIFFIN, "eating_status") is EatingStatus.TIFFIN


def test_coerce_enum_rejects_unknown_and_blank():
    with pytest.raises(ServiceValidationError) as exc:
        coerce_enum(EatingStatus, "partial", "eating_status")
    assert exc.value.code == "INVALID_CHOICE"
    assert "tiffin" in exc.value.details["allowed"]

    with pytest.raises(ServiceValidationError) as exc:
        coerce_enum(MealType, "", "meal_type")
    assert exc.value.code == "MISSING_FIELD"


def test_require_text_strips():
    assert require_text("  Pav Bhaji ", "option_text") == "Pav Bhaji"
    with pytest.raises(ServiceValidationError):
        require_text(None, "option_text")


@pytest.mark.parametrize("student_id", ["STU001", "STU500", "STU1234"])
def test_validate_student_id_accepts_pattern(student_id):
    assert validate_student_id(student_id) == student_id


@pytest.mark.parametrize("student_id", ["", "   ", "stu001", "STU1", "student-42"])
def test_validate_student_id_rejects(student_id):
    with pytest.raises(ServiceValidationError):
        validate_student_id(student_id)


# =============================================================================
# RATING PARSING
# =============================================================================


@pytest.mark.parametrize("value, expected", [(1, 1), (5, 5), ("3", 3), (" 4 ", 4), (2.0, 2)])
def test_parse_rating_accepts(value, expected):
    assert parse_rating(value) == expected


@pytest.mark.parametrize("value", [0, 6, -1, "abc", "", None, True, 4.5, "4.5"])
def test_parse_rating_rejects(value):
    with pytest.raises(ServiceValidationError) as exc:
        parse_rating(value)
    assert exc.value.code == "INVALID_RATING"
