"""
Comprehensive tests for the HTTP API.

Requests go through the real app (middleware, exception handlers, routers)
against the per-test in-memory database.
"""

from datetime import timedelta

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.config import settings
from domain.clock import today
from domain.models import Feedback
from test_fixtures import LUNCH_MENU, WEEKLY_OPTIONS, hours_ago, make_feedback, make_student

API = settings.api_prefix


# =============================================================================
# HEALTH
# =============================================================================


def test_health_check(client: TestClient):
    response = client.get(f"{API}/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == settings.app_name
    assert "timestamp" in data


def test_responses_carry_request_id(client: TestClient):
    response = client.get(f"{API}/health")

    assert response.headers.get("X-Request-ID")
    assert "X-Process-Time" in response.headers


# =============================================================================
# MENU
# =============================================================================


def test_menu_set_and_get_today(client: TestClient):
    response = client.post(f"{API}/menu/set", json={"meal_type": "lunch", "items": LUNCH_MENU})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Menu updated successfully"}

    menu = client.get(f"{API}/menu/today").json()
    assert menu == {"lunch": {"items": LUNCH_MENU, "date": today().isoformat()}}


def test_menu_today_empty(client: TestClient):
    response = client.get(f"{API}/menu/today")

    assert response.status_code == 200
    assert response.json() == {}


def test_menu_set_missing_items(client: TestClient):
    response = client.post(f"{API}/menu/set", json={"meal_type": "lunch"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"][0]["field"] == "items"


def test_menu_set_only_blank_items(client: TestClient):
    response = client.post(f"{API}/menu/set", json={"meal_type": "dinner", "items": [" "]})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "MISSING_FIELD"


# =============================================================================
# PREFERENCES AND STATS
# =============================================================================


def test_submit_preference_and_stats(client: TestClient):
    response = client.post(
        f"{API}/preferences",
        json={
            "student_id": "STU001",
            "meal_type": "lunch",
            "eating_status": "yes",
            "portion_size": "large",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert isinstance(body["id"], int)
    assert body["message"] == "Preference saved successfully"

    stats = client.get(f"{API}/stats/today").json()
    assert stats["lunch"]["total"] == 1
    assert stats["lunch"]["yes"] == 1
    assert stats["lunch"]["portions"]["large"] == 1
    assert stats["dinner"]["total"] == 0


def test_resubmitted_preference_counts_once(client: TestClient):
    payload = {
        "student_id": "STU002",
        "meal_type": "dinner",
        "eating_status": "yes",
        "portion_size": "small",
    }
    client.post(f"{API}/preferences", json=payload)
    client.post(f"{API}/preferences", json={**payload, "eating_status": "skip"})

    dinner = client.get(f"{API}/stats/today").json()["dinner"]
    assert dinner["total"] == 1
    assert dinner["skip"] == 1
    assert dinner["portions"] == {"small": 0, "medium": 0, "large": 0}


def test_submit_preference_missing_field(client: TestClient):
    response = client.post(
        f"{API}/preferences",
        json={"student_id": "STU001", "meal_type": "lunch", "eating_status": "yes"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"]["message"] == "Missing or invalid fields"
    assert "timestamp" in body


def test_submit_preference_invalid_choice(client: TestClient):
    response = client.post(
        f"{API}/preferences",
        json={
            "student_id": "STU001",
            "meal_type": "breakfast",
            "eating_status": "yes",
            "portion_size": "medium",
        },
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_get_student_preferences(client: TestClient):
    client.post(
        f"{API}/preferences",
        json={
            "student_id": "STU003",
            "meal_type": "dinner",
            "eating_status": "tiffin",
            "portion_size": "medium",
        },
    )

    data = client.get(f"{API}/preferences/STU003").json()
    assert list(data) == ["dinner"]
    assert data["dinner"]["eating_status"] == "tiffin"

    yesterday = (today() - timedelta(days=1)).isoformat()
    assert client.get(f"{API}/preferences/STU003", params={"date": yesterday}).json() == {}


def test_stats_for_date(client: TestClient):
    response = client.get(f"{API}/stats", params={"date": "2026-01-15"})

    assert response.status_code == 200
    assert response.json()["lunch"]["total"] == 0


def test_stats_for_date_requires_valid_date(client: TestClient):
    response = client.get(f"{API}/stats", params={"date": "yesterday"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


# =============================================================================
# VOTING
# =============================================================================


def test_weekly_options_round_trip(client: TestClient):
    response = client.post(f"{API}/voting/weekly-options", json=WEEKLY_OPTIONS)

    assert response.status_code == 200
    assert response.json()["count"] == 6

    options = client.get(f"{API}/voting/weekly-options").json()
    assert list(options) == ["Monday", "Friday"]
    assert options["Friday"]["dinner"] == ["Dal Makhani + Naan", "Pav Bhaji"]


def test_weekly_options_replace_all(client: TestClient):
    client.post(f"{API}/voting/weekly-options", json=WEEKLY_OPTIONS)
    client.post(f"{API}/voting/weekly-options", json={"Monday": {"lunch": ["Poha"]}})

    options = client.get(f"{API}/voting/weekly-options").json()
    assert options == {"Monday": {"lunch": ["Poha"], "dinner": []}}


def test_weekly_options_unknown_meal_key(client: TestClient):
    response = client.post(
        f"{API}/voting/weekly-options", json={"Monday": {"breakfast": ["Poha"]}}
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_weekly_options_unknown_day(client: TestClient):
    response = client.post(f"{API}/voting/weekly-options", json={"Funday": {"lunch": ["Poha"]}})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_CHOICE"


def test_vote_and_results(client: TestClient):
    client.post(f"{API}/voting/weekly-options", json=WEEKLY_OPTIONS)
    vote = {"student_id": "STU001", "day": "Friday", "meal_type": "lunch", "option_text": "Chole Bhature"}

    first = client.post(f"{API}/voting/weekly-vote", json=vote)
    second = client.post(f"{API}/voting/weekly-vote", json=vote)

    assert first.status_code == 200
    assert first.json()["message"] == "Vote recorded"
    assert first.json()["id"] == second.json()["id"]
    assert client.get(f"{API}/voting/weekly-results").json() == {
        "Friday_lunch": {"Chole Bhature": 1}
    }
    assert client.get(f"{API}/voting/votes/STU001").json() == {
        "Friday_lunch": "Chole Bhature"
    }


def test_vote_for_unknown_option(client: TestClient):
    client.post(f"{API}/voting/weekly-options", json=WEEKLY_OPTIONS)

    response = client.post(
        f"{API}/voting/weekly-vote",
        json={"student_id": "STU001", "day": "Monday", "meal_type": "dinner", "option_text": "Pizza"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "UNKNOWN_OPTION"


def test_vote_missing_option_text(client: TestClient):
    response = client.post(
        f"{API}/voting/weekly-vote",
        json={"student_id": "STU001", "day": "Monday", "meal_type": "lunch"},
    )

    assert response.status_code == 400


def test_voting_week(client: TestClient):
    data = client.get(f"{API}/voting/week").json()

    assert data["week_start"] > today().isoformat()


# =============================================================================
# FEEDBACK
# =============================================================================


def test_submit_feedback(client: TestClient):
    response = client.post(
        f"{API}/feedback",
        json={"student_id": "STU001", "rating": 5, "feedback_text": "Loved the biryani"},
    )

    assert response.status_code == 200
    assert response.json()["message"] == "Feedback submitted successfully"

    feed = client.get(f"{API}/feedback/recent").json()
    assert feed[0]["feedback"] == "Loved the biryani"
    assert feed[0]["name"] == "Student #STU001"
    assert feed[0]["time"] == "Just now"


def test_submit_feedback_non_numeric_rating(client: TestClient):
    response = client.post(f"{API}/feedback", json={"student_id": "STU001", "rating": "abc"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_RATING"


def test_submit_feedback_rating_out_of_range(client: TestClient):
    response = client.post(f"{API}/feedback", json={"student_id": "STU001", "rating": 7})

    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"field": "rating"}


def test_submit_feedback_boolean_rating_rejected(client: TestClient, db_session: Session):
    response = client.post(f"{API}/feedback", json={"student_id": "STU001", "rating": True})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    assert db_session.query(Feedback).count() == 0


def test_submit_feedback_fractional_rating_rejected(client: TestClient, db_session: Session):
    response = client.post(f"{API}/feedback", json={"student_id": "STU001", "rating": 4.5})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_RATING"
    assert db_session.query(Feedback).count() == 0


def test_submit_feedback_blank_meal_type_is_general(client: TestClient, db_session: Session):
    response = client.post(
        f"{API}/feedback", json={"student_id": "STU001", "rating": "5", "meal_type": ""}
    )

    assert response.status_code == 200
    stored = db_session.get(Feedback, response.json()["id"])
    assert stored.rating == 5
    assert stored.meal_type == "general"


def test_submit_feedback_unknown_meal_type(client: TestClient):
    response = client.post(
        f"{API}/feedback", json={"student_id": "STU001", "rating": 3, "meal_type": "snacks"}
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_CHOICE"


def test_recent_feedback_limit(client: TestClient, db_session: Session):
    make_student(db_session, "priya")
    for hours in (1, 2, 3):
        make_feedback(db_session, "STU002", created_at=hours_ago(hours))

    feed = client.get(f"{API}/feedback/recent", params={"limit": 2}).json()

    assert len(feed) == 2
    assert feed[0]["name"] == "Priya Sharma"


def test_recent_feedback_limit_out_of_range(client: TestClient):
    response = client.get(f"{API}/feedback/recent", params={"limit": 0})

    assert response.status_code == 400


# =============================================================================
# METRICS
# =============================================================================


def test_metrics_shape(client: TestClient):
    response = client.get(f"{API}/metrics")

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"confirmationRate", "avgSatisfaction", "wasteReduction", "costSavings"}
    assert data["confirmationRate"]["value"] == "0%"
    assert data["wasteReduction"]["source"] == "configured"
    for card in data.values():
        assert set(card) == {"value", "change", "trend", "source"}


# =============================================================================
# STUDENTS
# =============================================================================


def test_register_and_get_student(client: TestClient):
    response = client.post(
        f"{API}/students", json={"student_id": "STU050", "name": "Meera Iyer"}
    )

    assert response.status_code == 201
    assert response.json()["name"] == "Meera Iyer"

    fetched = client.get(f"{API}/students/STU050")
    assert fetched.status_code == 200
    assert fetched.json()["student_id"] == "STU050"


def test_register_known_student_updates_with_200(client: TestClient):
    client.post(f"{API}/students", json={"student_id": "STU051"})

    response = client.post(
        f"{API}/students", json={"student_id": "STU051", "email": "dev@example.com"}
    )

    assert response.status_code == 200
    assert response.json()["email"] == "dev@example.com"


def test_get_unknown_student(client: TestClient):
    response = client.get(f"{API}/students/STU404")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_register_student_invalid_id(client: TestClient):
    response = client.post(f"{API}/students", json={"student_id": "meera"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_STUDENT_ID"


def test_unknown_route_uses_error_envelope(client: TestClient):
    response = client.get(f"{API}/does-not-exist")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "HTTP_404"
