"""
Pytest configuration and shared fixtures.

Every test gets a fresh in-memory SQLite database. The FastAPI app is wired to
the same session through a ``get_db`` dependency override, so API tests can
inspect what a request wrote.
"""

import sys
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from api.dependencies import get_db
from domain.models import init_database, make_engine
from main import app


@pytest.fixture(scope="function")
def test_engine():
    """In-memory SQLite engine shared across threads for one test"""
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_database(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(test_engine) -> Generator[Session, None, None]:
    """
    Create a database session for integration tests.

    Yields:
        Session: SQLAlchemy session bound to the per-test in-memory database
    """
    SessionTesting = sessionmaker(bind=test_engine, autoflush=False, future=True)
    session = SessionTesting()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(db_session) -> Generator[TestClient, None, None]:
    """TestClient bound to the app with the database dependency overridden.

    Used without a ``with`` block so the lifespan (schema init on the real
    database file and sample seeding) never runs.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
