"""
Database configuration and session management.
"""

import logging
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger("nourishhub.database")

# Create SQLAlchemy Base
Base = declarative_base()


def make_engine(url: str, **kwargs) -> Engine:
    """Create an engine for a SQLite URL with foreign keys enforced."""
    connect_args = kwargs.pop("connect_args", {})
    # FastAPI runs sync routes in a threadpool; sessions never cross threads
    connect_args.setdefault("check_same_thread", False)
    new_engine = create_engine(url, connect_args=connect_args, future=True, **kwargs)

    @event.listens_for(new_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return new_engine


# Create engine
engine = make_engine(settings.database_url, echo=settings.db_echo)

# Create session factory
SessionLocal = sessionmaker(bind=engine, autoflush=False, future=True)


def init_database(bind: Engine = None):
    """Initialize database schema"""
    # Models must be imported so their tables are registered on Base.metadata
    import domain.models  # noqa: F401

    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info("Database tables created successfully (%s)", target.url)


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
