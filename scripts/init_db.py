#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the SQLite schema and optionally seeds sample data.
"""

import argparse
import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_db")


def init_schema() -> bool:
    """Create all tables and report what exists"""
    try:
        from sqlalchemy import inspect
        from domain.models.database import engine, init_database

        init_database()
        tables = inspect(engine).get_table_names()
        logger.info(f"✓ {len(tables)} tables ready: {', '.join(sorted(tables))}")
        return True
    except Exception as e:
        logger.exception(f"✗ Failed to create schema: {e}")
        return False


def seed(include_demo_preferences: bool) -> bool:
    """Insert missing sample students, menus, options (and demo preferences)"""
    from domain.models import SessionLocal
    from services import SeedService

    db = SessionLocal()
    try:
        created = SeedService.seed_sample_data(
            db, include_demo_preferences=include_demo_preferences
        )
        logger.info(
            "✓ Seeded " + ", ".join(f"{count} {kind}" for kind, count in created.items())
        )
        return True
    except Exception as e:
        logger.exception(f"✗ Failed to seed sample data: {e}")
        return False
    finally:
        db.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the NourishHub database")
    parser.add_argument("--no-seed", action="store_true", help="Only create tables")
    parser.add_argument(
        "--demo-preferences",
        action="store_true",
        help="Also insert random preferences for today (dashboard demo)",
    )
    args = parser.parse_args(argv)

    from app.config import settings

    logger.info("=" * 60)
    logger.info(f"NourishHub Database Initialization ({settings.database_url})")
    logger.info("=" * 60)

    ok = init_schema()
    if ok and not args.no_seed:
        ok = seed(args.demo_preferences)

    if ok:
        logger.info("✓ Database is ready to use")
        return 0
    logger.error("✗ Database initialization failed")
    return 1


if __name__ == "__main__":
    sys.exit(main())
