"""
Database table creation script.

Creates (or with --drop, recreates) every table registered on Base.metadata.

Dependencies: sqlalchemy, mangaverse.configs
System role: Database schema initialization

Usage:
    python -m mangaverse.boundary.db.create_tables [--drop]
"""

import argparse
import logging

from sqlalchemy import Engine

from mangaverse.boundary.db.base import Base
from mangaverse.boundary.db.connection import get_engine

# Registers every model table on Base.metadata
import mangaverse.boundary.db.models  # noqa: F401

logger = logging.getLogger(__name__)


def create_all_tables(engine: Engine | None = None, drop_first: bool = False) -> list[str]:
    """
    Create missing tables; existing tables are left untouched.

    Args:
        engine: Target engine, defaults to the configured Postgres engine
        drop_first: Drop every table (and its data) before creating

    Returns:
        Names of the tables known to the metadata
    """
    owns_engine = engine is None
    engine = engine or get_engine()
    try:
        if drop_first:
            Base.metadata.drop_all(bind=engine)
            logger.warning("All tables dropped")
        Base.metadata.create_all(bind=engine)
    finally:
        if owns_engine:
            engine.dispose()

    tables = sorted(Base.metadata.tables.keys())
    logger.info("Tables created", extra={"tables": tables})
    return tables


def main() -> None:
    from mangaverse.configs import get_settings
    from mangaverse.observability import configure_logging

    parser = argparse.ArgumentParser(description="Create the Mangaverse database tables")
    parser.add_argument("--drop", action="store_true", help="Drop existing tables first (destroys data)")
    args = parser.parse_args()

    configure_logging(get_settings().log_level)
    create_all_tables(drop_first=args.drop)


if __name__ == "__main__":
    main()
