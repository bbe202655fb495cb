from database import engine, Base, ensure_database_directory
from sqlalchemy import inspect
import logging

import models  # noqa: F401  registers tables on Base.metadata

logger = logging.getLogger(__name__)


def init_database(bind=None):
    """
    Create the database directory (SQLite) and any missing tables.

    Args:
        bind: Engine to initialize, defaults to the application engine
    """
    target = bind or engine
    ensure_database_directory(target.url)
    existing = set(inspect(target).get_table_names())
    Base.metadata.create_all(bind=target)

    created = sorted(set(Base.metadata.tables) - existing)
    if created:
        logger.info(f"Created tables: {', '.join(created)}")
    else:
        logger.info("Database schema up to date")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
