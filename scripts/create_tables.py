#!/usr/bin/env python3
"""
Create the favorites store tables on the configured database.
"""

import logging

from favorites_store.infrastructure.database.operations import get_db_manager, init_db
from favorites_store.infrastructure.logging.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_tables():
    """Create all database tables"""
    setup_logging()
    init_db()
    health = get_db_manager().health_check()
    logger.info("Database status: %s", health["status"])


if __name__ == "__main__":
    create_tables()
