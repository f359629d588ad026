"""
Context manager for handling database sessions and exceptions.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Generator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from favorites_store.infrastructure.database.operations import get_session

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]


@contextmanager
def managed_session(
    session_factory: Optional[SessionFactory] = None,
) -> Generator[Session, None, None]:
    """
    Context manager for handling database sessions, including commits, rollbacks,
    and exception logging.

    Args:
        session_factory: Callable returning a new session; the global
            database manager is used when omitted.

    Yields:
        Session: The SQLAlchemy session object.

    Raises:
        SQLAlchemyError: If a database-related error occurs.
        Exception: For any other unexpected errors.
    """
    session = session_factory() if session_factory is not None else get_session()
    try:
        yield session
        session.commit()
    except SQLAlchemyError as e:
        logger.error("DATABASE ERROR: %s", e)
        session.rollback()
        raise
    except Exception as e:
        logger.error("UNEXPECTED ERROR: %s", e)
        session.rollback()
        raise
    finally:
        session.close()
