"""
Context manager for handling database sessions and exceptions.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Generator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rentomatic.domain.exceptions import RepositoryUnavailableError
from rentomatic.infrastructure.database.operations import get_session

logger = logging.getLogger(__name__)


@contextmanager
def managed_session(
    session_factory: Optional[Callable[[], Session]] = None,
    operation: str = "query",
) -> Generator[Session, None, None]:
    """
    Context manager for handling database sessions, including commits, rollbacks,
    and exception logging.

    Yields:
        Session: The SQLAlchemy session object.

    Raises:
        RepositoryUnavailableError: If a database-related error occurs.
        Exception: For any other unexpected errors.
    """
    session = (session_factory or get_session)()
    try:
        yield session
        session.commit()
    except SQLAlchemyError as e:
        logger.error("Database error during %s: %s", operation, e)
        session.rollback()
        raise RepositoryUnavailableError(str(e), operation) from e
    except Exception as e:
        logger.error("Unexpected error during %s: %s", operation, e)
        session.rollback()
        raise
    finally:
        session.close()
