"""
Database engine and session management
"""

import logging
from typing import Any, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from rentomatic.infrastructure.configuration.config import get_config
from rentomatic.infrastructure.database.models import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the engine and session factory for one database URL"""

    def __init__(self, config: Optional[Any] = None, database_url: Optional[str] = None):
        self.config = config or get_config()
        self.database_url = database_url or self.config.database_url
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    def get_engine(self) -> Engine:
        """Get database engine with proper configuration"""
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        """Create database engine with backend-specific settings"""
        engine_kwargs = {
            "pool_pre_ping": True,
            "echo": False,
        }

        # SQLite-specific configurations
        if self.database_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in self.database_url or self.database_url == "sqlite://":
                engine_kwargs["poolclass"] = StaticPool

        logger.info("Creating database engine for %s", self.database_url.split("@")[-1])
        return create_engine(self.database_url, **engine_kwargs)

    def get_session_factory(self) -> sessionmaker:
        """Get the session factory bound to the engine"""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.get_engine(), autoflush=False, expire_on_commit=False
            )
        return self._session_factory

    def get_session(self) -> Session:
        """Open a new session"""
        return self.get_session_factory()()

    def init_db(self) -> None:
        """Create all tables"""
        Base.metadata.create_all(self.get_engine())
        logger.info("Database tables created")

    def dispose(self) -> None:
        """Release pooled connections"""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None


_database_manager: Optional[DatabaseManager] = None


def get_database_manager() -> DatabaseManager:
    """Get the process-wide database manager"""
    global _database_manager
    if _database_manager is None:
        _database_manager = DatabaseManager()
    return _database_manager


def get_session() -> Session:
    """Open a session on the process-wide database"""
    return get_database_manager().get_session()
