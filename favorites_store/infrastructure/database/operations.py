"""
Database engine and session management

The manager creates the engine lazily from Settings and hands out sessions.
Transactions are opened and closed by the repositories through
managed_session(); nothing here retries.
"""

import logging
import time
from typing import Any, Dict, Optional

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from favorites_store.infrastructure.configuration.config import Settings, get_config
from favorites_store.infrastructure.database.models import Base
from favorites_store.infrastructure.logging.logging_config import PerformanceLogger
from favorites_store.infrastructure.utilities.constants import (
    DatabaseSettings,
    PerformanceSettings,
)
from favorites_store.infrastructure.utilities.exceptions import DatabaseOperationError

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Database manager with slow query monitoring"""

    def __init__(self, config: Optional[Settings] = None):
        """Initialize database manager with configuration"""
        self.config = config or get_config()
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self.logger = logging.getLogger(__name__)

    def get_engine(self) -> Engine:
        """Get database engine with proper configuration"""
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        """Create database engine with environment-specific settings"""
        database_url = self.config.database_url
        engine_kwargs: Dict[str, Any] = {"echo": self.config.echo_sql}

        if self.config.is_sqlite:
            # One shared connection so in-memory databases survive across sessions
            engine_kwargs.update({
                "poolclass": StaticPool,
                "connect_args": {
                    "check_same_thread": False,
                    "timeout": DatabaseSettings.CONNECTION_TIMEOUT_SECONDS,
                },
            })
        else:
            if self.config.is_production:
                pool_size = DatabaseSettings.PRODUCTION_POOL_SIZE
                max_overflow = DatabaseSettings.PRODUCTION_MAX_OVERFLOW
            else:
                pool_size = DatabaseSettings.DEVELOPMENT_POOL_SIZE
                max_overflow = DatabaseSettings.DEVELOPMENT_MAX_OVERFLOW
            engine_kwargs.update({
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_recycle": DatabaseSettings.POOL_RECYCLE_SECONDS,
                "pool_pre_ping": True,
            })

        engine = create_engine(database_url, **engine_kwargs)
        self._setup_engine_events(engine)
        return engine

    def _setup_engine_events(self, engine: Engine) -> None:
        """Setup SQLAlchemy events for foreign keys and slow query logging"""
        threshold_ms = self.config.slow_query_threshold_ms

        if self.config.is_sqlite:
            @event.listens_for(engine, "connect")
            def enable_foreign_keys(dbapi_connection, connection_record):
                # SQLite ignores REFERENCES clauses unless asked per connection
                cursor = dbapi_connection.cursor()
                try:
                    cursor.execute("PRAGMA foreign_keys=ON")
                finally:
                    cursor.close()

        @event.listens_for(engine, "before_cursor_execute")
        def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            context._query_start_time = time.perf_counter()

        @event.listens_for(engine, "after_cursor_execute")
        def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            total_time_ms = (time.perf_counter() - context._query_start_time) * 1000

            if total_time_ms > threshold_ms:
                max_statement = PerformanceSettings.MAX_LOGGED_STATEMENT_LENGTH
                max_parameters = PerformanceSettings.MAX_LOGGED_PARAMETERS_LENGTH
                self.logger.warning(
                    "Slow query detected",
                    extra={
                        "query_time_ms": total_time_ms,
                        "statement": statement[:max_statement],
                        "parameters": str(parameters)[:max_parameters] if parameters else None,
                    },
                )

    def get_session_factory(self) -> sessionmaker:
        """Get session factory"""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.get_engine(),
                expire_on_commit=False,
            )
        return self._session_factory

    def get_session(self) -> Session:
        """Get database session"""
        return self.get_session_factory()()

    def create_tables(self) -> None:
        """Create all database tables"""
        try:
            with PerformanceLogger("create_tables", self.logger):
                Base.metadata.create_all(self.get_engine())
        except SQLAlchemyError as e:
            raise DatabaseOperationError(
                f"Failed to create database tables: {e}", "create_tables"
            ) from e

    def drop_tables(self) -> None:
        """Drop all database tables"""
        try:
            with PerformanceLogger("drop_tables", self.logger):
                Base.metadata.drop_all(self.get_engine())
        except SQLAlchemyError as e:
            raise DatabaseOperationError(
                f"Failed to drop database tables: {e}", "drop_tables"
            ) from e

    def health_check(self) -> Dict[str, Any]:
        """Perform database health check"""
        try:
            with self.get_session() as session:
                result = session.execute(text("SELECT 1")).scalar()
        except SQLAlchemyError as e:
            self.logger.error("Database health check failed: %s", e)
            return {"status": "unhealthy", "error": str(e)}

        if result != 1:
            return {
                "status": "unhealthy",
                "error": "Health check query returned unexpected result",
            }
        return {"status": "healthy", "environment": self.config.environment}

    def close(self) -> None:
        """Close database connections"""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
        self._session_factory = None
        self.logger.info("Database connections closed")


# Global database manager instance
_db_manager: Optional[DatabaseManager] = None


def get_db_manager() -> DatabaseManager:
    """Get global database manager instance"""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager


def set_db_manager(manager: Optional[DatabaseManager]) -> None:
    """Install the global database manager; None resets it"""
    global _db_manager
    _db_manager = manager


def get_session() -> Session:
    """Get database session from the global manager"""
    return get_db_manager().get_session()


def init_db() -> None:
    """Create the schema on the configured database"""
    get_db_manager().create_tables()
    logger.info("Database initialized")
