"""Database session and connection management"""

import logging
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from quiz_state.models.db import Base
from quiz_state.config import settings

logger = logging.getLogger(__name__)

# Seconds a SQLite connection waits for another writer to finish
SQLITE_BUSY_TIMEOUT = 30

def _use_immediate_transactions(engine: Engine) -> None:
    """
    Make every SQLite transaction take the database write lock up front.

    pysqlite defers BEGIN until the first write, so two transactions can both
    read the quiz counter before either locks it. Disabling the driver's own
    BEGIN and emitting BEGIN IMMEDIATE serializes transactions across
    connections and processes.
    """
    @event.listens_for(engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

class Database:
    """Database connection and session manager"""

    def __init__(self):
        """Initialize database manager state"""
        self._engine = None
        self._SessionLocal = None

    @property
    def is_initialized(self) -> bool:
        """Whether init() has been called and sessions can be opened"""
        return self._SessionLocal is not None

    def _engine_options(self, connection_string: str) -> dict:
        """
        Engine keyword arguments for the given URL.

        An in-memory SQLite database lives inside a single connection, so it is
        pinned to one shared connection for every session.
        """
        if connection_string.startswith('sqlite') and (
                ':memory:' in connection_string or connection_string.rstrip('/') == 'sqlite:'):
            return {
                'connect_args': {'check_same_thread': False},
                'poolclass': StaticPool,
            }
        if connection_string.startswith('sqlite'):
            return {'connect_args': {'check_same_thread': False, 'timeout': SQLITE_BUSY_TIMEOUT}}
        return {}

    def init(self, connection_string: Optional[str] = None) -> None:
        """
        Initialize database connection and create tables.

        This should be called once at application startup.

        Args:
            connection_string: SQLAlchemy URL, defaults to settings.DATABASE_URL

        Raises:
            SQLAlchemyError: If database initialization fails
        """
        connection_string = connection_string or settings.DATABASE_URL
        try:
            self._engine = create_engine(connection_string, **self._engine_options(connection_string))
            if self._engine.dialect.name == 'sqlite':
                _use_immediate_transactions(self._engine)
            Base.metadata.create_all(self._engine)
            self._SessionLocal = sessionmaker(bind=self._engine)
            logger.info("Database initialized successfully")

        except SQLAlchemyError as e:
            logger.error(f"Database initialization failed: {e}")
            raise

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Provide a transactional scope around a series of database operations.

        Everything done inside the block is committed together when it exits
        normally and rolled back when it raises.

        Usage:
            with db.session() as session:
                session.add(some_object)

        Yields:
            Session: SQLAlchemy database session

        Raises:
            RuntimeError: If database not initialized
            SQLAlchemyError: If database operations fail
        """
        if not self._SessionLocal:
            raise RuntimeError("Database not initialized. Call init() first.")

        session = self._SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        """
        Clean up database connections.
        Should be called during application shutdown.
        """
        if self._engine:
            self._engine.dispose()
            self._engine = None
            self._SessionLocal = None

# Global database instance
db = Database()
