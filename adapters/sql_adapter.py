from __future__ import annotations

import logging
import threading
from typing import Any, List, Mapping, Optional, Tuple

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import DatabaseError, NotConnectedError
from domain.models.database import create_db_engine, create_schema

logger = logging.getLogger("dietapi.db")

Row = Tuple[Any, ...]

# sqlite3 and psycopg2 raise some bind-time errors (an int past 64 bits, an
# unadaptable value) as plain Python exceptions that SQLAlchemy passes through.
STORE_ERRORS = (SQLAlchemyError, OverflowError, ValueError, TypeError)


class QueryGate:
    """
    Serialized access to the single database connection shared by all
    request threads.

    Every statement runs while holding one lock, so concurrent callers are
    put into a single total order of database operations. The lock is taken
    per call and released on every exit path, failures included; callers
    that issue several statements interleave with other callers between them.

    SQL is passed as SQLAlchemy ``text()`` with ``:name`` bind parameters.
    The connection runs in autocommit mode, so each ``execute`` is durable
    on return. There is no statement timeout.
    """

    def __init__(self, engine: Engine):
        self._engine = engine
        self._conn: Optional[Connection] = None
        self._lock = threading.Lock()

    @classmethod
    def from_url(cls, url: str, echo: bool = False) -> "QueryGate":
        return cls(create_db_engine(url, echo=echo))

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def connect(self) -> None:
        """Open the shared connection. Calling it again while connected is a no-op."""
        with self._lock:
            if self._conn is not None:
                return
            try:
                conn = self._engine.connect()
                self._conn = conn.execution_options(isolation_level="AUTOCOMMIT")
            except STORE_ERRORS as exc:
                logger.error("Database connection failed: %s", exc)
                raise DatabaseError(f"Database connection failed: {exc}") from exc
        logger.info("Connected to database %s", self._engine.url)

    def close(self) -> None:
        with self._lock:
            if self._conn is None:
                return
            try:
                self._conn.close()
            finally:
                self._conn = None
                self._engine.dispose()
        logger.info("Database connection closed")

    def _require_connection(self) -> Connection:
        if self._conn is None:
            logger.error("Database not connected")
            raise NotConnectedError()
        return self._conn

    def query(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Row]:
        """
        Run a SELECT and return all rows as tuples, in the order the store
        produced them.

        Raises:
            NotConnectedError: no connection is held (no I/O attempted)
            DatabaseError: the store rejected the statement
        """
        with self._lock:
            conn = self._require_connection()
            try:
                result = conn.execute(text(sql), dict(params or {}))
                return [tuple(row) for row in result.fetchall()]
            except STORE_ERRORS as exc:
                logger.error("Query failed: %s", exc)
                raise DatabaseError(f"Query failed: {exc}") from exc

    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> int:
        """
        Run a data-modifying statement and return the affected row count.

        Raises:
            NotConnectedError: no connection is held (no I/O attempted)
            DatabaseError: the store rejected the statement
        """
        with self._lock:
            conn = self._require_connection()
            try:
                result = conn.execute(text(sql), dict(params or {}))
                return result.rowcount
            except STORE_ERRORS as exc:
                logger.error("Execute failed: %s", exc)
                raise DatabaseError(f"Execute failed: {exc}") from exc

    def ping(self) -> bool:
        """True when a round trip to the store succeeds."""
        try:
            return self.query("SELECT 1") == [(1,)]
        except DatabaseError:
            return False

    def create_schema(self) -> None:
        """Create the application tables on the shared connection."""
        with self._lock:
            conn = self._require_connection()
            try:
                create_schema(conn)
            except STORE_ERRORS as exc:
                logger.error("Schema creation failed: %s", exc)
                raise DatabaseError(f"Schema creation failed: {exc}") from exc
