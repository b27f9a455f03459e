"""
db/connection.py
----------------
Persistence gateway for the PostgreSQL store.
Owns the psycopg2 connection pool and is the single place where SQL is
executed. One Database instance is created at startup and handed to every
repository.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import psycopg2
from psycopg2 import pool, extras

from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class QueryResult:
    """
    Outcome of a single statement.

    Attributes:
        rowcount: Rows affected (or returned) as reported by the driver.
        rows: Result rows as dicts keyed by column name (empty for plain writes).
    """
    rowcount: int
    rows: list[dict[str, Any]] = field(default_factory=list)


class Database:
    """Pooled access to the relational store."""

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 5):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self._pool: Optional[pool.ThreadedConnectionPool] = None
        self._pool_lock = threading.Lock()
        # getconn() raises PoolError when every connection is out; callers wait here instead
        self._slots = threading.BoundedSemaphore(max_conn)

    def _get_pool(self) -> pool.ThreadedConnectionPool:
        with self._pool_lock:
            if self._pool is None:
                self._pool = pool.ThreadedConnectionPool(self.min_conn, self.max_conn, self.dsn)
                logger.info("Database connection pool initialized successfully.")
            return self._pool

    def connect(self) -> bool:
        """
        Open the pool and run a trial query.

        Returns:
            True if the database answered, False otherwise. Never raises.
        """
        try:
            result = self.execute("SELECT 1 AS ok;")
            return result.rowcount > 0
        except psycopg2.Error as e:
            logger.error(f"Database connectivity check failed: {e}")
            return False

    def execute(self, sql: str, params: Optional[Sequence[Any]] = None) -> QueryResult:
        """
        Run one statement and commit it.
        Blocks until a pooled connection is free.

        Args:
            sql: Statement text using %s placeholders.
            params: Values bound to the placeholders.

        Returns:
            A QueryResult with the affected-row count and any returned rows.

        Raises:
            psycopg2.Error: If the pool cannot be created or the statement fails.
        """
        db_pool = self._get_pool()
        with self._slots:
            conn = db_pool.getconn()
            try:
                with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                    cur.execute(sql, params)
                    rows = [dict(r) for r in cur.fetchall()] if cur.description else []
                    rowcount = cur.rowcount
                conn.commit()
                return QueryResult(rowcount=rowcount, rows=rows)
            except Exception as e:
                conn.rollback()
                logger.error(f"Query failed: {e}")
                raise
            finally:
                db_pool.putconn(conn)

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")
