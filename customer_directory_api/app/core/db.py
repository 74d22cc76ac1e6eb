"""
PostgreSQL integration and schema bootstrap.

This module provides the ``StoreClient`` (a pooled connection wrapper
that executes one parameterized statement per call), the schema
bootstrap ``init_db`` run on application start, and the ``get_store``
dependency used by FastAPI routes.

The client is constructed explicitly by ``create_app`` and kept on
``app.state``; there is no module-level connection pool.  All
statements use positional ``%s`` placeholders and are never built by
interpolating caller-supplied values into SQL text.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import psycopg2
from fastapi import Request
from psycopg2 import extras, pool

logger = logging.getLogger(__name__)


SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS customers (
    customer_id     UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    first_name      VARCHAR NOT NULL,
    last_name       VARCHAR NOT NULL,
    phone_number    VARCHAR NOT NULL,
    city            VARCHAR NOT NULL,
    state           VARCHAR NOT NULL,
    postal_code     VARCHAR NOT NULL
);

-- Deleting a customer that still owns addresses is rejected by this key.
CREATE TABLE IF NOT EXISTS addresses (
    address_id      UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    customer_id     UUID REFERENCES customers(customer_id),
    address_line    VARCHAR NOT NULL,
    city            VARCHAR NOT NULL,
    state           VARCHAR NOT NULL,
    postal_code     VARCHAR NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_addresses_customer_id ON addresses(customer_id);
"""


class StoreError(Exception):
    """A statement could not be executed against the store."""


@dataclass
class QueryResult:
    """Rows returned by a statement, each a mapping of column name to value."""

    rows: List[Dict[str, Any]] = field(default_factory=list)
    row_count: int = 0

    def first(self) -> Optional[Dict[str, Any]]:
        return self.rows[0] if self.rows else None


class StoreClient:
    """Pooled access to the PostgreSQL store.

    At most ``max_connections`` statements run at the same time.
    psycopg2's pool raises ``PoolError`` once it is exhausted, so a
    bounded semaphore sits in front of it and makes extra callers wait
    for a connection to be returned instead.

    Parameters
    ----------
    dsn : str
        libpq connection string.
    sslmode : str
        Passed to libpq.  ``require`` encrypts the connection without
        validating the server certificate chain.
    min_connections, max_connections : int
        Pool bounds.
    """

    def __init__(
        self,
        dsn: str,
        sslmode: str = "require",
        min_connections: int = 1,
        max_connections: int = 10,
    ) -> None:
        self.dsn = dsn
        self.sslmode = sslmode
        self.min_connections = min_connections
        self.max_connections = max_connections
        self._pool: Optional[pool.ThreadedConnectionPool] = None
        self._slots = threading.BoundedSemaphore(max_connections)

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def open(self) -> None:
        """Create the connection pool.  Calling it twice is a no-op."""
        if self._pool is not None:
            return
        try:
            self._pool = pool.ThreadedConnectionPool(
                self.min_connections,
                self.max_connections,
                self.dsn,
                sslmode=self.sslmode,
            )
        except psycopg2.Error as exc:
            logger.error("Failed to initialize database pool: %s", exc)
            raise StoreError("Could not connect to the database") from exc
        logger.info(
            "Database connection pool opened (min=%s, max=%s)",
            self.min_connections,
            self.max_connections,
        )

    def close(self) -> None:
        """Close all pooled connections."""
        if self._pool is None:
            return
        self._pool.closeall()
        self._pool = None
        logger.info("Database connection pool closed")

    def query(self, sql: str, params: Sequence[Any] = ()) -> QueryResult:
        """Execute one statement and return its rows.

        The statement is committed on success and rolled back on
        failure.  Any driver error is raised as ``StoreError``; no rows
        are returned from a failed statement.
        """
        if self._pool is None:
            raise RuntimeError("Store is not open. Call open() first.")
        with self._slots:
            try:
                conn = self._pool.getconn()
            except psycopg2.Error as exc:
                raise StoreError("Could not acquire a database connection") from exc
            try:
                with conn.cursor(cursor_factory=extras.RealDictCursor) as cursor:
                    cursor.execute(sql, tuple(params))
                    # DDL and plain UPDATE/DELETE produce no result set
                    rows = [dict(row) for row in cursor.fetchall()] if cursor.description else []
                    row_count = cursor.rowcount
                conn.commit()
            except (psycopg2.Error, ValueError) as exc:
                # psycopg2 raises ValueError for values it cannot bind,
                # e.g. strings containing NUL characters.
                if not conn.closed:
                    try:
                        conn.rollback()
                    except psycopg2.Error:
                        logger.warning("Rollback failed; discarding connection", exc_info=True)
                        conn.close()
                raise StoreError(str(exc).strip()) from exc
            finally:
                self._pool.putconn(conn, close=bool(conn.closed))
        return QueryResult(rows=rows, row_count=row_count)

    def ping(self) -> None:
        """Round-trip a trivial statement; raises ``StoreError`` if the store is down."""
        self.query("SELECT 1")


def init_db(store: StoreClient) -> None:
    """Create the ``customers`` and ``addresses`` tables if they are absent.

    Safe to call on every start.  Errors are logged and re-raised so the
    application does not come up against a missing schema.
    """
    try:
        store.query(SCHEMA_SQL)
    except StoreError as exc:
        logger.error("Error initializing tables: %s", exc)
        raise
    logger.info("Tables initialized")


def get_store(request: Request) -> StoreClient:
    """FastAPI dependency returning the application's store client."""
    return request.app.state.store
