"""Database connectivity bootstrap.

``connect_db`` is called once before the WSGI application starts
serving requests.  A failure is logged and reported to the caller but
does not stop the process; requests that reach the store afterwards
fail through the regular exception handler.
"""

from __future__ import annotations

import time

import structlog
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections

logger = structlog.get_logger(__name__)


def ping_database(alias: str = DEFAULT_DB_ALIAS) -> float:
    """Open the connection and run ``SELECT 1``.

    Returns the round-trip time in milliseconds.  Raises ``DatabaseError``
    when the store is unreachable.
    """
    start = time.monotonic()
    conn = connections[alias]
    conn.ensure_connection()
    with conn.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    return round((time.monotonic() - start) * 1000, 2)


def connect_db(alias: str = DEFAULT_DB_ALIAS) -> bool:
    """Verify the database is reachable. Returns ``True`` on success."""
    try:
        elapsed = ping_database(alias)
    except DatabaseError as exc:
        logger.error("database_connection_failed", alias=alias, error=str(exc))
        return False
    logger.info("database_connected", alias=alias, response_time_ms=elapsed)
    return True
