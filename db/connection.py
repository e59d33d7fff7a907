"""
db/connection.py
----------------
Opens the single PostgreSQL connection used by the tutorial.
There is no pooling and no retry: one attempt either yields a live
psycopg2 connection or the driver error reaches the caller.
"""

import psycopg2
from psycopg2 import extensions

from config import DATABASE_URL, DB_HOST, DB_NAME, DB_PORT
from utils.logger import get_logger

logger = get_logger(__name__)


def get_connection() -> extensions.connection:
    """
    Open a new connection to the configured database.

    Returns:
        A psycopg2 connection object (autocommit off).

    Raises:
        psycopg2.OperationalError: If the database is unreachable or
            the credentials are rejected.
    """
    try:
        conn = psycopg2.connect(DATABASE_URL)
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to connect to {DB_HOST}:{DB_PORT}/{DB_NAME}: {e}")
        raise
    logger.info(f"Connected to {DB_HOST}:{DB_PORT}/{DB_NAME}")
    return conn


def close_connection(conn) -> None:
    """
    Close a connection returned by `get_connection()`.

    Args:
        conn: The psycopg2 connection to close. ``None`` and already
            closed connections are ignored.
    """
    if conn is None or conn.closed:
        return
    conn.close()
    logger.info("Database connection closed.")
