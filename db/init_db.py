"""
db/init_db.py
-------------
Creates the `users` table if it does not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import close_connection, get_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: surrogate key, display name and a unique email address
CREATE TABLE IF NOT EXISTS users (
    id      SERIAL PRIMARY KEY,
    name    VARCHAR(100) NOT NULL,
    email   VARCHAR(255) NOT NULL UNIQUE
);
"""


def create_tables(conn) -> None:
    """
    Execute the schema SQL on the given connection.
    Safe to call multiple times (uses IF NOT EXISTS).

    Args:
        conn: An open psycopg2 connection.
    """
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    connection = get_connection()
    try:
        create_tables(connection)
    finally:
        close_connection(connection)
    print("✅ Database schema created successfully.")
