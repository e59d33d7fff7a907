"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
All SQL queries related to the `users` table live here.
"""

from typing import Iterable, Optional

from psycopg2 import extras

from db.connection import close_connection, get_connection
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """
    Repository for CRUD operations on the users table.

    Works on a single connection. Pass one in to share it with other code,
    or omit it and the repository opens (and later closes) its own.
    Every write commits immediately and every read ends its transaction,
    so the connection is never left idle in a transaction. A failed
    statement rolls back and re-raises the driver error unchanged.
    """

    def __init__(self, conn=None):
        self._owns_connection = conn is None
        self.conn = conn if conn is not None else get_connection()

    def close(self) -> None:
        """Close the connection if this repository opened it."""
        if self._owns_connection:
            close_connection(self.conn)

    def __enter__(self) -> "UserRepository":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ── CREATE ────────────────────────────────────────────

    def add(self, user: User) -> None:
        """
        Insert a new user.

        The generated id is not read back; `user.id` is left untouched.

        Raises:
            psycopg2.errors.UniqueViolation: If the email is already taken.
        """
        sql = "INSERT INTO users (name, email) VALUES (%s, %s);"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (user.name, user.email))
            self.conn.commit()
            logger.info(f"Added user {user.email}")
        except Exception as e:
            self.conn.rollback()
            logger.error(f"Failed to add user {user.email}: {e}")
            raise

    def add_many(self, users: Iterable[User]) -> None:
        """
        Insert several users in one batched round trip.

        The batch is applied atomically: if any row is rejected
        (e.g. a duplicate email) none of them are stored.
        """
        params = [(u.name, u.email) for u in users]
        if not params:
            return
        sql = "INSERT INTO users (name, email) VALUES (%s, %s);"
        try:
            with self.conn.cursor() as cur:
                extras.execute_batch(cur, sql, params, page_size=len(params))
            self.conn.commit()
            logger.info(f"Added {len(params)} users")
        except Exception as e:
            self.conn.rollback()
            logger.error(f"Failed to add {len(params)} users: {e}")
            raise

    # ── READ ──────────────────────────────────────────────

    def get_all(self) -> list[User]:
        """
        Fetch every user.

        Returns:
            List of User objects in whatever order the database returns
            them. Empty if the table is empty.
        """
        sql = "SELECT id, name, email FROM users;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_user(r) for r in cur.fetchall()]
        finally:
            self.conn.rollback()

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Fetch a single user by primary key.

        Returns:
            A User object or None if not found.
        """
        sql = "SELECT id, name, email FROM users WHERE id = %s;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (user_id,))
                row = cur.fetchone()
                return self._row_to_user(row) if row else None
        finally:
            self.conn.rollback()

    # ── UPDATE ────────────────────────────────────────────

    def update(self, user: User) -> bool:
        """
        Overwrite name and email of the user with `user.id`.

        An id with no matching row is not an error.

        Returns:
            True if a row was updated, False otherwise.
        """
        sql = "UPDATE users SET name = %s, email = %s WHERE id = %s;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (user.name, user.email, user.id))
                updated = cur.rowcount > 0
            self.conn.commit()
            return updated
        except Exception as e:
            self.conn.rollback()
            logger.error(f"Failed to update user #{user.id}: {e}")
            raise

    def update_many(self, users: Iterable[User]) -> None:
        """
        Update several users in one batched round trip.

        Ids without a matching row are skipped silently. Any failing row
        rolls back the whole batch.
        """
        params = [(u.name, u.email, u.id) for u in users]
        if not params:
            return
        sql = "UPDATE users SET name = %s, email = %s WHERE id = %s;"
        try:
            with self.conn.cursor() as cur:
                extras.execute_batch(cur, sql, params, page_size=len(params))
            self.conn.commit()
            logger.info(f"Updated batch of {len(params)} users")
        except Exception as e:
            self.conn.rollback()
            logger.error(f"Failed to update batch of {len(params)} users: {e}")
            raise

    # ── DELETE ────────────────────────────────────────────

    def delete(self, user_id: int) -> bool:
        """
        Delete a user by primary key.

        Returns:
            True if a row was deleted, False otherwise.
        """
        sql = "DELETE FROM users WHERE id = %s;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql, (user_id,))
                deleted = cur.rowcount > 0
            self.conn.commit()
            if deleted:
                logger.info(f"Deleted user #{user_id}")
            return deleted
        except Exception as e:
            self.conn.rollback()
            logger.error(f"Failed to delete user #{user_id}: {e}")
            raise

    def delete_all(self) -> int:
        """Delete every user. Returns the number of rows removed."""
        sql = "DELETE FROM users;"
        try:
            with self.conn.cursor() as cur:
                cur.execute(sql)
                deleted = cur.rowcount
            self.conn.commit()
            logger.info(f"Deleted all users ({deleted} rows)")
            return deleted
        except Exception as e:
            self.conn.rollback()
            logger.error(f"Failed to delete all users: {e}")
            raise

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        """Convert a (id, name, email) row tuple to a User domain object."""
        return User(id=row[0], name=row[1], email=row[2])
