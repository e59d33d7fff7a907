"""Shared test fixtures."""

from dataclasses import dataclass, field

import psycopg2
import pytest

from db.connection import close_connection, get_connection
from db.init_db import create_tables


@dataclass
class FakeCursor:
    """Cursor that records statements and serves queued result rows."""

    connection: "FakeConnection"
    rowcount: int = -1
    closed: bool = False
    _rows: list[tuple] = field(default_factory=list)

    def __enter__(self) -> "FakeCursor":
        return self

    def __exit__(self, *_exc) -> None:
        self.closed = True

    def execute(self, sql: str, params=None) -> None:  # type: ignore[no-untyped-def]
        self.connection.executed.append((sql, params))
        if self.connection.error is not None:
            raise self.connection.error
        self._rows = self.connection.rows
        self.rowcount = self.connection.rowcount

    def mogrify(self, sql: str, params) -> bytes:  # type: ignore[no-untyped-def]
        quoted = tuple(f"'{p}'" if isinstance(p, str) else str(p) for p in params)
        return (sql % quoted).encode()

    def fetchall(self) -> list[tuple]:
        return list(self._rows)

    def fetchone(self) -> tuple | None:
        return self._rows[0] if self._rows else None


@dataclass
class FakeConnection:
    """psycopg2-like connection tracking commits, rollbacks and cursors."""

    rows: list[tuple] = field(default_factory=list)
    rowcount: int = 0
    error: Exception | None = None
    executed: list[tuple[str, object]] = field(default_factory=list)
    cursors: list[FakeCursor] = field(default_factory=list)
    commits: int = 0
    rollbacks: int = 0
    closed: int = 0

    def cursor(self) -> FakeCursor:
        cur = FakeCursor(connection=self)
        self.cursors.append(cur)
        return cur

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1

    def close(self) -> None:
        self.closed = 1


@pytest.fixture
def fake_conn() -> FakeConnection:
    return FakeConnection()


@pytest.fixture
def pg_conn():
    """Live connection to the compose database with a fresh users table."""
    try:
        conn = get_connection()
    except psycopg2.OperationalError as e:
        pytest.skip(f"PostgreSQL not reachable: {e}")
    create_tables(conn)
    with conn.cursor() as cur:
        cur.execute("TRUNCATE users RESTART IDENTITY;")
    conn.commit()
    yield conn
    close_connection(conn)
