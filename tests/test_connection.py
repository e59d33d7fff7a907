"""Tests for the connection provider."""

import psycopg2
import pytest

from db import connection
from db.connection import close_connection, get_connection
from tests.conftest import FakeConnection


def test_get_connection_uses_configured_url(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[str] = []
    fake = FakeConnection()

    def fake_connect(dsn: str) -> FakeConnection:
        seen.append(dsn)
        return fake

    monkeypatch.setattr(connection.psycopg2, "connect", fake_connect)

    assert get_connection() is fake
    assert seen == [connection.DATABASE_URL]


def test_get_connection_surfaces_operational_error(monkeypatch: pytest.MonkeyPatch) -> None:
    error = psycopg2.OperationalError("connection refused")

    def refuse(_dsn: str) -> None:
        raise error

    monkeypatch.setattr(connection.psycopg2, "connect", refuse)

    with pytest.raises(psycopg2.OperationalError) as exc_info:
        get_connection()
    assert exc_info.value is error


def test_close_connection_is_idempotent() -> None:
    fake = FakeConnection()

    close_connection(fake)
    close_connection(fake)
    close_connection(None)

    assert fake.closed == 1
