from __future__ import annotations

from contextlib import asynccontextmanager

import pytest

from app.infrastructure.db.postgres import (
    DatabaseError,
    PostgresConfig,
    PostgresDatabase,
    affected_rows,
    load_config_from_env,
)


@pytest.mark.parametrize(
    "status, expected",
    [("DELETE 1", 1), ("DELETE 0", 0), ("INSERT 0 3", 3), ("UPDATE 12", 12), ("", 0), ("CREATE TABLE", 0)],
)
def test_affected_rows(status, expected):
    assert affected_rows(status) == expected


def test_load_config_prefers_database_url(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/tasks")
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "4")

    config = load_config_from_env()

    assert config.dsn == "postgresql://u:p@db:5432/tasks"
    assert config.max_size == 4


def test_load_config_from_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DB_HOST", "pg")
    monkeypatch.setenv("DB_PORT", "6543")
    monkeypatch.delenv("DB_POOL_MAX_SIZE", raising=False)

    config = load_config_from_env()

    assert config.dsn is None
    assert (config.host, config.port) == ("pg", 6543)
    assert config.max_size == 10


def _config() -> PostgresConfig:
    return PostgresConfig(host="h", port=1, database="d", user="u", password="p")


async def test_calls_before_connect_raise():
    db = PostgresDatabase(_config())
    assert not db.is_connected
    with pytest.raises(RuntimeError):
        await db.fetch("SELECT 1")


class _BrokenConnection:
    async def fetchrow(self, query, *args):
        raise ConnectionResetError("connection reset by peer")


class _FakePool:
    @asynccontextmanager
    async def acquire(self):
        yield _BrokenConnection()

    async def close(self):
        pass


async def test_driver_errors_become_database_error(caplog):
    db = PostgresDatabase(_config())
    db._pool = _FakePool()

    with caplog.at_level("ERROR"), pytest.raises(DatabaseError) as info:
        await db.fetchrow("SELECT 1")

    assert info.value.operation == "fetchrow"
    assert "connection reset by peer" in caplog.text
    assert "connection reset by peer" not in str(info.value)


async def test_close_is_idempotent():
    db = PostgresDatabase(_config())
    db._pool = _FakePool()

    await db.close()
    await db.close()

    assert not db.is_connected
