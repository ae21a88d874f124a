from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional, Callable, Awaitable

import asyncpg

# .env is loaded by app.config; it must be imported before DB_* are read.
import app.config  # noqa: F401

logger = logging.getLogger(__name__)

# Errors raised by the driver or the socket underneath it.
_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


class DatabaseError(Exception):
    """
    Any failure talking to PostgreSQL. The driver message stays in the logs;
    callers only learn which operation failed.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"Database operation failed: {operation}")
        self.operation = operation


@dataclass(frozen=True)
class PostgresConfig:
    host: str
    port: int
    database: str
    user: str
    password: str
    dsn: Optional[str] = None
    min_size: int = 1
    max_size: int = 10


def load_config_from_env() -> PostgresConfig:
    """
    Load PostgreSQL settings from the environment (and `.env`).
    DATABASE_URL wins over the individual DB_* variables when both are set.
    """
    host = os.getenv("DB_HOST", "localhost")
    port = int(os.getenv("DB_PORT", "5432"))
    database = os.getenv("DB_NAME", "tasks")
    user = os.getenv("DB_USER", "app_user")
    password = os.getenv("DB_PASSWORD", "app_password")

    return PostgresConfig(
        host=host,
        port=port,
        database=database,
        user=user,
        password=password,
        dsn=os.getenv("DATABASE_URL") or None,
        min_size=int(os.getenv("DB_POOL_MIN_SIZE", "1")),
        max_size=int(os.getenv("DB_POOL_MAX_SIZE", "10")),
    )


def affected_rows(status: str) -> int:
    """
    Parse the row count out of a PostgreSQL command tag,
    e.g. "DELETE 1" -> 1, "INSERT 0 3" -> 3. Unknown tags give 0.
    """
    last = status.rsplit(" ", 1)[-1] if status else ""
    return int(last) if last.isdigit() else 0


class PostgresDatabase:
    """
    Connection pool over asyncpg.

    Created once per process and handed to repositories explicitly; every
    call borrows a single pooled connection for one round-trip and gives
    it back afterwards.
    """

    def __init__(self, config: PostgresConfig) -> None:
        self._config = config
        self._pool: Optional[asyncpg.Pool] = None

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    async def connect(self) -> None:
        if self._pool is not None:
            return

        try:
            if self._config.dsn:
                self._pool = await asyncpg.create_pool(
                    dsn=self._config.dsn,
                    min_size=self._config.min_size,
                    max_size=self._config.max_size,
                )
            else:
                self._pool = await asyncpg.create_pool(
                    host=self._config.host,
                    port=self._config.port,
                    database=self._config.database,
                    user=self._config.user,
                    password=self._config.password,
                    min_size=self._config.min_size,
                    max_size=self._config.max_size,
                )
        except _DRIVER_ERRORS as exc:
            logger.error("Failed to connect to the database: %r", exc)
            raise DatabaseError("connect") from exc

        logger.info("Database pool ready (max_size=%d)", self._config.max_size)

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            logger.info("Database pool closed")

    def _require_pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("PostgresDatabase is not connected")
        return self._pool

    async def execute(self, query: str, *args: Any) -> str:
        """
        Run a statement without a result set (INSERT/UPDATE/DELETE/...).
        Returns the PostgreSQL command tag.
        """
        pool = self._require_pool()
        try:
            async with pool.acquire() as connection:
                return await connection.execute(query, *args)
        except _DRIVER_ERRORS as exc:
            logger.error("Database error in execute: %r", exc)
            raise DatabaseError("execute") from exc

    async def fetch(self, query: str, *args: Any) -> list[asyncpg.Record]:
        """
        Run a query and return all rows.
        """
        pool = self._require_pool()
        try:
            async with pool.acquire() as connection:
                rows = await connection.fetch(query, *args)
                return list(rows)
        except _DRIVER_ERRORS as exc:
            logger.error("Database error in fetch: %r", exc)
            raise DatabaseError("fetch") from exc

    async def fetchrow(self, query: str, *args: Any) -> Optional[asyncpg.Record]:
        """
        Run a query and return the first row (or None).
        """
        pool = self._require_pool()
        try:
            async with pool.acquire() as connection:
                return await connection.fetchrow(query, *args)
        except _DRIVER_ERRORS as exc:
            logger.error("Database error in fetchrow: %r", exc)
            raise DatabaseError("fetchrow") from exc

    async def with_connection(
        self,
        func: Callable[[asyncpg.Connection], Awaitable[Any]],
    ) -> Any:
        """
        Hand a raw connection to `func`, for transactions and other
        connection-scoped work.
        """
        pool = self._require_pool()
        try:
            async with pool.acquire() as connection:
                return await func(connection)
        except _DRIVER_ERRORS as exc:
            logger.error("Database error in with_connection: %r", exc)
            raise DatabaseError("with_connection") from exc
