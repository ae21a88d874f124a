from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Set

from .postgres import PostgresDatabase, load_config_from_env

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"


async def _ensure_migrations_table(db: PostgresDatabase) -> None:
    """
    Create the bookkeeping table for applied migrations.
    Only the version (001, 002, ...) is stored.
    """
    sql = """
    CREATE TABLE IF NOT EXISTS schema_migrations (
        version    TEXT PRIMARY KEY,
        applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    );
    """
    await db.execute(sql)


async def _get_applied_versions(db: PostgresDatabase) -> Set[str]:
    rows = await db.fetch("SELECT version FROM schema_migrations;")
    return {row["version"] for row in rows}


async def _apply_migration(db: PostgresDatabase, version: str, sql: str) -> None:
    """
    Apply one migration inside a transaction and record its version.
    """
    async def _run(conn) -> None:
        async with conn.transaction():
            await conn.execute(sql)
            await conn.execute(
                "INSERT INTO schema_migrations (version) VALUES ($1);",
                version,
            )

    await db.with_connection(_run)


def migration_version(path: Path) -> str:
    # 001_create_tasks.sql -> "001"
    return path.stem.split("_", 1)[0]


async def apply_migrations(
    db: PostgresDatabase,
    migrations_dir: Path = MIGRATIONS_DIR,
) -> List[str]:
    """
    Apply every *.sql file in `migrations_dir` that is not applied yet,
    in file name order. Returns the versions applied by this call.
    """
    if not migrations_dir.exists():
        raise RuntimeError(f"Migrations directory does not exist: {migrations_dir}")

    await _ensure_migrations_table(db)
    applied_versions = await _get_applied_versions(db)

    migration_files = sorted(migrations_dir.glob("*.sql"))
    if not migration_files:
        logger.info("No migration files found in %s", migrations_dir)
        return []

    applied_now: List[str] = []
    for path in migration_files:
        version = migration_version(path)
        if version in applied_versions:
            continue

        logger.info("Applying migration %s from %s", version, path.name)
        await _apply_migration(db, version, path.read_text(encoding="utf-8"))
        applied_now.append(version)

    logger.info("Migrations completed, %d applied", len(applied_now))
    return applied_now


async def run_migrations() -> None:
    db = PostgresDatabase(load_config_from_env())

    await db.connect()
    try:
        await apply_migrations(db)
    finally:
        await db.close()


if __name__ == "__main__":
    from app.logging_setup import setup_logging

    setup_logging()
    asyncio.run(run_migrations())
