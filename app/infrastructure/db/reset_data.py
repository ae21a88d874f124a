from __future__ import annotations

import asyncio
import logging

from app.infrastructure.db.postgres import PostgresDatabase, load_config_from_env

logger = logging.getLogger(__name__)


_TRUNCATE_SQL = """
TRUNCATE TABLE
    tasks
RESTART IDENTITY CASCADE;
"""


async def reset_domain_data(db: PostgresDatabase) -> None:
    """
    Remove every task.

    schema_migrations is left alone so applied migrations stay applied.
    """
    logger.info("Resetting domain data")
    await db.execute(_TRUNCATE_SQL)
    logger.info("Reset done")


async def _main_cli() -> None:
    db = PostgresDatabase(load_config_from_env())
    await db.connect()

    try:
        await reset_domain_data(db)
    finally:
        await db.close()


if __name__ == "__main__":
    from app.logging_setup import setup_logging

    setup_logging()
    asyncio.run(_main_cli())
