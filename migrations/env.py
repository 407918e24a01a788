"""Alembic environment for the card desk schema.

Migrations always run online against the engine built from application
settings, so ``DATABASE__URL`` selects the target database.
"""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection

from carddesk.core.config import get_settings
from carddesk.db import models  # noqa: F401
from carddesk.infrastructure.database.base import Base
from carddesk.infrastructure.database.session import build_engine

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _apply(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=Base.metadata)
    with context.begin_transaction():
        context.run_migrations()


async def upgrade_database() -> None:
    engine = build_engine(get_settings())
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_apply)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    raise SystemExit("Offline (--sql) migrations are not supported; run against a database.")

asyncio.run(upgrade_database())
