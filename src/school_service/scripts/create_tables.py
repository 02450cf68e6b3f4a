"""Create the database schema for all mapped tables."""
from __future__ import annotations

import asyncio
import logging

from school_service.api.middleware.request_context import configure_logging
from school_service.infrastructure.db import models  # noqa: F401  (registers mappers)
from school_service.infrastructure.db.base import Base
from school_service.infrastructure.db.session import engine

logger = logging.getLogger(__name__)


async def create_tables() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Created %d tables", len(Base.metadata.tables))
    await engine.dispose()


def main() -> None:
    configure_logging("info")
    asyncio.run(create_tables())


if __name__ == "__main__":
    main()
