"""
animal_rescue.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create tables for local development and tests.
- Optionally seed sample animals.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from animal_rescue.db.base import Base
from animal_rescue.db.seed import seed_sample_animals
from animal_rescue.observability.logging import LogEvent, get_logger

log = get_logger(__name__)


async def init_db(
    engine: AsyncEngine,
    *,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
    seed: bool = False,
) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if seed and session_factory is not None:
        async with session_factory() as session:
            inserted = await seed_sample_animals(session)
        if inserted:
            log.info(LogEvent.sample_animals_seeded, count=inserted)


# --- Module Notes -----------------------------------------------------------
# Production deployments are expected to provision the schema out of band.
