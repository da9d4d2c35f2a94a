from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from animal_rescue.db.models import Animal

# Integer primary keys are signed 64-bit; larger ids cannot be bound as parameters.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class AnimalRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_all(self) -> list[Animal]:
        stmt = select(Animal).order_by(Animal.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def find_by_id(self, animal_id: int) -> Animal | None:
        if not MIN_ID <= animal_id <= MAX_ID:
            return None
        return await self._session.get(Animal, animal_id)
