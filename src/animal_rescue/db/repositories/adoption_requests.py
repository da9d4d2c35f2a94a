"""
animal_rescue.db.repositories.adoption_requests

Repository for `AdoptionRequest` entities.

Responsibilities:
- Look up requests by animal and count them by adopter.
- Insert/update and delete single requests.
"""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from animal_rescue.db.models import AdoptionRequest


class AdoptionRequestRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_animal(self, animal_id: int) -> list[AdoptionRequest]:
        stmt = (
            select(AdoptionRequest)
            .where(AdoptionRequest.animal_id == animal_id)
            .order_by(AdoptionRequest.id)
        )
        return list((await self._session.execute(stmt)).scalars().all())

    async def count_by_adopter_name(self, adopter_name: str) -> int:
        stmt = (
            select(func.count())
            .select_from(AdoptionRequest)
            .where(AdoptionRequest.adopter_name == adopter_name)
        )
        return (await self._session.execute(stmt)).scalar_one()

    async def save(self, entity: AdoptionRequest) -> AdoptionRequest:
        # add() is a no-op for instances already in the session; flush assigns ids.
        self._session.add(entity)
        await self._session.flush()
        return entity

    async def delete(self, entity: AdoptionRequest) -> None:
        await self._session.delete(entity)
        await self._session.flush()


# --- Module Notes -----------------------------------------------------------
# Nothing here commits; the calling service owns the transaction boundary.
