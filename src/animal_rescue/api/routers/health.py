"""
animal_rescue.api.routers.health

Liveness and readiness checks for the gateway and the container platform.

`/readyz` only reports ready once the animals table can be queried, so a
fresh deployment whose schema is missing stays out of rotation.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from animal_rescue.api.deps import db_session, settings_dep
from animal_rescue.db.models import Animal
from animal_rescue.observability.logging import LogEvent, get_logger
from animal_rescue.settings import Settings

log = get_logger(__name__)

router = APIRouter()


@router.get("/healthz")
async def healthz(settings: Settings = Depends(settings_dep)) -> dict[str, str]:
    return {"status": "ok", "service": settings.service_name}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str | int]:
    try:
        animals = (await session.execute(select(func.count()).select_from(Animal))).scalar_one()
    except SQLAlchemyError as e:
        log.error(LogEvent.readiness_check_failed, error=str(e))
        raise HTTPException(
            status_code=HTTP_503_SERVICE_UNAVAILABLE, detail="Database unavailable"
        ) from e
    return {"status": "ready", "animals": animals}
