"""
tests.conftest

Shared fixtures: an app wired to a throwaway SQLite file, seeded with a few
animals, plus helpers to act as a signed-in adopter.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import date

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from animal_rescue.api.app import create_app
from animal_rescue.auth.jwt import JwtConfig, issue_token
from animal_rescue.db.models import AdoptionRequest, Animal
from animal_rescue.settings import Settings

ANIMAL_IDS = (3, 5, 7)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'animal_rescue.db'}",
        seed_sample_data=False,
        adoption_request_limit=2,
        jwt_secret="test-secret",
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # ASGITransport does not run lifespan events; drive them explicitly.
    async with app.router.lifespan_context(app):
        async with app.state.sessionmaker() as session:
            session.add_all(
                Animal(id=i, name=f"Animal {i}", rescue_date=date(2020, 1, i)) for i in ANIMAL_IDS
            )
            await session.commit()
        yield app


@pytest.fixture
def sessionmaker(app: FastAPI) -> async_sessionmaker[AsyncSession]:
    return app.state.sessionmaker


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def auth_headers(settings: Settings):
    def _headers(name: str) -> dict[str, str]:
        token = issue_token(cfg=JwtConfig.from_settings(settings), subject=name)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def add_request(sessionmaker: async_sessionmaker[AsyncSession]):
    async def _add(animal_id: int, adopter_name: str, **fields) -> AdoptionRequest:
        async with sessionmaker() as session:
            ar = AdoptionRequest(animal_id=animal_id, adopter_name=adopter_name, **fields)
            session.add(ar)
            await session.commit()
            return ar

    return _add
