"""
tests.test_smoke

Minimal smoke tests to validate the service can boot and serve core endpoints.
"""

from __future__ import annotations

import httpx
import pytest
from fastapi import FastAPI

from animal_rescue.db.models import AdoptionRequest, Animal


@pytest.mark.asyncio
async def test_health_endpoints(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

    r = await client.get("/readyz")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz", headers={"x-request-id": "abc-123"})
    assert r.headers["x-request-id"] == "abc-123"

    r = await client.get("/healthz")
    assert r.headers["x-request-id"]


@pytest.mark.asyncio
async def test_dev_token_can_be_used_for_whoami(client: httpx.AsyncClient) -> None:
    r = await client.post("/dev/token", json={"subject": "alice"})
    assert r.status_code == 200
    token = r.json()["access_token"]

    r = await client.get("/whoami", headers={"Authorization": f"Bearer {token}"})
    assert r.text == "alice"


@pytest.mark.asyncio
async def test_health_reports_service_and_stock(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz")
    assert r.json()["service"] == "animal-rescue-backend"

    r = await client.get("/readyz")
    assert r.json()["animals"] == 3


@pytest.mark.asyncio
async def test_readyz_fails_without_schema(app: FastAPI, client: httpx.AsyncClient) -> None:
    async with app.state.engine.begin() as conn:
        await conn.run_sync(AdoptionRequest.__table__.drop)
        await conn.run_sync(Animal.__table__.drop)

    r = await client.get("/readyz")
    assert r.status_code == 503
    assert r.json()["detail"] == "Database unavailable"
