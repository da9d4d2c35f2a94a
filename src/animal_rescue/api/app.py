"""
animal_rescue.api.app

FastAPI app factory for the Animal Rescue backend.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Initialize and dispose shared infrastructure (DB engine/session factory).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from animal_rescue import __version__
from animal_rescue.api.routers.animals import router as animals_router
from animal_rescue.api.routers.dev_auth import router as dev_auth_router
from animal_rescue.api.routers.health import router as health_router
from animal_rescue.db.init_db import init_db
from animal_rescue.db.session import create_engine, create_sessionmaker
from animal_rescue.observability.logging import LogEvent, configure_logging, get_logger
from animal_rescue.observability.middleware import RequestContextMiddleware
from animal_rescue.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.log_json,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info(
            LogEvent.startup,
            env=settings.env,
            adoption_request_limit=settings.adoption_request_limit,
        )
        # Create the async DB engine and session factory once and stash them on app.state.
        # Routers obtain sessions via dependencies (see `animal_rescue.api.deps`).
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Dev/test convenience: create tables (and sample animals) automatically.
            await init_db(
                engine,
                session_factory=app.state.sessionmaker,
                seed=settings.seed_sample_data,
            )
        try:
            yield
        finally:
            await engine.dispose()
            log.info(LogEvent.shutdown)

    app = FastAPI(
        title="Animal Rescue Backend",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(dev_auth_router)
    app.include_router(animals_router)

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; adoption rules stay in services.adoption_service.
