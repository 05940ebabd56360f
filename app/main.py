"""Office Globe — FastAPI application factory."""

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from app.adapters.persistence.database import async_session_factory, engine, init_models
from app.adapters.persistence.models import OfficeModel
from app.config import settings
from app.infrastructure.api.routes_catalog import router as catalog_router
from app.infrastructure.api.routes_health import router as health_router
from app.infrastructure.api.routes_offices import router as offices_router
from app.tools.seed_db import seed

logger = logging.getLogger(__name__)


async def _seed_if_empty() -> None:
    """Load the data files on first start so the globe has something to show."""
    data_dir = Path(settings.data_path)
    async with async_session_factory() as session:
        count = (await session.execute(select(func.count(OfficeModel.id)))).scalar() or 0
    if count:
        return
    try:
        await seed(data_dir)
    except FileNotFoundError as e:
        logger.warning("Database is empty and could not be seeded: %s", e)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        await init_models()
        if settings.seed_on_startup:
            await _seed_if_empty()
        logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
    except SQLAlchemyError as e:
        logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(levelname)s | %(name)s | %(message)s",
    )

    app = FastAPI(
        title="Office Globe",
        description="Office directory API behind the interactive globe",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s → %d (%.1f ms)",
            request.method, request.url.path, response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(offices_router, prefix="/api")
    app.include_router(catalog_router, prefix="/api")

    return app


app = create_app()
