"""Async SQLAlchemy engine, session factory and declarative base."""

from __future__ import annotations

from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


class Base(DeclarativeBase):
    pass


engine = create_async_engine(settings.database_url, echo=settings.debug)
async_session_factory = async_sessionmaker(engine, expire_on_commit=False)


async def get_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency: one session per request. Routes commit explicitly."""
    async with async_session_factory() as session:
        yield session


async def init_models(bind: AsyncEngine = engine) -> None:
    """Create missing tables."""
    from app.adapters.persistence import models  # noqa: F401  register tables

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
