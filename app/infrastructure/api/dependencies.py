"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from pathlib import Path

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.json_loader.loader import JsonCatalog
from app.adapters.persistence.database import get_session
from app.adapters.persistence.repositories import SqlOfficeRepository, SqlRegionRepository
from app.application.ports.catalog_port import CatalogPort
from app.application.use_cases.office_directory import OfficeDirectoryUseCase
from app.config import settings
from app.domain.value_objects.camera import GlobeConfig


def get_office_directory(
    session: AsyncSession = Depends(get_session),
) -> OfficeDirectoryUseCase:
    return OfficeDirectoryUseCase(
        office_repo=SqlOfficeRepository(session),
        region_repo=SqlRegionRepository(session),
    )


def get_catalog() -> CatalogPort:
    return JsonCatalog(Path(settings.data_path))


def get_globe_config() -> GlobeConfig:
    return settings.globe_config()
