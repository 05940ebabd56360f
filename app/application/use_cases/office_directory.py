"""OfficeDirectoryUseCase — list, look up and edit offices."""

from __future__ import annotations

import dataclasses
import logging
import uuid

from app.application.ports.office_repo import OfficeRepository
from app.application.ports.region_repo import RegionRepository
from app.domain.entities.office import Office
from app.domain.entities.region import Region
from app.domain.policies.office_filter import OfficeFilter, apply_filter

logger = logging.getLogger(__name__)

# Entity fields an update may touch; id is immutable
EDITABLE_FIELDS = frozenset(
    {"name", "type", "region_id", "location", "address", "metadata", "camera_url"}
)


class OfficeDirectoryUseCase:
    """CRUD over offices plus region lookup."""

    def __init__(self, office_repo: OfficeRepository, region_repo: RegionRepository):
        self._offices = office_repo
        self._regions = region_repo

    async def search(self, criteria: OfficeFilter | None = None) -> list[Office]:
        offices = await self._offices.get_all()
        return apply_filter(offices, criteria or OfficeFilter())

    async def get(self, office_id: str) -> Office | None:
        return await self._offices.get_by_id(office_id)

    async def create(self, office: Office) -> Office:
        """Persist a new office under a freshly generated id."""
        office = dataclasses.replace(office, id=str(uuid.uuid4()))
        saved = await self._offices.save(office)
        logger.info("Created office %s (%s)", saved.id, saved.name)
        return saved

    async def update(self, office_id: str, changes: dict) -> Office | None:
        """Shallow-merge *changes* into an existing office.

        Nested values (address, metadata, location) are replaced as a whole.

        Raises:
            ValueError: if *changes* names a field that cannot be edited.
        """
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        existing = await self._offices.get_by_id(office_id)
        if existing is None:
            return None
        if not changes:
            return existing

        updated = await self._offices.update(dataclasses.replace(existing, **changes))
        logger.info("Updated office %s: %s", office_id, ", ".join(sorted(changes)))
        return updated

    async def delete(self, office_id: str) -> Office | None:
        removed = await self._offices.delete(office_id)
        if removed is not None:
            logger.info("Deleted office %s (%s)", removed.id, removed.name)
        return removed

    async def regions(self) -> list[Region]:
        return await self._regions.get_all()
