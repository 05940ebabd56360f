"""SQLAlchemy repository implementations."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.models import OfficeModel, RegionModel
from app.application.ports.office_repo import OfficeRepository
from app.application.ports.region_repo import RegionRepository
from app.domain.entities.office import Address, Office, OfficeMetadata
from app.domain.entities.region import Region
from app.domain.value_objects.enums import OfficeType
from app.domain.value_objects.geo_point import GeoPoint

# ─── Mappers ─────────────────────────────────────────────────────────


def _office_to_domain(m: OfficeModel) -> Office:
    address = None
    if any(v is not None for v in (m.address_line1, m.city, m.country)):
        address = Address(line1=m.address_line1, city=m.city, country=m.country)
    metadata = None
    if any(v is not None for v in (m.employees, m.established, m.sqft)):
        metadata = OfficeMetadata(employees=m.employees, established=m.established, sqft=m.sqft)
    return Office(
        id=m.id,
        name=m.name,
        type=OfficeType(m.type),
        region_id=m.region_id,
        location=GeoPoint(latitude=m.latitude, longitude=m.longitude),
        address=address,
        metadata=metadata,
        camera_url=m.camera_url,
    )


def _apply_office(m: OfficeModel, office: Office) -> None:
    """Copy every mutable entity field onto the row."""
    address = office.address or Address()
    metadata = office.metadata or OfficeMetadata()
    m.name = office.name
    m.type = office.type.value
    m.region_id = office.region_id
    m.latitude = office.location.latitude
    m.longitude = office.location.longitude
    m.address_line1 = address.line1
    m.city = address.city
    m.country = address.country
    m.employees = metadata.employees
    m.established = metadata.established
    m.sqft = metadata.sqft
    m.camera_url = office.camera_url


# ─── Repositories ────────────────────────────────────────────────────


class SqlOfficeRepository(OfficeRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, office: Office) -> Office:
        last = await self._s.execute(select(func.max(OfficeModel.sort_order)))
        m = OfficeModel(id=office.id, sort_order=(last.scalar() or 0) + 1)
        _apply_office(m, office)
        self._s.add(m)
        await self._s.flush()
        return _office_to_domain(m)

    async def get_by_id(self, office_id: str) -> Office | None:
        m = await self._s.get(OfficeModel, office_id)
        return _office_to_domain(m) if m else None

    async def get_all(self) -> list[Office]:
        result = await self._s.execute(
            select(OfficeModel).order_by(OfficeModel.sort_order, OfficeModel.id)
        )
        return [_office_to_domain(m) for m in result.scalars()]

    async def update(self, office: Office) -> Office:
        m = await self._s.get(OfficeModel, office.id)
        if m is None:
            raise ValueError(f"Office {office.id} does not exist")
        _apply_office(m, office)
        await self._s.flush()
        return _office_to_domain(m)

    async def delete(self, office_id: str) -> Office | None:
        m = await self._s.get(OfficeModel, office_id)
        if m is None:
            return None
        removed = _office_to_domain(m)
        await self._s.delete(m)
        await self._s.flush()
        return removed


class SqlRegionRepository(RegionRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_all(self) -> list[Region]:
        result = await self._s.execute(
            select(RegionModel).order_by(RegionModel.sort_order, RegionModel.id)
        )
        return [Region(id=m.id, name=m.name) for m in result.scalars()]
