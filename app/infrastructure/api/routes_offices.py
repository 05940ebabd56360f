"""Office endpoints — list with filters, CRUD."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.persistence.database import get_session
from app.application.use_cases.office_directory import OfficeDirectoryUseCase
from app.domain.entities.office import Office
from app.domain.policies.office_filter import OfficeFilter
from app.infrastructure.api.dependencies import get_office_directory
from app.infrastructure.api.schemas import OfficeCreate, OfficeUpdate

router = APIRouter(prefix="/offices", tags=["offices"])

NOT_FOUND = "Office not found"


@router.get("")
async def list_offices(
    q: str | None = None,
    region_id: str | None = Query(default=None, alias="regionId"),
    office_type: str | None = Query(default=None, alias="type"),
    directory: OfficeDirectoryUseCase = Depends(get_office_directory),
):
    """List offices, optionally filtered by free text, region and type."""
    criteria = OfficeFilter(query=q, region_id=region_id, office_type=office_type)
    offices = await directory.search(criteria)
    return [serialize_office(o) for o in offices]


@router.get("/{office_id}")
async def get_office(
    office_id: str,
    directory: OfficeDirectoryUseCase = Depends(get_office_directory),
):
    office = await directory.get(office_id)
    if not office:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return serialize_office(office)


@router.post("", status_code=201)
async def create_office(
    payload: OfficeCreate,
    directory: OfficeDirectoryUseCase = Depends(get_office_directory),
    session: AsyncSession = Depends(get_session),
):
    office = await directory.create(payload.to_domain())
    await session.commit()
    return serialize_office(office)


@router.put("/{office_id}")
async def update_office(
    office_id: str,
    payload: OfficeUpdate,
    directory: OfficeDirectoryUseCase = Depends(get_office_directory),
    session: AsyncSession = Depends(get_session),
):
    office = await directory.update(office_id, payload.to_changes())
    if not office:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    await session.commit()
    return serialize_office(office)


@router.delete("/{office_id}")
async def delete_office(
    office_id: str,
    directory: OfficeDirectoryUseCase = Depends(get_office_directory),
    session: AsyncSession = Depends(get_session),
):
    office = await directory.delete(office_id)
    if not office:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    await session.commit()
    return serialize_office(office)


def _compact(values: dict) -> dict:
    return {k: v for k, v in values.items() if v is not None}


def serialize_office(o: Office) -> dict:
    """Convert an Office to the API shape used by the data files."""
    data = {
        "id": o.id,
        "name": o.name,
        "type": o.type.value,
        "regionId": o.region_id,
        "coordinates": {"lat": o.location.latitude, "lng": o.location.longitude},
    }
    if o.address:
        data["address"] = _compact(
            {"line1": o.address.line1, "city": o.address.city, "country": o.address.country}
        )
    if o.metadata:
        data["metadata"] = _compact(
            {
                "employees": o.metadata.employees,
                "established": o.metadata.established,
                "sqft": o.metadata.sqft,
            }
        )
    if o.camera_url:
        data["cameraUrl"] = o.camera_url
    return data
