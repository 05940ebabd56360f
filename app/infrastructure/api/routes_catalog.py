"""Read-only catalog endpoints — regions, clients, activities, globe settings."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.application.ports.catalog_port import CatalogPort
from app.application.use_cases.office_directory import OfficeDirectoryUseCase
from app.domain.value_objects.camera import GlobeConfig
from app.infrastructure.api.dependencies import (
    get_catalog,
    get_globe_config,
    get_office_directory,
)

router = APIRouter(tags=["catalog"])

CHAT_PLACEHOLDER = "Chatbot not implemented in MVP phase."


@router.get("/regions")
async def list_regions(directory: OfficeDirectoryUseCase = Depends(get_office_directory)):
    regions = await directory.regions()
    return [{"id": r.id, "name": r.name} for r in regions]


# Plain def: FastAPI runs the blocking file reads in its threadpool
@router.get("/clients")
def list_clients(catalog: CatalogPort = Depends(get_catalog)):
    return catalog.load("clients")


@router.get("/activities")
def list_activities(catalog: CatalogPort = Depends(get_catalog)):
    return catalog.load("activities")


@router.get("/globe/config")
async def globe_config(config: GlobeConfig = Depends(get_globe_config)):
    """Constants the front-end globe controller and marker layer run with."""
    return config.to_dict()


@router.post("/chat")
async def chat():
    """Placeholder until an assistant backend is wired in."""
    return {"message": CHAT_PLACEHOLDER}
