"""Tests for the SQLAlchemy repositories against a temporary sqlite file."""

import pytest

from app.adapters.persistence.models import RegionModel
from app.adapters.persistence.repositories import SqlOfficeRepository, SqlRegionRepository
from app.domain.entities.office import Address, Office, OfficeMetadata
from app.domain.value_objects.enums import OfficeType
from app.domain.value_objects.geo_point import GeoPoint


def _office(oid: str, name: str, **kwargs) -> Office:
    return Office(
        id=oid,
        name=name,
        type=kwargs.pop("type", OfficeType.SECONDARY),
        region_id=kwargs.pop("region_id", "europe"),
        location=GeoPoint(latitude=51.5, longitude=-0.12),
        **kwargs,
    )


@pytest.mark.asyncio
async def test_save_and_get_roundtrip(session_factory):
    office = _office(
        "lon", "London Hub",
        type=OfficeType.PRIMARY,
        address=Address(line1="30 Fenchurch St", city="London", country="United Kingdom"),
        metadata=OfficeMetadata(employees=3800, established=1995),
        camera_url="https://cams.example/lon",
    )
    async with session_factory() as session:
        await SqlOfficeRepository(session).save(office)
        await session.commit()

    async with session_factory() as session:
        loaded = await SqlOfficeRepository(session).get_by_id("lon")
    assert loaded == office


@pytest.mark.asyncio
async def test_empty_address_and_metadata_load_as_none(session_factory):
    async with session_factory() as session:
        repo = SqlOfficeRepository(session)
        await repo.save(_office("x", "Bare"))
        loaded = await repo.get_by_id("x")
    assert loaded.address is None
    assert loaded.metadata is None


@pytest.mark.asyncio
async def test_get_missing_returns_none(session_factory):
    async with session_factory() as session:
        assert await SqlOfficeRepository(session).get_by_id("nope") is None


@pytest.mark.asyncio
async def test_get_all_keeps_insertion_order(session_factory):
    async with session_factory() as session:
        repo = SqlOfficeRepository(session)
        for oid, name in [("z", "Zurich"), ("a", "Austin"), ("m", "Madrid")]:
            await repo.save(_office(oid, name))
        await session.commit()
        assert [o.id for o in await repo.get_all()] == ["z", "a", "m"]


@pytest.mark.asyncio
async def test_update_overwrites_fields(session_factory):
    async with session_factory() as session:
        repo = SqlOfficeRepository(session)
        await repo.save(_office("lon", "London", address=Address(city="London")))
        await session.commit()

        updated = await repo.update(_office("lon", "London Hub", region_id="emea"))
        await session.commit()

    assert updated.name == "London Hub"
    assert updated.region_id == "emea"
    assert updated.address is None


@pytest.mark.asyncio
async def test_update_missing_raises(session_factory):
    async with session_factory() as session:
        with pytest.raises(ValueError, match="does not exist"):
            await SqlOfficeRepository(session).update(_office("ghost", "Ghost"))


@pytest.mark.asyncio
async def test_delete_returns_removed_office(session_factory):
    async with session_factory() as session:
        repo = SqlOfficeRepository(session)
        await repo.save(_office("lon", "London"))
        await session.commit()

        removed = await repo.delete("lon")
        await session.commit()
        assert removed.name == "London"
        assert await repo.get_by_id("lon") is None
        assert await repo.delete("lon") is None


@pytest.mark.asyncio
async def test_regions_keep_sort_order(session_factory):
    async with session_factory() as session:
        session.add_all([
            RegionModel(id="europe", name="Europe", sort_order=2),
            RegionModel(id="asia-pacific", name="Asia Pacific", sort_order=3),
            RegionModel(id="north-america", name="North America", sort_order=1),
        ])
        await session.commit()
        regions = await SqlRegionRepository(session).get_all()
    assert [r.id for r in regions] == ["north-america", "europe", "asia-pacific"]
