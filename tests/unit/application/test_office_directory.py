"""Tests for OfficeDirectoryUseCase with in-memory fakes."""

from __future__ import annotations

import pytest

from app.application.ports.office_repo import OfficeRepository
from app.application.ports.region_repo import RegionRepository
from app.application.use_cases.office_directory import OfficeDirectoryUseCase
from app.domain.entities.office import Address, Office
from app.domain.entities.region import Region
from app.domain.policies.office_filter import OfficeFilter
from app.domain.value_objects.enums import OfficeType
from app.domain.value_objects.geo_point import GeoPoint

# ─── In-memory fakes ────────────────────────────────────────────────


class FakeOfficeRepo(OfficeRepository):
    def __init__(self, offices: list[Office] | None = None):
        self.offices: dict[str, Office] = {o.id: o for o in offices or []}

    async def save(self, office):
        self.offices[office.id] = office
        return office

    async def get_by_id(self, office_id):
        return self.offices.get(office_id)

    async def get_all(self):
        return list(self.offices.values())

    async def update(self, office):
        self.offices[office.id] = office
        return office

    async def delete(self, office_id):
        return self.offices.pop(office_id, None)


class FakeRegionRepo(RegionRepository):
    async def get_all(self):
        return [Region(id="europe", name="Europe")]


def _office(oid: str, name: str, city: str, region: str = "europe", office_type=OfficeType.PRIMARY) -> Office:
    return Office(
        id=oid, name=name, type=office_type, region_id=region,
        location=GeoPoint(latitude=50.0, longitude=10.0),
        address=Address(city=city, country="Germany"),
    )


@pytest.fixture
def repo():
    return FakeOfficeRepo([
        _office("1", "Berlin Studio", "Berlin", office_type=OfficeType.SECONDARY),
        _office("2", "Munich Hub", "Munich"),
        _office("3", "Austin Lab", "Austin", region="north-america"),
    ])


@pytest.fixture
def directory(repo):
    return OfficeDirectoryUseCase(office_repo=repo, region_repo=FakeRegionRepo())


@pytest.mark.asyncio
async def test_search_without_filter_returns_all(directory):
    offices = await directory.search()
    assert [o.id for o in offices] == ["1", "2", "3"]


@pytest.mark.asyncio
async def test_search_by_query_and_region(directory):
    offices = await directory.search(OfficeFilter(query="germany", region_id="europe"))
    assert [o.id for o in offices] == ["1", "2"]


@pytest.mark.asyncio
async def test_create_assigns_new_id(directory, repo):
    draft = _office(None, "Paris Office", "Paris")
    created = await directory.create(draft)
    assert created.id
    assert created.id not in {"1", "2", "3"}
    assert repo.offices[created.id].name == "Paris Office"


@pytest.mark.asyncio
async def test_create_ignores_client_supplied_id(directory):
    created = await directory.create(_office("1", "Duplicate", "Berlin"))
    assert created.id != "1"


@pytest.mark.asyncio
async def test_update_merges_fields(directory):
    updated = await directory.update("2", {"name": "Munich Campus"})
    assert updated.name == "Munich Campus"
    assert updated.address.city == "Munich"


@pytest.mark.asyncio
async def test_update_replaces_nested_address(directory):
    updated = await directory.update("2", {"address": Address(city="Augsburg")})
    assert updated.address.city == "Augsburg"
    assert updated.address.country is None


@pytest.mark.asyncio
async def test_update_missing_returns_none(directory):
    assert await directory.update("nope", {"name": "x"}) is None


@pytest.mark.asyncio
async def test_update_rejects_unknown_fields(directory):
    with pytest.raises(ValueError, match="id"):
        await directory.update("2", {"id": "other"})


@pytest.mark.asyncio
async def test_delete_returns_removed(directory, repo):
    removed = await directory.delete("1")
    assert removed.name == "Berlin Studio"
    assert "1" not in repo.offices
    assert await directory.delete("1") is None


@pytest.mark.asyncio
async def test_regions(directory):
    regions = await directory.regions()
    assert regions == [Region(id="europe", name="Europe")]
