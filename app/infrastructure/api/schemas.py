"""Request schemas for the office endpoints (camelCase on the wire)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.domain.entities.office import Address, Office, OfficeMetadata
from app.domain.value_objects.enums import OfficeType
from app.domain.value_objects.geo_point import GeoPoint


class CoordinatesIn(BaseModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

    def to_domain(self) -> GeoPoint:
        return GeoPoint(latitude=self.lat, longitude=self.lng)


class AddressIn(BaseModel):
    line1: str | None = None
    city: str | None = None
    country: str | None = None

    def to_domain(self) -> Address:
        return Address(line1=self.line1, city=self.city, country=self.country)


class MetadataIn(BaseModel):
    employees: int | None = Field(default=None, ge=0)
    established: int | None = None
    sqft: int | None = Field(default=None, ge=0)

    def to_domain(self) -> OfficeMetadata:
        return OfficeMetadata(employees=self.employees, established=self.established, sqft=self.sqft)


class _OfficeFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @field_validator("type", mode="before", check_fields=False)
    @classmethod
    def _parse_type(cls, value):
        # Accept "primary", "PRIMARY", ... like the list filter does
        if isinstance(value, str):
            return OfficeType.parse(value)
        return value


class OfficeCreate(_OfficeFields):
    name: str = Field(min_length=1, max_length=200)
    type: OfficeType
    region_id: str = Field(alias="regionId", min_length=1)
    coordinates: CoordinatesIn
    address: AddressIn | None = None
    metadata: MetadataIn | None = None
    camera_url: str | None = Field(default=None, alias="cameraUrl", max_length=500)

    def to_domain(self) -> Office:
        return Office(
            id=None,
            name=self.name,
            type=self.type,
            region_id=self.region_id,
            location=self.coordinates.to_domain(),
            address=self.address.to_domain() if self.address else None,
            metadata=self.metadata.to_domain() if self.metadata else None,
            camera_url=self.camera_url,
        )


class OfficeUpdate(_OfficeFields):
    """Partial update: only fields present in the body are changed."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    type: OfficeType | None = None
    region_id: str | None = Field(default=None, alias="regionId", min_length=1)
    coordinates: CoordinatesIn | None = None
    address: AddressIn | None = None
    metadata: MetadataIn | None = None
    camera_url: str | None = Field(default=None, alias="cameraUrl", max_length=500)

    @model_validator(mode="after")
    def _required_fields_not_null(self):
        for field in ("name", "type", "region_id", "coordinates"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def to_changes(self) -> dict:
        """Map the provided fields onto Office attribute names."""
        changes: dict = {}
        provided = self.model_fields_set
        if "name" in provided:
            changes["name"] = self.name
        if "type" in provided:
            changes["type"] = self.type
        if "region_id" in provided:
            changes["region_id"] = self.region_id
        if "coordinates" in provided:
            changes["location"] = self.coordinates.to_domain()
        if "address" in provided:
            changes["address"] = self.address.to_domain() if self.address else None
        if "metadata" in provided:
            changes["metadata"] = self.metadata.to_domain() if self.metadata else None
        if "camera_url" in provided:
            changes["camera_url"] = self.camera_url
        return changes
