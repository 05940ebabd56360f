"""Office entity — a geo-located site shown on the globe."""

from dataclasses import dataclass

from app.domain.value_objects.enums import OfficeType
from app.domain.value_objects.geo_point import GeoPoint


@dataclass
class Address:
    line1: str | None = None
    city: str | None = None
    country: str | None = None


@dataclass
class OfficeMetadata:
    employees: int | None = None
    established: int | None = None
    sqft: int | None = None


@dataclass
class Office:
    id: str | None
    name: str
    type: OfficeType
    region_id: str
    location: GeoPoint
    address: Address | None = None
    metadata: OfficeMetadata | None = None
    camera_url: str | None = None

    def searchable_fields(self) -> list[str]:
        """Name, city and country — the fields free-text search looks at."""
        address = self.address or Address()
        return [v for v in (self.name, address.city, address.country) if v]

    def popup_properties(self) -> dict:
        """Property bag used when the office is shown in a map popup."""
        props: dict = {"name": self.name, "type": self.type.value}
        if self.address:
            place = ", ".join(p for p in (self.address.city, self.address.country) if p)
            if place:
                props["location"] = place
        if self.metadata:
            if self.metadata.employees is not None:
                props["employees"] = self.metadata.employees
            if self.metadata.established is not None:
                props["established"] = self.metadata.established
        return props
