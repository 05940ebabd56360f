"""GeoPoint value object — immutable (lat, lon) pair."""

from dataclasses import dataclass

# Two clicks closer than this (degrees, per axis) count as the same spot
SAME_POINT_TOLERANCE = 1e-4


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def is_near(self, other: "GeoPoint", tolerance: float = SAME_POINT_TOLERANCE) -> bool:
        """True when both axes differ by no more than *tolerance* degrees."""
        return (
            abs(self.longitude - other.longitude) <= tolerance
            and abs(self.latitude - other.latitude) <= tolerance
        )

    def shifted_east(self, degrees: float) -> "GeoPoint":
        """Return a point moved along the parallel, longitude wrapped to [-180, 180)."""
        return GeoPoint(latitude=self.latitude, longitude=wrap_longitude(self.longitude + degrees))

    def as_lng_lat(self) -> list[float]:
        return [self.longitude, self.latitude]


def wrap_longitude(lng: float) -> float:
    return (lng + 180.0) % 360.0 - 180.0
