"""Camera targets and the tunable constants of the globe."""

from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.value_objects.geo_point import SAME_POINT_TOLERANCE, GeoPoint


@dataclass(frozen=True)
class CameraView:
    center: GeoPoint
    zoom: float


@dataclass(frozen=True)
class GlobeConfig:
    """Everything the interaction controller and marker layer can be tuned by."""

    idle_view: CameraView = field(
        default_factory=lambda: CameraView(center=GeoPoint(latitude=20.0, longitude=0.0), zoom=1.3)
    )
    rotation_step_degrees: float = 0.03
    resume_delay_seconds: float = 15.0
    area_zoom: float = 11.5
    detail_zoom: float = 17.5
    office_zoom: float = 10.0
    fly_duration_ms: int = 2000
    office_fly_duration_ms: int = 1200
    same_point_tolerance: float = SAME_POINT_TOLERANCE
    marker_base_size: int = 24

    @property
    def fly_duration_seconds(self) -> float:
        return self.fly_duration_ms / 1000.0

    def to_dict(self) -> dict:
        return {
            "idleCenter": self.idle_view.center.as_lng_lat(),
            "idleZoom": self.idle_view.zoom,
            "rotationStepDegrees": self.rotation_step_degrees,
            "resumeDelaySeconds": self.resume_delay_seconds,
            "areaZoom": self.area_zoom,
            "detailZoom": self.detail_zoom,
            "officeZoom": self.office_zoom,
            "flyDurationMs": self.fly_duration_ms,
            "officeFlyDurationMs": self.office_fly_duration_ms,
            "samePointTolerance": self.same_point_tolerance,
            "markerBaseSize": self.marker_base_size,
        }
