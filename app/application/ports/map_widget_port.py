"""Port interface for the map rendering widget (camera, markers, popups)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable

from app.domain.value_objects.geo_point import GeoPoint


class MapWidgetError(Exception):
    """Raised by a widget when it rejects a command (e.g. an invalid fly-to target)."""


@dataclass(frozen=True)
class MapFeature:
    """A rendered feature returned by hit-testing."""

    properties: dict = field(default_factory=dict)
    position: GeoPoint | None = None


@dataclass(frozen=True)
class MarkerSpec:
    office_id: str
    position: GeoPoint
    html: str
    size: float
    anchor: str = "bottom"


class MapWidgetPort(ABC):
    # ── Camera ──────────────────────────────────────────────────────

    @abstractmethod
    def fly_to(self, center: GeoPoint, zoom: float, duration_ms: int) -> None:
        """Start an animated camera move. Raises MapWidgetError on rejection."""
        ...

    @abstractmethod
    def get_center(self) -> GeoPoint:
        ...

    @abstractmethod
    def set_center(self, center: GeoPoint) -> None:
        ...

    @abstractmethod
    def resize(self) -> None:
        ...

    # ── Render loop ─────────────────────────────────────────────────

    @abstractmethod
    def request_frame(self, callback: Callable[[float], None]) -> Any:
        """Run *callback(timestamp)* on the next animation frame; returns a handle."""
        ...

    @abstractmethod
    def cancel_frame(self, handle: Any) -> None:
        ...

    # ── Overlays ────────────────────────────────────────────────────

    @abstractmethod
    def add_marker(self, marker: MarkerSpec) -> Any:
        ...

    @abstractmethod
    def update_marker(self, handle: Any, html: str) -> None:
        ...

    @abstractmethod
    def remove_marker(self, handle: Any) -> None:
        ...

    @abstractmethod
    def open_popup(self, anchor: GeoPoint, html: str, offset: int = 0) -> Any:
        ...

    @abstractmethod
    def close_popup(self, handle: Any) -> None:
        ...

    # ── Hit-testing ─────────────────────────────────────────────────

    @abstractmethod
    def features_at(self, x: float, y: float) -> list[MapFeature]:
        """Features rendered under the screen point (x, y), topmost first."""
        ...
