"""MarkerLayer — one pin per office, hover styling, click to select."""

from __future__ import annotations

import logging
from typing import Any, Callable

from app.application.ports.map_widget_port import MapWidgetPort, MarkerSpec
from app.application.use_cases.globe_interaction import GlobeInteractionController
from app.domain.entities.office import Office
from app.domain.policies.marker_style import pin_svg, style_for

logger = logging.getLogger(__name__)


class MarkerLayer:
    """Keeps the widget's markers in sync with the current office list."""

    def __init__(
        self,
        widget: MapWidgetPort,
        controller: GlobeInteractionController,
        base_size: float | None = None,
        on_select: Callable[[Office], None] | None = None,
    ):
        self._widget = widget
        self._controller = controller
        if base_size is None:
            base_size = controller.config.marker_base_size
        if base_size <= 0:
            raise ValueError("Marker base size must be positive")
        self._base_size = base_size
        self._on_select = on_select
        self._markers: dict[str, tuple[Any, Office]] = {}

    @property
    def base_size(self) -> float:
        return self._base_size

    def __len__(self) -> int:
        return len(self._markers)

    def render(self, offices: list[Office]) -> None:
        """Replace all markers with one per office."""
        self.clear()
        for office in offices:
            style = style_for(office.type, self._base_size)
            handle = self._widget.add_marker(
                MarkerSpec(
                    office_id=office.id,
                    position=office.location,
                    html=pin_svg(style),
                    size=style.size,
                )
            )
            self._markers[office.id] = (handle, office)
        logger.debug("Rendered %d office markers", len(self._markers))

    def clear(self) -> None:
        for handle, _ in self._markers.values():
            self._widget.remove_marker(handle)
        self._markers.clear()

    def set_base_size(self, base_size: float) -> None:
        """Display-settings change: re-render every marker at the new size."""
        if base_size <= 0:
            raise ValueError("Marker base size must be positive")
        self._base_size = base_size
        self.render([office for _, office in self._markers.values()])

    def on_hover(self, office_id: str, hovering: bool) -> None:
        entry = self._markers.get(office_id)
        if entry is None:
            logger.debug("Hover on unknown marker %s", office_id)
            return
        handle, office = entry
        style = style_for(office.type, self._base_size, hovered=hovering)
        self._widget.update_marker(handle, pin_svg(style))

    def on_click(self, office_id: str) -> None:
        """Select the office and fly the camera to it with an info popup."""
        entry = self._markers.get(office_id)
        if entry is None:
            logger.debug("Click on unknown marker %s", office_id)
            return
        _, office = entry
        if self._on_select is not None:
            self._on_select(office)
        self._controller.focus_office(office.location, office.popup_properties())
