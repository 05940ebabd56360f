"""GlobeInteractionController — ambient rotation, drill-down zoom, resume on idle.

The controller sits between raw widget events and camera motion:

* while idle it advances the camera longitude on every animation frame;
* any user gesture suspends rotation and cancels the pending timer;
* a click on a feature zooms to an "area" view, a second click on the same
  spot zooms to a "detail" view with a popup;
* once input stops for the configured delay the camera flies back to the
  idle view and rotation resumes after the flight.

All mutable fields live in a single InteractionState; the methods below are
its only mutators. Exactly one timer (resume or post-flight settle) may be
pending at any time.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from app.application.ports.map_widget_port import MapFeature, MapWidgetError, MapWidgetPort
from app.application.ports.scheduler_port import SchedulerPort
from app.domain.entities.interaction_state import InteractionState
from app.domain.policies.popup_content import build_popup_html
from app.domain.value_objects.camera import GlobeConfig
from app.domain.value_objects.enums import GlobeState, InputKind
from app.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

# Popups sit this many pixels above their anchor so the pin stays visible
POPUP_OFFSET_PX = 25


class GlobeInteractionController:
    """State machine driving one map widget instance.

    Create a new controller whenever the widget is recreated; call
    ``dispose()`` before the widget is torn down.
    """

    def __init__(
        self,
        widget: MapWidgetPort,
        scheduler: SchedulerPort,
        config: GlobeConfig | None = None,
    ):
        self._widget = widget
        self._scheduler = scheduler
        self._config = config or GlobeConfig()
        self._s = InteractionState()
        self._disposed = False

    # ── Read-only view ──────────────────────────────────────────────

    @property
    def config(self) -> GlobeConfig:
        return self._config

    @property
    def state(self) -> GlobeState:
        return self._s.state

    @property
    def user_interacting(self) -> bool:
        return self._s.user_interacting

    @property
    def last_clicked_point(self) -> GeoPoint | None:
        return self._s.last_clicked_point

    @property
    def active_popup(self) -> Any:
        return self._s.active_popup

    @property
    def has_pending_timer(self) -> bool:
        return self._s.pending_timer is not None

    @property
    def disposed(self) -> bool:
        return self._disposed

    # ── Lifecycle ───────────────────────────────────────────────────

    def start(self) -> None:
        """Begin ambient rotation."""
        if self._disposed:
            raise RuntimeError("Controller has been disposed")
        self._cancel_timer()
        self._s.gesture_active = False
        self._s.user_interacting = False
        self._transition(GlobeState.ROTATING)
        self._schedule_frame()

    def dispose(self) -> None:
        """Cancel the pending timer and frame callback; later events are ignored."""
        if self._disposed:
            return
        self._cancel_timer()
        self._cancel_frame()
        # The widget owns the popup and removes it with itself
        self._s.active_popup = None
        self._s.last_clicked_point = None
        self._disposed = True
        logger.debug("Globe controller disposed")

    # ── Event entry points ──────────────────────────────────────────

    def on_frame(self, timestamp: float = 0.0) -> None:
        """Animation-frame callback: rotate one step and ask for the next frame."""
        self._s.frame_handle = None
        if self._disposed or not self._s.is_rotating():
            return
        center = self._widget.get_center()
        self._widget.set_center(center.shifted_east(self._config.rotation_step_degrees))
        self._schedule_frame()

    def on_input(self, kind: InputKind) -> None:
        """Handle a user-originated gesture event.

        The widget adapter must forward only events caused by the user, not
        the zoom events emitted by the controller's own camera flights.
        """
        if self._disposed:
            return
        if kind.begins_gesture():
            self._begin_gesture()
        else:
            self._end_gesture()

    def handle_click(self, x: float, y: float, point: GeoPoint) -> None:
        """Click at screen (x, y) resolving to geographic *point*."""
        if self._disposed:
            return
        features = self._widget.features_at(x, y)
        if not features:
            logger.debug("Click at (%.1f, %.1f) hit no features", x, y)
            return

        self._s.user_interacting = True
        self._cancel_frame()

        last = self._s.last_clicked_point
        if last is not None and point.is_near(last, self._config.same_point_tolerance):
            self._zoom_to_detail(point, features[0])
        else:
            self._zoom_to_area(point)

    def focus_office(self, position: GeoPoint, properties: dict) -> None:
        """Fly to a selected office and show its info popup."""
        if self._disposed:
            return
        self._s.user_interacting = True
        self._s.last_clicked_point = None
        self._cancel_frame()
        if not self._fly(position, self._config.office_zoom, self._config.office_fly_duration_ms):
            self._suspend()
            return
        self._show_popup(position, properties)
        self._transition(GlobeState.INTERACTING)
        self._arm_resume_timer()

    def go_home(self) -> None:
        """Home control: return to the idle view right away."""
        if self._disposed:
            return
        self._return_home()

    def handle_resize(self) -> None:
        if self._disposed:
            return
        self._widget.resize()

    # ── Transitions ─────────────────────────────────────────────────

    def _begin_gesture(self) -> None:
        self._s.gesture_active = True
        self._s.user_interacting = True
        self._cancel_timer()
        self._cancel_frame()
        # ZOOMED_AREA is kept so the second click of a drill-down still counts
        if self._s.state in (GlobeState.ROTATING, GlobeState.ZOOMED_DETAIL):
            self._transition(GlobeState.INTERACTING)

    def _end_gesture(self) -> None:
        self._s.gesture_active = False
        self._s.user_interacting = True
        self._cancel_frame()
        if self._s.state == GlobeState.ROTATING:
            self._transition(GlobeState.INTERACTING)
        self._arm_resume_timer()

    def _zoom_to_area(self, point: GeoPoint) -> None:
        self._s.last_clicked_point = point
        self._close_popup()
        if not self._fly(point, self._config.area_zoom, self._config.fly_duration_ms):
            self._suspend()
            return
        self._transition(GlobeState.ZOOMED_AREA)
        self._arm_resume_timer()

    def _zoom_to_detail(self, point: GeoPoint, feature: MapFeature) -> None:
        if not self._fly(point, self._config.detail_zoom, self._config.fly_duration_ms):
            self._suspend()
            return
        self._show_popup(feature.position or point, feature.properties)
        self._transition(GlobeState.ZOOMED_DETAIL)
        self._arm_resume_timer()

    def _return_home(self) -> None:
        self._cancel_timer()
        self._cancel_frame()
        self._close_popup()
        self._s.last_clicked_point = None
        # Rotation stays off until the flight has settled
        self._s.user_interacting = True
        view = self._config.idle_view
        if not self._fly(view.center, view.zoom, self._config.fly_duration_ms):
            self._suspend()
            return
        self._transition(GlobeState.INTERACTING)
        self._arm_timer(self._config.fly_duration_seconds, self._on_home_settled)

    def _suspend(self) -> None:
        """Leave the globe frozen after a failed camera command."""
        self._cancel_timer()
        self._close_popup()
        self._s.user_interacting = True
        self._transition(GlobeState.INTERACTING)

    # ── Timer callbacks ─────────────────────────────────────────────

    def _on_resume_timeout(self, generation: int) -> None:
        if self._is_stale(generation):
            logger.debug("Ignoring stale resume timer")
            return
        self._s.pending_timer = None
        logger.info("No input for %.1fs, returning globe to idle view", self._config.resume_delay_seconds)
        self._return_home()

    def _on_home_settled(self, generation: int) -> None:
        if self._is_stale(generation):
            return
        self._s.pending_timer = None
        self._s.user_interacting = False
        self._transition(GlobeState.ROTATING)
        self._schedule_frame()

    def _is_stale(self, generation: int) -> bool:
        return (
            self._disposed
            or generation != self._s.timer_generation
            or self._s.gesture_active
        )

    # ── Helpers ─────────────────────────────────────────────────────

    def _arm_resume_timer(self) -> None:
        self._arm_timer(self._config.resume_delay_seconds, self._on_resume_timeout)

    def _arm_timer(self, delay: float, callback: Callable[[int], None]) -> None:
        self._cancel_timer()
        generation = self._s.timer_generation
        self._s.pending_timer = self._scheduler.call_later(delay, lambda: callback(generation))

    def _cancel_timer(self) -> None:
        if self._s.pending_timer is not None:
            self._scheduler.cancel(self._s.pending_timer)
            self._s.pending_timer = None
        self._s.timer_generation += 1

    def _schedule_frame(self) -> None:
        if self._s.frame_handle is None:
            self._s.frame_handle = self._widget.request_frame(self.on_frame)

    def _cancel_frame(self) -> None:
        if self._s.frame_handle is not None:
            self._widget.cancel_frame(self._s.frame_handle)
            self._s.frame_handle = None

    def _show_popup(self, anchor: GeoPoint, properties: dict) -> None:
        html = build_popup_html(properties)
        self._close_popup()
        self._s.active_popup = self._widget.open_popup(anchor, html, POPUP_OFFSET_PX)

    def _close_popup(self) -> None:
        if self._s.active_popup is not None:
            self._widget.close_popup(self._s.active_popup)
            self._s.active_popup = None

    def _fly(self, center: GeoPoint, zoom: float, duration_ms: int) -> bool:
        try:
            self._widget.fly_to(center, zoom, duration_ms)
        except MapWidgetError as e:
            logger.warning(
                "Camera flight to (%.5f, %.5f) zoom %.1f rejected: %s; rotation stays paused",
                center.longitude, center.latitude, zoom, e,
            )
            return False
        return True

    def _transition(self, new_state: GlobeState) -> None:
        if new_state != self._s.state:
            logger.debug("Globe state %s → %s", self._s.state.value, new_state.value)
            self._s.state = new_state
