"""InteractionState — the mutable fields owned by the globe controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.domain.value_objects.enums import GlobeState
from app.domain.value_objects.geo_point import GeoPoint


@dataclass
class InteractionState:
    state: GlobeState = GlobeState.ROTATING
    user_interacting: bool = False
    gesture_active: bool = False
    last_clicked_point: GeoPoint | None = None
    active_popup: Any = None
    pending_timer: Any = None
    timer_generation: int = 0
    frame_handle: Any = None

    def is_rotating(self) -> bool:
        return self.state == GlobeState.ROTATING and not self.user_interacting
