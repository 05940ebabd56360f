"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class OfficeType(str, Enum):
    PRIMARY = "Primary"
    SECONDARY = "Secondary"

    @classmethod
    def parse(cls, raw: str) -> "OfficeType":
        """Case-insensitive lookup ('primary' → PRIMARY)."""
        for member in cls:
            if member.value.lower() == raw.strip().lower():
                return member
        raise ValueError(f"Unknown office type: {raw!r}")


class GlobeState(str, Enum):
    ROTATING = "rotating"
    INTERACTING = "interacting"
    ZOOMED_AREA = "zoomed_area"
    ZOOMED_DETAIL = "zoomed_detail"


class InputKind(str, Enum):
    """Raw gesture events forwarded from the map widget."""

    POINTER_DOWN = "pointerdown"
    DRAG_START = "dragstart"
    WHEEL = "wheel"
    PINCH = "pinch"
    ZOOM_START = "zoomstart"
    POINTER_UP = "pointerup"
    TOUCH_END = "touchend"
    ZOOM_END = "zoomend"

    def begins_gesture(self) -> bool:
        return self in _GESTURE_START


_GESTURE_START = frozenset(
    {
        InputKind.POINTER_DOWN,
        InputKind.DRAG_START,
        InputKind.WHEEL,
        InputKind.PINCH,
        InputKind.ZOOM_START,
    }
)
