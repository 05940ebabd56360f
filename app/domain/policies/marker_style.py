"""MarkerStylePolicy — maps an office to the look of its map pin."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.value_objects.enums import OfficeType

PIN_COLOR = "#A100FF"
PIN_HOVER_COLOR = "#B333FF"
HOVER_SCALE = 1.1

# Primary pins are 5/3 of the base size (24 px base → 40 px pin)
PRIMARY_SIZE_RATIO = 5 / 3


@dataclass(frozen=True)
class MarkerStyle:
    size: float
    color: str
    scale: float = 1.0

    @property
    def rendered_size(self) -> float:
        return round(self.size * self.scale, 2)


def marker_size(office_type: OfficeType, base_size: float) -> float:
    """Pin size in pixels for an office type.

    Raises:
        ValueError: if *base_size* is not positive.
    """
    if base_size <= 0:
        raise ValueError("Marker base size must be positive")
    if office_type == OfficeType.PRIMARY:
        return round(base_size * PRIMARY_SIZE_RATIO, 2)
    return float(base_size)


def style_for(office_type: OfficeType, base_size: float, hovered: bool = False) -> MarkerStyle:
    size = marker_size(office_type, base_size)
    if hovered:
        return MarkerStyle(size=size, color=PIN_HOVER_COLOR, scale=HOVER_SCALE)
    return MarkerStyle(size=size, color=PIN_COLOR)


def pin_svg(style: MarkerStyle) -> str:
    """Render the drop-shadowed pin used as the marker element."""
    s = style.rendered_size
    return (
        f'<svg width="{s}" height="{s}" viewBox="0 0 64 64" xmlns="http://www.w3.org/2000/svg">'
        '<defs><filter id="shadow" x="-50%" y="-50%" width="200%" height="200%">'
        '<feDropShadow dx="0" dy="2" stdDeviation="2" flood-color="#000" flood-opacity="0.2"/>'
        "</filter></defs>"
        '<g filter="url(#shadow)">'
        '<path d="M32 2c-12.15 0-22 9.26-22 20.69 0 13.28 17.57 33.7 21.38 38.01a1 1 0 0 0 '
        '1.25 0C36.43 56.39 54 35.97 54 22.69 54 11.26 44.15 2 32 2z" '
        f'fill="{style.color}"/>'
        '<circle cx="32" cy="24" r="8" fill="#fff"/>'
        "</g></svg>"
    )
