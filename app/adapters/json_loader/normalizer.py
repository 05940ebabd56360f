"""Value normalization for hand-edited JSON data files."""

from __future__ import annotations

import re


def clean_string(value: object) -> str | None:
    """Strip whitespace and return None for empty or missing values."""
    if value is None:
        return None
    value = str(value).strip()
    return value if value else None


def parse_int(value: object) -> int | None:
    """Parse counts like 1200, "1,200", "1 200" or "1200.0"; None when not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    text = re.sub(r"[\s, _]", "", str(value))
    if not text:
        return None
    try:
        return int(float(text))
    except ValueError:
        return None


def parse_float(value: object) -> float | None:
    """Parse a coordinate; accepts numbers and numeric strings (comma as decimal point)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip().replace(",", ".")
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None
