"""PopupContentPolicy — turns a feature's property bag into popup HTML."""

from __future__ import annotations

from html import escape

# Keys rendered as the heading rather than in the property list
HEADING_KEYS = ("title", "name")


def split_heading(properties: dict) -> tuple[str | None, dict]:
    """Separate the heading (title, else name) from the remaining properties.

    Matching is case-insensitive; every title/name key is dropped from the
    listed properties, even the one not used as heading.
    """
    lowered = {str(k).lower(): k for k in properties}
    heading = None
    for key in HEADING_KEYS:
        original = lowered.get(key)
        if original is not None and properties[original] not in (None, ""):
            heading = str(properties[original])
            break

    rest = {k: v for k, v in properties.items() if str(k).lower() not in HEADING_KEYS}
    return heading, rest


def _label(key: str) -> str:
    return str(key).replace("_", " ").strip().capitalize()


def build_popup_html(properties: dict) -> str:
    """Build the popup body: optional <h3> heading, then a definition list."""
    heading, rest = split_heading(properties)
    parts = ['<div class="globe-popup">']
    if heading:
        parts.append(f"<h3>{escape(heading)}</h3>")
    if rest:
        parts.append("<dl>")
        for key, value in rest.items():
            if value is None or value == "":
                continue
            parts.append(f"<dt>{escape(_label(key))}</dt><dd>{escape(str(value))}</dd>")
        parts.append("</dl>")
    parts.append("</div>")
    return "".join(parts)
