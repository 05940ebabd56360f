"""OfficeFilterPolicy — list filtering used by the office directory."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.office import Office


@dataclass(frozen=True)
class OfficeFilter:
    """Optional criteria; unset fields do not restrict the result."""

    query: str | None = None
    region_id: str | None = None
    office_type: str | None = None

    def is_empty(self) -> bool:
        return not (self.query or self.region_id or self.office_type)


def matches(office: Office, criteria: OfficeFilter) -> bool:
    """Check a single office against the filter.

    - region: exact string match
    - type: case-insensitive exact match
    - query: case-insensitive substring of name, city or country
    """
    if criteria.region_id and str(office.region_id) != str(criteria.region_id):
        return False
    if criteria.office_type and office.type.value.lower() != criteria.office_type.lower():
        return False
    if criteria.query:
        needle = criteria.query.lower()
        if not any(needle in value.lower() for value in office.searchable_fields()):
            return False
    return True


def apply_filter(offices: list[Office], criteria: OfficeFilter) -> list[Office]:
    """Filter offices, preserving input order."""
    if criteria.is_empty():
        return list(offices)
    return [o for o in offices if matches(o, criteria)]
