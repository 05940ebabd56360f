"""JSON loader — reads the data files that seed the database and back catalogs."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from app.adapters.json_loader.normalizer import clean_string, parse_float, parse_int
from app.application.ports.catalog_port import CatalogPort
from app.domain.value_objects.enums import OfficeType

logger = logging.getLogger(__name__)


def read_json(file_path: Path) -> Any:
    with open(file_path, encoding="utf-8-sig") as f:
        return json.load(f)


def _read_records(file_path: Path) -> list[dict]:
    data = read_json(file_path)
    if not isinstance(data, list):
        raise ValueError(f"{file_path} must contain a JSON array")
    return [r for r in data if isinstance(r, dict)]


def load_offices(file_path: Path) -> list[dict[str, Any]]:
    """Load offices.json into flat dicts ready for the persistence layer.

    Records without usable coordinates or with an unknown type are skipped
    with a warning.
    """
    offices = []
    for i, raw in enumerate(_read_records(file_path)):
        coords = raw.get("coordinates") or {}
        lat = parse_float(coords.get("lat"))
        lng = parse_float(coords.get("lng"))
        name = clean_string(raw.get("name"))
        if not name or lat is None or lng is None:
            logger.warning("Skipping office #%d in %s: missing name or coordinates", i, file_path)
            continue
        try:
            office_type = OfficeType.parse(str(raw.get("type") or ""))
        except ValueError:
            logger.warning("Skipping office '%s': unknown type %r", name, raw.get("type"))
            continue

        address = raw.get("address") or {}
        metadata = raw.get("metadata") or {}
        offices.append({
            "id": clean_string(raw.get("id")),
            "name": name,
            "type": office_type.value,
            "region_id": clean_string(raw.get("regionId")) or "",
            "latitude": lat,
            "longitude": lng,
            "address_line1": clean_string(address.get("line1")),
            "city": clean_string(address.get("city")),
            "country": clean_string(address.get("country")),
            "employees": parse_int(metadata.get("employees")),
            "established": parse_int(metadata.get("established")),
            "sqft": parse_int(metadata.get("sqft")),
            "camera_url": clean_string(raw.get("cameraUrl")),
        })

    logger.info("Loaded %d offices from %s", len(offices), file_path)
    return offices


def load_regions(file_path: Path) -> list[dict[str, str]]:
    regions = []
    for raw in _read_records(file_path):
        region_id = clean_string(raw.get("id"))
        if not region_id:
            continue
        regions.append({"id": region_id, "name": clean_string(raw.get("name")) or region_id})
    logger.info("Loaded %d regions from %s", len(regions), file_path)
    return regions


class JsonCatalog(CatalogPort):
    """Serves ``<data_dir>/<name>.json`` as-is."""

    def __init__(self, data_dir: Path):
        self._data_dir = Path(data_dir)

    def load(self, name: str) -> list:
        file_path = self._data_dir / f"{name}.json"
        if not file_path.exists():
            logger.warning("Catalog file not found: %s", file_path)
            return []
        data = read_json(file_path)
        if not isinstance(data, list):
            raise ValueError(f"{file_path} must contain a JSON array")
        return data
