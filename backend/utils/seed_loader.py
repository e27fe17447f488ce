"""Load seed vehicles from a JSON or CSV file at startup."""
import csv
import json
import logging
from io import StringIO
from pathlib import Path
from typing import Any

from models.vehicle import Vehicle
from utils.import_validators import validate_vehicle_row

LOG = logging.getLogger(__name__)


def _clean_row(row: dict[str, Any]) -> dict[str, Any]:
    """Strip keys and string values; drop blank keys (trailing CSV commas)."""
    cleaned: dict[str, Any] = {}
    for key, value in row.items():
        key = (key or "").strip()
        if not key:
            continue
        cleaned[key] = value.strip() if isinstance(value, str) else value
    return cleaned


def rows_from_json(content: str) -> list[dict[str, Any]]:
    """Rows from a JSON array of objects. Raises ValueError otherwise."""
    data = json.loads(content)
    if not isinstance(data, list):
        raise ValueError("Seed JSON must be an array of objects")
    rows = []
    for i, item in enumerate(data, start=1):
        if not isinstance(item, dict):
            raise ValueError(f"Seed row {i} is not an object")
        rows.append(_clean_row(item))
    return rows


def rows_from_csv(content: str) -> list[dict[str, Any]]:
    """Rows from CSV with a header line. Blank lines are skipped."""
    reader = csv.DictReader(StringIO(content))
    return [r for r in (_clean_row(dict(row)) for row in reader) if any(v != "" for v in r.values())]


def load_seed_vehicles(path: str | Path) -> list[Vehicle]:
    """
    Read and validate every vehicle in a seed file.
    Format is picked by extension (.csv, otherwise JSON). Values in CSV rows
    are strings, so they are decoded leniently. Raises ValueError naming the
    first invalid row or repeated id.
    """
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    is_csv = path.suffix.lower() == ".csv"
    rows = rows_from_csv(content) if is_csv else rows_from_json(content)
    vehicles: list[Vehicle] = []
    first_row: dict[int, int] = {}
    for i, row in enumerate(rows, start=1):
        ok, vehicle, err = validate_vehicle_row(row, strict=not is_csv)
        if not ok:
            raise ValueError(f"{path.name} row {i}: {err}")
        if vehicle.id in first_row:
            raise ValueError(
                f"{path.name} row {i}: id {vehicle.id} already used in row {first_row[vehicle.id]}"
            )
        first_row[vehicle.id] = i
        vehicles.append(vehicle)
    LOG.info("Loaded %d seed vehicles from %s", len(vehicles), path)
    return vehicles
