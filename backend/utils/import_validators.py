"""Validate raw vehicle rows from request bodies and seed files."""
from typing import Any, Iterable

from pydantic import ValidationError

from models.vehicle import Vehicle
from schemas.vehicles import VEHICLE_REQUIRED_FIELDS, VehicleBody

MALFORMED_VEHICLE_MSG = "Malformed or incomplete vehicle data"


def find_missing_field(row: dict[str, Any], required: Iterable[str]) -> str | None:
    """Return the first required key absent from row, or None if all are present."""
    for field in required:
        if field not in row:
            return field
    return None


def _format_validation_error(e: ValidationError) -> str:
    """First pydantic error as 'field <name>: <msg>'."""
    err = e.errors()[0]
    field = ".".join(str(p) for p in err.get("loc", ())) or "body"
    return f"field {field}: {err.get('msg', 'is invalid')}"


def validate_vehicle_row(
    row: Any,
    strict: bool = True,
) -> tuple[bool, Vehicle | None, str]:
    """
    Validate a vehicle row. Returns (ok, vehicle, error_message).
    Presence of every required field is checked before decoding, so a missing
    field is always reported by name. strict=False lets seed rows from CSV
    carry numbers as strings.
    """
    if not isinstance(row, dict):
        return False, None, f"{MALFORMED_VEHICLE_MSG}: expected a JSON object"
    missing = find_missing_field(row, VEHICLE_REQUIRED_FIELDS)
    if missing is not None:
        return False, None, f"{MALFORMED_VEHICLE_MSG}: field {missing}: is required"
    try:
        body = VehicleBody.model_validate(row, strict=strict)
    except ValidationError as e:
        return False, None, f"{MALFORMED_VEHICLE_MSG}: {_format_validation_error(e)}"
    return True, body.to_vehicle(), ""
