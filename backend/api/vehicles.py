"""Vehicle API routes."""
import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from dependencies import get_vehicle_service
from models.vehicle import Vehicle
from repositories.errors import (
    InvalidFieldError,
    VehicleAlreadyExistsError,
    VehicleNotFoundByBrandError,
    VehicleNotFoundByTransmissionError,
    VehicleNotFoundError,
)
from schemas.vehicles import (
    AverageCapacityResponse,
    AverageSpeedResponse,
    FuelTypeUpdate,
    MessageResponse,
    SpeedUpdate,
    VehicleBody,
)
from services.vehicle_service import VehicleService
from utils.import_validators import MALFORMED_VEHICLE_MSG, validate_vehicle_row

LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


def _to_response(vehicles: list[Vehicle]) -> list[VehicleBody]:
    return [VehicleBody.from_vehicle(v) for v in vehicles]


def _bad_request(detail: str) -> HTTPException:
    LOG.warning("Rejected vehicle request: %s", detail)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _not_found(e: VehicleNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _check_range(name: str, low: Optional[float], high: Optional[float]) -> None:
    if low is not None and high is not None and low > high:
        raise _bad_request(f"Invalid {name} range: minimum {low} is greater than maximum {high}")


@router.get("", response_model=list[VehicleBody])
def list_vehicles(sv: VehicleService = Depends(get_vehicle_service)) -> list[VehicleBody]:
    """List all vehicles."""
    return _to_response(sv.find_all())


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_vehicle(
    body: Any = Body(None),
    sv: VehicleService = Depends(get_vehicle_service),
) -> MessageResponse:
    """Create a vehicle. Every field is required; the id must not exist yet."""
    ok, vehicle, err = validate_vehicle_row(body)
    if not ok:
        raise _bad_request(err)
    try:
        sv.create(vehicle)
    except VehicleAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    return MessageResponse(message="Vehicle created successfully")


@router.post("/batch", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_vehicles_batch(
    body: Any = Body(None),
    sv: VehicleService = Depends(get_vehicle_service),
) -> MessageResponse:
    """Create several vehicles at once. Nothing is stored if any vehicle is invalid or collides."""
    if not isinstance(body, list):
        raise _bad_request(f"{MALFORMED_VEHICLE_MSG}: expected a JSON array")
    vehicles: list[Vehicle] = []
    for i, row in enumerate(body, start=1):
        ok, vehicle, err = validate_vehicle_row(row)
        if not ok:
            raise _bad_request(f"vehicle {i}: {err}")
        vehicles.append(vehicle)
    try:
        sv.create_multiple(vehicles)
    except VehicleAlreadyExistsError as e:
        raise _bad_request(str(e)) from e
    return MessageResponse(message=f"{len(vehicles)} vehicles created successfully")


@router.get("/color/{color}/year/{year}", response_model=list[VehicleBody])
def get_by_color_and_year(
    color: str,
    year: int,
    sv: VehicleService = Depends(get_vehicle_service),
) -> list[VehicleBody]:
    """Vehicles with the given color and fabrication year."""
    try:
        return _to_response(sv.get_by_color_and_year(color, year))
    except VehicleNotFoundError as e:
        raise _not_found(e) from e


@router.get("/brand/{brand}/between/{start_year}/{end_year}", response_model=list[VehicleBody])
def get_by_brand_and_year_range(
    brand: str,
    start_year: int,
    end_year: int,
    sv: VehicleService = Depends(get_vehicle_service),
) -> list[VehicleBody]:
    """Vehicles of a brand fabricated between two years (inclusive)."""
    if start_year > end_year:
        raise _bad_request(f"Invalid year range: {start_year} is after {end_year}")
    try:
        return _to_response(sv.get_by_brand_and_year_range(brand, start_year, end_year))
    except VehicleNotFoundError as e:
        raise _not_found(e) from e


@router.get("/average-speed/brand/{brand}", response_model=AverageSpeedResponse)
def get_average_speed_by_brand(
    brand: str,
    sv: VehicleService = Depends(get_vehicle_service),
) -> AverageSpeedResponse:
    """Average max speed of a brand."""
    try:
        average = sv.get_average_speed_by_brand(brand)
    except VehicleNotFoundByBrandError as e:
        raise _not_found(e) from e
    return AverageSpeedResponse(brand=brand, average_speed=average)


@router.get("/average-capacity/brand/{brand}", response_model=AverageCapacityResponse)
def get_average_capacity_by_brand(
    brand: str,
    sv: VehicleService = Depends(get_vehicle_service),
) -> AverageCapacityResponse:
    """Average passenger capacity of a brand."""
    try:
        average = sv.get_average_capacity_by_brand(brand)
    except VehicleNotFoundByBrandError as e:
        raise _not_found(e) from e
    return AverageCapacityResponse(brand=brand, average_capacity=average)


@router.patch("/{vehicle_id}/update_speed", response_model=MessageResponse)
def update_speed(
    vehicle_id: int,
    body: SpeedUpdate,
    sv: VehicleService = Depends(get_vehicle_service),
) -> MessageResponse:
    """Update a vehicle's max speed. Body: {"speed": <non-negative number>}."""
    try:
        sv.update_speed(vehicle_id, body.speed)
    except InvalidFieldError as e:
        raise _bad_request(f"{MALFORMED_VEHICLE_MSG}: {e}") from e
    except VehicleNotFoundError as e:
        raise _not_found(e) from e
    return MessageResponse(message="Vehicle speed updated successfully")


@router.patch("/{vehicle_id}/update_fuel", response_model=MessageResponse)
def update_fuel_type(
    vehicle_id: int,
    body: FuelTypeUpdate,
    sv: VehicleService = Depends(get_vehicle_service),
) -> MessageResponse:
    """Update a vehicle's fuel type. Body: {"fuel_type": <string>}."""
    try:
        sv.update_fuel_type(vehicle_id, body.fuel_type)
    except InvalidFieldError as e:
        raise _bad_request(f"{MALFORMED_VEHICLE_MSG}: {e}") from e
    except VehicleNotFoundError as e:
        raise _not_found(e) from e
    return MessageResponse(message="Vehicle fuel type updated successfully")


@router.get("/fuel_type/{fuel_type}", response_model=list[VehicleBody])
def get_by_fuel_type(
    fuel_type: str,
    sv: VehicleService = Depends(get_vehicle_service),
) -> list[VehicleBody]:
    """Vehicles using the given fuel type."""
    try:
        return _to_response(sv.get_by_fuel_type(fuel_type))
    except VehicleNotFoundError as e:
        raise _not_found(e) from e


@router.get("/transmission/{transmission}", response_model=list[VehicleBody])
def get_by_transmission(
    transmission: str,
    sv: VehicleService = Depends(get_vehicle_service),
) -> list[VehicleBody]:
    """Vehicles with the given transmission type."""
    try:
        return _to_response(sv.get_by_transmission(transmission))
    except VehicleNotFoundByTransmissionError as e:
        raise _not_found(e) from e


@router.get("/dimensions", response_model=list[VehicleBody])
def get_by_dimensions(
    min_height: Optional[float] = None,
    max_height: Optional[float] = None,
    min_length: Optional[float] = None,
    max_length: Optional[float] = None,
    min_width: Optional[float] = None,
    max_width: Optional[float] = None,
    sv: VehicleService = Depends(get_vehicle_service),
) -> list[VehicleBody]:
    """Vehicles within the given dimension bounds. Omitted bounds are unconstrained."""
    _check_range("height", min_height, max_height)
    _check_range("length", min_length, max_length)
    _check_range("width", min_width, max_width)
    given = {
        "min_height": min_height,
        "max_height": max_height,
        "min_length": min_length,
        "max_length": max_length,
        "min_width": min_width,
        "max_width": max_width,
    }
    bounds = {k: v for k, v in given.items() if v is not None}
    return _to_response(sv.get_by_dimensions(bounds))


@router.get("/weight", response_model=list[VehicleBody])
def get_by_weight(
    min_weight: Optional[float] = Query(None, alias="min"),
    max_weight: Optional[float] = Query(None, alias="max"),
    sv: VehicleService = Depends(get_vehicle_service),
) -> list[VehicleBody]:
    """Vehicles whose weight lies between min and max. Omitted bounds are unconstrained."""
    _check_range("weight", min_weight, max_weight)
    bounds = {}
    if min_weight is not None:
        bounds["min_weight"] = min_weight
    if max_weight is not None:
        bounds["max_weight"] = max_weight
    return _to_response(sv.get_by_weight(bounds))


@router.delete("/{vehicle_id}", response_model=MessageResponse)
def delete_vehicle(
    vehicle_id: int,
    sv: VehicleService = Depends(get_vehicle_service),
) -> MessageResponse:
    """Delete a vehicle by id."""
    try:
        sv.delete(vehicle_id)
    except VehicleNotFoundError as e:
        raise _not_found(e) from e
    return MessageResponse(message="Vehicle deleted successfully")
