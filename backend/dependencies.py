"""FastAPI dependencies: the per-process vehicle service."""
from fastapi import Request

from services.vehicle_service import VehicleService


def get_vehicle_service(request: Request) -> VehicleService:
    """FastAPI dependency: the VehicleService created at startup."""
    return request.app.state.vehicle_service
