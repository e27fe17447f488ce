# Set test environment before any application imports.
import os

os.environ.pop("VEHICLES_FILE", None)

import pytest
from fastapi.testclient import TestClient

from dependencies import get_vehicle_service
from main import app
from models.vehicle import Dimensions, Vehicle
from repositories.vehicle_repository import VehicleRepository
from services.vehicle_service import VehicleService


def _make_vehicle(vehicle_id: int, **overrides) -> Vehicle:
    """Vehicle with sensible defaults; keyword overrides replace any field."""
    fields = {
        "id": vehicle_id,
        "brand": "Toyota",
        "model": "Corolla",
        "registration": f"ABC-{vehicle_id:03d}",
        "color": "red",
        "fabrication_year": 2020,
        "capacity": 5,
        "max_speed": 180.0,
        "fuel_type": "gasoline",
        "transmission": "manual",
        "weight": 1300.0,
        "dimensions": Dimensions(height=1.4, length=4.6, width=1.8),
    }
    fields.update(overrides)
    return Vehicle(**fields)


def _vehicle_payload(vehicle_id: int, **overrides) -> dict:
    """JSON body for POST /api/vehicles."""
    body = {
        "id": vehicle_id,
        "brand": "Toyota",
        "model": "Corolla",
        "registration": f"ABC-{vehicle_id:03d}",
        "color": "red",
        "year": 2020,
        "passengers": 5,
        "max_speed": 180.0,
        "fuel_type": "gasoline",
        "transmission": "manual",
        "weight": 1300.0,
        "height": 1.4,
        "length": 4.6,
        "width": 1.8,
    }
    body.update(overrides)
    return body


@pytest.fixture
def repository():
    """Empty repository per test."""
    return VehicleRepository()


@pytest.fixture
def vehicle_service(repository):
    """Service over the test repository."""
    return VehicleService(repository)


@pytest.fixture
def client(vehicle_service):
    """API test client; overrides get_vehicle_service to use the test service, cleared on teardown."""
    app.dependency_overrides[get_vehicle_service] = lambda: vehicle_service
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_vehicle():
    """Factory for domain Vehicle records."""
    return _make_vehicle


@pytest.fixture
def vehicle_payload():
    """Factory for vehicle JSON bodies."""
    return _vehicle_payload
