"""Unit tests: vehicle service forwards to the repository."""
from unittest.mock import MagicMock

import pytest

from repositories.errors import VehicleNotFoundError
from repositories.vehicle_repository import VehicleRepository
from services.vehicle_service import VehicleService

pytestmark = pytest.mark.unit


@pytest.fixture
def mock_repo():
    """Repository double recording calls."""
    return MagicMock(spec=VehicleRepository)


def test_find_all_forwards(mock_repo, make_vehicle):
    """find_all returns the repository result unchanged."""
    mock_repo.find_all.return_value = [make_vehicle(1)]
    assert VehicleService(mock_repo).find_all() == [make_vehicle(1)]


def test_update_speed_forwards_single_field(mock_repo):
    """update_speed calls update with only the speed key."""
    VehicleService(mock_repo).update_speed(3, 140.0)
    mock_repo.update.assert_called_once_with(3, {"speed": 140.0})


def test_update_fuel_type_forwards_single_field(mock_repo):
    """update_fuel_type calls update with only the fuel_type key."""
    VehicleService(mock_repo).update_fuel_type(3, "diesel")
    mock_repo.update.assert_called_once_with(3, {"fuel_type": "diesel"})


def test_filters_forward_arguments(mock_repo):
    """Filter calls pass their arguments through."""
    sv = VehicleService(mock_repo)
    sv.get_by_brand_and_year_range("Ford", 2000, 2010)
    sv.get_by_dimensions({"min_length": 4.0})
    sv.get_by_weight({})
    mock_repo.get_by_brand_and_year_range.assert_called_once_with("Ford", 2000, 2010)
    mock_repo.get_by_dimensions.assert_called_once_with({"min_length": 4.0})
    mock_repo.get_by_weight.assert_called_once_with({})


def test_errors_propagate(mock_repo):
    """Repository errors reach the caller unchanged."""
    mock_repo.delete.side_effect = VehicleNotFoundError()
    with pytest.raises(VehicleNotFoundError):
        VehicleService(mock_repo).delete(1)


def test_service_over_real_repository(make_vehicle):
    """End to end through a real repository."""
    sv = VehicleService(VehicleRepository())
    sv.create(make_vehicle(1, max_speed=100.0))
    sv.create_multiple([make_vehicle(2, max_speed=120.0)])
    sv.update_speed(2, 140.0)
    assert sv.get_average_speed_by_brand("Toyota") == 120.0
    assert sv.get_average_capacity_by_brand("Toyota") == 5.0
    assert [v.id for v in sv.get_by_color_and_year("red", 2020)] == [1, 2]
    assert [v.id for v in sv.get_by_fuel_type("gasoline")] == [1, 2]
    assert [v.id for v in sv.get_by_transmission("manual")] == [1, 2]
    sv.update(1, {"fuel_type": "diesel"})
    assert [v.id for v in sv.get_by_fuel_type("diesel")] == [1]
