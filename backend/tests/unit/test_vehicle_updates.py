"""Unit tests: partial update parsing."""
import pytest

from repositories.errors import InvalidFieldError
from repositories.vehicle_updates import SetFuelType, SetSpeed, parse_vehicle_updates

pytestmark = pytest.mark.unit


def test_parse_speed_and_fuel_type():
    """Both recognized keys produce their update operations."""
    updates = parse_vehicle_updates({"speed": 150.0, "fuel_type": "diesel"})
    assert updates == [SetSpeed(150.0), SetFuelType("diesel")]


def test_parse_integer_speed_becomes_float():
    """Integer speeds are converted to float."""
    (update,) = parse_vehicle_updates({"speed": 90})
    assert isinstance(update.speed, float) and update.speed == 90.0


def test_parse_empty_mapping():
    """An empty mapping yields no updates."""
    assert parse_vehicle_updates({}) == []


def test_parse_unknown_key():
    """Unknown keys raise InvalidFieldError naming the key."""
    with pytest.raises(InvalidFieldError) as exc:
        parse_vehicle_updates({"color": "blue"})
    assert exc.value.field == "color"
    assert "color" in str(exc.value)


@pytest.mark.parametrize("value", ["100", None, False, [1]])
def test_parse_speed_rejects_non_numbers(value):
    """Speed must be an int or float (not bool)."""
    with pytest.raises(InvalidFieldError, match="speed"):
        parse_vehicle_updates({"speed": value})


def test_parse_fuel_type_rejects_non_string():
    """fuel_type must be a string."""
    with pytest.raises(InvalidFieldError, match="fuel_type"):
        parse_vehicle_updates({"fuel_type": 1})


def test_apply(make_vehicle):
    """apply sets the targeted field on the vehicle."""
    vehicle = make_vehicle(1)
    SetSpeed(55.5).apply(vehicle)
    SetFuelType("electric").apply(vehicle)
    assert vehicle.max_speed == 55.5 and vehicle.fuel_type == "electric"


def test_parse_speed_rejects_int_too_large_for_float():
    """An integer beyond float range is an invalid speed, not an overflow."""
    with pytest.raises(InvalidFieldError, match="speed"):
        parse_vehicle_updates({"speed": 10 ** 400})


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_parse_speed_rejects_non_finite(value):
    """Infinite and NaN speeds are rejected."""
    with pytest.raises(InvalidFieldError, match="finite"):
        parse_vehicle_updates({"speed": value})
