"""Pydantic schemas for vehicle API."""
from pydantic import BaseModel, ConfigDict, Field

from models.vehicle import Dimensions, Vehicle

# Fields every vehicle body must carry, checked on the raw JSON object before decoding.
VEHICLE_REQUIRED_FIELDS = (
    "id",
    "brand",
    "model",
    "registration",
    "color",
    "year",
    "passengers",
    "max_speed",
    "fuel_type",
    "transmission",
    "weight",
    "height",
    "length",
    "width",
)


class VehicleBody(BaseModel):
    """Vehicle as sent and returned over HTTP (flat dimensions)."""

    model_config = ConfigDict(allow_inf_nan=False)

    id: int
    brand: str
    model: str
    registration: str
    color: str
    year: int
    passengers: int
    max_speed: float
    fuel_type: str
    transmission: str
    weight: float
    height: float
    length: float
    width: float

    def to_vehicle(self) -> Vehicle:
        """Build the domain Vehicle from this body."""
        return Vehicle(
            id=self.id,
            brand=self.brand,
            model=self.model,
            registration=self.registration,
            color=self.color,
            fabrication_year=self.year,
            capacity=self.passengers,
            max_speed=self.max_speed,
            fuel_type=self.fuel_type,
            transmission=self.transmission,
            weight=self.weight,
            dimensions=Dimensions(height=self.height, length=self.length, width=self.width),
        )

    @classmethod
    def from_vehicle(cls, v: Vehicle) -> "VehicleBody":
        return cls(
            id=v.id,
            brand=v.brand,
            model=v.model,
            registration=v.registration,
            color=v.color,
            year=v.fabrication_year,
            passengers=v.capacity,
            max_speed=v.max_speed,
            fuel_type=v.fuel_type,
            transmission=v.transmission,
            weight=v.weight,
            height=v.dimensions.height,
            length=v.dimensions.length,
            width=v.dimensions.width,
        )


class SpeedUpdate(BaseModel):
    """Payload for PATCH /vehicles/{id}/update_speed."""

    speed: float = Field(..., ge=0, allow_inf_nan=False, strict=True)


class FuelTypeUpdate(BaseModel):
    """Payload for PATCH /vehicles/{id}/update_fuel."""

    fuel_type: str = Field(..., strict=True)


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class AverageSpeedResponse(BaseModel):
    """Response for GET /vehicles/average-speed/brand/{brand}."""

    brand: str
    average_speed: float


class AverageCapacityResponse(BaseModel):
    """Response for GET /vehicles/average-capacity/brand/{brand}."""

    brand: str
    average_capacity: float
