"""Vehicle entity: identity, attributes and dimensions."""
from pydantic import BaseModel


class Dimensions(BaseModel):
    """Vehicle dimensions in meters."""

    height: float
    length: float
    width: float


class Vehicle(BaseModel):
    """Vehicle record held by the repository. Id is assigned by the caller."""

    id: int
    brand: str
    model: str
    registration: str
    color: str
    fabrication_year: int
    capacity: int
    max_speed: float
    fuel_type: str
    transmission: str
    weight: float
    dimensions: Dimensions

    def copy_record(self) -> "Vehicle":
        """Return a deep copy that shares no state with this record."""
        return self.model_copy(deep=True)
