"""Vehicle repository errors."""


class VehicleStoreError(Exception):
    """Base exception for all repository failures."""


class VehicleAlreadyExistsError(VehicleStoreError):
    """A vehicle with the same id is already stored."""

    def __init__(self, vehicle_id: int) -> None:
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle with id {vehicle_id} already exists")


class VehicleNotFoundError(VehicleStoreError):
    """No vehicle matches the given id or criteria."""

    def __init__(self, message: str = "No vehicles found matching those criteria") -> None:
        super().__init__(message)


class VehicleNotFoundByBrandError(VehicleNotFoundError):
    """No vehicle of the given brand is stored."""

    def __init__(self, brand: str) -> None:
        self.brand = brand
        super().__init__(f"No vehicles found for brand '{brand}'")


class VehicleNotFoundByTransmissionError(VehicleNotFoundError):
    """No vehicle with the given transmission type is stored."""

    def __init__(self, transmission: str) -> None:
        self.transmission = transmission
        super().__init__(f"No vehicles found with transmission '{transmission}'")


class InvalidFieldError(VehicleStoreError):
    """A field is unknown, missing or has the wrong type."""

    def __init__(self, field: str, msg: str) -> None:
        self.field = field
        self.msg = msg
        super().__init__(f"field {field}: {msg}")
