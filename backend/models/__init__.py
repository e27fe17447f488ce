"""Domain models."""
from .vehicle import Dimensions, Vehicle

__all__ = ["Dimensions", "Vehicle"]
