"""PostNL request entities."""

from .base import Entity
from .coordinates import Coordinates, CoordinatesNorthWest, CoordinatesSouthEast
from .options import DeliveryOption
from .requests import (
    FindLocationsInAreaRequest,
    FindNearestLocationsRequest,
    RetrieveUpdatedShipmentsRequest,
)

__all__ = [
    "Entity",
    "Coordinates",
    "CoordinatesNorthWest",
    "CoordinatesSouthEast",
    "DeliveryOption",
    "FindLocationsInAreaRequest",
    "FindNearestLocationsRequest",
    "RetrieveUpdatedShipmentsRequest",
]
