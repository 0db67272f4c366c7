"""Request entities and validators for the PostNL web API."""

from .entities import (
    Coordinates,
    CoordinatesNorthWest,
    CoordinatesSouthEast,
    DeliveryOption,
    Entity,
    FindLocationsInAreaRequest,
    FindNearestLocationsRequest,
    RetrieveUpdatedShipmentsRequest,
)
from .exceptions import InvalidArgumentError, PostNLError, UnknownNamespaceError
from .namespaces import Service, qualified_payload, resolve_namespace

__version__ = "0.1.0"

__all__ = [
    "Coordinates",
    "CoordinatesNorthWest",
    "CoordinatesSouthEast",
    "DeliveryOption",
    "Entity",
    "FindLocationsInAreaRequest",
    "FindNearestLocationsRequest",
    "RetrieveUpdatedShipmentsRequest",
    "InvalidArgumentError",
    "PostNLError",
    "UnknownNamespaceError",
    "Service",
    "qualified_payload",
    "resolve_namespace",
]
