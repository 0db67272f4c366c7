"""Request entities grouped by API endpoint."""

from .locations import FindLocationsInAreaRequest, FindNearestLocationsRequest
from .shipments import RetrieveUpdatedShipmentsRequest

__all__ = [
    "FindLocationsInAreaRequest",
    "FindNearestLocationsRequest",
    "RetrieveUpdatedShipmentsRequest",
]
