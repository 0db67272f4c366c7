"""Coordinate pair records used by location and timeframe requests."""

from __future__ import annotations

from typing import Optional

from .base import Entity


class Coordinates(Entity):
    """Latitude/longitude pair kept as the strings the API expects."""

    latitude: Optional[str] = None
    longitude: Optional[str] = None

    def set_latitude(self, latitude: Optional[str]) -> "Coordinates":
        self.latitude = latitude
        return self

    def set_longitude(self, longitude: Optional[str]) -> "Coordinates":
        self.longitude = longitude
        return self


class CoordinatesNorthWest(Coordinates):
    """North-west corner of an area. Values are not range-checked."""


class CoordinatesSouthEast(Coordinates):
    """South-east corner of an area. Values are not range-checked."""
