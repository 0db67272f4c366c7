"""Request entities for the location lookup endpoints."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import field_validator

from ... import validation
from ..base import Entity


class FindNearestLocationsRequest(Entity):
    """Lookup of the pickup locations nearest to an address."""

    country_code: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    street: Optional[str] = None
    house_number: Optional[int] = None
    delivery_date: Optional[str] = None
    opening_time: Optional[str] = None
    delivery_options: Optional[list[str]] = None

    @field_validator("country_code", mode="before")
    @classmethod
    def _check_country_code(cls, value: Any) -> Optional[str]:
        return validation.iso_alpha2_country_code_nl_be(value)

    @field_validator("postal_code", mode="before")
    @classmethod
    def _check_postal_code(cls, value: Any) -> Optional[str]:
        return validation.postcode(value)

    @field_validator("city", mode="before")
    @classmethod
    def _check_city(cls, value: Any) -> Optional[str]:
        return validation.city(value)

    @field_validator("street", mode="before")
    @classmethod
    def _check_street(cls, value: Any) -> Optional[str]:
        return validation.street(value)

    @field_validator("house_number", mode="before")
    @classmethod
    def _check_house_number(cls, value: Any) -> Optional[int]:
        return validation.integer(value)

    @field_validator("delivery_date", mode="before")
    @classmethod
    def _check_delivery_date(cls, value: Any) -> Optional[str]:
        return validation.date(value)

    @field_validator("opening_time", mode="before")
    @classmethod
    def _check_opening_time(cls, value: Any) -> Optional[str]:
        return validation.time(value)

    @field_validator("delivery_options", mode="before")
    @classmethod
    def _check_delivery_options(cls, value: Any) -> Optional[list[str]]:
        return validation.delivery_options(value)

    def set_country_code(self, country_code: Optional[str]) -> "FindNearestLocationsRequest":
        self.country_code = country_code
        return self

    def set_postal_code(self, postal_code: Optional[str]) -> "FindNearestLocationsRequest":
        self.postal_code = postal_code
        return self

    def set_city(self, city: Optional[str]) -> "FindNearestLocationsRequest":
        self.city = city
        return self

    def set_street(self, street: Optional[str]) -> "FindNearestLocationsRequest":
        self.street = street
        return self

    def set_house_number(self, house_number: Any) -> "FindNearestLocationsRequest":
        self.house_number = house_number
        return self

    def set_delivery_date(self, delivery_date: Optional[str]) -> "FindNearestLocationsRequest":
        self.delivery_date = delivery_date
        return self

    def set_opening_time(self, opening_time: Optional[str]) -> "FindNearestLocationsRequest":
        self.opening_time = opening_time
        return self

    def set_delivery_options(self, delivery_options: Any) -> "FindNearestLocationsRequest":
        self.delivery_options = delivery_options
        return self


class FindLocationsInAreaRequest(Entity):
    """Lookup of pickup locations inside a bounding box.

    The four corners are validated one by one; whether north actually lies
    above south is left to the API.
    """

    latitude_north: Optional[float] = None
    longitude_west: Optional[float] = None
    latitude_south: Optional[float] = None
    longitude_east: Optional[float] = None
    country_code: Optional[str] = None
    delivery_options: Optional[list[str]] = None
    delivery_date: Optional[str] = None
    opening_time: Optional[str] = None

    @field_validator("latitude_north", "longitude_west", "latitude_south", "longitude_east", mode="before")
    @classmethod
    def _check_coordinate(cls, value: Any) -> Optional[float]:
        return validation.coordinate(value)

    @field_validator("country_code", mode="before")
    @classmethod
    def _check_country_code(cls, value: Any) -> Optional[str]:
        return validation.iso_alpha2_country_code_nl_be(value)

    @field_validator("delivery_options", mode="before")
    @classmethod
    def _check_delivery_options(cls, value: Any) -> Optional[list[str]]:
        return validation.delivery_options(value)

    @field_validator("delivery_date", mode="before")
    @classmethod
    def _check_delivery_date(cls, value: Any) -> Optional[str]:
        return validation.date(value)

    @field_validator("opening_time", mode="before")
    @classmethod
    def _check_opening_time(cls, value: Any) -> Optional[str]:
        return validation.time(value)

    def set_latitude_north(self, latitude_north: Any) -> "FindLocationsInAreaRequest":
        self.latitude_north = latitude_north
        return self

    def set_longitude_west(self, longitude_west: Any) -> "FindLocationsInAreaRequest":
        self.longitude_west = longitude_west
        return self

    def set_latitude_south(self, latitude_south: Any) -> "FindLocationsInAreaRequest":
        self.latitude_south = latitude_south
        return self

    def set_longitude_east(self, longitude_east: Any) -> "FindLocationsInAreaRequest":
        self.longitude_east = longitude_east
        return self

    def set_country_code(self, country_code: Optional[str]) -> "FindLocationsInAreaRequest":
        self.country_code = country_code
        return self

    def set_delivery_options(self, delivery_options: Any) -> "FindLocationsInAreaRequest":
        self.delivery_options = delivery_options
        return self

    def set_delivery_date(self, delivery_date: Optional[str]) -> "FindLocationsInAreaRequest":
        self.delivery_date = delivery_date
        return self

    def set_opening_time(self, opening_time: Optional[str]) -> "FindLocationsInAreaRequest":
        self.opening_time = opening_time
        return self
