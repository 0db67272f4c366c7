import pytest
from pydantic import ValidationError

from postnl.entities import (
    Coordinates,
    CoordinatesNorthWest,
    CoordinatesSouthEast,
    DeliveryOption,
    FindNearestLocationsRequest,
)


def test_coordinates_positional_construction() -> None:
    corner = CoordinatesNorthWest("52.156439", "5.015643")

    assert corner.latitude == "52.156439"
    assert corner.longitude == "5.015643"
    assert corner.to_payload() == {"Latitude": "52.156439", "Longitude": "5.015643"}


def test_coordinates_are_not_range_checked() -> None:
    corner = CoordinatesSouthEast(latitude="123.4", longitude="not-a-number")

    assert corner.latitude == "123.4"
    assert corner.longitude == "not-a-number"


def test_coordinates_require_strings() -> None:
    with pytest.raises(ValidationError):
        CoordinatesNorthWest(52.156439)


def test_coordinates_setters_chain_and_clear() -> None:
    point = Coordinates()

    assert point.set_latitude("52.1").set_longitude("4.3") is point
    assert point.latitude == "52.1"

    point.set_latitude(None)
    assert point.latitude is None
    assert point.to_payload() == {"Longitude": "4.3"}


def test_entities_compare_by_fields() -> None:
    assert CoordinatesNorthWest("52.1", "4.3") == CoordinatesNorthWest(latitude="52.1", longitude="4.3")
    assert CoordinatesNorthWest("52.1", "4.3") != CoordinatesNorthWest("52.1", "4.4")


def test_alias_names_are_accepted() -> None:
    request = FindNearestLocationsRequest(CountryCode="BE", PostalCode="1000")

    assert request.country_code == "BE"
    assert request.postal_code == "1000"


def test_unknown_fields_are_rejected() -> None:
    with pytest.raises(ValidationError):
        FindNearestLocationsRequest(country="NL")


def test_too_many_positional_arguments() -> None:
    with pytest.raises(TypeError):
        Coordinates("52.1", "4.3", "extra")


def test_positional_and_keyword_for_same_field() -> None:
    with pytest.raises(TypeError):
        FindNearestLocationsRequest("NL", country_code="BE")
    with pytest.raises(TypeError):
        FindNearestLocationsRequest("NL", CountryCode="BE")

