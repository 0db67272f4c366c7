"""XML namespace lookup for entity fields.

Entities carry no namespace data. Serializers resolve the namespace of each
field here, from an explicit registry keyed by entity type, field and
service.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Union

from .config import Settings, settings
from .entities.base import Entity
from .exceptions import UnknownNamespaceError


class Service(str, Enum):
    """PostNL web services that exchange entities."""

    BARCODE = "Barcode"
    CONFIRMING = "Confirming"
    LABELLING = "Labelling"
    SHIPPING_STATUS = "ShippingStatus"
    DELIVERY_DATE = "DeliveryDate"
    LOCATION = "Location"
    TIMEFRAME = "Timeframe"


ALL_SERVICES = frozenset(Service)

_COORDINATE_FIELDS: Mapping[str, frozenset[Service]] = {
    "Latitude": ALL_SERVICES,
    "Longitude": ALL_SERVICES,
}

# entity class name -> field alias -> services the field is exchanged with
FIELD_NAMESPACES: Mapping[str, Mapping[str, frozenset[Service]]] = {
    "Coordinates": _COORDINATE_FIELDS,
    "CoordinatesNorthWest": _COORDINATE_FIELDS,
    "CoordinatesSouthEast": _COORDINATE_FIELDS,
}

EntityRef = Union[type[Entity], Entity, str]


def _entity_name_and_type(entity_type: EntityRef) -> tuple[str, Optional[type[Entity]]]:
    if isinstance(entity_type, str):
        return entity_type, None
    cls = entity_type if isinstance(entity_type, type) else type(entity_type)
    return cls.__name__, cls


def _field_alias(cls: Optional[type[Entity]], field: str) -> str:
    if cls is not None and field in cls.model_fields:
        return cls.model_fields[field].alias or field
    return field


def _coerce_service(service: Union[Service, str]) -> Service:
    try:
        return Service(service)
    except ValueError:
        raise UnknownNamespaceError(f"Unknown service: {service!r}") from None


def resolve_namespace(
    entity_type: EntityRef,
    field: str,
    service: Union[Service, str],
    config: Optional[Settings] = None,
) -> str:
    """Return the namespace URI for ``field`` of ``entity_type`` within ``service``.

    ``field`` may be the Python attribute name or the API alias.
    """

    name, cls = _entity_name_and_type(entity_type)
    alias = _field_alias(cls, field)
    service = _coerce_service(service)

    services = FIELD_NAMESPACES.get(name, {}).get(alias)
    if not services or service not in services:
        raise UnknownNamespaceError(
            f"No namespace registered for {name}.{alias} in the {service.value} service"
        )

    if config is None:
        config = settings
    return config.namespace_overrides.get(service.value, config.domain_namespace)


def qualified_payload(
    entity: Entity,
    service: Union[Service, str],
    config: Optional[Settings] = None,
) -> dict[str, Any]:
    """Return the entity payload keyed by Clark-notation names (``{uri}Field``)."""

    payload: dict[str, Any] = {}
    for key, value in entity.to_payload().items():
        namespace = resolve_namespace(entity, key, service, config)
        payload[f"{{{namespace}}}{key}"] = value
    return payload
