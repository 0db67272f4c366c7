"""Base model for PostNL request entities."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class Entity(BaseModel):
    """Flat record of optional fields validated on construction and assignment.

    Fields can be passed positionally (in declaration order) or by name, using
    either the Python name or the API's PascalCase alias. Assigning an
    attribute re-runs its validator; a rejected value raises
    ``pydantic.ValidationError`` and leaves the previous value in place.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )

    def __init__(self, *args: Any, **data: Any) -> None:
        names = list(type(self).model_fields)
        if len(args) > len(names):
            raise TypeError(
                f"{type(self).__name__} takes at most {len(names)} positional arguments ({len(args)} given)"
            )
        for name, value in zip(names, args):
            alias = type(self).model_fields[name].alias
            if name in data or alias in data:
                raise TypeError(f"{type(self).__name__} got multiple values for argument '{name}'")
            data[name] = value
        super().__init__(**data)

    def to_payload(self) -> dict[str, Any]:
        """Return the set fields keyed by their API names, ready for JSON encoding."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
