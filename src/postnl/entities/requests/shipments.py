"""Request entities for the shipment endpoints."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import field_validator

from ... import validation
from ..base import Entity


class RetrieveUpdatedShipmentsRequest(Entity):
    """Query for shipments whose status changed within a time window."""

    start_date: Optional[str] = None
    end_date: Optional[str] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _check_date_time(cls, value: Any) -> Optional[str]:
        return validation.date_time(value)

    def set_start_date(self, start_date: Optional[str]) -> "RetrieveUpdatedShipmentsRequest":
        self.start_date = start_date
        return self

    def set_end_date(self, end_date: Optional[str]) -> "RetrieveUpdatedShipmentsRequest":
        self.end_date = end_date
        return self
