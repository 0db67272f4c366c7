"""Delivery option codes accepted by the location endpoints."""

from __future__ import annotations

from enum import Enum


class DeliveryOption(str, Enum):
    """Service-level codes for pickup locations."""

    PG = "PG"
    PGE = "PGE"
    PA = "PA"

