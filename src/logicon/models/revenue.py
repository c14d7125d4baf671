"""Pydantic models for shipment history and revenue rollups."""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field

from logicon.models.base import UtcDatetime


class Period(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class ShipmentRecord(BaseModel):
    id: int
    timestamp: UtcDatetime
    revenue: Decimal = Field(..., ge=0)


class RevenueBucket(BaseModel):
    timeframe: str
    total: Decimal
    shipments: int = Field(..., ge=0)
