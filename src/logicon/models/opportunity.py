"""Pydantic models for freight opportunities and their ranked matches."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from logicon.models.base import UtcDatetime


class Opportunity(BaseModel):
    id: int
    origin: str
    destination: str
    origin_latitude: float = Field(..., ge=-90.0, le=90.0)
    origin_longitude: float = Field(..., ge=-180.0, le=180.0)
    payload: str = ""
    revenue: Decimal = Field(..., ge=0)
    expiry: UtcDatetime

    def is_open(self, now: datetime) -> bool:
        return now < self.expiry


class RankedOpportunity(BaseModel):
    opportunity: Opportunity
    distance_km: float = Field(..., ge=0.0)
