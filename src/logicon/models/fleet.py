"""Pydantic models for vehicle position reports."""

from pydantic import BaseModel, Field

from logicon.models.base import UtcDatetime


class VehiclePosition(BaseModel):
    id: int
    license_plate: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)
    last_updated: UtcDatetime
