"""Validated parameters for the three query operations.

Handlers pass raw query-string values straight in; pydantic's lax mode
coerces numeric strings, and anything out of range fails validation.
"""

from pydantic import BaseModel, ConfigDict, Field

from logicon.models.revenue import Period

DEFAULT_WINDOW_MINUTES = 5
DEFAULT_MAX_DISTANCE_KM = 100.0


class FreshnessQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    window_minutes: int = Field(default=DEFAULT_WINDOW_MINUTES, gt=0)


class ProximityQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90.0, le=90.0, allow_inf_nan=False)
    lng: float = Field(..., ge=-180.0, le=180.0, allow_inf_nan=False)
    max_distance_km: float = Field(default=DEFAULT_MAX_DISTANCE_KM, gt=0, allow_inf_nan=False)


class RevenueQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    period: Period = Period.MONTH
