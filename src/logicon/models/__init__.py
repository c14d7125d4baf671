"""
Pydantic models for Logicon.
"""

from logicon.models.fleet import VehiclePosition
from logicon.models.opportunity import Opportunity, RankedOpportunity
from logicon.models.queries import FreshnessQuery, ProximityQuery, RevenueQuery
from logicon.models.revenue import Period, RevenueBucket, ShipmentRecord

__all__ = [
    "FreshnessQuery",
    "Opportunity",
    "Period",
    "ProximityQuery",
    "RankedOpportunity",
    "RevenueBucket",
    "RevenueQuery",
    "ShipmentRecord",
    "VehiclePosition",
]
