"""
Query services for Logicon.

- tracking.py: freshness filter over vehicle positions
- matching.py: proximity ranking of open opportunities
- analytics.py: period-bucketed revenue rollups
- migration.py: Alembic schema bootstrap
"""

from logicon.services.analytics import revenue_by_period
from logicon.services.matching import find_opportunities
from logicon.services.tracking import list_recent_vehicle_positions

__all__ = ["find_opportunities", "list_recent_vehicle_positions", "revenue_by_period"]
