"""Freshness filter for live vehicle positions."""

import logging
from datetime import datetime, timedelta

from logicon.db.store import LogisticsStore
from logicon.models import FreshnessQuery, VehiclePosition
from logicon.services.validation import parse_query, resolve_now

logger = logging.getLogger(__name__)


def list_recent_vehicle_positions(
    store: LogisticsStore,
    window_minutes: int | None = None,
    now: datetime | None = None,
) -> list[VehiclePosition]:
    """Vehicles that reported within the last ``window_minutes``, newest first."""
    query = parse_query(FreshnessQuery, window_minutes=window_minutes)
    now = resolve_now(now)
    cutoff = now - timedelta(minutes=query.window_minutes)

    positions = [p for p in store.fetch_vehicle_positions(cutoff) if p.last_updated > cutoff]
    # Stable sort keeps store (insertion) order among equal timestamps.
    positions.sort(key=lambda p: p.last_updated, reverse=True)

    logger.debug("%d vehicles reported in the last %d minutes", len(positions), query.window_minutes)
    return positions
