"""Proximity ranking of open freight opportunities."""

import logging
from datetime import datetime

from logicon.db.store import LogisticsStore
from logicon.models import ProximityQuery, RankedOpportunity
from logicon.services.geo import great_circle_km
from logicon.services.validation import parse_query, resolve_now

logger = logging.getLogger(__name__)

MAX_RESULTS = 50


def _rank_key(match: RankedOpportunity) -> tuple:
    return (-match.opportunity.revenue, match.distance_km, match.opportunity.id)


def find_opportunities(
    store: LogisticsStore,
    lat: float | None,
    lng: float | None,
    max_distance_km: float | None = None,
    now: datetime | None = None,
) -> list[RankedOpportunity]:
    """Open opportunities within ``max_distance_km`` of (lat, lng).

    Ranked by revenue (highest first), then distance, then id. At most
    ``MAX_RESULTS`` matches are returned, taken after ranking.
    """
    query = parse_query(ProximityQuery, lat=lat, lng=lng, max_distance_km=max_distance_km)
    now = resolve_now(now)

    matches = []
    for opportunity in store.fetch_open_opportunities(now):
        if not opportunity.is_open(now):
            continue
        distance = great_circle_km(
            query.lat, query.lng, opportunity.origin_latitude, opportunity.origin_longitude
        )
        if distance < query.max_distance_km:
            matches.append(RankedOpportunity(opportunity=opportunity, distance_km=distance))

    matches.sort(key=_rank_key)

    logger.debug(
        "%d opportunities within %.1f km of (%.5f, %.5f)",
        len(matches),
        query.max_distance_km,
        query.lat,
        query.lng,
    )
    return matches[:MAX_RESULTS]
