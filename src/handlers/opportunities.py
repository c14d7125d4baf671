"""GET /api/opportunities: open loads near the caller, best paying first."""

import logging
from typing import Any

from logicon.config import get_config
from logicon.db import PostgresStore
from logicon.errors import InvalidArgumentError, LogisticsError
from logicon.http import error_response, json_response, query_params
from logicon.models import ProximityQuery, RankedOpportunity
from logicon.services import find_opportunities
from logicon.services.validation import parse_query

logger = logging.getLogger(__name__)


def _to_row(match: RankedOpportunity) -> dict[str, Any]:
    return {**match.opportunity.model_dump(mode="json"), "distance": match.distance_km}


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    params = query_params(event)
    try:
        query = parse_query(
            ProximityQuery,
            lat=params.get("lat"),
            lng=params.get("lng"),
            max_distance_km=params.get("max_distance"),
        )
        with PostgresStore(get_config()) as store:
            matches = find_opportunities(store, query.lat, query.lng, query.max_distance_km)
    except InvalidArgumentError as e:
        logger.info("Rejected opportunities request: %s", e.message)
        return error_response(e)
    except LogisticsError as e:
        logger.error("Opportunities request failed: %s", e.message)
        return error_response(e)

    return json_response(200, [_to_row(m) for m in matches])
