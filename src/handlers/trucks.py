"""GET /api/gps/trucks: vehicles that reported recently."""

import logging
from typing import Any

from logicon.config import get_config
from logicon.db import PostgresStore
from logicon.errors import InvalidArgumentError, LogisticsError
from logicon.http import error_response, json_response, query_params
from logicon.models import FreshnessQuery, VehiclePosition
from logicon.services import list_recent_vehicle_positions
from logicon.services.validation import parse_query

logger = logging.getLogger(__name__)


def _to_row(position: VehiclePosition) -> dict[str, Any]:
    return {
        "id": position.id,
        "license_plate": position.license_plate,
        "lat": position.latitude,
        "lng": position.longitude,
        "timestamp": int(position.last_updated.timestamp()),
    }


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    params = query_params(event)
    try:
        query = parse_query(FreshnessQuery, window_minutes=params.get("window_minutes"))
        with PostgresStore(get_config()) as store:
            positions = list_recent_vehicle_positions(store, window_minutes=query.window_minutes)
    except InvalidArgumentError as e:
        logger.info("Rejected trucks request: %s", e.message)
        return error_response(e)
    except LogisticsError as e:
        logger.error("Trucks request failed: %s", e.message)
        return error_response(e)

    return json_response(200, [_to_row(p) for p in positions])
