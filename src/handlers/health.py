"""GET /api/health: service status and database reachability."""

import logging
from typing import Any

from logicon import __version__
from logicon.config import get_config
from logicon.db import PostgresStore
from logicon.http import json_response

logger = logging.getLogger(__name__)

FEATURES = [
    "gps-tracking",
    "partnership-matching",
    "geospatial-analytics",
    "revenue-analytics",
]


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    """Always returns 200; a failed database check reports ``degraded``."""
    try:
        with PostgresStore(get_config()) as store:
            healthy = store.health_check()
    except Exception:
        logger.exception("Health check could not reach the database")
        healthy = False

    return json_response(
        200,
        {
            "status": "operational" if healthy else "degraded",
            "version": __version__,
            "features": FEATURES,
        },
    )
