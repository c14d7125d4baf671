"""GET /api/analytics/revenue: revenue per bucket over the trailing period."""

import logging
from typing import Any

from logicon.config import get_config
from logicon.db import PostgresStore
from logicon.errors import InvalidArgumentError, LogisticsError
from logicon.http import error_response, json_response, query_params
from logicon.models import RevenueQuery
from logicon.services import revenue_by_period
from logicon.services.validation import parse_query

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    params = query_params(event)
    try:
        query = parse_query(RevenueQuery, period=params.get("period"))
        with PostgresStore(get_config()) as store:
            buckets = revenue_by_period(store, query.period)
    except InvalidArgumentError as e:
        logger.info("Rejected revenue request: %s", e.message)
        return error_response(e)
    except LogisticsError as e:
        logger.error("Revenue request failed: %s", e.message)
        return error_response(e)

    return json_response(200, [b.model_dump(mode="json") for b in buckets])
