"""API Gateway proxy responses for the Lambda handlers."""

import json
from typing import Any

from logicon.errors import ErrorCode, LogisticsError

STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.INVALID_ARGUMENT: 400,
    ErrorCode.STORE_UNAVAILABLE: 503,
    ErrorCode.INTERNAL_ERROR: 500,
}


def json_response(status_code: int, body: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def error_response(error: LogisticsError) -> dict[str, Any]:
    """Map an error to its status code; only the user-facing message is exposed."""
    status_code = STATUS_CODES.get(error.code, 500)
    return json_response(status_code, {"error": error.code.value, "message": error.user_message})


def query_params(event: dict[str, Any]) -> dict[str, str]:
    return event.get("queryStringParameters") or {}
