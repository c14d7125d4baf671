import json

from logicon.errors import ErrorCode, InvalidArgumentError, LogisticsError, StoreUnavailableError
from logicon.http import error_response, json_response, query_params


def test_json_response():
    result = json_response(200, [{"id": 1}])
    assert result["statusCode"] == 200
    assert result["headers"]["Content-Type"] == "application/json"
    assert json.loads(result["body"]) == [{"id": 1}]


def test_error_status_mapping():
    assert error_response(InvalidArgumentError("bad"))["statusCode"] == 400
    assert error_response(StoreUnavailableError("down"))["statusCode"] == 503
    assert error_response(LogisticsError("boom"))["statusCode"] == 500


def test_error_body_hides_internal_message():
    result = error_response(StoreUnavailableError("password authentication failed for user"))
    body = json.loads(result["body"])
    assert body["error"] == ErrorCode.STORE_UNAVAILABLE.value
    assert "password" not in body["message"]


def test_query_params_handles_missing():
    assert query_params({"queryStringParameters": None}) == {}
    assert query_params({}) == {}
    assert query_params({"queryStringParameters": {"lat": "40"}}) == {"lat": "40"}
