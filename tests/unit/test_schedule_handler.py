"""Unit tests for the weekly schedule handler."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from handlers.schedule import handler
from tripcore.errors import StorageWriteError
from tripcore.storage import InMemoryKeyValueStore, KeyValueStore

SCHEDULE_BODY = {
    "schedule": {
        "selectedDays": ["mon", "wed"],
        "selectedTime": "08:15",
        "returnTime": None,
        "isReturnTrip": False,
        "customizedDays": {"wed": {"outboundTime": "09:00", "returnTime": None}},
        "timestamp": "2024-01-01T12:00:00+00:00",
    }
}


def event(method, body=None, user_id="user-1"):
    e = {"httpMethod": method, "requestContext": {"authorizer": {"userId": user_id}}}
    if body is not None:
        e["body"] = json.dumps(body)
    return e


@pytest.fixture
def backend():
    backend = InMemoryKeyValueStore()
    with patch("handlers.schedule.get_key_value_store", return_value=backend):
        yield backend


def test_get_empty_schedule(backend):
    result = handler(event("GET"), None)

    assert result["statusCode"] == 200
    body = json.loads(result["body"])
    assert body["schedule"] is None
    assert body["customizedDays"] is None
    assert "retrievedAt" in body


def test_put_then_get(backend):
    put = handler(event("PUT", SCHEDULE_BODY), None)
    assert put["statusCode"] == 200

    body = json.loads(handler(event("GET"), None)["body"])
    assert body["schedule"]["selectedDays"] == ["mon", "wed"]
    assert body["customizedDays"] == {"wed": {"outboundTime": "09:00", "returnTime": None}}
    assert backend.keys() == ["customizedSchedule", "flexibleSchedule"]


def test_put_invalid_schedule_returns_400(backend):
    body = {"schedule": {**SCHEDULE_BODY["schedule"], "customizedDays": {"fri": {"outboundTime": "09:00"}}}}
    result = handler(event("PUT", body), None)

    assert result["statusCode"] == 400
    assert json.loads(result["body"])["code"] == "INVALID_SCHEDULE"
    assert backend.keys() == []


def test_delete_clears(backend):
    handler(event("PUT", SCHEDULE_BODY), None)
    result = handler(event("DELETE"), None)

    assert result == {"statusCode": 204}
    assert backend.keys() == []


def test_write_failure_returns_503():
    failing = AsyncMock(spec=KeyValueStore)
    failing.set_many.side_effect = StorageWriteError("throttled")
    with patch("handlers.schedule.get_key_value_store", return_value=failing):
        result = handler(event("PUT", SCHEDULE_BODY), None)

    assert result["statusCode"] == 503
    assert json.loads(result["body"])["code"] == "STORAGE_WRITE_FAILED"


def test_missing_authorizer_returns_401():
    result = handler({"httpMethod": "GET", "requestContext": {}}, None)
    assert result["statusCode"] == 401


def test_unsupported_method_returns_405(backend):
    assert handler(event("PATCH"), None)["statusCode"] == 405


@pytest.mark.parametrize(
    "request_context",
    [None, {"authorizer": None}, {"authorizer": {}}],
)
def test_null_authorizer_context_returns_401(request_context):
    result = handler({"httpMethod": "GET", "requestContext": request_context}, None)
    assert result["statusCode"] == 401
