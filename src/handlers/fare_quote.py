"""Fare quote handler — prices a resolved route for a driver."""

import json
import logging
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from tripcore.errors import ErrorCode, InvalidInputError, TripCoreError
from tripcore.models.fare import FareContext
from tripcore.services.fare import fare_breakdown, quote_fare, time_context

logger = logging.getLogger(__name__)


def _build_context(body: Any) -> FareContext:
    if not isinstance(body, dict):
        raise InvalidInputError("Request body must be a JSON object", code=ErrorCode.INVALID_FARE_INPUT)

    # Raw values; FareContext parses "false"/"true" and rejects anything else.
    flags = {
        "is_peak_hours": body.get("isPeakHours", False),
        "is_night_hours": body.get("isNightHours", False),
        "is_weekend": body.get("isWeekend", False),
    }
    departure = body.get("departureTime")
    if departure:
        flags = time_context(datetime.fromisoformat(departure)).model_dump()

    return FareContext(
        distance_km=body["distanceKm"],
        duration_min=body["durationMin"],
        driver_level=body["driverLevel"],
        rating=body["rating"],
        **flags,
    )


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        body = json.loads(event.get("body") or "{}")
        ctx = _build_context(body)
        fare = quote_fare(ctx)
    except (KeyError, ValueError, TypeError, ValidationError) as e:
        logger.warning("Rejected fare request: %s", e)
        err = InvalidInputError(str(e), code=ErrorCode.INVALID_FARE_INPUT)
        return _error(400, err)
    except TripCoreError as e:
        return _error(400, e)

    response: dict[str, Any] = {"fare": fare}
    if body.get("includeBreakdown"):
        response["breakdown"] = fare_breakdown(ctx).model_dump()
    return {"statusCode": 200, "body": json.dumps(response)}


def _error(status: int, err: TripCoreError) -> dict[str, Any]:
    return {
        "statusCode": status,
        "body": json.dumps({"code": err.code.value, "message": err.user_message}),
    }
