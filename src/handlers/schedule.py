"""Weekly schedule handler — GET, PUT and DELETE of the caller's schedule."""

import asyncio
import json
import logging
from typing import Any

from pydantic import ValidationError

from tripcore.errors import ErrorCode, InvalidInputError, StorageWriteError, TripCoreError
from tripcore.models.schedule import CustomizedDays, WeeklySchedule
from tripcore.services.schedule_store import ScheduleStore
from tripcore.storage import get_key_value_store

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    # ScheduleStore is async; asyncio.run() bridges it into this sync Lambda handler.
    try:
        user_id = event["requestContext"]["authorizer"]["userId"]
    except (KeyError, TypeError):
        return _error(401, InvalidInputError("Missing authorizer context"))

    store = ScheduleStore(get_key_value_store(user_id))
    method = event.get("httpMethod", "GET").upper()

    try:
        if method == "GET":
            snapshot = asyncio.run(store.load_all())
            return {"statusCode": 200, "body": snapshot.model_dump_json(by_alias=True)}
        if method == "PUT":
            schedule, customized = _parse_body(event.get("body"))
            asyncio.run(store.save_all(schedule, customized))
            return {"statusCode": 200, "body": schedule.model_dump_json(by_alias=True)}
        if method == "DELETE":
            asyncio.run(store.clear())
            return {"statusCode": 204}
    except StorageWriteError as e:
        logger.error("Schedule write failed for %s: %s", user_id, e.message)
        return _error(503, e)
    except TripCoreError as e:
        return _error(400, e)

    return _error(405, InvalidInputError(f"Unsupported method {method}"))


def _parse_body(raw: str | None) -> tuple[WeeklySchedule, CustomizedDays | None]:
    try:
        body = json.loads(raw or "{}")
        schedule = WeeklySchedule.model_validate(body["schedule"])
        customized = body.get("customizedDays")
        return schedule, CustomizedDays.model_validate(customized) if customized is not None else None
    except (KeyError, ValueError, TypeError, ValidationError) as e:
        raise InvalidInputError(f"Invalid schedule payload: {e}", code=ErrorCode.INVALID_SCHEDULE) from e


def _error(status: int, err: TripCoreError) -> dict[str, Any]:
    return {
        "statusCode": status,
        "body": json.dumps({"code": err.code.value, "message": err.user_message}),
    }
