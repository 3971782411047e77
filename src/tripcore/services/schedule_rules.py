"""Validation and resolution rules for weekly schedules."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from tripcore.errors import ErrorCode, ScheduleValidationError
from tripcore.models.schedule import DAYS, CustomizedDays, DayTimes, DayToken, WeeklySchedule


def _first_filled(entry: Mapping[str, Any], *names: str) -> str | None:
    for name in names:
        value = entry.get(name)
        if isinstance(value, str) and value.strip():
            return value
    return None


def validate_customized_days(
    days: Mapping[str, Mapping[str, Any]],
    selected_days: list[DayToken],
    is_return_trip: bool,
) -> CustomizedDays:
    """Check per-day edits before they are saved.

    Every override needs an outbound time, and a return time when the
    schedule is a round trip. Days are checked in week order so the first
    error reported is the earliest day.
    """
    ordered = sorted(days, key=lambda d: DAYS.index(d) if d in DAYS else len(DAYS))
    for day in ordered:
        if day not in selected_days:
            raise ScheduleValidationError(f"{day} is not a selected day", field=day)
        entry = days[day]
        if _first_filled(entry, "outboundTime", "there") is None:
            raise ScheduleValidationError(
                f"{day} has no outbound time",
                code=ErrorCode.MISSING_OUTBOUND_TIME,
                field=f"{day}-outboundTime",
            )
        if is_return_trip and _first_filled(entry, "returnTime", "back") is None:
            raise ScheduleValidationError(
                f"{day} has no return time",
                code=ErrorCode.MISSING_RETURN_TIME,
                field=f"{day}-returnTime",
            )

    try:
        return CustomizedDays.model_validate({day: dict(entry) for day, entry in days.items()})
    except ValidationError as e:
        raise ScheduleValidationError(f"Invalid customized days: {e}") from e


def resolve_day_times(schedule: WeeklySchedule) -> dict[DayToken, DayTimes]:
    """Effective times for each selected day.

    An override wins over the schedule defaults; an override without a
    return time falls back to the default return time. Days with neither an
    override nor a default departure time are left out. Return times are
    None for one-way schedules.
    """
    resolved: dict[DayToken, DayTimes] = {}
    for day in schedule.selected_days:
        override = schedule.customized_days.get(day)
        outbound = override.outbound_time if override else schedule.selected_time
        if outbound is None:
            continue
        return_time = None
        if schedule.is_return_trip:
            return_time = (override.return_time if override else None) or schedule.return_time
        resolved[day] = DayTimes(outbound_time=outbound, return_time=return_time)
    return resolved
