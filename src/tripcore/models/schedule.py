"""Pydantic models for the weekly recurring trip schedule."""

import logging
from datetime import datetime, timezone
from typing import Annotated, Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, RootModel, StringConstraints, field_validator, model_validator

logger = logging.getLogger(__name__)

DayToken = Literal["mon", "tue", "wed", "thu", "fri", "sat", "sun"]
DAYS: tuple[DayToken, ...] = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")

TimeOfDay = Annotated[str, StringConstraints(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")]


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class DayTimes(BaseModel):
    """Outbound/return override for one day. Reads legacy ``{there, back}`` records too."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    outbound_time: TimeOfDay = Field(..., alias="outboundTime", validation_alias=AliasChoices("outboundTime", "there"))
    return_time: TimeOfDay | None = Field(
        default=None, alias="returnTime", validation_alias=AliasChoices("returnTime", "back")
    )

    @field_validator("return_time", mode="before")
    @classmethod
    def blank_return_time(cls, value: Any) -> Any:
        return _blank_to_none(value)


class CustomizedDays(RootModel[dict[DayToken, DayTimes]]):
    """Per-day overrides persisted on their own, independent of the full schedule."""

    root: dict[DayToken, DayTimes] = {}

    def to_stored(self) -> str:
        return self.model_dump_json(by_alias=True)


class WeeklySchedule(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    selected_days: list[DayToken] = Field(..., alias="selectedDays")
    selected_time: TimeOfDay | None = Field(default=None, alias="selectedTime")
    return_time: TimeOfDay | None = Field(default=None, alias="returnTime")
    is_return_trip: bool = Field(default=False, alias="isReturnTrip")
    customized_days: dict[DayToken, DayTimes] = Field(default_factory=dict, alias="customizedDays")
    timestamp: str = Field(default_factory=_utc_now_iso)

    @field_validator("selected_time", "return_time", mode="before")
    @classmethod
    def blank_times(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("selected_days")
    @classmethod
    def canonical_day_order(cls, days: list[DayToken]) -> list[DayToken]:
        unique = set(days)
        return [day for day in DAYS if day in unique]

    @field_validator("timestamp")
    @classmethod
    def iso_timestamp(cls, value: str) -> str:
        datetime.fromisoformat(value)
        return value

    @model_validator(mode="after")
    def overrides_within_selected_days(self) -> "WeeklySchedule":
        orphans = sorted(set(self.customized_days) - set(self.selected_days), key=DAYS.index)
        if orphans:
            raise ValueError(f"customizedDays contains days that are not selected: {', '.join(orphans)}")
        return self

    @classmethod
    def from_stored(cls, data: dict[str, Any]) -> "WeeklySchedule":
        """Validate a persisted record, dropping overrides for days no longer selected."""
        selected = set(data.get("selectedDays") or [])
        overrides = data.get("customizedDays") or {}
        orphans = [day for day in overrides if day not in selected] if isinstance(overrides, dict) else []
        if orphans:
            logger.warning("Dropping overrides for unselected days: %s", ", ".join(orphans))
            data = {**data, "customizedDays": {day: t for day, t in overrides.items() if day in selected}}
        return cls.model_validate(data)

    def to_stored(self) -> str:
        return self.model_dump_json(by_alias=True)


class ScheduleSnapshot(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schedule: WeeklySchedule | None
    customized_days: CustomizedDays | None = Field(..., alias="customizedDays")
    retrieved_at: datetime = Field(..., alias="retrievedAt")
