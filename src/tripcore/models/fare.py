"""Pydantic models for fare computation."""

from pydantic import BaseModel, ConfigDict, Field


class FareContext(BaseModel):
    """Inputs for a single fare request. Built fresh per request, never persisted."""

    model_config = ConfigDict(frozen=True)

    distance_km: float
    duration_min: float
    driver_level: int
    rating: float
    is_peak_hours: bool = False
    is_night_hours: bool = False
    is_weekend: bool = False


class TimeContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_peak_hours: bool
    is_night_hours: bool
    is_weekend: bool


class FareBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    base: float
    level_multiplier: float
    rating_bonus: float
    time_multiplier: float
    unclamped: float
    fare: int


class TripScenario(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    distance_km: float = Field(..., alias="distanceKm")
    duration_min: int = Field(..., alias="durationMin")
    price: int
    is_peak_hours: bool = Field(..., alias="isPeakHours")
    is_night_hours: bool = Field(..., alias="isNightHours")
    is_weekend: bool = Field(..., alias="isWeekend")
