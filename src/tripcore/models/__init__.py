"""
Pydantic models for the trip schedule and fare engine.
"""

from tripcore.models.fare import FareBreakdown, FareContext, TimeContext, TripScenario
from tripcore.models.progress import ProgressStep, StepDefinition, StepId
from tripcore.models.schedule import DAYS, CustomizedDays, DayTimes, DayToken, ScheduleSnapshot, WeeklySchedule

__all__ = [
    "DAYS",
    "CustomizedDays",
    "DayTimes",
    "DayToken",
    "FareBreakdown",
    "FareContext",
    "ProgressStep",
    "ScheduleSnapshot",
    "StepDefinition",
    "StepId",
    "TimeContext",
    "TripScenario",
    "WeeklySchedule",
]
