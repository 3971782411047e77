"""Pydantic models for the scheduling flow step indicators."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class StepId(str, Enum):
    TIME_SCHEDULE = "timeSchedule"
    ADDRESSES = "addresses"
    CONFIRMATION = "confirmation"


class StepDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: StepId
    title: str
    icon: str


class ProgressStep(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: StepId
    title: str
    icon: str
    is_active: bool = Field(..., alias="isActive")
    is_completed: bool = Field(..., alias="isCompleted")
