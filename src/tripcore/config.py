from os import environ
from typing import Literal

from pydantic import BaseModel, ConfigDict


def _env_flag(name: str, default: str = "false") -> bool:
    return environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    schedule_table: str
    storage_backend: Literal["dynamodb", "memory"] = "dynamodb"
    strict_fare_inputs: bool = False
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config — for testing only."""
    global _cached_config
    _cached_config = None


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        schedule_table=environ.get("SCHEDULE_TABLE", "TripCoreSchedules"),
        storage_backend=environ.get("STORAGE_BACKEND", "dynamodb"),
        strict_fare_inputs=_env_flag("STRICT_FARE_INPUTS"),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
