"""Persistence for the weekly schedule and its per-day overrides."""

import asyncio
import json
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, TypeVar

from tripcore.errors import StorageReadError, StorageWriteError, TripCoreError
from tripcore.models.schedule import CustomizedDays, ScheduleSnapshot, WeeklySchedule
from tripcore.storage.interface import KeyValueStore

logger = logging.getLogger(__name__)

FLEXIBLE_SCHEDULE_KEY = "flexibleSchedule"
CUSTOMIZED_SCHEDULE_KEY = "customizedSchedule"

T = TypeVar("T")


class ScheduleStore:
    """Reads and writes the two schedule records through a KeyValueStore.

    Records are overwritten wholesale; merging edits is the caller's job.
    Reads are fail-soft: a missing, unreadable or corrupt record loads as
    None. Writes raise StorageWriteError. There is no locking, so concurrent
    writers resolve as last-write-wins.
    """

    def __init__(self, backend: KeyValueStore) -> None:
        self._backend = backend

    async def save_schedule(self, schedule: WeeklySchedule) -> None:
        await self._write({FLEXIBLE_SCHEDULE_KEY: schedule.to_stored()})
        logger.info("Saved schedule for %d days", len(schedule.selected_days))

    async def load_schedule(self) -> WeeklySchedule | None:
        return await self._load(FLEXIBLE_SCHEDULE_KEY, WeeklySchedule.from_stored)

    async def save_customized_days(self, data: CustomizedDays) -> None:
        await self._write({CUSTOMIZED_SCHEDULE_KEY: data.to_stored()})
        logger.info("Saved %d customized days", len(data.root))

    async def load_customized_days(self) -> CustomizedDays | None:
        return await self._load(CUSTOMIZED_SCHEDULE_KEY, CustomizedDays.model_validate)

    async def save_all(self, schedule: WeeklySchedule, customized_days: CustomizedDays | None = None) -> None:
        """Write both records in a single atomic backend call.

        When ``customized_days`` is omitted the overrides embedded in the
        schedule are stored as the customized record.
        """
        if customized_days is None:
            customized_days = CustomizedDays(schedule.customized_days)
        await self._write(
            {
                FLEXIBLE_SCHEDULE_KEY: schedule.to_stored(),
                CUSTOMIZED_SCHEDULE_KEY: customized_days.to_stored(),
            }
        )
        logger.info("Saved schedule and %d customized days", len(customized_days.root))

    async def load_all(self) -> ScheduleSnapshot:
        schedule, customized = await asyncio.gather(self.load_schedule(), self.load_customized_days())
        return ScheduleSnapshot(
            schedule=schedule,
            customized_days=customized,
            retrieved_at=datetime.now(timezone.utc),
        )

    async def clear(self) -> None:
        """Remove both records. Never raises; a failed delete is logged."""
        for key in (FLEXIBLE_SCHEDULE_KEY, CUSTOMIZED_SCHEDULE_KEY):
            try:
                await self._backend.delete(key)
            except Exception:
                logger.exception("Failed to remove %s", key)
        logger.info("Cleared schedule data")

    async def _write(self, items: dict[str, str]) -> None:
        try:
            if len(items) == 1:
                [(key, value)] = items.items()
                await self._backend.set(key, value)
            else:
                await self._backend.set_many(items)
        except StorageWriteError:
            logger.error("Write rejected for %s", ", ".join(items))
            raise
        except Exception as e:
            raise StorageWriteError(f"Write failed for {', '.join(items)}: {e}") from e

    async def _load(self, key: str, parse: Callable[[Any], T]) -> T | None:
        try:
            raw = await self._backend.get(key)
            if raw is None:
                logger.info("No record stored under %s", key)
                return None
            return self._decode(key, raw, parse)
        except StorageReadError as e:
            logger.warning("Treating %s as absent: %s", key, e.message)
            return None

    @staticmethod
    def _decode(key: str, raw: str, parse: Callable[[Any], T]) -> T:
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise StorageReadError(f"Record under {key} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise StorageReadError(f"Record under {key} is not a JSON object")
        try:
            return parse(data)
        except (ValueError, TypeError, TripCoreError) as e:
            raise StorageReadError(f"Record under {key} failed validation: {e}") from e
