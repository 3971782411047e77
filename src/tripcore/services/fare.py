"""
Dynamic fare calculation.

The fare is built from a distance/duration base, scaled by the driver's
level, a single rating bonus and any stacking time-of-day bonuses, then
clamped to [MIN_PRICE, MAX_PRICE] and floored to whole fare units.

Usage:
    from tripcore.services.fare import compute_fare

    compute_fare(FareContext(distance_km=5, duration_min=20, driver_level=3, rating=4.8))  # 25
"""

import logging
import math
from datetime import datetime

from tripcore.errors import ErrorCode, InvalidInputError
from tripcore.models.fare import FareBreakdown, FareContext, TimeContext

logger = logging.getLogger(__name__)

BASE_PRICE = 8
PRICE_PER_KM = 1.5
PRICE_PER_MINUTE = 0.2
MIN_PRICE = 5
MAX_PRICE = 25

LEVEL_MULTIPLIERS: dict[int, float] = {
    1: 1.0,  # starter
    2: 1.1,  # determined
    3: 1.2,  # reliable
    4: 1.3,  # champion
    5: 1.4,  # superstar
    6: 1.5,  # emperor
    7: 2.0,  # VIP
}

# Highest threshold first; only the first match applies.
RATING_BONUS_TIERS: tuple[tuple[float, float], ...] = (
    (5.0, 0.20),
    (4.9, 0.15),
    (4.7, 0.10),
    (4.5, 0.05),
)

# Applied in this order, each compounding on the previous.
TIME_BONUSES: tuple[tuple[str, float], ...] = (
    ("is_peak_hours", 0.15),
    ("is_night_hours", 0.25),
    ("is_weekend", 0.10),
)

PEAK_HOURS = frozenset({7, 8, 9, 17, 18, 19})
NIGHT_START_HOUR = 22
NIGHT_END_HOUR = 6


def level_multiplier(driver_level: int) -> float:
    return LEVEL_MULTIPLIERS.get(driver_level, 1.0)


def rating_bonus(rating: float) -> float:
    for threshold, bonus in RATING_BONUS_TIERS:
        if rating >= threshold:
            return bonus
    return 0.0


def fare_breakdown(ctx: FareContext) -> FareBreakdown:
    """Compute the fare and every intermediate factor that produced it."""
    base = BASE_PRICE + ctx.distance_km * PRICE_PER_KM + ctx.duration_min * PRICE_PER_MINUTE
    multiplier = level_multiplier(ctx.driver_level)
    bonus = rating_bonus(ctx.rating)

    price = base * multiplier
    price *= 1 + bonus

    time_multiplier = 1.0
    for flag, time_bonus in TIME_BONUSES:
        if getattr(ctx, flag):
            price *= 1 + time_bonus
            time_multiplier *= 1 + time_bonus

    unclamped = price
    price = min(MAX_PRICE, max(MIN_PRICE, price))

    return FareBreakdown(
        base=base,
        level_multiplier=multiplier,
        rating_bonus=bonus,
        time_multiplier=time_multiplier,
        unclamped=unclamped,
        fare=math.floor(price),
    )


def compute_fare(ctx: FareContext) -> int:
    """Fare in whole units, always within [MIN_PRICE, MAX_PRICE]. Never raises."""
    return fare_breakdown(ctx).fare


def validate_fare_context(ctx: FareContext) -> None:
    values = {"distance_km": ctx.distance_km, "duration_min": ctx.duration_min, "rating": ctx.rating}
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidInputError(f"{name} must be a finite number, got {value}", code=ErrorCode.INVALID_FARE_INPUT)
    if ctx.distance_km < 0:
        raise InvalidInputError(f"distance_km must be >= 0, got {ctx.distance_km}", code=ErrorCode.INVALID_FARE_INPUT)
    if ctx.duration_min < 0:
        raise InvalidInputError(f"duration_min must be >= 0, got {ctx.duration_min}", code=ErrorCode.INVALID_FARE_INPUT)
    if not 0 <= ctx.rating <= 5:
        raise InvalidInputError(f"rating must be within 0..5, got {ctx.rating}", code=ErrorCode.INVALID_FARE_INPUT)


def quote_fare(ctx: FareContext, strict: bool | None = None) -> int:
    """Quote a fare for a confirmed booking.

    In strict mode (``STRICT_FARE_INPUTS``) out-of-domain inputs raise
    InvalidInputError instead of flowing through the arithmetic.
    """
    if strict is None:
        from tripcore.config import get_config

        strict = get_config().strict_fare_inputs
    if strict:
        validate_fare_context(ctx)

    fare = compute_fare(ctx)
    logger.info(
        "Quoted fare %d for %.1f km / %.0f min, level %d",
        fare,
        ctx.distance_km,
        ctx.duration_min,
        ctx.driver_level,
    )
    return fare


def time_context_for(hour: int, weekday: int) -> TimeContext:
    """Flags for a departure hour (0-23) and weekday (0=Monday .. 6=Sunday)."""
    return TimeContext(
        is_peak_hours=hour in PEAK_HOURS,
        is_night_hours=hour >= NIGHT_START_HOUR or hour <= NIGHT_END_HOUR,
        is_weekend=weekday >= 5,
    )


def time_context(moment: datetime) -> TimeContext:
    return time_context_for(moment.hour, moment.weekday())
