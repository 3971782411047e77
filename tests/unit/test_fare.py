import math

import pytest

from tripcore.errors import ErrorCode, InvalidInputError
from tripcore.models.fare import FareContext
from tripcore.services.fare import (
    LEVEL_MULTIPLIERS,
    MAX_PRICE,
    MIN_PRICE,
    compute_fare,
    fare_breakdown,
    quote_fare,
    rating_bonus,
    time_context,
    time_context_for,
)


def ctx(**overrides) -> FareContext:
    params = dict(distance_km=5, duration_min=20, driver_level=3, rating=4.8)
    params.update(overrides)
    return FareContext(**params)


# --- Reference scenarios ---


def test_level_three_top_rated_clamps_to_max():
    assert compute_fare(ctx()) == 25


def test_zero_trip_is_base_price():
    assert compute_fare(ctx(distance_km=0, duration_min=0, driver_level=1, rating=0)) == 8


def test_vip_with_stacked_bonuses_clamps_to_max():
    fare = ctx(distance_km=2, duration_min=10, driver_level=7, rating=5.0, is_peak_hours=True, is_weekend=True)
    breakdown = fare_breakdown(fare)
    assert breakdown.base == pytest.approx(13)
    assert breakdown.unclamped == pytest.approx(39.468)
    assert breakdown.fare == 25


def test_breakdown_stages():
    b = fare_breakdown(ctx())
    assert b.base == pytest.approx(19.5)
    assert b.level_multiplier == 1.2
    assert b.rating_bonus == 0.10
    assert b.time_multiplier == 1.0
    assert b.unclamped == pytest.approx(25.74)


def test_floors_instead_of_rounding():
    # 8 + 3*1.5 + 5*0.2 = 13.5
    assert compute_fare(ctx(distance_km=3, duration_min=5, driver_level=1, rating=0)) == 13


def test_min_price_floor():
    assert compute_fare(ctx(distance_km=-10, duration_min=0, driver_level=1, rating=0)) == MIN_PRICE


# --- Level multipliers ---


@pytest.mark.parametrize("level,multiplier", sorted(LEVEL_MULTIPLIERS.items()))
def test_level_multiplier_table(level, multiplier):
    assert fare_breakdown(ctx(driver_level=level)).level_multiplier == multiplier


@pytest.mark.parametrize("level", [0, 8, -1, 100])
def test_unknown_level_defaults_to_one(level):
    assert fare_breakdown(ctx(driver_level=level)).level_multiplier == 1.0


# --- Rating bonus ---


@pytest.mark.parametrize(
    "rating,bonus",
    [(5.0, 0.20), (4.95, 0.15), (4.9, 0.15), (4.8, 0.10), (4.7, 0.10), (4.6, 0.05), (4.5, 0.05), (4.49, 0.0), (0, 0.0)],
)
def test_rating_bonus_highest_tier_only(rating, bonus):
    assert rating_bonus(rating) == bonus


def test_rating_bonus_applied_once():
    # 8 * 1.2 = 9.6, a cumulative application would exceed it
    b = fare_breakdown(ctx(distance_km=0, duration_min=0, driver_level=1, rating=5.0))
    assert b.unclamped == pytest.approx(9.6)


# --- Time bonuses ---


def test_time_bonuses_compound():
    b = fare_breakdown(
        ctx(distance_km=0, duration_min=0, driver_level=1, rating=0, is_peak_hours=True, is_night_hours=True, is_weekend=True)
    )
    assert b.time_multiplier == pytest.approx(1.15 * 1.25 * 1.10)
    assert b.unclamped == pytest.approx(8 * 1.15 * 1.25 * 1.10)


def test_night_bonus_alone():
    assert compute_fare(ctx(distance_km=0, duration_min=0, driver_level=1, rating=0, is_night_hours=True)) == 10


# --- Properties ---


@pytest.mark.parametrize("level", range(1, 8))
def test_monotonic_in_distance_and_duration(level):
    previous = 0
    for step in range(0, 40):
        fare = compute_fare(ctx(distance_km=step * 0.5, duration_min=step, driver_level=level, rating=4.0))
        assert fare >= previous
        previous = fare


@pytest.mark.parametrize(
    "distance,duration,level,rating",
    [(0, 0, 1, 0), (1000, 1000, 7, 5), (-50, -50, 3, 4.9), (math.inf, 0, 2, 4.5), (math.nan, 10, 1, 3)],
)
def test_output_always_bounded_integer(distance, duration, level, rating):
    fare = compute_fare(ctx(distance_km=distance, duration_min=duration, driver_level=level, rating=rating))
    assert isinstance(fare, int)
    assert MIN_PRICE <= fare <= MAX_PRICE


# --- quote_fare ---


def test_quote_fare_permissive_by_default():
    assert quote_fare(ctx(distance_km=-3), strict=False) == compute_fare(ctx(distance_km=-3))


@pytest.mark.parametrize(
    "overrides",
    [{"distance_km": -1}, {"duration_min": -0.5}, {"rating": 5.1}, {"rating": -1}, {"distance_km": math.nan}],
)
def test_quote_fare_strict_rejects_out_of_domain(overrides):
    with pytest.raises(InvalidInputError) as exc_info:
        quote_fare(ctx(**overrides), strict=True)
    assert exc_info.value.code == ErrorCode.INVALID_FARE_INPUT


def test_quote_fare_strict_accepts_valid_input():
    assert quote_fare(ctx(), strict=True) == 25


# --- Time context ---


@pytest.mark.parametrize("hour", [7, 8, 9, 17, 18, 19])
def test_peak_hours(hour):
    assert time_context_for(hour, 2).is_peak_hours


@pytest.mark.parametrize("hour", [22, 23, 0, 3, 6])
def test_night_hours(hour):
    assert time_context_for(hour, 2).is_night_hours


@pytest.mark.parametrize("hour", [10, 12, 16, 20, 21])
def test_off_peak_daytime(hour):
    flags = time_context_for(hour, 2)
    assert not flags.is_peak_hours
    assert not flags.is_night_hours


def test_time_context_from_datetime():
    from datetime import datetime

    saturday_evening = datetime(2024, 6, 1, 18, 30)
    flags = time_context(saturday_evening)
    assert flags.is_peak_hours
    assert flags.is_weekend
    assert not flags.is_night_hours
