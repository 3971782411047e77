"""Synthetic trips for fixtures and simulations. Not used for real quotes."""

import random

from tripcore.models.fare import FareContext, TripScenario
from tripcore.services.fare import compute_fare, time_context_for

MIN_DISTANCE_KM = 2
MAX_DISTANCE_KM = 15
MIN_DURATION_MIN = 10
MAX_DURATION_MIN = 45


def generate_scenario(driver_level: int, rating: float = 4.8, rng: random.Random | None = None) -> TripScenario:
    rng = rng or random.Random()

    distance_km = rng.uniform(MIN_DISTANCE_KM, MAX_DISTANCE_KM)
    duration_min = rng.uniform(MIN_DURATION_MIN, MAX_DURATION_MIN)
    flags = time_context_for(hour=rng.randint(0, 23), weekday=rng.randint(0, 6))

    # Priced from the raw draws; only the reported values are rounded.
    price = compute_fare(
        FareContext(
            distance_km=distance_km,
            duration_min=duration_min,
            driver_level=driver_level,
            rating=rating,
            is_peak_hours=flags.is_peak_hours,
            is_night_hours=flags.is_night_hours,
            is_weekend=flags.is_weekend,
        )
    )

    return TripScenario(
        distance_km=round(distance_km, 1),
        duration_min=round(duration_min),
        price=price,
        is_peak_hours=flags.is_peak_hours,
        is_night_hours=flags.is_night_hours,
        is_weekend=flags.is_weekend,
    )


def generate_scenarios(
    driver_level: int, count: int, rating: float = 4.8, rng: random.Random | None = None
) -> list[TripScenario]:
    rng = rng or random.Random()
    return [generate_scenario(driver_level, rating, rng) for _ in range(count)]
