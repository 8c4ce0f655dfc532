"""
modules/tool_usage/weather_tool.py
-----------------------------------
Deterministic weather simulator.

Not a forecast: a seeded pseudo-random draw weighted by climate and season,
so the same (date, destination) always yields the same condition and a
stored itinerary can later be compared against a fresh sample.

Climate buckets (substring match on the lower-cased destination name)
─────────────────────────────────────────────────────────────────────
  tropical   bali, thailand, hawaii, caribbean  (monsoon Jun-Oct)
  desert     dubai, egypt, morocco
  temperate  everything else, split into winter/spring/summer/autumn

Seed:  day-of-month + len(destination) + zero-based month
"""

from __future__ import annotations
import logging
import math
from datetime import date, datetime

from tripwise.schemas.trip import WEATHER_CONDITIONS, WeatherCondition

logger = logging.getLogger(__name__)


_TROPICAL_KEYWORDS = ("bali", "thailand", "hawaii", "caribbean")
_DESERT_KEYWORDS = ("dubai", "egypt", "morocco")


# Probability tables, keyed by (climate, season).  Each row sums to 1.0.
_PROBABILITIES: dict[tuple[str, str], dict[WeatherCondition, float]] = {
    ("tropical", "monsoon"): {WeatherCondition.sunny: 0.30, WeatherCondition.cloudy: 0.30,
                              WeatherCondition.rainy: 0.35, WeatherCondition.stormy: 0.05},
    ("tropical", "dry"):     {WeatherCondition.sunny: 0.60, WeatherCondition.cloudy: 0.25,
                              WeatherCondition.rainy: 0.12, WeatherCondition.stormy: 0.03},
    ("desert", "any"):       {WeatherCondition.sunny: 0.75, WeatherCondition.cloudy: 0.20,
                              WeatherCondition.rainy: 0.04, WeatherCondition.stormy: 0.01},
    ("temperate", "winter"): {WeatherCondition.sunny: 0.25, WeatherCondition.cloudy: 0.35,
                              WeatherCondition.rainy: 0.30, WeatherCondition.stormy: 0.10},
    ("temperate", "spring"): {WeatherCondition.sunny: 0.40, WeatherCondition.cloudy: 0.30,
                              WeatherCondition.rainy: 0.25, WeatherCondition.stormy: 0.05},
    ("temperate", "summer"): {WeatherCondition.sunny: 0.60, WeatherCondition.cloudy: 0.25,
                              WeatherCondition.rainy: 0.10, WeatherCondition.stormy: 0.05},
    ("temperate", "autumn"): {WeatherCondition.sunny: 0.35, WeatherCondition.cloudy: 0.35,
                              WeatherCondition.rainy: 0.25, WeatherCondition.stormy: 0.05},
}


def seeded_random(seed: int) -> float:
    """Sine-hash of *seed* into [0, 1)."""
    x = math.sin(seed * 9999) * 10000
    return x - math.floor(x)


def climate_for(destination: str) -> str:
    """'tropical' | 'desert' | 'temperate' for a destination name."""
    dest = destination.lower()
    if any(k in dest for k in _TROPICAL_KEYWORDS):
        return "tropical"
    if any(k in dest for k in _DESERT_KEYWORDS):
        return "desert"
    return "temperate"


def season_for(climate: str, month0: int) -> str:
    """Season bucket for a zero-based month (0 = January)."""
    if climate == "tropical":
        return "monsoon" if 5 <= month0 <= 9 else "dry"
    if climate == "desert":
        return "any"
    if month0 >= 11 or month0 <= 1:
        return "winter"
    if 2 <= month0 <= 4:
        return "spring"
    if 5 <= month0 <= 7:
        return "summer"
    return "autumn"


def weather_probabilities(when: date | datetime, destination: str) -> dict[WeatherCondition, float]:
    climate = climate_for(destination)
    return _PROBABILITIES[(climate, season_for(climate, when.month - 1))]


def pick_condition(sample: float, probabilities: dict[WeatherCondition, float]) -> WeatherCondition:
    """First condition, in fixed order, whose cumulative mass exceeds *sample*."""
    cumulative = 0.0
    for condition in WEATHER_CONDITIONS:
        cumulative += probabilities.get(condition, 0.0)
        if sample < cumulative:
            return condition
    # float accumulation fell short of 1.0
    return WeatherCondition.sunny


def simulate_weather(when: date | datetime, destination: str) -> WeatherCondition:
    """Pure function of (calendar day, destination name)."""
    month0 = when.month - 1
    seed = when.day + len(destination) + month0
    condition = pick_condition(seeded_random(seed), weather_probabilities(when, destination))
    logger.debug("simulate_weather(%s, %r) -> %s", when, destination, condition.value)
    return condition
