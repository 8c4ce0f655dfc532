"""
modules/planning/rain_swap.py
------------------------------
The rain-swap rule shared by itinerary generation and weather re-evaluation.

    rainy/stormy -> the indoor daytime option is "main"
    sunny/cloudy -> the outdoor daytime option is "main"

apply_rain_swap is a function of (weather, current main kind, current alt
kind), never a toggle: applying it twice with the same weather changes
nothing the second time.
"""

from __future__ import annotations

from tripwise.schemas.itinerary import Activity
from tripwise.schemas.trip import ActivityKind, WeatherCondition


def main_kind_for(weather: WeatherCondition) -> ActivityKind:
    return ActivityKind.indoor if WeatherCondition.parse(weather).is_rainy else ActivityKind.outdoor


def apply_rain_swap(
    main: Activity,
    alt: Activity,
    weather: WeatherCondition,
) -> tuple[Activity, Activity, bool]:
    """Return (main, alt, swapped) for the daytime pair under *weather*."""
    if WeatherCondition.parse(weather).is_rainy:
        if main.kind is ActivityKind.outdoor:
            return alt, main, True
    elif main.kind is ActivityKind.indoor and alt.kind is ActivityKind.outdoor:
        # fair again: undo an earlier rain swap
        return alt, main, True
    return main, alt, False
