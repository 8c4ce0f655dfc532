"""
modules/reoptimization/weather_adjustment.py
----------------------------------------------
Re-evaluates a stored DayPlan against a freshly sampled weather condition.

One call = one scheduled check for one day:
  1. gate       -- with probability WEATHER_CHANGE_PROBABILITY the forecast is
                   treated as changed; otherwise nothing happens
  2. resample   -- simulate_weather at the day's date plus a random sub-day
                   offset; if that equals the current weather, advance to the
                   next condition in [sunny, cloudy, rainy, stormy]
  3. rain swap  -- same rule as generation (modules/planning/rain_swap.py)
  4. result     -- updated copy with weather_adjusted=True and a notification
                   message

The input plan is never mutated.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, replace
from datetime import datetime, time, timedelta
from typing import Optional

from tripwise import config
from tripwise.modules.planning.itinerary_generator import WeatherSource
from tripwise.modules.planning.poi_selector import RandomSource
from tripwise.modules.planning.rain_swap import apply_rain_swap
from tripwise.modules.tool_usage.weather_tool import simulate_weather
from tripwise.schemas.itinerary import DayPlan
from tripwise.schemas.trip import WEATHER_CONDITIONS, WeatherCondition

logger = logging.getLogger(__name__)

_SECONDS_PER_DAY = 86400


def next_condition(current: WeatherCondition) -> WeatherCondition:
    """Successor of *current* in the fixed cyclic order."""
    i = WEATHER_CONDITIONS.index(WeatherCondition.parse(current))
    return WEATHER_CONDITIONS[(i + 1) % len(WEATHER_CONDITIONS)]


def change_message(destination: str, day_number: int, old: WeatherCondition, new: WeatherCondition) -> str:
    return (
        f"Weather update for your {destination} trip on Day {day_number}: "
        f"Changed from {old.value} to {new.value}. Activities have been adjusted."
    )


@dataclass
class ReevaluationResult:
    """Output of WeatherAdjustmentEngine.reevaluate()."""
    changed: bool
    updated_plan: DayPlan
    notification_message: Optional[str] = None
    previous_weather: Optional[WeatherCondition] = None
    swapped: bool = False


class WeatherAdjustmentEngine:
    """
    Applies forecast changes to stored days.

    Randomness (gate and sub-day offset) comes from the injected source so
    tests can force either outcome.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        change_probability: Optional[float] = None,
        weather: WeatherSource = simulate_weather,
    ) -> None:
        self.rng = rng or random.Random()
        self.change_probability = (
            config.WEATHER_CHANGE_PROBABILITY if change_probability is None else change_probability
        )
        self.weather = weather

    # ── public API ────────────────────────────────────────────────────────

    def reevaluate(self, day_plan: DayPlan, destination_name: str) -> ReevaluationResult:
        """Run one scheduled check for *day_plan*."""
        if not self.forecast_changed():
            return ReevaluationResult(changed=False, updated_plan=day_plan)

        new_weather = self.sample_new_weather(day_plan, destination_name)
        return self.apply_weather(day_plan, new_weather, destination_name)

    def forecast_changed(self) -> bool:
        """Stochastic gate: has the forecast moved since the last check?"""
        return self.rng.random() < self.change_probability

    def sample_new_weather(self, day_plan: DayPlan, destination_name: str) -> WeatherCondition:
        """A condition guaranteed to differ from the plan's current weather."""
        offset = timedelta(seconds=self.rng.random() * _SECONDS_PER_DAY)
        when = datetime.combine(day_plan.date, time()) + offset
        candidate = WeatherCondition.parse(self.weather(when, destination_name))
        current = WeatherCondition.parse(day_plan.weather)
        if candidate is current:
            candidate = next_condition(current)
        return candidate

    def apply_weather(
        self,
        day_plan: DayPlan,
        new_weather: WeatherCondition,
        destination_name: str,
    ) -> ReevaluationResult:
        """Rain-swap the daytime pair for *new_weather* and stamp the change."""
        new_weather = WeatherCondition.parse(new_weather)
        old_weather = WeatherCondition.parse(day_plan.weather)

        main, alt, swapped = apply_rain_swap(day_plan.daytime_main, day_plan.daytime_alt, new_weather)
        updated = replace(
            day_plan,
            weather=new_weather,
            daytime_main=main,
            daytime_alt=alt,
            weather_adjusted=True,
        )
        message = change_message(destination_name, day_plan.day_number, old_weather, new_weather)
        logger.info(
            "Day %d of %r: %s -> %s (daytime %s)",
            day_plan.day_number, destination_name, old_weather.value, new_weather.value,
            "swapped" if swapped else "unchanged",
        )
        return ReevaluationResult(
            changed=True,
            updated_plan=updated,
            notification_message=message,
            previous_weather=old_weather,
            swapped=swapped,
        )
