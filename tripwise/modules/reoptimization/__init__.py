"""modules/reoptimization — Weather-driven adjustment of stored itineraries."""

from tripwise.modules.reoptimization.weather_adjustment import (
    ReevaluationResult, WeatherAdjustmentEngine, change_message, next_condition,
)
from tripwise.modules.reoptimization.weather_sweep import (
    SweepError, SweepReport, SweepTrip, SweepUpdate, WeatherSweep, is_upcoming,
)

__all__ = [
    "ReevaluationResult",
    "WeatherAdjustmentEngine",
    "change_message",
    "next_condition",
    "SweepError",
    "SweepReport",
    "SweepTrip",
    "SweepUpdate",
    "WeatherSweep",
    "is_upcoming",
]
