"""
schemas/itinerary.py
--------------------
Dataclass definitions for catalog reference data and the generated itinerary.

Reference data (PriceTiers, POI, StylePools, Destination) is frozen: it is
built once when the catalog loads and never mutated.  DayPlan is the unit a
caller persists, one record per trip day.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Optional

from tripwise.schemas.trip import (
    ActivityKind, BudgetLevel, SlotChoice, TimeOfDay, TravelStyle, WeatherCondition,
)


# ─────────────────────────────────────────────────────────────────────────────
# Catalog reference data
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PriceTiers:
    """Per-person base price in dollars for each budget level. All tiers >= 0."""
    low: int = 0
    medium: int = 0
    high: int = 0

    def for_level(self, level: BudgetLevel) -> int:
        return getattr(self, BudgetLevel.parse(level).value)


@dataclass(frozen=True)
class POI:
    """A named point of interest. lat/lng of 0/0 means "no fixed location"."""
    name: str
    lat: float
    lng: float
    address: str
    activity_label: str
    duration_hours: float
    price_tiers: PriceTiers = field(default_factory=PriceTiers)

    @property
    def has_location(self) -> bool:
        return not (self.lat == 0 and self.lng == 0)


@dataclass(frozen=True)
class StylePools:
    """The three POI pools of one travel style."""
    outdoor: tuple[POI, ...] = ()
    indoor: tuple[POI, ...] = ()
    nightlife: tuple[POI, ...] = ()


# eq=False keeps identity hashing; pools_by_style is a dict and would make a field hash fail.
@dataclass(frozen=True, eq=False)
class Destination:
    name: str
    center_lat: float
    center_lng: float
    country: str
    pools_by_style: dict[TravelStyle, StylePools]
    currency: str = "USD"
    timezone: str = "UTC"
    is_generated: bool = False   # True for coordinate-driven fallbacks

    @property
    def has_location(self) -> bool:
        """Zero/zero is the "unknown location" sentinel, not a real point."""
        return not (self.center_lat == 0 and self.center_lng == 0)

    def pools(self, style: TravelStyle) -> StylePools:
        return self.pools_by_style[TravelStyle.parse(style)]


# ─────────────────────────────────────────────────────────────────────────────
# Generated itinerary
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Location:
    lat: float = 0.0
    lng: float = 0.0
    name: str = ""
    address: str = ""


@dataclass(frozen=True)
class Activity:
    """A POI realised for one trip: labelled, typed and priced per person."""
    name: str
    kind: ActivityKind
    duration_hours: float
    location: Location
    price_per_person: int


@dataclass
class DayPlan:
    """
    One day's four activities.

    Invariant: daytime_main.kind and daytime_alt.kind are complementary, and
    the kind of daytime_main agrees with `weather` under the rain-swap rule at
    the moment the plan is produced or adjusted.
    """
    day_number: int
    date: date
    weather: WeatherCondition
    daytime_main: Activity
    daytime_alt: Activity
    nighttime_main: Activity
    nighttime_alt: Activity
    selected_daytime: SlotChoice = SlotChoice.main
    selected_nighttime: SlotChoice = SlotChoice.main
    weather_adjusted: bool = False

    @property
    def activities(self) -> tuple[Activity, Activity, Activity, Activity]:
        return (self.daytime_main, self.daytime_alt, self.nighttime_main, self.nighttime_alt)

    @property
    def chosen_daytime(self) -> Activity:
        return self.daytime_main if self.selected_daytime is SlotChoice.main else self.daytime_alt

    @property
    def chosen_nighttime(self) -> Activity:
        return self.nighttime_main if self.selected_nighttime is SlotChoice.main else self.nighttime_alt

    def select(self, time_of_day: TimeOfDay | str, choice: SlotChoice | str) -> "DayPlan":
        """Return a copy with the traveller's pick for one half of the day changed."""
        tod = TimeOfDay.parse(time_of_day)
        pick = SlotChoice.parse(choice)
        if tod is TimeOfDay.daytime:
            return replace(self, selected_daytime=pick)
        return replace(self, selected_nighttime=pick)

    def total_price(self, travelers: int = 1) -> int:
        """Cost of the currently chosen day + night activities for the party."""
        return (self.chosen_daytime.price_per_person + self.chosen_nighttime.price_per_person) * travelers


@dataclass
class Notification:
    """Change notice produced when a re-evaluation alters a stored day."""
    trip_id: str
    message: str
    user_id: Optional[str] = None
    day_number: int = 0
    is_read: bool = False
    created_at: datetime = field(default_factory=datetime.now)


# ─────────────────────────────────────────────────────────────────────────────
# Directions
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ModeEstimate:
    duration: int        # minutes
    distance: float      # km, one decimal


@dataclass(frozen=True)
class TaxiEstimate:
    duration: int
    distance: float
    estimated_cost: int  # local-ish currency units, rounded


@dataclass(frozen=True)
class DirectionsEstimate:
    walking: ModeEstimate
    public_transport: ModeEstimate
    taxi: TaxiEstimate

    def to_dict(self) -> dict:
        return {
            "walking":         {"duration": self.walking.duration, "distance": self.walking.distance},
            "publicTransport": {"duration": self.public_transport.duration,
                                "distance": self.public_transport.distance},
            "taxi":            {"duration": self.taxi.duration, "distance": self.taxi.distance,
                                "estimatedCost": self.taxi.estimated_cost},
        }
