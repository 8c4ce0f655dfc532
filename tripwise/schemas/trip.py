"""
schemas/trip.py
---------------
Option enums shared across the core, and the trip descriptor handed in by the
trip create/update flow.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from tripwise.errors import UnknownOptionError


class _Option(str, Enum):
    """str-valued enum with a lenient, case-insensitive parser."""

    @classmethod
    def parse(cls, value: object):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownOptionError(
                cls.__name__, value, [m.value for m in cls]
            ) from None


class WeatherCondition(_Option):
    sunny = "sunny"
    cloudy = "cloudy"
    rainy = "rainy"
    stormy = "stormy"

    @property
    def is_rainy(self) -> bool:
        return self in (WeatherCondition.rainy, WeatherCondition.stormy)


# Fixed cyclic order; also the order probability mass is accumulated in.
WEATHER_CONDITIONS: tuple[WeatherCondition, ...] = (
    WeatherCondition.sunny,
    WeatherCondition.cloudy,
    WeatherCondition.rainy,
    WeatherCondition.stormy,
)


class ActivityKind(_Option):
    indoor = "indoor"
    outdoor = "outdoor"

    @property
    def opposite(self) -> "ActivityKind":
        return ActivityKind.outdoor if self is ActivityKind.indoor else ActivityKind.indoor


class TravelStyle(_Option):
    relax = "relax"
    adventure = "adventure"
    cultural = "cultural"
    food = "food"


class BudgetLevel(_Option):
    low = "low"
    medium = "medium"
    high = "high"


class TripType(_Option):
    solo = "solo"
    couple = "couple"
    family = "family"
    friends = "friends"


class TimeOfDay(_Option):
    daytime = "daytime"
    nighttime = "nighttime"


class SlotChoice(_Option):
    main = "main"
    alternative = "alternative"


class Coordinates(BaseModel):
    lat: float
    lng: float
    country: Optional[str] = None

    @property
    def is_set(self) -> bool:
        """Zero/zero means "location unknown", never the Gulf of Guinea."""
        return not (self.lat == 0 and self.lng == 0)


class TripRequest(BaseModel):
    """Trip descriptor as accepted by the create/update trip flow."""

    destination: str = Field(..., min_length=1)
    start_date: date
    number_of_days: int = Field(..., ge=1, le=30)
    travel_style: TravelStyle
    budget_level: BudgetLevel
    budget_amount: float = Field(1000.0, ge=0)
    number_of_travelers: int = Field(1, ge=1, le=20)
    trip_type: TripType = TripType.solo
    hotel_name: Optional[str] = None
    hotel_address: Optional[str] = None
    hotel_coords: Optional[Coordinates] = None
    destination_coords: Optional[Coordinates] = None

    @field_validator("destination")
    @classmethod
    def _strip_destination(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("destination must not be blank")
        return v

    @field_validator("travel_style", "budget_level", "trip_type", mode="before")
    @classmethod
    def _lower_options(cls, v):
        return v.strip().lower() if isinstance(v, str) else v
