"""
modules/tool_usage/distance_tool.py
-------------------------------------
Travel estimates between lat/lng points using the Haversine formula and
per-mode speed heuristics.  No external HTTP calls are made; these are
geometric approximations, not routing.

Config knobs (config.py):
  WALKING_SPEED_KMH                                   -- default 5
  TRANSIT_SPEED_SHORT_KMH / _LONG_KMH, _SHORT_TRIP_KM -- 15 / 20 under/over 3 km
  TRANSIT_WAIT_MINUTES                                -- flat 10
  TAXI_SPEED_SHORT_KMH / _LONG_KMH, _SHORT_TRIP_KM    -- 20 / 35 under/over 5 km
  TAXI_PICKUP_MINUTES                                 -- flat 5
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Optional

from tripwise import config
from tripwise.rounding import round_half_up, round_int
from tripwise.schemas.itinerary import DirectionsEstimate, Location, ModeEstimate, TaxiEstimate

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Pure maths
# ---------------------------------------------------------------------------

_EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points (Haversine formula) in km."""
    r = _EARTH_RADIUS_KM
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lam = math.radians(lon2 - lon1)
    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lam / 2) ** 2
    )
    return 2 * r * math.asin(math.sqrt(min(1.0, a)))


def _km_to_minutes(km: float, speed_kmh: float) -> float:
    """Straight-line km to minutes at a given speed."""
    return (km / speed_kmh) * 60.0


# ---------------------------------------------------------------------------
# Taxi fares
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TaxiRate:
    base_fare: float
    per_km: float


TAXI_RATES: dict[str, TaxiRate] = {
    "usa":       TaxiRate(3.5, 2.5),
    "france":    TaxiRate(4.0, 1.8),
    "japan":     TaxiRate(5.0, 3.0),
    "uk":        TaxiRate(3.0, 2.0),
    "indonesia": TaxiRate(1.0, 0.5),
}
DEFAULT_TAXI_RATE = TaxiRate(3.0, 1.5)

_COUNTRY_ALIASES: dict[str, str] = {
    "united states":            "usa",
    "united states of america": "usa",
    "us":                       "usa",
    "united kingdom":           "uk",
    "great britain":            "uk",
    "england":                  "uk",
}


def taxi_rate_for(country: Optional[str]) -> TaxiRate:
    """Fare table for *country*; unknown or missing countries get the default."""
    if not country:
        return DEFAULT_TAXI_RATE
    key = country.strip().lower()
    key = _COUNTRY_ALIASES.get(key, key)
    return TAXI_RATES.get(key, DEFAULT_TAXI_RATE)


# ---------------------------------------------------------------------------
# DistanceTool
# ---------------------------------------------------------------------------


class DistanceTool:
    """
    Estimates walking, public-transport and taxi options between two points.
    Speeds and flat waits default to config values and can be overridden.
    """

    def __init__(
        self,
        walking_speed_kmh: Optional[float] = None,
        transit_speeds_kmh: Optional[tuple[float, float]] = None,
        taxi_speeds_kmh: Optional[tuple[float, float]] = None,
        transit_short_trip_km: Optional[float] = None,
        transit_wait_minutes: Optional[float] = None,
        taxi_short_trip_km: Optional[float] = None,
        taxi_pickup_minutes: Optional[float] = None,
    ) -> None:
        self.walking_speed = walking_speed_kmh or config.WALKING_SPEED_KMH
        self.transit_short, self.transit_long = transit_speeds_kmh or (
            config.TRANSIT_SPEED_SHORT_KMH, config.TRANSIT_SPEED_LONG_KMH,
        )
        self.taxi_short, self.taxi_long = taxi_speeds_kmh or (
            config.TAXI_SPEED_SHORT_KMH, config.TAXI_SPEED_LONG_KMH,
        )
        # thresholds and flat waits may legitimately be 0, so only None means "use config"
        self.transit_short_trip_km = (
            config.TRANSIT_SHORT_TRIP_KM if transit_short_trip_km is None else transit_short_trip_km
        )
        self.transit_wait = config.TRANSIT_WAIT_MINUTES if transit_wait_minutes is None else transit_wait_minutes
        self.taxi_short_trip_km = config.TAXI_SHORT_TRIP_KM if taxi_short_trip_km is None else taxi_short_trip_km
        self.taxi_pickup = config.TAXI_PICKUP_MINUTES if taxi_pickup_minutes is None else taxi_pickup_minutes

    def calculate(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Return Haversine distance in km."""
        if lat1 == lat2 and lon1 == lon2:
            return 0.0
        return haversine_km(lat1, lon1, lat2, lon2)

    def estimate_directions(
        self,
        from_lat: float,
        from_lng: float,
        to_lat: float,
        to_lng: float,
        country: Optional[str] = None,
    ) -> DirectionsEstimate:
        """
        Walking / public transport / taxi estimate.

        Durations are whole minutes, distances km to one decimal.  Coincident
        points give zero distance plus the flat wait/pickup/base-fare parts.
        """
        km = self.calculate(from_lat, from_lng, to_lat, to_lng)
        distance = round_half_up(km, 1)

        walking = round_int(_km_to_minutes(km, self.walking_speed))

        transit_speed = self.transit_short if km < self.transit_short_trip_km else self.transit_long
        transit = round_int(_km_to_minutes(km, transit_speed) + self.transit_wait)

        taxi_speed = self.taxi_short if km < self.taxi_short_trip_km else self.taxi_long
        taxi = round_int(_km_to_minutes(km, taxi_speed) + self.taxi_pickup)

        rate = taxi_rate_for(country)
        cost = round_int(rate.base_fare + km * rate.per_km)

        logger.debug(
            "directions %.4f,%.4f -> %.4f,%.4f: %.2f km (walk %d, transit %d, taxi %d min)",
            from_lat, from_lng, to_lat, to_lng, km, walking, transit, taxi,
        )
        return DirectionsEstimate(
            walking=ModeEstimate(duration=walking, distance=distance),
            public_transport=ModeEstimate(duration=transit, distance=distance),
            taxi=TaxiEstimate(duration=taxi, distance=distance, estimated_cost=cost),
        )


def estimate_directions(
    from_lat: float,
    from_lng: float,
    to_lat: float,
    to_lng: float,
    country: Optional[str] = None,
) -> DirectionsEstimate:
    """Module-level shortcut using config defaults."""
    return DistanceTool().estimate_directions(from_lat, from_lng, to_lat, to_lng, country)


# ---------------------------------------------------------------------------
# Lodging -> activity
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LodgingDirections:
    has_directions: bool
    origin: Optional[Location] = None
    directions: Optional[DirectionsEstimate] = None
    message: str = ""


def directions_from_lodging(
    to_lat: float,
    to_lng: float,
    hotel: Optional[Location] = None,
    destination_center: Optional[tuple[float, float]] = None,
    country: Optional[str] = None,
    tool: Optional[DistanceTool] = None,
) -> LodgingDirections:
    """
    Directions from the traveller's hotel (or the destination centre when no
    hotel point is stored) to an activity.  A point with either coordinate
    at zero is "unset": with no usable origin the result carries a prompt
    instead of numbers.
    """
    origin = None
    if hotel is not None and hotel.lat and hotel.lng:
        origin = Location(lat=hotel.lat, lng=hotel.lng,
                          name=hotel.name or "Your Hotel", address=hotel.address)
    elif destination_center is not None and all(destination_center):
        lat, lng = destination_center
        origin = Location(lat=lat, lng=lng, name="Your Hotel")

    if origin is None:
        return LodgingDirections(
            has_directions=False,
            message="Please set your hotel location to get directions",
        )

    estimate = (tool or DistanceTool()).estimate_directions(
        origin.lat, origin.lng, to_lat, to_lng, country,
    )
    return LodgingDirections(has_directions=True, origin=origin, directions=estimate)
