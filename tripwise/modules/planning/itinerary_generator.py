"""
modules/planning/itinerary_generator.py
----------------------------------------
Builds one DayPlan per trip day from the destination catalog.

Per day:
  1. date     = start_date + (day - 1)
  2. weather  = simulate_weather(date, destination)      -- deterministic
  3. daytime  = rain-swap rule: rainy -> indoor main / outdoor alt,
                otherwise outdoor main / indoor alt
  4. night    = nightlife main, indoor alt (tracked apart from daytime indoor)
  5. price each POI for the budget level and trip type

Weather is reproducible; POI choice is not (it draws from the injected random
source) so repeated builds vary while later re-evaluation still compares
against a stable forecast.
"""

from __future__ import annotations
import logging
import random
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from tripwise import config
from tripwise.modules.planning.activity_pricer import price
from tripwise.modules.planning.poi_selector import (
    INDOOR, NIGHT_INDOOR, NIGHTLIFE, OUTDOOR, POISelector, RandomSource, SelectionState,
)
from tripwise.modules.planning.rain_swap import main_kind_for
from tripwise.modules.tool_usage.destination_catalog import DestinationCatalog, default_catalog
from tripwise.modules.tool_usage.weather_tool import simulate_weather
from tripwise.schemas.itinerary import POI, Activity, DayPlan, Destination, Location
from tripwise.schemas.trip import (
    ActivityKind, BudgetLevel, Coordinates, TravelStyle, TripRequest, TripType, WeatherCondition,
)

logger = logging.getLogger(__name__)

WeatherSource = Callable[[date, str], WeatherCondition]


class ItineraryGenerator:
    """
    Orchestrates catalog, weather simulator, POI selector and pricer.

    A generator may be reused across trips: every generate() call starts a
    fresh SelectionState, so no "used" tracking leaks between builds.
    """

    def __init__(
        self,
        catalog: Optional[DestinationCatalog] = None,
        rng: Optional[RandomSource] = None,
        weather: WeatherSource = simulate_weather,
    ) -> None:
        self.catalog = catalog or default_catalog()
        self.rng = rng or random.Random()
        self.weather = weather

    def generate(
        self,
        destination_name: str,
        start_date: date | datetime,
        num_days: int,
        travel_style: TravelStyle | str,
        budget_level: BudgetLevel | str,
        trip_type: TripType | str = TripType.solo,
        dest_coords: Optional[Coordinates | tuple[float, float]] = None,
    ) -> list[DayPlan]:
        style = TravelStyle.parse(travel_style)
        budget = BudgetLevel.parse(budget_level)
        party = TripType.parse(trip_type)
        if isinstance(start_date, datetime):
            start_date = start_date.date()

        destination = self.catalog.resolve(destination_name, dest_coords)
        pools = destination.pools(style)
        selector = POISelector(self.rng, SelectionState())

        logger.info(
            "Generating %d-day %s itinerary for %r (%s budget, %s, catalog=%s)",
            num_days, style.value, destination_name, budget.value, party.value, destination.name,
        )

        plans: list[DayPlan] = []
        for day in range(1, num_days + 1):
            day_date = start_date + timedelta(days=day - 1)
            weather = WeatherCondition.parse(self.weather(day_date, destination_name))
            main_kind = main_kind_for(weather)

            if main_kind is ActivityKind.indoor:
                day_main = selector.select(pools.indoor, INDOOR)
                day_alt = selector.select(pools.outdoor, OUTDOOR)
            else:
                day_main = selector.select(pools.outdoor, OUTDOOR)
                day_alt = selector.select(pools.indoor, INDOOR)
            night_main = selector.select(pools.nightlife, NIGHTLIFE)
            night_alt = selector.select(pools.indoor, NIGHT_INDOOR)

            def build(poi: POI, kind: ActivityKind) -> Activity:
                return self._build_activity(poi, kind, destination, budget, party)

            plans.append(DayPlan(
                day_number=day,
                date=day_date,
                weather=weather,
                daytime_main=build(day_main, main_kind),
                daytime_alt=build(day_alt, main_kind.opposite),
                nighttime_main=build(night_main, ActivityKind.indoor),
                nighttime_alt=build(night_alt, ActivityKind.indoor),
            ))
            logger.debug("Day %d (%s, %s): %s / %s", day, day_date, weather.value,
                         day_main.activity_label, night_main.activity_label)

        return plans

    def generate_for_trip(self, trip: TripRequest) -> list[DayPlan]:
        """generate() driven by a validated trip descriptor."""
        return self.generate(
            trip.destination,
            trip.start_date,
            trip.number_of_days,
            trip.travel_style,
            trip.budget_level,
            trip.trip_type,
            trip.destination_coords,
        )

    # ── internals ─────────────────────────────────────────────────────────

    def _build_activity(
        self,
        poi: POI,
        kind: ActivityKind,
        destination: Destination,
        budget: BudgetLevel,
        party: TripType,
    ) -> Activity:
        lat, lng = poi.lat, poi.lng
        if not poi.has_location and destination.has_location:
            jitter = config.ACTIVITY_JITTER_DEG
            lat = destination.center_lat + (self.rng.random() - 0.5) * jitter
            lng = destination.center_lng + (self.rng.random() - 0.5) * jitter
        return Activity(
            name=poi.activity_label,
            kind=kind,
            duration_hours=poi.duration_hours,
            location=Location(lat=lat, lng=lng, name=poi.name, address=poi.address),
            price_per_person=price(poi, budget, party),
        )


def generate_itinerary(
    destination_name: str,
    start_date: date | datetime,
    num_days: int,
    travel_style: TravelStyle | str,
    budget_level: BudgetLevel | str,
    trip_type: TripType | str = TripType.solo,
    dest_coords: Optional[Coordinates | tuple[float, float]] = None,
    rng: Optional[RandomSource] = None,
) -> list[DayPlan]:
    """One-shot build against the curated catalog."""
    return ItineraryGenerator(rng=rng).generate(
        destination_name, start_date, num_days, travel_style,
        budget_level, trip_type, dest_coords,
    )
