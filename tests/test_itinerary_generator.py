import random
from datetime import date, timedelta

import pytest

from tripwise.errors import UnknownOptionError
from tripwise.modules.planning.itinerary_generator import ItineraryGenerator, generate_itinerary
from tripwise.modules.tool_usage.destination_catalog import DestinationCatalog, default_catalog
from tripwise.modules.tool_usage.weather_tool import simulate_weather
from tripwise.schemas.itinerary import POI, Destination, PriceTiers, StylePools
from tripwise.schemas.trip import (
    ActivityKind, BudgetLevel, SlotChoice, TimeOfDay, TravelStyle, TripRequest, TripType, WeatherCondition,
)

from conftest import fixed_weather


def _names(pool):
    return {p.name for p in pool}


def test_paris_three_day_cultural_medium_solo():
    start = date(2026, 11, 2)
    plans = generate_itinerary("Paris", start, 3, "cultural", "medium", "solo", rng=random.Random(1))
    pools = default_catalog().lookup("paris").pools(TravelStyle.cultural)
    # a venue can appear in two pools with different activities and prices
    by_key = {(p.name, p.activity_label): p for p in pools.outdoor + pools.indoor + pools.nightlife}

    assert [p.day_number for p in plans] == [1, 2, 3]
    assert [p.date for p in plans] == [start + timedelta(days=i) for i in range(3)]
    for plan in plans:
        assert plan.weather is simulate_weather(plan.date, "Paris")
        assert plan.daytime_main.kind is not plan.daytime_alt.kind
        expected_main = ActivityKind.indoor if plan.weather.is_rainy else ActivityKind.outdoor
        assert plan.daytime_main.kind is expected_main
        assert plan.nighttime_main.location.name in _names(pools.nightlife)
        assert plan.nighttime_alt.location.name in _names(pools.indoor)
        assert plan.selected_daytime is SlotChoice.main
        assert not plan.weather_adjusted
        for activity in plan.activities:
            poi = by_key[(activity.location.name, activity.name)]
            assert activity.price_per_person == poi.price_tiers.medium
            assert (activity.location.lat, activity.location.lng) == (poi.lat, poi.lng)


def test_fair_weather_puts_outdoor_first(catalog, rng, start):
    plans = ItineraryGenerator(catalog, rng, fixed_weather(WeatherCondition.cloudy)).generate(
        "Testville", start, 2, TravelStyle.adventure, BudgetLevel.low)
    pools = catalog.lookup("testville").pools(TravelStyle.adventure)
    for plan in plans:
        assert plan.daytime_main.kind is ActivityKind.outdoor
        assert plan.daytime_alt.kind is ActivityKind.indoor
        assert plan.daytime_main.location.name in _names(pools.outdoor)
        assert plan.daytime_alt.location.name in _names(pools.indoor)


@pytest.mark.parametrize("weather", [WeatherCondition.rainy, WeatherCondition.stormy])
def test_rain_puts_indoor_first(catalog, rng, start, weather):
    plans = ItineraryGenerator(catalog, rng, fixed_weather(weather)).generate(
        "Testville", start, 2, TravelStyle.adventure, BudgetLevel.low)
    for plan in plans:
        assert plan.weather is weather
        assert plan.daytime_main.kind is ActivityKind.indoor
        assert plan.daytime_alt.kind is ActivityKind.outdoor


def test_nightlife_comes_from_the_chosen_style(catalog, rng, start):
    plans = ItineraryGenerator(catalog, rng).generate("Testville", start, 3, "food", "medium")
    for plan in plans:
        assert plan.nighttime_main.name.startswith("food Bar")
        assert plan.nighttime_main.kind is ActivityKind.indoor
        assert plan.nighttime_alt.kind is ActivityKind.indoor


def test_no_repeats_within_a_build(catalog, rng, start):
    plans = ItineraryGenerator(catalog, rng, fixed_weather(WeatherCondition.sunny)).generate(
        "Testville", start, 5, "relax", "medium")
    assert len({p.daytime_main.name for p in plans}) == 5
    assert len({p.daytime_alt.name for p in plans}) == 5
    assert len({p.nighttime_alt.name for p in plans}) == 5
    # three nightlife venues over five nights: first three distinct, then cycling
    assert len({p.nighttime_main.name for p in plans[:3]}) == 3


def test_selection_state_does_not_leak_between_builds(catalog, start):
    generator = ItineraryGenerator(catalog, random.Random(3), fixed_weather(WeatherCondition.sunny))
    first = generator.generate("Testville", start, 5, "relax", "medium")
    second = generator.generate("Testville", start, 5, "relax", "medium")
    # each build on its own sees the full five-POI pool
    assert len({p.daytime_main.name for p in first}) == 5
    assert len({p.daytime_main.name for p in second}) == 5


def test_group_pricing(catalog, rng, start):
    plans = ItineraryGenerator(catalog, rng).generate("Testville", start, 2, "cultural", "high", "family")
    pools = catalog.lookup("testville").pools(TravelStyle.cultural)
    by_name = {p.name: p for p in pools.outdoor + pools.indoor + pools.nightlife}
    for plan in plans:
        for activity in plan.activities:
            # high tiers are multiples of 40, so the 0.8 family rate is exact
            assert activity.price_per_person == by_name[activity.location.name].price_tiers.high * 8 // 10


def test_unknown_destination_uses_the_default_template(rng, start):
    plans = generate_itinerary("Atlantis", start, 2, "adventure", "low", rng=rng)
    assert len(plans) == 2
    for plan in plans:
        for activity in plan.activities:
            assert (activity.location.lat, activity.location.lng) == (0, 0)


def test_unknown_destination_with_coordinates_gets_generated_pois(rng, start):
    plans = ItineraryGenerator(DestinationCatalog(), rng).generate(
        "Ljubljana", start, 2, "cultural", "medium", dest_coords=(46.05, 14.5))
    for plan in plans:
        for activity in plan.activities:
            assert activity.location.address.endswith(", Ljubljana")
            assert abs(activity.location.lat - 46.05) < 0.03


def test_zero_coordinate_pois_are_placed_near_a_known_centre(rng, start):
    def nowhere(name):
        return POI(name, 0, 0, "", f"{name} Visit", 2, PriceTiers(5, 10, 20))

    pools = StylePools(
        outdoor=(nowhere("Plaza"),), indoor=(nowhere("Gallery"),), nightlife=(nowhere("Club"),),
    )
    town = Destination("sometown", 40.0, -3.0, "Spain", {style: pools for style in TravelStyle})
    plans = ItineraryGenerator(DestinationCatalog({"sometown": town}), rng).generate(
        "Sometown", start, 3, "adventure", "low")
    for plan in plans:
        for activity in plan.activities:
            assert abs(activity.location.lat - 40.0) <= 0.025
            assert abs(activity.location.lng + 3.0) <= 0.025
            assert (activity.location.lat, activity.location.lng) != (0, 0)


def test_generate_for_trip(catalog, rng):
    trip = TripRequest(
        destination="Testville", start_date="2026-11-02", number_of_days=4,
        travel_style="adventure", budget_level="medium", trip_type="couple",
    )
    plans = ItineraryGenerator(catalog, rng).generate_for_trip(trip)
    assert len(plans) == 4
    assert plans[0].date == date(2026, 11, 2)


def test_unknown_style_is_rejected(catalog, rng, start):
    with pytest.raises(UnknownOptionError):
        ItineraryGenerator(catalog, rng).generate("Testville", start, 1, "luxury", "medium")


def test_choosing_the_alternative(catalog, rng, start):
    plan = ItineraryGenerator(catalog, rng).generate("Testville", start, 1, "relax", "low", TripType.solo)[0]
    picked = plan.select(TimeOfDay.daytime, "alternative")
    assert picked is not plan
    assert plan.chosen_daytime is plan.daytime_main
    assert picked.chosen_daytime is picked.daytime_alt
    assert picked.chosen_nighttime is picked.nighttime_main
    assert picked.total_price(2) == 2 * (picked.daytime_alt.price_per_person
                                         + picked.nighttime_main.price_per_person)
