from datetime import date, datetime

import pytest

from tripwise.modules.tool_usage.weather_tool import (
    climate_for, pick_condition, season_for, seeded_random, simulate_weather, weather_probabilities,
)
from tripwise.schemas.trip import WEATHER_CONDITIONS, WeatherCondition


def test_same_day_and_destination_always_agree():
    day = date(2026, 3, 14)
    first = simulate_weather(day, "Paris")
    assert all(simulate_weather(day, "Paris") is first for _ in range(10))
    assert first in WEATHER_CONDITIONS


def test_time_of_day_does_not_change_the_draw():
    assert simulate_weather(datetime(2026, 3, 14, 18, 30), "Paris") is simulate_weather(date(2026, 3, 14), "Paris")


def test_seed_is_day_plus_name_length_plus_zero_based_month():
    day = date(2026, 3, 14)
    seed = 14 + len("Paris") + 2
    expected = pick_condition(seeded_random(seed), weather_probabilities(day, "Paris"))
    assert simulate_weather(day, "Paris") is expected


def test_same_length_temperate_names_share_weather():
    # the draw only sees the name through its length and climate bucket
    day = date(2026, 7, 1)
    assert simulate_weather(day, "Paris") is simulate_weather(day, "Tokyo")


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 365, 10_000])
def test_seeded_random_is_a_unit_interval_sample(seed):
    assert 0.0 <= seeded_random(seed) < 1.0


@pytest.mark.parametrize("name, climate", [
    ("Bali, Indonesia", "tropical"),
    ("Phuket, THAILAND", "tropical"),
    ("Dubai", "desert"),
    ("Marrakech, Morocco", "desert"),
    ("Paris", "temperate"),
    ("Somewhere Unknown", "temperate"),
])
def test_climate_buckets(name, climate):
    assert climate_for(name) == climate


def test_seasons():
    assert season_for("tropical", 5) == "monsoon"
    assert season_for("tropical", 9) == "monsoon"
    assert season_for("tropical", 10) == "dry"
    assert season_for("desert", 6) == "any"
    assert season_for("temperate", 0) == "winter"
    assert season_for("temperate", 11) == "winter"
    assert season_for("temperate", 3) == "spring"
    assert season_for("temperate", 6) == "summer"
    assert season_for("temperate", 9) == "autumn"


def test_every_probability_row_sums_to_one():
    for month in range(1, 13):
        for name in ("Bali", "Dubai", "Paris"):
            probs = weather_probabilities(date(2026, month, 1), name)
            assert sum(probs.values()) == pytest.approx(1.0)


def test_pick_condition_walks_cumulative_mass_in_fixed_order():
    probs = {
        WeatherCondition.sunny: 0.25, WeatherCondition.cloudy: 0.35,
        WeatherCondition.rainy: 0.30, WeatherCondition.stormy: 0.10,
    }
    assert pick_condition(0.0, probs) is WeatherCondition.sunny
    assert pick_condition(0.3, probs) is WeatherCondition.cloudy
    assert pick_condition(0.7, probs) is WeatherCondition.rainy
    assert pick_condition(0.95, probs) is WeatherCondition.stormy


def test_pick_condition_falls_back_to_sunny_when_mass_runs_out():
    short = {WeatherCondition.sunny: 0.1, WeatherCondition.cloudy: 0.1,
             WeatherCondition.rainy: 0.1, WeatherCondition.stormy: 0.1}
    assert pick_condition(0.99, short) is WeatherCondition.sunny
