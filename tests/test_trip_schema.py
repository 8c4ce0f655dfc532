from datetime import date

import pytest
from pydantic import ValidationError

from tripwise.errors import TripwiseError, UnknownOptionError
from tripwise.schemas.trip import (
    BudgetLevel, Coordinates, SlotChoice, TimeOfDay, TravelStyle, TripRequest, TripType, WeatherCondition,
)


def _request(**overrides):
    fields = {
        "destination": "Paris, France",
        "start_date": "2026-11-02",
        "number_of_days": 3,
        "travel_style": "cultural",
        "budget_level": "medium",
    }
    fields.update(overrides)
    return TripRequest(**fields)


def test_defaults():
    trip = _request()
    assert trip.start_date == date(2026, 11, 2)
    assert trip.budget_amount == 1000
    assert trip.number_of_travelers == 1
    assert trip.trip_type is TripType.solo
    assert trip.hotel_coords is None


def test_option_strings_are_normalised():
    trip = _request(travel_style=" Cultural ", budget_level="HIGH", trip_type="Family")
    assert trip.travel_style is TravelStyle.cultural
    assert trip.budget_level is BudgetLevel.high
    assert trip.trip_type is TripType.family


def test_destination_is_stripped():
    assert _request(destination="  Tokyo ").destination == "Tokyo"


@pytest.mark.parametrize("overrides", [
    {"destination": ""},
    {"destination": "   "},
    {"number_of_days": 0},
    {"number_of_days": 31},
    {"number_of_travelers": 0},
    {"number_of_travelers": 21},
    {"budget_amount": -1},
    {"travel_style": "luxury"},
    {"budget_level": "extreme"},
])
def test_invalid_requests_are_rejected(overrides):
    with pytest.raises(ValidationError):
        _request(**overrides)


def test_coordinates_zero_means_unset():
    assert not Coordinates(lat=0, lng=0).is_set
    assert Coordinates(lat=0, lng=2.35).is_set


def test_parse_is_lenient_about_case_and_whitespace():
    assert WeatherCondition.parse(" Rainy ") is WeatherCondition.rainy
    assert TimeOfDay.parse("NIGHTTIME") is TimeOfDay.nighttime
    assert SlotChoice.parse(SlotChoice.alternative) is SlotChoice.alternative


def test_unknown_option_error():
    with pytest.raises(UnknownOptionError) as excinfo:
        WeatherCondition.parse("hail")
    err = excinfo.value
    assert isinstance(err, TripwiseError)
    assert isinstance(err, ValueError)
    assert err.kind == "WeatherCondition"
    assert err.allowed == ["sunny", "cloudy", "rainy", "stormy"]
    assert "'hail'" in str(err)


def test_rainy_conditions():
    assert WeatherCondition.rainy.is_rainy
    assert WeatherCondition.stormy.is_rainy
    assert not WeatherCondition.sunny.is_rainy
    assert not WeatherCondition.cloudy.is_rainy
