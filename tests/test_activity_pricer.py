import pytest

from tripwise.modules.planning.activity_pricer import TRIP_TYPE_MULTIPLIERS, price
from tripwise.rounding import round_half_up, round_int
from tripwise.schemas.itinerary import POI, PriceTiers
from tripwise.schemas.trip import BudgetLevel, TripType

LOUVRE = POI("Louvre", 48.86, 2.34, "Rue de Rivoli", "Museum Tour", 3, PriceTiers(low=10, medium=20, high=40))


@pytest.mark.parametrize("budget, trip_type, expected", [
    (BudgetLevel.low, TripType.solo, 10),
    (BudgetLevel.medium, TripType.solo, 20),
    (BudgetLevel.high, TripType.solo, 40),
    (BudgetLevel.medium, TripType.couple, 18),
    (BudgetLevel.high, TripType.family, 32),
    (BudgetLevel.medium, TripType.friends, 17),
])
def test_price_is_tier_times_group_multiplier(budget, trip_type, expected):
    assert price(LOUVRE, budget, trip_type) == expected


def test_price_accepts_option_strings():
    assert price(LOUVRE, "High", "couple") == 36


def test_free_pois_stay_free():
    park = POI("Park", 1, 1, "", "Walk", 2, PriceTiers())
    for trip_type in TripType:
        assert price(park, BudgetLevel.high, trip_type) == 0


def test_group_discounts_never_raise_prices():
    assert max(TRIP_TYPE_MULTIPLIERS.values()) == 1.0
    assert set(TRIP_TYPE_MULTIPLIERS) == set(TripType)


def test_halves_round_up():
    assert round_int(22.5) == 23
    assert round_int(0.49) == 0
    assert round_int(-2.5) == -3
    assert round_half_up(10.04, 1) == 10.0
    assert round_half_up(10.05, 1) == 10.1
