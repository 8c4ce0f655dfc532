"""
modules/planning/activity_pricer.py
------------------------------------
Per-person price of a POI for a budget level and trip type.

    price = round(price_tiers[budget_level] * TRIP_TYPE_MULTIPLIERS[trip_type])

Group discounts only; no clamping (catalog tiers are never negative).
"""

from __future__ import annotations

from tripwise.rounding import round_int
from tripwise.schemas.itinerary import POI
from tripwise.schemas.trip import BudgetLevel, TripType

TRIP_TYPE_MULTIPLIERS: dict[TripType, float] = {
    TripType.solo:    1.0,
    TripType.couple:  0.9,
    TripType.family:  0.8,
    TripType.friends: 0.85,
}


def price(poi: POI, budget_level: BudgetLevel | str, trip_type: TripType | str) -> int:
    base = poi.price_tiers.for_level(BudgetLevel.parse(budget_level))
    return round_int(base * TRIP_TYPE_MULTIPLIERS[TripType.parse(trip_type)])
