from __future__ import annotations

import random
from datetime import date

import pytest

from tripwise.modules.observability.logger import StructuredLogger
from tripwise.modules.tool_usage.destination_catalog import DestinationCatalog
from tripwise.schemas.itinerary import POI, Destination, PriceTiers, StylePools
from tripwise.schemas.trip import TravelStyle, WeatherCondition

TESTVILLE_CENTER = (10.0, 20.0)


class ScriptedRandom:
    """Hands out the given values in order, then keeps repeating the last one."""

    def __init__(self, *values: float) -> None:
        self.values = list(values) or [0.0]
        self.calls = 0

    def random(self) -> float:
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value


def fixed_weather(condition: WeatherCondition):
    """Weather source that ignores date and destination."""
    def source(when, destination):
        return condition
    return source


def _poi(name: str, index: int, lat: float, lng: float) -> POI:
    return POI(
        name=name,
        lat=lat,
        lng=lng,
        address=f"{index} Test Street",
        activity_label=f"{name} Visit",
        duration_hours=2,
        price_tiers=PriceTiers(low=10 * (index + 1), medium=20 * (index + 1), high=40 * (index + 1)),
    )


def _testville_pools(style: TravelStyle) -> StylePools:
    lat, lng = TESTVILLE_CENTER
    return StylePools(
        outdoor=tuple(_poi(f"{style.value} Park {i}", i, lat + 0.001 * (i + 1), lng) for i in range(5)),
        indoor=tuple(_poi(f"{style.value} Museum {i}", i, lat, lng + 0.001 * (i + 1)) for i in range(5)),
        nightlife=tuple(_poi(f"{style.value} Bar {i}", i, lat - 0.001 * (i + 1), lng) for i in range(3)),
    )


@pytest.fixture
def testville() -> Destination:
    lat, lng = TESTVILLE_CENTER
    return Destination(
        name="testville",
        center_lat=lat,
        center_lng=lng,
        country="France",
        pools_by_style={style: _testville_pools(style) for style in TravelStyle},
    )


@pytest.fixture
def catalog(testville) -> DestinationCatalog:
    return DestinationCatalog({"testville": testville})


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20261019)


@pytest.fixture
def start() -> date:
    return date(2026, 11, 2)


@pytest.fixture
def slog(tmp_path):
    logger = StructuredLogger(tmp_path / "logs")
    yield logger
    logger.close()
