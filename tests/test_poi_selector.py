import random

import pytest

from tripwise.modules.planning.poi_selector import (
    INDOOR, NIGHT_INDOOR, POISelector, SelectionState, select_poi,
)
from tripwise.schemas.itinerary import POI

from conftest import ScriptedRandom


def _pool(n):
    return tuple(POI(f"Spot {i}", 1.0 + i, 2.0, "addr", f"Visit {i}", 2) for i in range(n))


def test_no_repeats_until_pool_is_exhausted():
    pool = _pool(4)
    used: set[int] = set()
    rng = random.Random(5)
    names = [select_poi(pool, used, rng).name for _ in range(4)]
    assert sorted(names) == [p.name for p in pool]
    assert used == {0, 1, 2, 3}


def test_exhausted_pool_cycles_from_scratch():
    pool = _pool(3)
    used = {0, 1, 2}
    poi = select_poi(pool, used, ScriptedRandom(0.5))
    assert poi.name == "Spot 1"
    assert used == {1}


def test_pick_is_uniform_over_available_indices():
    pool = _pool(4)
    used = {0, 2}
    # available [1, 3]; 0.6 * 2 -> position 1 -> index 3
    assert select_poi(pool, used, ScriptedRandom(0.6)).name == "Spot 3"


def test_source_returning_one_is_clamped():
    assert select_poi(_pool(3), set(), ScriptedRandom(1.0)).name == "Spot 2"


def test_returns_a_copy_of_the_catalog_entry():
    pool = _pool(1)
    poi = select_poi(pool, set(), ScriptedRandom(0.0))
    assert poi == pool[0]
    assert poi is not pool[0]


def test_empty_pool_is_rejected():
    with pytest.raises(ValueError):
        select_poi((), set(), ScriptedRandom(0.0))


def test_purposes_are_tracked_independently():
    pool = _pool(2)
    state = SelectionState()
    selector = POISelector(ScriptedRandom(0.0), state)
    day = selector.select(pool, INDOOR)
    night = selector.select(pool, NIGHT_INDOOR)
    assert day.name == night.name == "Spot 0"
    assert state.used_for(INDOOR) == {0}
    assert state.used_for(NIGHT_INDOOR) == {0}
