"""
modules/planning/poi_selector.py
---------------------------------
No-repeat-until-exhausted POI selection.

SelectionState is owned by one itinerary build: it records, per pool purpose,
which indices have already been handed out.  When a pool is exhausted it is
cleared and cycling starts over, so selection never fails.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field, replace
from typing import Protocol, Sequence

from tripwise.schemas.itinerary import POI

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with random() -> float in [0, 1); random.Random qualifies."""

    def random(self) -> float: ...


# Pool purposes tracked independently within one build.
OUTDOOR = "outdoor"
INDOOR = "indoor"
NIGHTLIFE = "nightlife"
NIGHT_INDOOR = "night_indoor"   # indoor POIs reused as nighttime alternatives


@dataclass
class SelectionState:
    used: dict[str, set[int]] = field(default_factory=dict)

    def used_for(self, purpose: str) -> set[int]:
        return self.used.setdefault(purpose, set())


def _pick_index(count: int, rng: RandomSource) -> int:
    # min() guards a source that returns exactly 1.0
    return min(int(rng.random() * count), count - 1)


def select_poi(pool: Sequence[POI], used_indices: set[int], rng: RandomSource) -> POI:
    """
    Uniform pick among unused indices of *pool*; marks the pick used.

    Returns a copy, never the catalog's own object.  Raises ValueError only for
    an empty pool, which the catalog never contains.
    """
    if not pool:
        raise ValueError("cannot select from an empty POI pool")

    available = [i for i in range(len(pool)) if i not in used_indices]
    if available:
        index = available[_pick_index(len(available), rng)]
    else:
        logger.debug("POI pool of %d exhausted; cycling", len(pool))
        used_indices.clear()
        index = _pick_index(len(pool), rng)

    used_indices.add(index)
    return replace(pool[index])


class POISelector:
    """select_poi bound to one build's SelectionState and random source."""

    def __init__(self, rng: RandomSource, state: SelectionState | None = None) -> None:
        self.rng = rng
        self.state = state if state is not None else SelectionState()

    def select(self, pool: Sequence[POI], purpose: str) -> POI:
        return select_poi(pool, self.state.used_for(purpose), self.rng)
