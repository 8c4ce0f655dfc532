"""
modules/tool_usage/destination_catalog.py
------------------------------------------
Read-only repository of destinations and their POI pools.

Resolution order used by the itinerary generator:
  1. lookup(name)              -- curated entry whose key is contained in the
                                  (lower-cased) requested name
  2. generate_fallback(...)    -- POIs synthesised around a known centre
  3. DEFAULT_DESTINATION       -- generic template, zero coordinates

Zero/zero coordinates always mean "location unknown".
"""

from __future__ import annotations
import logging
import math
from functools import lru_cache
from typing import Optional

from tripwise.modules.tool_usage.destination_data import (
    CURATED_DESTINATIONS, DEFAULT_POOLS,
    FALLBACK_INDOOR, FALLBACK_NIGHTLIFE, FALLBACK_OUTDOOR,
)
from tripwise.schemas.itinerary import POI, Destination, PriceTiers, StylePools
from tripwise.schemas.trip import Coordinates, TravelStyle

logger = logging.getLogger(__name__)

_FALLBACK_POOL_SIZE = 5

# pool -> (angle phase, lat spread deg, lng spread deg)
_POOL_GEOMETRY: dict[str, tuple[int, float, float]] = {
    "outdoor":   (0, 0.015, 0.020),
    "indoor":    (1, 0.012, 0.018),
    "nightlife": (2, 0.010, 0.015),
}


def _build_pools(raw_pools: dict[str, dict]) -> dict[TravelStyle, StylePools]:
    return {
        TravelStyle.parse(style): StylePools(
            outdoor=tuple(pools["outdoor"]),
            indoor=tuple(pools["indoor"]),
            nightlife=tuple(pools["nightlife"]),
        )
        for style, pools in raw_pools.items()
    }


def _build_destination(key: str, raw: dict) -> Destination:
    lat, lng = raw["center"]
    return Destination(
        name=key,
        center_lat=lat,
        center_lng=lng,
        country=raw.get("country", "Unknown"),
        currency=raw.get("currency", "USD"),
        timezone=raw.get("timezone", "UTC"),
        pools_by_style=_build_pools(raw["pools"]),
    )


DEFAULT_DESTINATION = Destination(
    name="default",
    center_lat=0.0,
    center_lng=0.0,
    country="Unknown",
    pools_by_style=_build_pools(DEFAULT_POOLS),
)


def fallback_offset(index: int, phase: int, lat_spread: float, lng_spread: float) -> tuple[float, float]:
    """
    (d_lat, d_lng) for the index-th synthesised POI of a pool.

    Points sit on five distinct bearings with a radius that grows with the
    index, so no two POIs of a pool share coordinates.
    """
    angle = ((index + phase) % _FALLBACK_POOL_SIZE) / _FALLBACK_POOL_SIZE * 2 * math.pi
    radius = 0.5 + 0.1 * index
    return math.cos(angle) * lat_spread * radius, math.sin(angle) * lng_spread * radius


class DestinationCatalog:
    """Destination lookup with coordinate-driven fallback generation."""

    def __init__(
        self,
        destinations: Optional[dict[str, Destination]] = None,
        default: Destination = DEFAULT_DESTINATION,
    ) -> None:
        # insertion order decides ties when several keys match one name
        self._destinations: dict[str, Destination] = {
            k.lower(): v for k, v in (destinations or {}).items()
        }
        self.default = default

    @classmethod
    def from_raw(cls, raw: dict[str, dict]) -> "DestinationCatalog":
        return cls({key: _build_destination(key, entry) for key, entry in raw.items()})

    @property
    def keys(self) -> list[str]:
        return list(self._destinations)

    def lookup(self, name: str) -> Optional[Destination]:
        """Curated destination whose key appears inside *name*, else None."""
        name_lower = (name or "").lower()
        for key, dest in self._destinations.items():
            if key in name_lower:
                return dest
        return None

    def generate_fallback(self, lat: float, lng: float, name: str) -> Destination:
        """Synthesise five POIs per (style x pool) spread around (lat, lng)."""
        logger.debug("Generating fallback POIs for %r around (%.4f, %.4f)", name, lat, lng)
        pools = {
            style: StylePools(
                outdoor=self._synthesise(FALLBACK_OUTDOOR, "outdoor", lat, lng, name, style),
                indoor=self._synthesise(FALLBACK_INDOOR, "indoor", lat, lng, name, style),
                nightlife=self._synthesise(FALLBACK_NIGHTLIFE, "nightlife", lat, lng, name, style),
            )
            for style in TravelStyle
        }
        return Destination(
            name=name,
            center_lat=lat,
            center_lng=lng,
            country="Unknown",
            pools_by_style=pools,
            is_generated=True,
        )

    def resolve(
        self,
        name: str,
        coords: Optional[Coordinates | tuple[float, float]] = None,
    ) -> Destination:
        """Catalog entry, else fallback around *coords*, else the default template."""
        dest = self.lookup(name)
        if dest is not None:
            return dest

        if coords is not None:
            lat, lng = (coords.lat, coords.lng) if isinstance(coords, Coordinates) else coords
            if not (lat == 0 and lng == 0):
                return self.generate_fallback(lat, lng, name)

        logger.debug("No catalog entry or coordinates for %r; using default template", name)
        return self.default

    # ── internals ─────────────────────────────────────────────────────────

    @staticmethod
    def _synthesise(
        templates: tuple[tuple, ...],
        pool: str,
        lat: float,
        lng: float,
        city: str,
        style: TravelStyle,
    ) -> tuple[POI, ...]:
        phase, lat_spread, lng_spread = _POOL_GEOMETRY[pool]
        verb = "Relaxing" if style is TravelStyle.relax else "Exploring"
        pois = []
        for i, (name_t, activity_t, hours, low, medium, high) in enumerate(templates):
            d_lat, d_lng = fallback_offset(i, phase, lat_spread, lng_spread)
            name = name_t.format(city=city)
            pois.append(POI(
                name=name,
                lat=lat + d_lat,
                lng=lng + d_lng,
                address=f"{name}, {city}",
                activity_label=activity_t.format(verb=verb),
                duration_hours=hours,
                price_tiers=PriceTiers(low=low, medium=medium, high=high),
            ))
        return tuple(pois)


@lru_cache(maxsize=1)
def default_catalog() -> DestinationCatalog:
    """The curated catalog, built once per process."""
    return DestinationCatalog.from_raw(CURATED_DESTINATIONS)
