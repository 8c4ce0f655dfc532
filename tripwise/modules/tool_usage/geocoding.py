"""
modules/tool_usage/geocoding.py
--------------------------------
Destination name -> centre coordinates.

A table of well-known city centres is consulted first (zero network calls for
common destinations).  Anything else is handed to an injected geocoder, a
black-box callable owned by the caller (e.g. a Nominatim client) that returns
Coordinates or None.  A geocoder failure is logged and treated as "unknown".
"""

from __future__ import annotations
import logging
from typing import Callable, Optional

from tripwise.schemas.trip import Coordinates

logger = logging.getLogger(__name__)

Geocoder = Callable[[str], Optional[Coordinates]]


# name -> (lat, lng, country); matched by substring containment
KNOWN_CENTERS: dict[str, tuple[float, float, str]] = {
    # ── France
    "paris":            (48.8566, 2.3522, "France"),
    "nice":             (43.7102, 7.2620, "France"),
    "lyon":             (45.7640, 4.8357, "France"),
    "marseille":        (43.2965, 5.3698, "France"),
    # ── Spain
    "barcelona":        (41.3851, 2.1734, "Spain"),
    "madrid":           (40.4168, -3.7038, "Spain"),
    "seville":          (37.3891, -5.9845, "Spain"),
    "valencia":         (39.4699, -0.3763, "Spain"),
    # ── United States
    "new york":         (40.7128, -74.0060, "United States"),
    "los angeles":      (34.0522, -118.2437, "United States"),
    "miami":            (25.7617, -80.1918, "United States"),
    "san francisco":    (37.7749, -122.4194, "United States"),
    "chicago":          (41.8781, -87.6298, "United States"),
    "las vegas":        (36.1699, -115.1398, "United States"),
    "orlando":          (28.5383, -81.3792, "United States"),
    "washington":       (38.9072, -77.0369, "United States"),
    "boston":           (42.3601, -71.0589, "United States"),
    "seattle":          (47.6062, -122.3321, "United States"),
    # ── Italy
    "rome":             (41.9028, 12.4964, "Italy"),
    "venice":           (45.4408, 12.3155, "Italy"),
    "florence":         (43.7696, 11.2558, "Italy"),
    "milan":            (45.4642, 9.1900, "Italy"),
    "naples":           (40.8518, 14.2681, "Italy"),
    # ── Turkey
    "istanbul":         (41.0082, 28.9784, "Turkey"),
    "antalya":          (36.8969, 30.7133, "Turkey"),
    "cappadocia":       (38.6580, 34.6850, "Turkey"),
    # ── Mexico
    "mexico city":      (19.4326, -99.1332, "Mexico"),
    "cancun":           (21.1619, -86.8515, "Mexico"),
    "playa del carmen": (20.6294, -87.0739, "Mexico"),
    "guadalajara":      (20.6597, -103.3496, "Mexico"),
    # ── United Kingdom
    "london":           (51.5074, -0.1278, "United Kingdom"),
    "edinburgh":        (55.9533, -3.1883, "United Kingdom"),
    "manchester":       (53.4808, -2.2426, "United Kingdom"),
    "birmingham":       (52.4862, -1.8904, "United Kingdom"),
    "liverpool":        (53.4084, -2.9916, "United Kingdom"),
    # ── China
    "beijing":          (39.9042, 116.4074, "China"),
    "shanghai":         (31.2304, 121.4737, "China"),
    "hong kong":        (22.3193, 114.1694, "China"),
    "chengdu":          (30.5728, 104.0668, "China"),
    "xian":             (34.3416, 108.9398, "China"),
    # ── Germany
    "berlin":           (52.5200, 13.4050, "Germany"),
    "munich":           (48.1351, 11.5820, "Germany"),
    "hamburg":          (53.5511, 9.9937, "Germany"),
    "frankfurt":        (50.1109, 8.6821, "Germany"),
    "cologne":          (50.9375, 6.9603, "Germany"),
    # ── Greece
    "athens":           (37.9838, 23.7275, "Greece"),
    "santorini":        (36.3932, 25.4615, "Greece"),
    "mykonos":          (37.4467, 25.3244, "Greece"),
    "thessaloniki":     (40.6401, 22.9444, "Greece"),
    # ── Other popular destinations
    "tokyo":            (35.6762, 139.6503, "Japan"),
    "bali":             (-8.4095, 115.1889, "Indonesia"),
    "amsterdam":        (52.3676, 4.9041, "Netherlands"),
    "sydney":           (-33.8688, 151.2093, "Australia"),
    "dubai":            (25.2048, 55.2708, "UAE"),
    "singapore":        (1.3521, 103.8198, "Singapore"),
    "vienna":           (48.2082, 16.3738, "Austria"),
    "prague":           (50.0755, 14.4378, "Czech Republic"),
    "bangkok":          (13.7563, 100.5018, "Thailand"),
    "seoul":            (37.5665, 126.9780, "South Korea"),
    "cairo":            (30.0444, 31.2357, "Egypt"),
}

_KEYS_LONGEST_FIRST: list[str] = sorted(KNOWN_CENTERS, key=len, reverse=True)


def known_center(destination: str) -> Optional[Coordinates]:
    """Centre of the known city whose key appears in *destination*.

    Longest key wins, so "Venice" is never read as "Nice".
    """
    dest = destination.lower()
    matches = [key for key in _KEYS_LONGEST_FIRST if key in dest]
    if not matches:
        return None
    lat, lng, country = KNOWN_CENTERS[matches[0]]
    return Coordinates(lat=lat, lng=lng, country=country)


def resolve_destination_center(
    destination: str,
    geocoder: Optional[Geocoder] = None,
) -> Optional[Coordinates]:
    """
    Known-city table first, then *geocoder*.

    Returns None when nothing is known; never raises on geocoder failure so a
    trip can still be planned from the default template.
    """
    coords = known_center(destination)
    if coords is not None:
        return coords
    if geocoder is None:
        return None

    try:
        result = geocoder(destination)
    except Exception:
        logger.exception("Geocoding failed for %r", destination)
        return None

    if result is None or not result.is_set:
        logger.info("Geocoder found no usable location for %r", destination)
        return None
    return result
