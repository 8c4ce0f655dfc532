"""
config.py
---------
Central configuration for the TripWise itinerary core.
Every knob is read from the environment (optionally seeded from a .env file)
and can also be overridden per-instance by passing it to the component.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (if it exists).  Won't override vars already
# set in the shell.
_env_path = Path(__file__).resolve().parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path, override=False)

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
# JSONL sweep logs land here, one file per session id
LOGS_DIR: Path = Path(os.getenv("LOGS_DIR", str(Path(__file__).resolve().parent.parent / "logs")))

# ── Weather re-evaluation ─────────────────────────────────────────────────────
# Chance that a scheduled check finds the forecast changed since the last one.
WEATHER_CHANGE_PROBABILITY: float = float(os.getenv("WEATHER_CHANGE_PROBABILITY", "0.2"))
# Only trips starting within this many days are swept.
SWEEP_LOOKAHEAD_DAYS: int = int(os.getenv("SWEEP_LOOKAHEAD_DAYS", "7"))

# ── Directions heuristics (km/h, minutes, km) ────────────────────────────────
WALKING_SPEED_KMH: float       = float(os.getenv("WALKING_SPEED_KMH",       "5"))
TRANSIT_SPEED_SHORT_KMH: float = float(os.getenv("TRANSIT_SPEED_SHORT_KMH", "15"))
TRANSIT_SPEED_LONG_KMH: float  = float(os.getenv("TRANSIT_SPEED_LONG_KMH",  "20"))
TRANSIT_SHORT_TRIP_KM: float   = float(os.getenv("TRANSIT_SHORT_TRIP_KM",   "3"))
TRANSIT_WAIT_MINUTES: float    = float(os.getenv("TRANSIT_WAIT_MINUTES",    "10"))
TAXI_SPEED_SHORT_KMH: float    = float(os.getenv("TAXI_SPEED_SHORT_KMH",    "20"))
TAXI_SPEED_LONG_KMH: float     = float(os.getenv("TAXI_SPEED_LONG_KMH",     "35"))
TAXI_SHORT_TRIP_KM: float      = float(os.getenv("TAXI_SHORT_TRIP_KM",      "5"))
TAXI_PICKUP_MINUTES: float     = float(os.getenv("TAXI_PICKUP_MINUTES",     "5"))

# ── Itinerary generation ──────────────────────────────────────────────────────
# Jitter (degrees) applied around the destination centre when a POI has no
# coordinates of its own.
ACTIVITY_JITTER_DEG: float = float(os.getenv("ACTIVITY_JITTER_DEG", "0.05"))
