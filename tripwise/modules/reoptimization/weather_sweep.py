"""
modules/reoptimization/weather_sweep.py
-----------------------------------------
One scheduled weather pass over many trips.

The caller decides *when* a sweep runs and persists what it returns; the
sweep decides *what happens*: every day of every upcoming trip is passed to
the WeatherAdjustmentEngine, and each change becomes an updated DayPlan plus
a Notification.

Failure isolation: an exception on one day (or one whole trip) is logged,
recorded in the report, and the sweep moves on.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from tripwise import config
from tripwise.modules.observability.logger import StructuredLogger
from tripwise.modules.reoptimization.weather_adjustment import WeatherAdjustmentEngine
from tripwise.schemas.itinerary import DayPlan, Notification

logger = logging.getLogger(__name__)


@dataclass
class SweepTrip:
    """The persisted view of one trip that a sweep needs."""
    trip_id: str
    destination: str
    start_date: date
    days: list[DayPlan] = field(default_factory=list)
    user_id: Optional[str] = None


@dataclass
class SweepUpdate:
    trip_id: str
    day_number: int
    plan: DayPlan
    notification: Notification


@dataclass
class SweepError:
    trip_id: str
    day_number: Optional[int]   # None when the whole trip failed
    error: str


@dataclass
class SweepReport:
    session_id: str = ""
    checked_trips: int = 0
    checked_days: int = 0
    updates: list[SweepUpdate] = field(default_factory=list)
    errors: list[SweepError] = field(default_factory=list)

    def summary(self) -> dict:
        return {
            "checked_trips": self.checked_trips,
            "checked_days":  self.checked_days,
            "updated_days":  len(self.updates),
            "errors":        len(self.errors),
        }


def is_upcoming(start: date | datetime, now: date | datetime, lookahead_days: int) -> bool:
    """True when *start* falls within [now, now + lookahead_days]."""
    if isinstance(start, datetime):
        start = start.date()
    if isinstance(now, datetime):
        now = now.date()
    return now <= start <= now + timedelta(days=lookahead_days)


class WeatherSweep:
    """Runs the adjustment engine across trips with per-item error boundaries."""

    def __init__(
        self,
        engine: Optional[WeatherAdjustmentEngine] = None,
        structured_logger: Optional[StructuredLogger] = None,
        lookahead_days: Optional[int] = None,
    ) -> None:
        self.engine = engine or WeatherAdjustmentEngine()
        self.slog = structured_logger
        self.lookahead_days = config.SWEEP_LOOKAHEAD_DAYS if lookahead_days is None else lookahead_days

    def run(
        self,
        trips: Iterable[SweepTrip],
        now: Optional[datetime] = None,
        only_upcoming: bool = True,
    ) -> SweepReport:
        now = now or datetime.now()
        session_id = f"weather_sweep_{now:%Y%m%dT%H%M%S}"
        report = SweepReport(session_id=session_id)

        try:
            for trip in trips:
                try:
                    if only_upcoming and not is_upcoming(trip.start_date, now, self.lookahead_days):
                        continue
                    report.checked_trips += 1
                    self._sweep_trip(trip, report, session_id, now)
                except Exception as exc:
                    logger.exception("Error processing trip %s", trip.trip_id)
                    report.errors.append(SweepError(trip.trip_id, None, repr(exc)))
                    self._log(session_id, "SWEEP_ITEM_ERROR", {"trip_id": trip.trip_id, "error": repr(exc)})

            logger.info(
                "Weather sweep completed. Checked %d upcoming trips (%d days, %d updated, %d errors).",
                report.checked_trips, report.checked_days, len(report.updates), len(report.errors),
            )
            self._log(session_id, "SWEEP_COMPLETE", report.summary())
        finally:
            if self.slog is not None:
                self.slog.close(session_id)
        return report

    # ── internals ─────────────────────────────────────────────────────────

    def _sweep_trip(self, trip: SweepTrip, report: SweepReport, session_id: str, now: datetime) -> None:
        for day in trip.days:
            report.checked_days += 1
            try:
                update = self._sweep_day(trip, day, session_id, now)
            except Exception as exc:
                logger.exception("Error processing day %s of trip %s", day.day_number, trip.trip_id)
                report.errors.append(SweepError(trip.trip_id, day.day_number, repr(exc)))
                self._log(session_id, "SWEEP_ITEM_ERROR", {
                    "trip_id": trip.trip_id, "day": day.day_number, "error": repr(exc),
                })
                continue
            if update is not None:
                report.updates.append(update)

    def _sweep_day(self, trip: SweepTrip, day: DayPlan, session_id: str, now: datetime) -> Optional[SweepUpdate]:
        """One day's check; the update is only returned once every step succeeded."""
        result = self.engine.reevaluate(day, trip.destination)
        self._log(session_id, "WEATHER_CHECK", {
            "trip_id": trip.trip_id, "day": day.day_number, "changed": result.changed,
        })
        if not result.changed:
            return None

        # stored days may carry plain strings; previous_weather is already parsed
        self._log(session_id, "WEATHER_ADJUSTED", {
            "trip_id": trip.trip_id,
            "day": day.day_number,
            "from": result.previous_weather.value,
            "to": result.updated_plan.weather.value,
            "swapped": result.swapped,
        })
        notification = Notification(
            trip_id=trip.trip_id,
            user_id=trip.user_id,
            day_number=day.day_number,
            message=result.notification_message or "",
            created_at=now,
        )
        return SweepUpdate(trip.trip_id, day.day_number, result.updated_plan, notification)

    def _log(self, session_id: str, event_type: str, payload: dict) -> None:
        if self.slog is not None:
            self.slog.log(session_id, event_type, payload)
