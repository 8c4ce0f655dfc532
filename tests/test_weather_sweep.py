from dataclasses import replace
from datetime import date, datetime, timedelta

import pytest

from tripwise.modules.planning.itinerary_generator import ItineraryGenerator
from tripwise.modules.reoptimization.weather_adjustment import WeatherAdjustmentEngine
from tripwise.modules.reoptimization.weather_sweep import SweepTrip, WeatherSweep, is_upcoming
from tripwise.schemas.trip import WeatherCondition

from conftest import ScriptedRandom, fixed_weather

NOW = datetime(2026, 10, 19, 6, 0)


class FlakyEngine(WeatherAdjustmentEngine):
    """Always changes the weather, but blows up on one day number."""

    def __init__(self, bad_day: int) -> None:
        super().__init__(ScriptedRandom(0.0), change_probability=1.0, weather=fixed_weather(WeatherCondition.rainy))
        self.bad_day = bad_day

    def reevaluate(self, day_plan, destination_name):
        if day_plan.day_number == self.bad_day:
            raise RuntimeError("corrupt day record")
        return super().reevaluate(day_plan, destination_name)


def _trip(catalog, rng, trip_id, start, days=3):
    plans = ItineraryGenerator(catalog, rng, fixed_weather(WeatherCondition.sunny)).generate(
        "Testville", start, days, "cultural", "medium")
    return SweepTrip(trip_id=trip_id, destination="Testville", start_date=start, days=plans, user_id="u-" + trip_id)


def test_is_upcoming_window_is_inclusive():
    today = date(2026, 10, 19)
    assert is_upcoming(today, NOW, 7)
    assert is_upcoming(today + timedelta(days=7), NOW, 7)
    assert not is_upcoming(today + timedelta(days=8), NOW, 7)
    assert not is_upcoming(today - timedelta(days=1), NOW, 7)
    assert is_upcoming(datetime(2026, 10, 21, 23, 0), NOW, 7)


def test_only_upcoming_trips_are_checked(catalog, rng):
    soon = _trip(catalog, rng, "soon", date(2026, 10, 21))
    later = _trip(catalog, rng, "later", date(2026, 12, 1))
    engine = WeatherAdjustmentEngine(ScriptedRandom(0.0), change_probability=1.0,
                                     weather=fixed_weather(WeatherCondition.rainy))
    report = WeatherSweep(engine, lookahead_days=7).run([soon, later], now=NOW)

    assert report.checked_trips == 1
    assert report.checked_days == 3
    assert {u.trip_id for u in report.updates} == {"soon"}

    everything = WeatherSweep(engine, lookahead_days=7).run([soon, later], now=NOW, only_upcoming=False)
    assert everything.checked_trips == 2


def test_updates_carry_plan_and_notification(catalog, rng):
    trip = _trip(catalog, rng, "t1", date(2026, 10, 20), days=2)
    engine = WeatherAdjustmentEngine(ScriptedRandom(0.0), change_probability=1.0,
                                     weather=fixed_weather(WeatherCondition.rainy))
    report = WeatherSweep(engine).run([trip], now=NOW)

    assert [u.day_number for u in report.updates] == [1, 2]
    update = report.updates[0]
    assert update.plan.weather is WeatherCondition.rainy
    assert update.plan.weather_adjusted
    note = update.notification
    assert note.trip_id == "t1"
    assert note.user_id == "u-t1"
    assert note.day_number == 1
    assert not note.is_read
    assert note.created_at == NOW
    assert note.message.startswith("Weather update for your Testville trip on Day 1:")
    # stored plans are untouched; persisting the updates is the caller's job
    assert trip.days[0].weather is WeatherCondition.sunny


def test_quiet_sweep_produces_no_updates(catalog, rng):
    trip = _trip(catalog, rng, "t1", date(2026, 10, 20))
    engine = WeatherAdjustmentEngine(ScriptedRandom(0.99), change_probability=0.2)
    report = WeatherSweep(engine).run([trip], now=NOW)
    assert report.checked_days == 3
    assert report.updates == []
    assert report.errors == []


def test_one_bad_day_does_not_stop_the_sweep(catalog, rng):
    trip = _trip(catalog, rng, "t1", date(2026, 10, 20))
    report = WeatherSweep(FlakyEngine(bad_day=2)).run([trip], now=NOW)

    assert [u.day_number for u in report.updates] == [1, 3]
    assert len(report.errors) == 1
    assert report.errors[0].trip_id == "t1"
    assert report.errors[0].day_number == 2
    assert "corrupt day record" in report.errors[0].error


def test_one_bad_trip_does_not_stop_the_sweep(catalog, rng):
    broken = SweepTrip(trip_id="broken", destination="Testville", start_date=date(2026, 10, 20), days=None)
    good = _trip(catalog, rng, "good", date(2026, 10, 20))
    report = WeatherSweep(FlakyEngine(bad_day=99)).run([broken, good], now=NOW)

    assert report.checked_trips == 2
    assert len(report.errors) == 1
    assert report.errors[0].trip_id == "broken"
    assert report.errors[0].day_number is None
    assert {u.trip_id for u in report.updates} == {"good"}


def test_sweep_events_are_logged(catalog, rng, slog):
    trip = _trip(catalog, rng, "t1", date(2026, 10, 20))
    report = WeatherSweep(FlakyEngine(bad_day=2), structured_logger=slog).run([trip], now=NOW)

    assert slog.sessions() == [report.session_id]
    events = [r["event_type"] for r in slog.read(report.session_id)]
    assert events == [
        "WEATHER_CHECK", "WEATHER_ADJUSTED",
        "SWEEP_ITEM_ERROR",
        "WEATHER_CHECK", "WEATHER_ADJUSTED",
        "SWEEP_COMPLETE",
    ]
    adjusted = slog.read(report.session_id, "WEATHER_ADJUSTED")[0]["payload"]
    assert adjusted == {"trip_id": "t1", "day": 1, "from": "sunny", "to": "rainy", "swapped": True}
    complete = slog.read(report.session_id, "SWEEP_COMPLETE")[0]["payload"]
    assert complete == {"checked_trips": 1, "checked_days": 3, "updated_days": 2, "errors": 1}


def test_trip_without_start_date_is_isolated(catalog, rng, slog):
    undated = SweepTrip(trip_id="undated", destination="Testville", start_date=None, days=[])
    good = _trip(catalog, rng, "good", date(2026, 10, 20))
    report = WeatherSweep(FlakyEngine(bad_day=99), structured_logger=slog).run([undated, good], now=NOW)

    assert report.checked_trips == 1
    assert len(report.errors) == 1
    assert report.errors[0].trip_id == "undated"
    assert report.errors[0].day_number is None
    assert [u.day_number for u in report.updates] == [1, 2, 3]
    assert {u.trip_id for u in report.updates} == {"good"}
    events = slog.read(report.session_id)
    assert events[0]["event_type"] == "SWEEP_ITEM_ERROR"
    assert events[-1]["event_type"] == "SWEEP_COMPLETE"


def test_session_log_is_closed_when_trip_source_fails(catalog, rng, slog):
    def trips():
        yield _trip(catalog, rng, "t1", date(2026, 10, 20))
        raise ConnectionError("trip store went away")

    sweep = WeatherSweep(FlakyEngine(bad_day=99), structured_logger=slog)
    with pytest.raises(ConnectionError):
        sweep.run(trips(), now=NOW)

    session_id = slog.sessions()[0]
    assert session_id not in slog._handles
    assert [r["event_type"] for r in slog.read(session_id, "WEATHER_ADJUSTED")] == ["WEATHER_ADJUSTED"] * 3


def test_days_stored_with_plain_string_weather(catalog, rng, slog):
    trip = _trip(catalog, rng, "t1", date(2026, 10, 20))
    trip.days = [replace(day, weather="sunny") for day in trip.days]
    engine = WeatherAdjustmentEngine(ScriptedRandom(0.0), change_probability=1.0,
                                     weather=fixed_weather(WeatherCondition.rainy))
    report = WeatherSweep(engine, structured_logger=slog).run([trip], now=NOW)

    assert report.errors == []
    assert [u.day_number for u in report.updates] == [1, 2, 3]
    assert all(u.plan.weather is WeatherCondition.rainy for u in report.updates)
    adjusted = [r["payload"]["from"] for r in slog.read(report.session_id, "WEATHER_ADJUSTED")]
    assert adjusted == ["sunny", "sunny", "sunny"]
