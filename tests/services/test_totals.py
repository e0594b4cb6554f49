"""Tests for logbook totals aggregation."""

from __future__ import annotations

from flightlog.contracts.buckets import TimeBuckets
from flightlog.services.totals import aggregate_totals, is_simulator_only, me_time, se_time


class TestHelpers:
    def test_se_and_me_time(self):
        flight = TimeBuckets(se_day_pic=1.0, se_night_dual=0.5, me_day_copilot=2.0)
        assert se_time(flight) == 1.5
        assert me_time(flight) == 2.0

    def test_simulator_only(self):
        assert is_simulator_only(TimeBuckets(simulator=1.0))
        assert not is_simulator_only(TimeBuckets(simulator=1.0, se_day_pic=0.5))
        assert not is_simulator_only(TimeBuckets())


class TestAggregateTotals:
    def test_empty_logbook(self):
        totals = aggregate_totals([])
        assert totals.total_flights == 0
        assert totals.total_hours == 0

    def test_mixed_logbook(self):
        flights = [
            TimeBuckets(se_day_pic=1.2, xc_day_pic=1.2, day_takeoffs_landings=1),
            TimeBuckets(me_night_dual=1.5, dual_received=1.5, actual_imc=0.5, night_takeoffs_landings=4),
            TimeBuckets(se_day_pic=0.9, as_flight_instructor=0.9, hood=0.3, ifr_approaches=2),
            TimeBuckets(simulator=1.0),
        ]
        totals = aggregate_totals(flights)
        assert totals.total_flights == 4
        assert totals.aircraft_flights == 3
        assert totals.simulator_flights == 1
        assert totals.total_hours == 3.6
        assert totals.total_pic == 2.1
        assert totals.total_dual == 1.5
        assert totals.total_copilot == 0
        assert totals.total_night == 1.5
        assert totals.total_xc == 1.2
        assert totals.total_instrument == 0.8
        assert totals.total_simulator == 1.0
        assert totals.as_flight_instructor == 0.9
        assert totals.dual_received == 1.5
        assert totals.day_takeoffs_landings == 1
        assert totals.night_takeoffs_landings == 4
        assert totals.ifr_approaches == 2
        assert totals.holding == 0

    def test_accepts_generator(self):
        totals = aggregate_totals(TimeBuckets(se_day_pic=0.1) for _ in range(3))
        assert totals.total_hours == 0.3
        assert totals.total_flights == 3

    def test_logbook_row_breakdown(self):
        flights = [
            TimeBuckets(se_day_dual=1.0, se_day_pic=0.5, xc_day_dual=1.0),
            TimeBuckets(se_night_pic=1.2, se_night_copilot=0.3, xc_night_pic=1.2),
            TimeBuckets(me_day_pic=2.0, me_night_dual=0.7, me_night_copilot=0.4),
            TimeBuckets(actual_imc=0.6, hood=0.2, simulator=1.5),
        ]
        totals = aggregate_totals(flights)

        assert totals.se_day_dual == 1.0
        assert totals.se_day_pic == 0.5
        assert totals.se_night_copilot == 0.3
        assert totals.se_day_total == 1.5
        assert totals.se_night_total == 1.5
        assert totals.se_total == 3.0

        assert totals.me_day_pic == 2.0
        assert totals.me_night_dual == 0.7
        assert totals.me_day_total == 2.0
        assert totals.me_night_total == 1.1
        assert totals.me_total == 3.1

        assert totals.xc_day_dual == 1.0
        assert totals.xc_night_pic == 1.2
        assert totals.xc_day_total == 1.0
        assert totals.xc_night_total == 1.2

        assert totals.actual_imc == 0.6
        assert totals.hood == 0.2
        assert totals.total_hours == 6.1

    def test_breakdown_rounded(self):
        totals = aggregate_totals(TimeBuckets(me_day_copilot=0.1) for _ in range(3))
        assert totals.me_day_copilot == 0.3
        assert totals.me_day_total == 0.3
