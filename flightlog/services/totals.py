"""Logbook totals aggregation.

Total time is SE + ME only. A line with no aircraft time but some
simulator time counts as a simulator session, everything else as an
aircraft flight.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from flightlog.contracts.buckets import (
    COPILOT_BUCKETS,
    DUAL_BUCKETS,
    ME_BUCKETS,
    NIGHT_BUCKETS,
    PIC_BUCKETS,
    PRIMARY_BUCKETS,
    SE_BUCKETS,
    XC_BUCKETS,
    TimeBuckets,
)
from flightlog.contracts.common import round1
from flightlog.contracts.totals import LogbookTotals


def _subtotal(prefix: str, period: str) -> tuple[str, ...]:
    return tuple(f"{prefix}_{period}_{seat}" for seat in ("dual", "pic", "copilot"))


_HOUR_GROUPS: dict[str, tuple[str, ...]] = {
    "total_hours": PRIMARY_BUCKETS,
    "total_pic": PIC_BUCKETS,
    "total_dual": DUAL_BUCKETS,
    "total_copilot": COPILOT_BUCKETS,
    "total_night": NIGHT_BUCKETS,
    "total_xc": XC_BUCKETS,
    "total_instrument": ("actual_imc", "hood"),
    "total_simulator": ("simulator",),
    "se_day_total": _subtotal("se", "day"),
    "se_night_total": _subtotal("se", "night"),
    "se_total": SE_BUCKETS,
    "me_day_total": _subtotal("me", "day"),
    "me_night_total": _subtotal("me", "night"),
    "me_total": ME_BUCKETS,
    "xc_day_total": _subtotal("xc", "day"),
    "xc_night_total": _subtotal("xc", "night"),
}

# Columns carried over one for one
_HOUR_GROUPS.update(
    (name, (name,))
    for name in SE_BUCKETS
    + ME_BUCKETS
    + XC_BUCKETS
    + ("actual_imc", "hood", "as_flight_instructor", "dual_received")
)

_COUNT_FIELDS = (
    "day_takeoffs_landings",
    "night_takeoffs_landings",
    "ifr_approaches",
    "holding",
)


def _sum(flight: TimeBuckets, names: Iterable[str]) -> float:
    return math.fsum(getattr(flight, name) or 0.0 for name in names)


def se_time(flight: TimeBuckets) -> float:
    return _sum(flight, SE_BUCKETS)


def me_time(flight: TimeBuckets) -> float:
    return _sum(flight, ME_BUCKETS)


def is_simulator_only(flight: TimeBuckets) -> bool:
    """No aircraft time, positive simulator time."""
    return se_time(flight) + me_time(flight) == 0 and (flight.simulator or 0) > 0


def aggregate_totals(flights: Iterable[TimeBuckets]) -> LogbookTotals:
    """Grand totals across logbook lines."""
    flights = list(flights)
    hours = {
        field: round1(math.fsum(_sum(f, names) for f in flights))
        for field, names in _HOUR_GROUPS.items()
    }
    counts = {
        field: sum(getattr(f, field) or 0 for f in flights)
        for field in _COUNT_FIELDS
    }
    simulator_flights = sum(1 for f in flights if is_simulator_only(f))

    return LogbookTotals(
        total_flights=len(flights),
        aircraft_flights=len(flights) - simulator_flights,
        simulator_flights=simulator_flights,
        **hours,
        **counts,
    )
