"""Total flight hours from a bucket set."""

from __future__ import annotations

import math

from flightlog.contracts.buckets import PRIMARY_BUCKETS, TimeBuckets
from flightlog.contracts.common import round1


def primary_sum(buckets: TimeBuckets) -> float:
    """Unrounded sum of the twelve SE/ME primary buckets."""
    return math.fsum(getattr(buckets, name) or 0.0 for name in PRIMARY_BUCKETS)


def total_hours(buckets: TimeBuckets) -> float:
    """Total aircraft flight time, rounded half-up to one decimal.

    Only SE + ME primary time counts. Simulator time is tracked apart;
    XC, actual IMC, hood, instructor and dual received are qualifiers
    already contained in a primary bucket.
    """
    return round1(primary_sum(buckets))
