"""Bucket consistency checks.

Both checks are informational: they never raise and never mutate the
buckets. The caller decides whether a failed check blocks anything.
"""

from __future__ import annotations

import math

from flightlog.contracts.buckets import DUAL_BUCKETS, PIC_BUCKETS, XC_BUCKETS, TimeBuckets
from flightlog.contracts.result import SumCheck, XCSubsetCheck
from flightlog.services.allocation.totalizer import primary_sum, total_hours

# Hours
SUM_TOLERANCE = 0.01
XC_TOLERANCE = 0.01


def _sum(buckets: TimeBuckets, names: tuple[str, ...]) -> float:
    return math.fsum(getattr(buckets, name) or 0.0 for name in names)


def validate_sum(buckets: TimeBuckets, expected_time: float) -> SumCheck:
    """Check that primary time reconciles with the entered flight time.

    The gap is measured on the unrounded primary sum so that 2.02 h of
    buckets does not pass for 2.0 h just because it rounds there.
    """
    difference = abs(primary_sum(buckets) - expected_time)
    return SumCheck(
        is_valid=difference < SUM_TOLERANCE,
        calculated_total=total_hours(buckets),
        difference=difference,
    )


def validate_xc_subset(buckets: TimeBuckets) -> XCSubsetCheck:
    """Cross-country time cannot exceed PIC + dual time."""
    total_pic = _sum(buckets, PIC_BUCKETS)
    total_dual = _sum(buckets, DUAL_BUCKETS)
    total_xc = _sum(buckets, XC_BUCKETS)

    if total_xc > total_pic + total_dual + XC_TOLERANCE:
        return XCSubsetCheck(
            is_valid=False,
            message=(
                f"Cross-country time ({total_xc:g}) exceeds "
                f"total PIC+Dual time ({total_pic + total_dual:g})"
            ),
        )
    return XCSubsetCheck(is_valid=True)
