"""Bucket allocation: expands a quick entry into the full logbook line.

Role and aircraft type select the "home" cell of the logbook; tags only
annotate it (cross-country, instrument, landings) or redirect day to
night. Rules run in a fixed order:

1. primary allocation (``PRIMARY_ALLOCATION`` table)
2. cross-country qualifier
3. instrument qualifier
4. default takeoffs/landings
5. manual overrides (whitelisted bucket names only)
6. totalizing
"""

from __future__ import annotations

import logging
from typing import Any

from flightlog.contracts.buckets import BUCKET_NAMES, TimeBuckets
from flightlog.contracts.enums import EngineType, FlightRole, FlightTag
from flightlog.contracts.flight import CalculationRequest, CalculationResult
from flightlog.services.allocation.classifier import classify
from flightlog.services.allocation.totalizer import total_hours

logger = logging.getLogger(__name__)

XC_WARNING = "XC time duplicated as qualifier (not additive to total)"
IFR_WARNING = "IFR tag allocated full time to Actual IMC. Use Advanced mode for partial IMC."
OVERRIDE_WARNING = "Manual overrides applied - calculation may not follow standard rules"

CIRCUIT_LANDINGS = 4
DEFAULT_LANDINGS = 1

_R = FlightRole
_E = EngineType

# (role, engine type, night) -> buckets that receive the full flight time
PRIMARY_ALLOCATION: dict[tuple[FlightRole, EngineType, bool], tuple[str, ...]] = {
    # Student: dual time, credited as dual received
    (_R.STUDENT, _E.SE, False): ("se_day_dual", "dual_received"),
    (_R.STUDENT, _E.SE, True): ("se_night_dual", "dual_received"),
    (_R.STUDENT, _E.ME, False): ("me_day_dual", "dual_received"),
    (_R.STUDENT, _E.ME, True): ("me_night_dual", "dual_received"),
    (_R.STUDENT, _E.SIM, False): ("simulator",),
    (_R.STUDENT, _E.SIM, True): ("simulator",),
    # PIC
    (_R.PIC, _E.SE, False): ("se_day_pic",),
    (_R.PIC, _E.SE, True): ("se_night_pic",),
    (_R.PIC, _E.ME, False): ("me_day_pic",),
    (_R.PIC, _E.ME, True): ("me_night_pic",),
    (_R.PIC, _E.SIM, False): ("simulator",),
    (_R.PIC, _E.SIM, True): ("simulator",),
    # Instructor: PIC time, credited as instructing
    (_R.INSTRUCTOR, _E.SE, False): ("se_day_pic", "as_flight_instructor"),
    (_R.INSTRUCTOR, _E.SE, True): ("se_night_pic", "as_flight_instructor"),
    (_R.INSTRUCTOR, _E.ME, False): ("me_day_pic", "as_flight_instructor"),
    (_R.INSTRUCTOR, _E.ME, True): ("me_night_pic", "as_flight_instructor"),
    (_R.INSTRUCTOR, _E.SIM, False): ("simulator",),
    (_R.INSTRUCTOR, _E.SIM, True): ("simulator",),
    # Simulator session, whatever the device is called
    (_R.SIMULATOR, _E.SE, False): ("simulator",),
    (_R.SIMULATOR, _E.SE, True): ("simulator",),
    (_R.SIMULATOR, _E.ME, False): ("simulator",),
    (_R.SIMULATOR, _E.ME, True): ("simulator",),
    (_R.SIMULATOR, _E.SIM, False): ("simulator",),
    (_R.SIMULATOR, _E.SIM, True): ("simulator",),
}

# (role, night) -> cross-country bucket mirroring the primary seat
XC_ALLOCATION: dict[tuple[FlightRole, bool], str] = {
    (_R.STUDENT, False): "xc_day_dual",
    (_R.STUDENT, True): "xc_night_dual",
    (_R.PIC, False): "xc_day_pic",
    (_R.PIC, True): "xc_night_pic",
    (_R.INSTRUCTOR, False): "xc_day_pic",
    (_R.INSTRUCTOR, True): "xc_night_pic",
    (_R.SIMULATOR, False): "xc_day_pic",
    (_R.SIMULATOR, True): "xc_night_pic",
}

LANDINGS_BUCKET: dict[bool, str] = {
    False: "day_takeoffs_landings",
    True: "night_takeoffs_landings",
}


def apply_overrides(
    values: dict[str, Any], overrides: dict[str, float | None] | None
) -> list[str]:
    """Merge-patch known bucket names into *values*; return the keys applied.

    Unknown keys are ignored. A ``None`` value clears the bucket.

    The caller only flags a calculation as overridden when this returns
    something: an empty mapping, or one holding nothing but unknown keys,
    leaves the standard allocation untouched and raises no warning. Merely
    sending an ``overrides`` object does not mark the result as overridden.
    """
    if not overrides:
        return []
    applied = [key for key in overrides if key in BUCKET_NAMES]
    for key in applied:
        values[key] = overrides[key]
    return applied


def allocate(request: CalculationRequest) -> CalculationResult:
    """Expand a quick entry into every time bucket.

    Deterministic: identical input gives identical buckets and warnings.
    Never raises for business-rule outcomes.
    """
    role = FlightRole(request.role)
    tags = {FlightTag(tag) for tag in request.tags}
    engine_type = classify(request.aircraft_make_model)
    is_night = FlightTag.NIGHT in tags
    flight_time = request.flight_time

    values: dict[str, Any] = {}
    warnings: list[str] = []

    # 1. Primary allocation
    for name in PRIMARY_ALLOCATION[(role, engine_type, is_night)]:
        values[name] = flight_time

    # 2-4 apply to real aircraft only
    if engine_type != EngineType.SIM:
        if FlightTag.XC in tags:
            values[XC_ALLOCATION[(role, is_night)]] = flight_time
            warnings.append(XC_WARNING)

        if FlightTag.IFR in tags:
            values["actual_imc"] = flight_time
            warnings.append(IFR_WARNING)

        landings = CIRCUIT_LANDINGS if FlightTag.CIRCUITS in tags else DEFAULT_LANDINGS
        values[LANDINGS_BUCKET[is_night]] = landings

    # 5. Overrides
    applied = apply_overrides(values, request.overrides)
    if applied:
        warnings.append(OVERRIDE_WARNING)

    buckets = TimeBuckets.model_validate(values)

    # 6. Totalizing
    flight_hours = total_hours(buckets)

    logger.debug(
        "Allocated %.1f h %s/%s night=%s -> %s (overrides: %s)",
        flight_time,
        role.value,
        engine_type.value,
        is_night,
        sorted(values),
        applied or "none",
    )

    return CalculationResult(buckets=buckets, flight_hours=flight_hours, warnings=warnings)
