"""Flight endpoints: allocation preview, smart defaults, totals and CRUD."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query

from flightlog.api.deps import (
    get_current_user,
    get_defaults_service,
    get_flight_repo,
    get_profile_repo,
)
from flightlog.contracts.flight import (
    CalculatedFlight,
    CalculationRequest,
    LogbookFlight,
    QuickEntryInput,
)
from flightlog.persistence.errors import DocumentNotFoundError
from flightlog.persistence.repositories.flight_repo import DEFAULT_PAGE_SIZE, FlightRepository
from flightlog.persistence.repositories.profile_repo import ProfileRepository
from flightlog.services.allocation.allocator import allocate
from flightlog.services.allocation.record_builder import build_calculated_flight
from flightlog.services.allocation.validator import validate_sum, validate_xc_subset
from flightlog.services.defaults_service import DefaultsService
from flightlog.services.totals import aggregate_totals

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flights", tags=["flights"])


async def _build(
    user_id: str, entry: QuickEntryInput, profile_repo: ProfileRepository
) -> CalculatedFlight:
    """Build the logbook line with crew names from the pilot profile."""
    profile = await profile_repo.get_profile(user_id)
    calculated = build_calculated_flight(
        entry,
        pilot_name=profile.pilot_name if profile else None,
        default_instructor=profile.default_instructor if profile else None,
    )

    # Informational only: overrides may legitimately move time around.
    sum_check = validate_sum(calculated, entry.flight_time)
    if not sum_check.is_valid:
        logger.warning(
            "Buckets total %.1f h but %.1f h entered (user %s)",
            sum_check.calculated_total,
            entry.flight_time,
            user_id,
        )
    xc_check = validate_xc_subset(calculated)
    if not xc_check.is_valid:
        logger.warning("%s (user %s)", xc_check.message, user_id)

    return calculated


# ------------------------------------------------------------------
# Calculated views (never persisted)
# ------------------------------------------------------------------


@router.post("/calculate")
async def calculate(
    request: CalculationRequest,
    user_id: str = Depends(get_current_user),
) -> dict:
    """Preview the bucket allocation for a quick entry."""
    return allocate(request).model_dump(mode="json")


@router.get("/defaults")
async def get_defaults(
    user_id: str = Depends(get_current_user),
    service: DefaultsService = Depends(get_defaults_service),
) -> dict:
    defaults = await service.resolve(user_id)
    return defaults.model_dump(mode="json")


@router.get("/totals")
async def get_totals(
    user_id: str = Depends(get_current_user),
    repo: FlightRepository = Depends(get_flight_repo),
) -> dict:
    flights = await repo.list_all(user_id)
    return aggregate_totals(flights).model_dump(mode="json")


# ------------------------------------------------------------------
# CRUD
# ------------------------------------------------------------------


@router.get("")
async def list_flights(
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1),
    offset: int = Query(0, ge=0),
    user_id: str = Depends(get_current_user),
    repo: FlightRepository = Depends(get_flight_repo),
) -> list[dict]:
    """Page through the logbook, most recent flight first."""
    items = await repo.list_recent(user_id, limit=limit, offset=offset)
    return [f.to_firestore() for f in items]


@router.post("", status_code=201)
async def create_flight(
    entry: QuickEntryInput,
    user_id: str = Depends(get_current_user),
    repo: FlightRepository = Depends(get_flight_repo),
    profile_repo: ProfileRepository = Depends(get_profile_repo),
) -> dict:
    calculated = await _build(user_id, entry, profile_repo)
    flight = LogbookFlight(**calculated.model_dump())
    doc_id = await repo.create(user_id, flight)
    logger.info(
        "Logged %.1f h on %s %s for %s (%s)",
        flight.flight_hours,
        flight.aircraft_make_model,
        flight.registration,
        user_id,
        doc_id,
    )
    data = flight.to_firestore()
    data["id"] = doc_id
    return data


@router.get("/{flight_id}")
async def get_flight(
    flight_id: str,
    user_id: str = Depends(get_current_user),
    repo: FlightRepository = Depends(get_flight_repo),
) -> dict:
    try:
        item = await repo.require(user_id, flight_id)
    except DocumentNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Flight not found") from exc
    data = item.to_firestore()
    data["id"] = flight_id
    return data


@router.put("/{flight_id}")
async def update_flight(
    flight_id: str,
    entry: QuickEntryInput,
    user_id: str = Depends(get_current_user),
    repo: FlightRepository = Depends(get_flight_repo),
    profile_repo: ProfileRepository = Depends(get_profile_repo),
) -> dict:
    try:
        existing = await repo.require(user_id, flight_id)
        calculated = await _build(user_id, entry, profile_repo)
        flight = LogbookFlight(
            **calculated.model_dump(),
            created_at=existing.created_at,
            updated_at=datetime.now(tz=timezone.utc),
        )
        await repo.replace(user_id, flight_id, flight)
    except DocumentNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Flight not found") from exc
    logger.info("Updated flight %s for %s", flight_id, user_id)

    data = flight.to_firestore()
    data["id"] = flight_id
    return data


@router.delete("/{flight_id}", status_code=204)
async def delete_flight(
    flight_id: str,
    user_id: str = Depends(get_current_user),
    repo: FlightRepository = Depends(get_flight_repo),
) -> None:
    try:
        await repo.delete(user_id, flight_id)
    except DocumentNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Flight not found") from exc
    logger.info("Deleted flight %s for %s", flight_id, user_id)
