"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Depends

from flightlog.api.auth import UserClaims, verify_firebase_token
from flightlog.persistence.repositories.flight_repo import FlightRepository
from flightlog.persistence.repositories.profile_repo import ProfileRepository
from flightlog.services.defaults_service import DefaultsService


# ------------------------------------------------------------------
# Current user
# ------------------------------------------------------------------


def get_current_user(
    claims: UserClaims = Depends(verify_firebase_token),
) -> str:
    """Return the authenticated user ID."""
    return claims.uid


# ------------------------------------------------------------------
# Repositories (stateless, one instance per request)
# ------------------------------------------------------------------


def get_flight_repo() -> FlightRepository:
    return FlightRepository()


def get_profile_repo() -> ProfileRepository:
    return ProfileRepository()


# ------------------------------------------------------------------
# Services
# ------------------------------------------------------------------


def get_defaults_service(
    flight_repo: FlightRepository = Depends(get_flight_repo),
    profile_repo: ProfileRepository = Depends(get_profile_repo),
) -> DefaultsService:
    return DefaultsService(flight_repo, profile_repo)
