"""Pilot profile endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from flightlog.api.deps import get_current_user, get_profile_repo
from flightlog.contracts.profile import PilotProfile
from flightlog.persistence.repositories.profile_repo import ProfileRepository

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def get_profile(
    user_id: str = Depends(get_current_user),
    repo: ProfileRepository = Depends(get_profile_repo),
) -> dict:
    profile = await repo.get_profile(user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Pilot profile not set up")
    return profile.to_firestore()


@router.put("")
async def save_profile(
    profile: PilotProfile,
    user_id: str = Depends(get_current_user),
    repo: ProfileRepository = Depends(get_profile_repo),
) -> dict:
    await repo.save_profile(user_id, profile)
    return profile.to_firestore()
