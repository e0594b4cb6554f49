"""Repository for the pilot profile (one document per user)."""

from __future__ import annotations

from flightlog.contracts.profile import PilotProfile
from flightlog.persistence.repositories.base import BaseRepository

PROFILE_DOC_ID = "profile"


class ProfileRepository(BaseRepository[PilotProfile]):
    def __init__(self):
        super().__init__(PilotProfile, "settings")

    async def get_profile(self, user_id: str) -> PilotProfile | None:
        doc = await self._collection_ref(user_id).document(PROFILE_DOC_ID).get()
        if not doc.exists:
            return None
        return PilotProfile.from_firestore(doc.to_dict())

    async def save_profile(self, user_id: str, profile: PilotProfile) -> None:
        """Create or fully replace the profile."""
        await self._collection_ref(user_id).document(PROFILE_DOC_ID).set(
            profile.to_firestore()
        )
