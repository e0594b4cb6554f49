"""Repository for logbook flights."""

from __future__ import annotations

from flightlog.contracts.flight import LogbookFlight
from flightlog.contracts.profile import AutocompleteData
from flightlog.persistence.repositories.base import BaseRepository

DESCENDING = "DESCENDING"
DEFAULT_PAGE_SIZE = 10


class FlightRepository(BaseRepository[LogbookFlight]):
    def __init__(self):
        super().__init__(LogbookFlight, "flights")

    def _newest_first(self, user_id: str):
        return (
            self._collection_ref(user_id)
            .order_by("flight_date", direction=DESCENDING)
            .order_by("created_at", direction=DESCENDING)
        )

    async def list_recent(
        self, user_id: str, limit: int = DEFAULT_PAGE_SIZE, offset: int = 0
    ) -> list[LogbookFlight]:
        """One page of flights, most recent first (ties by creation time)."""
        query = self._newest_first(user_id).offset(offset).limit(limit)
        return [self._hydrate(doc) async for doc in query.stream()]

    async def get_last_flight(self, user_id: str) -> LogbookFlight | None:
        """Most recent flight by date, latest entry first on the same day."""
        async for doc in self._newest_first(user_id).limit(1).stream():
            return self._hydrate(doc)
        return None

    async def count(self, user_id: str) -> int:
        """Number of logbook lines, simulator sessions included."""
        results = await self._collection_ref(user_id).count(alias="total").get()
        return int(results[0][0].value)

    async def autocomplete_data(self, user_id: str) -> AutocompleteData:
        """Distinct aircraft and their registrations, in logbook order."""
        query = self._collection_ref(user_id).order_by("flight_date")
        registrations: dict[str, list[str]] = {}
        async for doc in query.stream():
            data = doc.to_dict()
            aircraft = data.get("aircraft_make_model")
            if not aircraft:
                continue
            seen = registrations.setdefault(aircraft, [])
            registration = data.get("registration")
            if registration and registration not in seen:
                seen.append(registration)
        return AutocompleteData(
            aircraft=list(registrations),
            registrations_by_aircraft=registrations,
        )
