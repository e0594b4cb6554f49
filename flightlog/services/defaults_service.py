"""Smart defaults for the quick entry form."""

from __future__ import annotations

import asyncio
import logging

from flightlog.contracts.buckets import TimeBuckets
from flightlog.contracts.enums import FlightRole
from flightlog.contracts.profile import FlightDefaults
from flightlog.persistence.repositories.flight_repo import FlightRepository
from flightlog.persistence.repositories.profile_repo import ProfileRepository

logger = logging.getLogger(__name__)

# Checked in order; the first nonzero marker wins.
ROLE_MARKERS: tuple[tuple[str, FlightRole], ...] = (
    ("simulator", FlightRole.SIMULATOR),
    ("as_flight_instructor", FlightRole.INSTRUCTOR),
    ("dual_received", FlightRole.STUDENT),
)


def infer_role(buckets: TimeBuckets) -> FlightRole:
    """Guess the role a recorded flight was logged with.

    Roles are not stored, only their footprint in the buckets is.
    Flights without any marker were flown as PIC.
    """
    for bucket, role in ROLE_MARKERS:
        value = getattr(buckets, bucket)
        if value is not None and value > 0:
            return role
    return FlightRole.PIC


class DefaultsService:
    """Merges history, profile and autocomplete data into form defaults."""

    def __init__(self, flight_repo: FlightRepository, profile_repo: ProfileRepository):
        self._flight_repo = flight_repo
        self._profile_repo = profile_repo

    async def resolve(self, user_id: str) -> FlightDefaults:
        """Build ``FlightDefaults`` for a user.

        The four lookups are independent and read-only, so they run
        concurrently.
        """
        last_flight, autocomplete, profile, flight_count = await asyncio.gather(
            self._flight_repo.get_last_flight(user_id),
            self._flight_repo.autocomplete_data(user_id),
            self._profile_repo.get_profile(user_id),
            self._flight_repo.count(user_id),
        )

        home_base = profile.home_base if profile else None
        if last_flight is not None and last_flight.arrival_airport:
            route_prefix = f"{last_flight.arrival_airport}-"
        elif home_base:
            route_prefix = f"{home_base}-"
        else:
            route_prefix = None

        pilot_name = profile.pilot_name if profile else None

        defaults = FlightDefaults(
            aircraft=last_flight.aircraft_make_model if last_flight else None,
            registration=last_flight.registration if last_flight else None,
            route_prefix=route_prefix,
            role=infer_role(last_flight) if last_flight else None,
            pilot_name=pilot_name,
            home_base=home_base,
            default_instructor=profile.default_instructor if profile else None,
            has_profile=bool(pilot_name and home_base),
            aircraft_options=autocomplete.aircraft,
            registrations_by_aircraft=autocomplete.registrations_by_aircraft,
            flight_count=flight_count,
        )
        logger.debug(
            "Defaults for %s: %d flights, profile=%s", user_id, flight_count, defaults.has_profile
        )
        return defaults
