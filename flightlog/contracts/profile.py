"""Pilot profile and the smart defaults that pre-fill the entry form.

``PilotProfile`` is stored at: ``/users/{user_id}/settings/profile``

``AutocompleteData`` and ``FlightDefaults`` are calculated API response
models, never stored.
"""

from pydantic import Field, field_validator

from flightlog.contracts.common import FirestoreModel
from flightlog.contracts.enums import FlightRole


class PilotProfile(FirestoreModel):
    """Who owns the logbook and where they usually fly from."""

    pilot_name: str = Field(..., min_length=1)
    home_base: str = Field(..., min_length=1, description="e.g. CZBB")
    default_instructor: str | None = None

    @field_validator("home_base")
    @classmethod
    def upper_home_base(cls, value: str) -> str:
        return value.strip().upper()


class AutocompleteData(FirestoreModel):
    """Aircraft and registrations seen in the logbook, first-seen order."""

    aircraft: list[str] = Field(default_factory=list)
    registrations_by_aircraft: dict[str, list[str]] = Field(default_factory=dict)


class FlightDefaults(FirestoreModel):
    """Pre-fill suggestions for a new quick entry."""

    # From the last flight
    aircraft: str | None = None
    registration: str | None = None
    route_prefix: str | None = Field(default=None, description="Last arrival + '-'")
    role: FlightRole | None = None

    # From the profile
    pilot_name: str | None = None
    home_base: str | None = None
    default_instructor: str | None = None
    has_profile: bool = False

    # Autocomplete
    aircraft_options: list[str] = Field(default_factory=list)
    registrations_by_aircraft: dict[str, list[str]] = Field(default_factory=dict)

    flight_count: int = Field(default=0, ge=0)
