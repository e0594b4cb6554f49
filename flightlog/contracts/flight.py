"""Quick entry input and the calculated logbook line it expands into.

Stored at: ``/users/{user_id}/flights/{flight_id}``
"""

from datetime import date, datetime, timezone

from pydantic import ConfigDict, Field, field_validator

from flightlog.contracts.buckets import BUCKET_NAMES, COUNT_BUCKETS, TimeBuckets
from flightlog.contracts.common import FirestoreModel
from flightlog.contracts.enums import FlightRole, FlightTag


class CalculationRequest(FirestoreModel):
    """Everything the bucket allocator needs.

    Accepted as-is by the preview endpoint, which has no date or
    registration yet.
    """

    # Keep enum members: tags and roles are used as lookup keys.
    model_config = ConfigDict(use_enum_values=False)

    aircraft_make_model: str = Field(..., min_length=1, description="e.g. C172, DA42, Redbird FMX")
    role: FlightRole
    flight_time: float = Field(..., gt=0, description="Decimal hours, e.g. 1.5")
    tags: set[FlightTag] = Field(default_factory=set)
    overrides: dict[str, float | None] | None = Field(
        default=None,
        description="Advanced mode: bucket name -> value, replaces the computed value",
    )

    @field_validator("overrides")
    @classmethod
    def counts_are_whole(
        cls, value: dict[str, float | None] | None
    ) -> dict[str, float | None] | None:
        if not value:
            return value
        for key, amount in value.items():
            if amount is None or key not in BUCKET_NAMES:
                continue
            if amount < 0:
                raise ValueError(f"override {key} must not be negative")
            if key in COUNT_BUCKETS and not float(amount).is_integer():
                raise ValueError(f"override {key} is a count and must be a whole number")
        return value


class QuickEntryInput(CalculationRequest):
    """The quick entry form: six required fields and a few optional ones."""

    flight_date: date
    registration: str = Field(..., min_length=1, description="e.g. C-GABC")
    route: str | None = Field(default=None, description="Free text, e.g. CZBB-CYCW-CZBB")
    remarks: str | None = None


class CalculationResult(FirestoreModel):
    """Preview of an allocation. Warnings are advisory, never blocking."""

    buckets: TimeBuckets
    flight_hours: float
    warnings: list[str] = Field(default_factory=list)


class CalculatedFlight(TimeBuckets):
    """A fully calculated logbook line, ready for the record store.

    ``flight_hours`` is the time the pilot entered, not the recomputed
    bucket total; the two agree within validator tolerance unless
    overrides moved time around.
    """

    flight_date: date
    aircraft_make_model: str
    registration: str
    pilot_in_command: str | None = None
    copilot_or_student: str | None = None
    departure_airport: str | None = None
    arrival_airport: str | None = None
    remarks: str | None = None
    flight_hours: float = Field(..., ge=0)


class LogbookFlight(CalculatedFlight):
    """Persisted logbook line."""

    id: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
    updated_at: datetime | None = None
