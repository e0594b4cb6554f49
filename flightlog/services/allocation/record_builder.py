"""Assemble the stored logbook line from a quick entry."""

from __future__ import annotations

from flightlog.contracts.enums import FlightRole
from flightlog.contracts.flight import CalculatedFlight, QuickEntryInput
from flightlog.services.allocation.allocator import allocate
from flightlog.services.allocation.route_parser import parse_route


def attribute_pilots(
    role: FlightRole,
    pilot_name: str | None,
    default_instructor: str | None,
) -> tuple[str | None, str | None]:
    """Return ``(pilot_in_command, copilot_or_student)`` for a role.

    A student logs the instructor as PIC and themself in the second seat.
    Simulator sessions carry no crew names.
    """
    role = FlightRole(role)
    if role in (FlightRole.PIC, FlightRole.INSTRUCTOR):
        return pilot_name, None
    if role == FlightRole.STUDENT:
        return default_instructor, pilot_name
    return None, None


def build_calculated_flight(
    entry: QuickEntryInput,
    pilot_name: str | None = None,
    default_instructor: str | None = None,
) -> CalculatedFlight:
    """Allocate buckets, parse the route and attach crew names.

    ``flight_hours`` on the result is the entered ``flight_time``: the
    pilot's figure is authoritative for storage.
    """
    result = allocate(entry)
    departure, arrival = parse_route(entry.route)
    pilot_in_command, copilot_or_student = attribute_pilots(
        entry.role, pilot_name, default_instructor
    )

    return CalculatedFlight(
        **result.buckets.model_dump(),
        flight_date=entry.flight_date,
        aircraft_make_model=entry.aircraft_make_model,
        registration=entry.registration,
        pilot_in_command=pilot_in_command,
        copilot_or_student=copilot_or_student,
        departure_airport=departure,
        arrival_airport=arrival,
        remarks=entry.remarks,
        flight_hours=entry.flight_time,
    )
