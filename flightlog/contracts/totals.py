"""Logbook grand totals: calculated API response, never stored."""

from pydantic import Field

from flightlog.contracts.common import FirestoreModel


class LogbookTotals(FirestoreModel):
    """Totals row of the logbook.

    ``total_hours`` is SE + ME time only: simulator time is tracked
    separately and qualifiers (XC, instrument, instructor, dual received)
    are subsets of primary time. The per-column breakdown mirrors the
    paper logbook so the row can be checked column by column.
    """

    # Counts of logbook lines
    total_flights: int = 0
    aircraft_flights: int = 0
    simulator_flights: int = 0

    # Primary hours
    total_hours: float = 0.0
    total_pic: float = 0.0
    total_dual: float = 0.0
    total_copilot: float = 0.0
    total_night: float = 0.0
    total_xc: float = 0.0
    total_instrument: float = Field(default=0.0, description="Actual IMC + hood, not simulator")
    total_simulator: float = 0.0

    # --- Single-engine ---
    se_day_dual: float = 0.0
    se_day_pic: float = 0.0
    se_day_copilot: float = 0.0
    se_night_dual: float = 0.0
    se_night_pic: float = 0.0
    se_night_copilot: float = 0.0
    se_day_total: float = 0.0
    se_night_total: float = 0.0
    se_total: float = 0.0

    # --- Multi-engine ---
    me_day_dual: float = 0.0
    me_day_pic: float = 0.0
    me_day_copilot: float = 0.0
    me_night_dual: float = 0.0
    me_night_pic: float = 0.0
    me_night_copilot: float = 0.0
    me_day_total: float = 0.0
    me_night_total: float = 0.0
    me_total: float = 0.0

    # --- Cross-country ---
    xc_day_dual: float = 0.0
    xc_day_pic: float = 0.0
    xc_day_copilot: float = 0.0
    xc_night_dual: float = 0.0
    xc_night_pic: float = 0.0
    xc_night_copilot: float = 0.0
    xc_day_total: float = 0.0
    xc_night_total: float = 0.0

    # --- Instrument ---
    actual_imc: float = 0.0
    hood: float = 0.0

    # --- Instructor / dual ---
    as_flight_instructor: float = 0.0
    dual_received: float = 0.0

    # Counts, not hours
    day_takeoffs_landings: int = 0
    night_takeoffs_landings: int = 0
    ifr_approaches: int = 0
    holding: int = 0
