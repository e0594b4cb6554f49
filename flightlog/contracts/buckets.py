"""TimeBuckets: the 27 categorized slots of a logbook line.

Layout follows the paper logbook columns:

- **Primary** (hours): engine class (SE/ME) x day/night x seat (dual/PIC/copilot).
  Only these twelve count toward total flight time.
- **Cross-country** (hours): the same day/night x seat grid, a qualifier
  that copies primary time and is never added to the total.
- **Counts**: takeoffs/landings, IFR approaches, holding procedures.
- **Instrument** (hours): actual IMC, hood, simulator.
- **Role credit** (hours): time as flight instructor, dual received.

``None`` means "not applicable" and is distinct from ``0``.
"""

from pydantic import NonNegativeFloat, NonNegativeInt

from flightlog.contracts.common import FirestoreModel


class TimeBuckets(FirestoreModel):
    """Fixed-shape record of every bucket; all members optional."""

    # --- Single-engine ---
    se_day_dual: NonNegativeFloat | None = None
    se_day_pic: NonNegativeFloat | None = None
    se_day_copilot: NonNegativeFloat | None = None
    se_night_dual: NonNegativeFloat | None = None
    se_night_pic: NonNegativeFloat | None = None
    se_night_copilot: NonNegativeFloat | None = None

    # --- Multi-engine ---
    me_day_dual: NonNegativeFloat | None = None
    me_day_pic: NonNegativeFloat | None = None
    me_day_copilot: NonNegativeFloat | None = None
    me_night_dual: NonNegativeFloat | None = None
    me_night_pic: NonNegativeFloat | None = None
    me_night_copilot: NonNegativeFloat | None = None

    # --- Cross-country (qualifier, subset of primary time) ---
    xc_day_dual: NonNegativeFloat | None = None
    xc_day_pic: NonNegativeFloat | None = None
    xc_day_copilot: NonNegativeFloat | None = None
    xc_night_dual: NonNegativeFloat | None = None
    xc_night_pic: NonNegativeFloat | None = None
    xc_night_copilot: NonNegativeFloat | None = None

    # --- Counts ---
    day_takeoffs_landings: NonNegativeInt | None = None
    night_takeoffs_landings: NonNegativeInt | None = None

    # --- Instrument ---
    actual_imc: NonNegativeFloat | None = None
    hood: NonNegativeFloat | None = None
    simulator: NonNegativeFloat | None = None
    ifr_approaches: NonNegativeInt | None = None
    holding: NonNegativeInt | None = None

    # --- Instructor / dual ---
    as_flight_instructor: NonNegativeFloat | None = None
    dual_received: NonNegativeFloat | None = None


BUCKET_NAMES: tuple[str, ...] = tuple(TimeBuckets.model_fields)

PIC_BUCKETS = ("se_day_pic", "se_night_pic", "me_day_pic", "me_night_pic")
DUAL_BUCKETS = ("se_day_dual", "se_night_dual", "me_day_dual", "me_night_dual")
COPILOT_BUCKETS = (
    "se_day_copilot",
    "se_night_copilot",
    "me_day_copilot",
    "me_night_copilot",
)

SE_BUCKETS = (
    "se_day_dual",
    "se_day_pic",
    "se_day_copilot",
    "se_night_dual",
    "se_night_pic",
    "se_night_copilot",
)
ME_BUCKETS = (
    "me_day_dual",
    "me_day_pic",
    "me_day_copilot",
    "me_night_dual",
    "me_night_pic",
    "me_night_copilot",
)

# The only buckets that make up total flight time
PRIMARY_BUCKETS = SE_BUCKETS + ME_BUCKETS

NIGHT_BUCKETS = tuple(name for name in PRIMARY_BUCKETS if "_night_" in name)

XC_BUCKETS = (
    "xc_day_dual",
    "xc_day_pic",
    "xc_day_copilot",
    "xc_night_dual",
    "xc_night_pic",
    "xc_night_copilot",
)

COUNT_BUCKETS = (
    "day_takeoffs_landings",
    "night_takeoffs_landings",
    "ifr_approaches",
    "holding",
)
