"""FlightLog data contracts: Pydantic v2 models for the quick-entry logbook.

Data authority
--------------

**Firestore** (source of truth for user-owned data):
- ``LogbookFlight``: ``/users/{uid}/flights/{id}``
- ``PilotProfile``: ``/users/{uid}/settings/profile``

Calculated (never persisted)
----------------------------
- ``CalculationResult``: allocation preview (buckets, total, warnings)
- ``FlightDefaults`` / ``AutocompleteData``: entry form pre-fill
- ``SumCheck`` / ``XCSubsetCheck``: bucket consistency results
- ``LogbookTotals``: grand totals across a logbook

Transient input
---------------
- ``CalculationRequest`` / ``QuickEntryInput``: one per form submission
"""

from flightlog.contracts.enums import EngineType, FlightRole, FlightTag
from flightlog.contracts.common import FirestoreModel, round1
from flightlog.contracts.buckets import (
    BUCKET_NAMES,
    COPILOT_BUCKETS,
    COUNT_BUCKETS,
    DUAL_BUCKETS,
    ME_BUCKETS,
    NIGHT_BUCKETS,
    PIC_BUCKETS,
    PRIMARY_BUCKETS,
    SE_BUCKETS,
    XC_BUCKETS,
    TimeBuckets,
)
from flightlog.contracts.flight import (
    CalculatedFlight,
    CalculationRequest,
    CalculationResult,
    LogbookFlight,
    QuickEntryInput,
)
from flightlog.contracts.profile import AutocompleteData, FlightDefaults, PilotProfile
from flightlog.contracts.result import SumCheck, XCSubsetCheck
from flightlog.contracts.totals import LogbookTotals

__all__ = [
    # Enums
    "EngineType",
    "FlightRole",
    "FlightTag",
    # Common
    "FirestoreModel",
    "round1",
    # Buckets
    "BUCKET_NAMES",
    "COPILOT_BUCKETS",
    "COUNT_BUCKETS",
    "DUAL_BUCKETS",
    "ME_BUCKETS",
    "NIGHT_BUCKETS",
    "PIC_BUCKETS",
    "PRIMARY_BUCKETS",
    "SE_BUCKETS",
    "XC_BUCKETS",
    "TimeBuckets",
    # Domain models
    "CalculatedFlight",
    "CalculationRequest",
    "CalculationResult",
    "LogbookFlight",
    "QuickEntryInput",
    "AutocompleteData",
    "FlightDefaults",
    "PilotProfile",
    # Results
    "SumCheck",
    "XCSubsetCheck",
    "LogbookTotals",
]
