"""Base classes and shared helpers for FlightLog contracts.

Unit conventions (all contracts and API responses):
- **Flight time**: decimal hours, e.g. ``1.5`` for 1h30, rounded to one
  decimal wherever a total is derived
- **Takeoffs/landings, approaches, holds**: integer counts
- **Dates**: ISO 8601 (``YYYY-MM-DD``) in serialized form
- **Datetimes**: always UTC, ISO 8601 in serialized form
- **Airports**: upper-case identifiers as typed by the pilot (ICAO or local)
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict


def round1(value: float | None) -> float:
    """Round half-up to one decimal place; ``None`` counts as zero."""
    if value is None:
        return 0.0
    return math.floor(value * 10 + 0.5) / 10


class FirestoreModel(BaseModel):
    """Base model with Firestore-friendly serialization.

    - Enums serialize as string values (Firestore stores strings).
    - ``to_firestore()`` produces a JSON-safe dict (dates as ISO 8601).
    - ``from_firestore()`` hydrates from a Firestore document dict.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_firestore(self) -> dict[str, Any]:
        """Dump to Firestore-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_firestore(cls, data: dict[str, Any]) -> "FirestoreModel":
        """Create model instance from Firestore document dict."""
        return cls.model_validate(data)
