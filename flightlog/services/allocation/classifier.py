"""Aircraft make/model classification (single-engine, multi-engine, simulator)."""

from __future__ import annotations

from flightlog.contracts.enums import EngineType

# Checked first: a device name beats any airframe it imitates ("FRASCA PA44").
SIMULATOR_PATTERNS: tuple[str, ...] = (
    "REDBIRD",
    "ALSIM",
    "AL250",
    "FMX",
    "SIM",
    "FRASCA",
    "SIMULATOR",
)

MULTI_ENGINE_PATTERNS: tuple[str, ...] = (
    "PA44",
    "BE76",
    "DA42",
    "PA34",
    "C310",
    "BE58",
    "PA-44",
    "BE-76",
)

# Ordered lookup; anything unmatched is single-engine.
CLASSIFICATION_TABLE: tuple[tuple[EngineType, tuple[str, ...]], ...] = (
    (EngineType.SIM, SIMULATOR_PATTERNS),
    (EngineType.ME, MULTI_ENGINE_PATTERNS),
)


def classify(make_model: str) -> EngineType:
    """Classify a free-text aircraft make/model.

    Case-insensitive substring match against the pattern tables in
    ``CLASSIFICATION_TABLE`` order. Never raises: unknown types fall back
    to ``EngineType.SE``.
    """
    upper = (make_model or "").upper()
    for engine_type, patterns in CLASSIFICATION_TABLE:
        if any(pattern in upper for pattern in patterns):
            return engine_type
    return EngineType.SE
