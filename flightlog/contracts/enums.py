"""Enumerations shared across all FlightLog contracts."""

from enum import Enum


class FlightRole(str, Enum):
    """Seat the pilot occupied; selects the primary bucket family."""
    PIC = "PIC"
    STUDENT = "Student"
    INSTRUCTOR = "Instructor"
    SIMULATOR = "Simulator"


class FlightTag(str, Enum):
    """Quick-entry qualifiers.

    ``CHECKRIDE`` is informational only and never changes a bucket.
    """
    NIGHT = "Night"
    XC = "XC"
    IFR = "IFR"
    CIRCUITS = "Circuits"
    CHECKRIDE = "Checkride"


class EngineType(str, Enum):
    """Aircraft classification used to route time."""
    SE = "SE"
    ME = "ME"
    SIM = "SIM"
