"""Route string parsing."""

from __future__ import annotations

import re
from typing import NamedTuple

# Any run of dash/en dash/em dash/arrow/slash or whitespace
_SEPARATORS = re.compile(r"[-–—>/\s]+")


class RouteEndpoints(NamedTuple):
    departure: str | None
    arrival: str | None


def parse_route(route: str | None) -> RouteEndpoints:
    """Split a free-text route into departure and arrival codes.

    ``"CZBB-CYCW-CZBB"`` -> ``("CZBB", "CZBB")``; intermediate waypoints are
    dropped. A single token is a same-field circuit, so it is both ends.
    """
    if not route or not route.strip():
        return RouteEndpoints(None, None)

    parts = [p.upper() for p in _SEPARATORS.split(route) if p]
    if not parts:
        return RouteEndpoints(None, None)

    return RouteEndpoints(parts[0], parts[-1])
