"""Shared constants — single source of truth.

Centralises the numeric tolerances of the scale corrector, the search
defaults, and the string keys used when indexing GeoJSON boundary files.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Scale correction
# ---------------------------------------------------------------------------

MIN_CLAMP_LATITUDE_DEG: float = 0.1
"""Absolute latitudes below this are raised to it before taking a cosine."""

MAX_CLAMP_LATITUDE_DEG: float = 85.0
"""Absolute latitudes above this are lowered to it (keeps sec(lat) finite)."""

DEAD_ZONE_TOLERANCE: float = 0.01
"""Scale factors within this distance of 1.0 are not applied."""

# ---------------------------------------------------------------------------
# Catalog search
# ---------------------------------------------------------------------------

DEFAULT_SEARCH_MIN_QUERY: int = 2
DEFAULT_SEARCH_LIMIT: int = 10

COUNTRY_KIND: str = "Country"
STATE_KIND: str = "State"

COUNTRY_NAME_PROPERTY: str = "ADMIN"
"""Natural Earth admin-0 name property."""

STATE_NAME_PROPERTY: str = "name"

# ---------------------------------------------------------------------------
# Clone styling
# ---------------------------------------------------------------------------

DEFAULT_PALETTE: tuple[str, ...] = (
    "#e6194B",
    "#3cb44b",
    "#ffe119",
    "#4363d8",
    "#f58231",
    "#911eb4",
    "#42d4f4",
    "#f032e6",
)

CLONE_STROKE_WEIGHT: int = 2
CLONE_FILL_OPACITY: float = 0.5
