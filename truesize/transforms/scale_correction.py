"""Scale corrector.

A shape drawn at latitude L and displayed at latitude L' keeps its true
east-west ground size only if its longitude span is multiplied by
``sec(L') / sec(L)``, i.e. ``cos(L) / cos(L')``.  Latitude span is left
alone, so this corrects width only and is not a conformal reprojection.

Absolute latitudes are clamped to ``[0.1, 85]`` degrees before taking a
cosine so that shapes dragged towards a pole stay finite.  Corrections
within the dead zone around 1.0 are skipped to avoid visible jitter
while dragging along a parallel.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from truesize.core.constants import (
    DEAD_ZONE_TOLERANCE,
    MAX_CLAMP_LATITUDE_DEG,
    MIN_CLAMP_LATITUDE_DEG,
)
from truesize.core.exceptions import InvalidReferencePointError
from truesize.models.geometry import (
    LatLng,
    coerce_geometry,
    match_input_format,
    transform_vertices,
)

if TYPE_CHECKING:
    from truesize.models.geometry import GeometryLike, PointLike

logger = logging.getLogger("truesize.transforms.scale_correction")


def clamp_latitude(
    lat: float,
    *,
    min_lat: float = MIN_CLAMP_LATITUDE_DEG,
    max_lat: float = MAX_CLAMP_LATITUDE_DEG,
) -> float:
    """Clamp ``|lat|`` into ``[min_lat, max_lat]`` degrees.

    Raises:
        InvalidReferencePointError: If ``lat`` is NaN or infinite.
    """
    if not math.isfinite(lat):
        msg = f"latitude must be finite, got {lat!r}"
        raise InvalidReferencePointError(msg)
    return min(max(abs(lat), min_lat), max_lat)


def scale_factor(
    original_lat: float,
    new_lat: float,
    *,
    min_lat: float = MIN_CLAMP_LATITUDE_DEG,
    max_lat: float = MAX_CLAMP_LATITUDE_DEG,
) -> float:
    """Longitude scale factor for moving a shape from one latitude to another.

    Returns:
        ``sec(clamp(|new_lat|)) / sec(clamp(|original_lat|))``.  Greater
        than 1 when moving poleward, less than 1 when moving towards the
        equator.
    """
    new_rad = math.radians(clamp_latitude(new_lat, min_lat=min_lat, max_lat=max_lat))
    original_rad = math.radians(clamp_latitude(original_lat, min_lat=min_lat, max_lat=max_lat))
    new_secant = 1.0 / math.cos(new_rad)
    original_secant = 1.0 / math.cos(original_rad)
    return new_secant / original_secant


def effective_scale_factor(
    original_lat: float,
    new_lat: float,
    *,
    min_lat: float = MIN_CLAMP_LATITUDE_DEG,
    max_lat: float = MAX_CLAMP_LATITUDE_DEG,
    dead_zone: float = DEAD_ZONE_TOLERANCE,
) -> float:
    """``scale_factor`` as ``correct_scale`` applies it: 1.0 inside the dead zone."""
    factor = scale_factor(original_lat, new_lat, min_lat=min_lat, max_lat=max_lat)
    if abs(factor - 1.0) < dead_zone:
        return 1.0
    return factor


def correct_scale(
    geometry: GeometryLike,
    original_center: PointLike,
    new_center: PointLike,
    *,
    min_lat: float = MIN_CLAMP_LATITUDE_DEG,
    max_lat: float = MAX_CLAMP_LATITUDE_DEG,
    dead_zone: float = DEAD_ZONE_TOLERANCE,
) -> GeometryLike:
    """Rescale the east-west extent of ``geometry`` around ``new_center``.

    Every vertex longitude becomes
    ``new_center.lng + (lng - new_center.lng) * factor``; latitudes are
    unchanged.

    Args:
        geometry: Polygon / MultiPolygon already positioned at ``new_center``.
        original_center: Reference point where the shape was drawn.
        new_center: Reference point where the shape is displayed.
        min_lat: Lower clamp for absolute latitude (degrees).
        max_lat: Upper clamp for absolute latitude (degrees).
        dead_zone: Factors with ``|factor - 1| < dead_zone`` are skipped.

    Returns:
        A geometry in the same representation as ``geometry``; unchanged
        in value when the factor falls inside the dead zone.

    Raises:
        UnsupportedGeometryKind: If ``geometry`` is not a (Multi)Polygon.
    """
    origin = LatLng.coerce(original_center)
    target = LatLng.coerce(new_center)
    factor = effective_scale_factor(
        origin.lat,
        target.lat,
        min_lat=min_lat,
        max_lat=max_lat,
        dead_zone=dead_zone,
    )

    if factor == 1.0:
        logger.debug(
            "scale correction skipped | dead_zone=%.4f | lat %.4f -> %.4f",
            dead_zone,
            origin.lat,
            target.lat,
        )
        return match_input_format(geometry, coerce_geometry(geometry))

    logger.debug(
        "scale correction | factor=%.6f | lat %.4f -> %.4f | pivot_lng=%.4f",
        factor,
        origin.lat,
        target.lat,
        target.lng,
    )

    pivot = target.lng
    return transform_vertices(geometry, lambda lng, lat: (pivot + (lng - pivot) * factor, lat))
