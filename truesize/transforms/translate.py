"""Coordinate translator.

Shifts every vertex of a Polygon or MultiPolygon by the latitude and
longitude offset between two reference points.  Shape, ring structure
and vertex counts are untouched.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from truesize.models.geometry import LatLng, transform_vertices

if TYPE_CHECKING:
    from truesize.models.geometry import GeometryLike, PointLike

logger = logging.getLogger("truesize.transforms.translate")


def translate(
    geometry: GeometryLike,
    original_center: PointLike,
    new_center: PointLike,
) -> GeometryLike:
    """Move a geometry so that ``original_center`` lands on ``new_center``.

    Every vertex ``(lng, lat)`` becomes ``(lng + d_lng, lat + d_lat)``.

    Args:
        geometry: Polygon / MultiPolygon, as a model or GeoJSON.
        original_center: Reference point of the shape as drawn.
        new_center: Where that reference point should end up.

    Returns:
        A new geometry in the same representation as ``geometry``.

    Raises:
        UnsupportedGeometryKind: If ``geometry`` is not a (Multi)Polygon.
    """
    origin = LatLng.coerce(original_center)
    target = LatLng.coerce(new_center)
    d_lat = target.lat - origin.lat
    d_lng = target.lng - origin.lng

    logger.debug("translate | d_lat=%.6f | d_lng=%.6f", d_lat, d_lng)

    return transform_vertices(geometry, lambda lng, lat: (lng + d_lng, lat + d_lat))
