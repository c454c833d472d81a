"""Centroid estimator.

The reference point of a shape is the plain mean of all its vertices
across every ring and polygon, closing duplicates included.  This is
not an area-weighted centroid; the drag interaction only needs a stable
handle that moves with the shape.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from truesize.core.exceptions import EmptyGeometryError
from truesize.models.geometry import LatLng, coerce_geometry, iter_vertices

if TYPE_CHECKING:
    from truesize.models.geometry import GeometryLike

logger = logging.getLogger("truesize.transforms.centroid")


def centroid_of(geometry: GeometryLike) -> LatLng:
    """Return the unweighted vertex mean of ``geometry`` as ``LatLng``.

    Raises:
        EmptyGeometryError: If the geometry has no vertices.
        UnsupportedGeometryKind: If ``geometry`` is not a (Multi)Polygon.
    """
    lng_sum = 0.0
    lat_sum = 0.0
    count = 0
    for lng, lat in iter_vertices(coerce_geometry(geometry)):
        lng_sum += lng
        lat_sum += lat
        count += 1

    if count == 0:
        msg = "Cannot compute centroid of a geometry with no vertices"
        raise EmptyGeometryError(msg)

    centre = LatLng(lat=lat_sum / count, lng=lng_sum / count)
    logger.debug("centroid | vertices=%d | lat=%.6f | lng=%.6f", count, centre.lat, centre.lng)
    return centre
