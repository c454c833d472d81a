"""Area relocation transform.

Composes the translator and the scale corrector.  Translation comes
first because the correction pivots around the destination centre.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from truesize.core.constants import (
    DEAD_ZONE_TOLERANCE,
    MAX_CLAMP_LATITUDE_DEG,
    MIN_CLAMP_LATITUDE_DEG,
)
from truesize.transforms.scale_correction import correct_scale
from truesize.transforms.translate import translate

if TYPE_CHECKING:
    from truesize.core.config import TrueSizeConfig
    from truesize.models.geometry import GeometryLike, PointLike

logger = logging.getLogger("truesize.transforms.relocate")


def relocate(
    geometry: GeometryLike,
    original_center: PointLike,
    new_center: PointLike,
    *,
    min_lat: float = MIN_CLAMP_LATITUDE_DEG,
    max_lat: float = MAX_CLAMP_LATITUDE_DEG,
    dead_zone: float = DEAD_ZONE_TOLERANCE,
) -> GeometryLike:
    """Move a shape to ``new_center`` and correct it for the local scale.

    ``relocate(g, c, c)`` returns ``g`` (within floating-point tolerance).

    Args:
        geometry: Polygon / MultiPolygon, as a model or GeoJSON.
        original_center: Reference point of the shape as drawn.
        new_center: Destination reference point.
        min_lat: Lower clamp for absolute latitude (degrees).
        max_lat: Upper clamp for absolute latitude (degrees).
        dead_zone: Scale-factor tolerance around 1.0 that is ignored.

    Returns:
        A new geometry in the same representation as ``geometry``.

    Raises:
        UnsupportedGeometryKind: If ``geometry`` is not a (Multi)Polygon.
    """
    moved = translate(geometry, original_center, new_center)
    return correct_scale(
        moved,
        original_center,
        new_center,
        min_lat=min_lat,
        max_lat=max_lat,
        dead_zone=dead_zone,
    )


def relocate_with_config(
    geometry: GeometryLike,
    original_center: PointLike,
    new_center: PointLike,
    config: TrueSizeConfig,
) -> GeometryLike:
    """``relocate`` with clamp bounds and dead zone taken from ``config``."""
    return relocate(
        geometry,
        original_center,
        new_center,
        min_lat=config.min_latitude_deg,
        max_lat=config.max_latitude_deg,
        dead_zone=config.dead_zone,
    )
