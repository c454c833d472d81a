"""A draggable, true-size clone of a boundary feature.

The clone remembers the geometry it was created from and relocates that
original on every drag event, so repeated drags never accumulate
rounding or scaling error.  The map layer calls ``drag_to`` once per
pointer event with the centre of the shape's displayed bounds;
superseded results are simply replaced.

Relocation itself is anchored on the vertex mean, not the bounds
centre.  The offset between the two is recorded once at creation and
used to turn each bounds centre back into a vertex-mean target, so a
drag to the current bounds centre leaves the shape where it is.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from truesize.core.config import TrueSizeConfig
from truesize.models.geometry import LatLng, coerce_geometry
from truesize.session.palette import ClonePalette
from truesize.transforms.centroid import centroid_of
from truesize.transforms.relocate import relocate_with_config
from truesize.transforms.scale_correction import effective_scale_factor
from truesize.utils.geodesy import bbox_center, geodesic_area_km2

if TYPE_CHECKING:
    from collections.abc import Mapping

    from truesize.models.geometry import Geometry, PointLike
    from truesize.session.palette import CloneStyle

logger = logging.getLogger("truesize.session.clone")


class DraggableClone:
    """One coloured clone of a country or state silhouette.

    Attributes:
        name: Display name of the cloned feature.
        style: Colour and stroke style assigned at creation.
        original_geometry: Shape as loaded; never modified.
        original_center: Vertex-mean centre of ``original_geometry``.
        bounds_offset: Bounds centre minus vertex mean of
            ``original_geometry``, in degrees.
        geometry: Shape as currently displayed.
        center: Bounds centre the shape is currently displayed at.
    """

    def __init__(
        self,
        geometry: Geometry,
        style: CloneStyle,
        *,
        name: str = "",
        properties: Mapping[str, Any] | None = None,
        config: TrueSizeConfig | None = None,
    ) -> None:
        self.name = name
        self.style = style
        self.properties = dict(properties or {})
        self.config = config or TrueSizeConfig()
        self.original_geometry = geometry
        self.original_center = centroid_of(geometry)
        home = bbox_center(geometry)
        self.bounds_offset = LatLng(
            lat=home.lat - self.original_center.lat,
            lng=home.lng - self.original_center.lng,
        )
        self.geometry = geometry
        self.center = home

    @classmethod
    def from_feature(
        cls,
        feature: Mapping[str, Any],
        palette: ClonePalette,
        *,
        name: str = "",
        config: TrueSizeConfig | None = None,
    ) -> DraggableClone:
        """Clone a GeoJSON Feature, taking the next palette colour.

        Raises:
            UnsupportedGeometryKind: If the feature is not a (Multi)Polygon.
            EmptyGeometryError: If the feature has no vertices.
        """
        geometry = coerce_geometry(feature)
        clone = cls(
            geometry,
            palette.next_style(),
            name=name,
            properties=feature.get("properties") or {},
            config=config,
        )
        logger.info(
            "clone created | name=%s | color=%s | centre=(%.4f, %.4f)",
            name,
            clone.style.color,
            clone.original_center.lat,
            clone.original_center.lng,
        )
        return clone

    def anchor_for(self, bounds_center: PointLike) -> LatLng:
        """Vertex-mean target whose relocated shape has ``bounds_center``.

        Latitudes only translate, so the latitude offset carries over
        unchanged.  Longitudes are rescaled about the target, so the
        longitude offset is scaled by the factor applied there.
        """
        target = LatLng.coerce(bounds_center)
        lat = target.lat - self.bounds_offset.lat
        factor = effective_scale_factor(
            self.original_center.lat,
            lat,
            min_lat=self.config.min_latitude_deg,
            max_lat=self.config.max_latitude_deg,
            dead_zone=self.config.dead_zone,
        )
        return LatLng(lat=lat, lng=target.lng - self.bounds_offset.lng * factor)

    def drag_to(self, new_center: PointLike) -> Geometry:
        """Relocate the original shape so its bounds are centred on ``new_center``."""
        target = LatLng.coerce(new_center)
        self.geometry = relocate_with_config(
            self.original_geometry,
            self.original_center,
            self.anchor_for(target),
            self.config,
        )
        self.center = target
        return self.geometry

    def reset(self) -> Geometry:
        """Put the clone back where it was created."""
        self.geometry = self.original_geometry
        self.center = bbox_center(self.original_geometry)
        return self.geometry

    @property
    def true_area_km2(self) -> float:
        """Geodesic area of the shape where it really is."""
        return geodesic_area_km2(self.original_geometry)

    @property
    def displayed_area_km2(self) -> float:
        """Geodesic area of the shape as currently displayed."""
        return geodesic_area_km2(self.geometry)

    def to_feature(self) -> dict[str, Any]:
        """Render the current shape as a GeoJSON Feature carrying its style."""
        return {
            "type": "Feature",
            "geometry": self.geometry.to_geojson(),
            "properties": {**self.properties, "style": self.style.to_dict()},
        }
