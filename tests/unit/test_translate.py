"""Tests for the coordinate translator.

Covers:
- Offset arithmetic (lat/lng deltas between reference points)
- Polygon, polygon-with-hole and MultiPolygon dispatch
- Output format follows input format; inputs are never mutated
- Unsupported geometry kinds are rejected
"""

from __future__ import annotations

import copy

import pytest
from shapely.geometry import box

from truesize.core.exceptions import UnsupportedGeometryKind
from truesize.models.geometry import LatLng, MultiPolygon, Polygon, iter_vertices
from truesize.transforms.translate import translate


class TestTranslateOffsets:
    """Every vertex moves by the same (d_lng, d_lat)."""

    def test_single_point_ring_moves_east(self) -> None:
        ring_at_origin = Polygon(([(0, 0)],))
        moved = translate(ring_at_origin, LatLng(0, 0), LatLng(0, 10))
        assert moved.rings == (((10.0, 0.0),),)

    def test_northward_move(self, square_near_40: Polygon) -> None:
        moved = translate(square_near_40, (40.5, 0.5), (60.5, 0.5))
        assert moved.rings[0] == (
            (0.0, 60.0),
            (1.0, 60.0),
            (1.0, 61.0),
            (0.0, 61.0),
            (0.0, 60.0),
        )

    def test_diagonal_move(self, polygon_with_hole: Polygon) -> None:
        moved = translate(polygon_with_hole, LatLng(0, 15), LatLng(-20, -30))
        for (lng, lat), (orig_lng, orig_lat) in zip(
            iter_vertices(moved), iter_vertices(polygon_with_hole), strict=True
        ):
            assert lng == pytest.approx(orig_lng - 45)
            assert lat == pytest.approx(orig_lat - 20)

    def test_same_center_is_identity(self, two_islands: MultiPolygon) -> None:
        assert translate(two_islands, (-28, 101), (-28, 101)) == two_islands

    def test_reference_points_as_mappings(self, square_near_40: Polygon) -> None:
        moved = translate(square_near_40, {"lat": 40, "lng": 0}, {"lat": 40, "lng": -5})
        assert moved.rings[0][0] == (-5.0, 40.0)


class TestTranslateStructure:
    """Ring and polygon structure survive translation."""

    def test_hole_kept(self, polygon_with_hole: Polygon) -> None:
        moved = translate(polygon_with_hole, (0, 0), (10, 10))
        assert len(moved.rings) == 2
        assert [len(r) for r in moved.rings] == [5, 5]

    def test_multipolygon_kept(self, two_islands: MultiPolygon) -> None:
        moved = translate(two_islands, (0, 0), (5, 5))
        assert isinstance(moved, MultiPolygon)
        assert [len(p.rings[0]) for p in moved.polygons] == [5, 4]


class TestTranslateFormats:
    """Output representation follows the input representation."""

    def test_geojson_in_geojson_out(self) -> None:
        data = {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 0]]]}
        pristine = copy.deepcopy(data)
        moved = translate(data, (0, 0), (1, 2))
        assert moved == {
            "type": "Polygon",
            "coordinates": [[[2.0, 1.0], [3.0, 1.0], [3.0, 2.0], [2.0, 1.0]]],
        }
        assert data == pristine

    def test_feature_in_geometry_out(self) -> None:
        feature = {
            "type": "Feature",
            "properties": {"ADMIN": "Somewhere"},
            "geometry": {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [0, 1], [0, 0]]]},
        }
        moved = translate(feature, (0, 0), (0, 1))
        assert moved["type"] == "Polygon"
        assert moved["coordinates"][0][0] == [1.0, 0.0]

    def test_shapely_in_geojson_out(self) -> None:
        moved = translate(box(0, 0, 1, 1), (0, 0), (10, 0))
        assert moved["type"] == "Polygon"
        lats = [pos[1] for pos in moved["coordinates"][0]]
        assert min(lats) == pytest.approx(10.0)


class TestTranslateRejects:
    @pytest.mark.parametrize("kind", ["Point", "LineString", "MultiLineString", "GeometryCollection"])
    def test_unsupported_kind(self, kind: str) -> None:
        with pytest.raises(UnsupportedGeometryKind, match=kind):
            translate({"type": kind, "coordinates": []}, (0, 0), (1, 1))
