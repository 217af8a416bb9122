"""Tests for conversion between shapely and S-100 spatial attributes."""

import pytest
import shapely
from shapely import GeometryCollection, LineString, MultiLineString, MultiPoint, Point, Polygon

from maritime_geo.converters.s100_bridge import (
    from_position_list, from_spatial_attributes, geojson_to_spatial_attributes, to_position_list,
    to_spatial_attributes, union_geometries,
)
from maritime_geo.core.constants import WGS_84_SRID
from maritime_geo.core.exceptions import MalformedGeometry, UnsupportedGeometryKind
from maritime_geo.schemas.s100 import CurveProperty, PointProperty, SurfacePatch, SurfaceProperty

SQUARE = Polygon(
    [(10.0, 55.0), (11.0, 55.0), (11.0, 56.0), (10.0, 56.0), (10.0, 55.0)],
    [[(10.2, 55.2), (10.2, 55.4), (10.4, 55.4), (10.4, 55.2), (10.2, 55.2)]],
)


class TestPositionList:
    def test_swaps_to_lat_lon(self):
        assert to_position_list([(10.0, 55.0), (11.5, 56.5)]) == [55.0, 10.0, 56.5, 11.5]

    def test_from_shapely_coords(self):
        assert to_position_list(Point(10.0, 55.0).coords) == [55.0, 10.0]

    def test_empty(self):
        assert to_position_list([]) == []
        assert from_position_list([]) == []

    def test_swaps_back_to_lon_lat(self):
        assert from_position_list([55.0, 10.0, 56.5, 11.5]) == [(10.0, 55.0), (11.5, 56.5)]

    def test_odd_length(self):
        with pytest.raises(MalformedGeometry):
            from_position_list([55.0, 10.0, 56.0])


class TestToSpatialAttributes:
    def test_point(self):
        assert to_spatial_attributes(Point(10.0, 55.0)) == [PointProperty(pos=[55.0, 10.0])]

    def test_line_string(self):
        attributes = to_spatial_attributes(LineString([(10.0, 55.0), (11.0, 56.0)]))
        assert attributes == [CurveProperty(segments=[[55.0, 10.0, 56.0, 11.0]])]

    def test_polygon_carries_holes(self):
        [attribute] = to_spatial_attributes(SQUARE)

        assert isinstance(attribute, SurfaceProperty)
        [patch] = attribute.patches
        assert patch.exterior[:4] == [55.0, 10.0, 55.0, 11.0]
        assert len(patch.exterior) == 10
        assert len(patch.interiors) == 1
        assert patch.interiors[0][:2] == [55.2, 10.2]

    def test_multi_geometries_are_not_merged(self):
        lines = MultiLineString([[(0, 0), (1, 1)], [(2, 2), (3, 3)]])
        points = MultiPoint([(0, 0), (1, 1), (2, 2)])

        assert [type(a) for a in to_spatial_attributes(lines)] == [CurveProperty, CurveProperty]
        assert [type(a) for a in to_spatial_attributes(points)] == [PointProperty] * 3

    def test_nested_collections_are_flattened(self):
        g = GeometryCollection([
            Point(10.0, 55.0),
            GeometryCollection([
                LineString([(10.0, 55.0), (11.0, 56.0)]),
                LineString([(12.0, 54.0), (13.0, 54.5)]),
            ]),
        ])

        attributes = to_spatial_attributes(g)

        assert [type(a) for a in attributes] == [PointProperty, CurveProperty, CurveProperty]
        assert attributes[2].segments == [[54.0, 12.0, 54.5, 13.0]]

    def test_empty_collection(self):
        assert to_spatial_attributes(GeometryCollection()) == []

    def test_unknown_kind(self):
        with pytest.raises(UnsupportedGeometryKind):
            to_spatial_attributes(object())

    def test_from_geojson(self, geometry_collection):
        attributes = geojson_to_spatial_attributes(geometry_collection)
        # point, line, polygon, then the three members of the multi point
        assert [type(a) for a in attributes] == [
            PointProperty, CurveProperty, SurfaceProperty, PointProperty, PointProperty, PointProperty,
        ]


class TestFromSpatialAttributes:
    def test_point(self):
        g = from_spatial_attributes([PointProperty(pos=[55.0, 10.0])])
        assert isinstance(g, Point)
        assert (g.x, g.y) == (10.0, 55.0)
        assert shapely.get_srid(g) == WGS_84_SRID

    def test_single_position_curve_is_a_point(self):
        g = from_spatial_attributes([CurveProperty(segments=[[55.0, 10.0]])])
        assert isinstance(g, Point)
        assert (g.x, g.y) == (10.0, 55.0)

    def test_single_position_patch_is_a_point(self):
        g = from_spatial_attributes([SurfaceProperty(patches=[SurfacePatch(exterior=[55.0, 10.0])])])
        assert isinstance(g, Point)

    def test_surface_round_trip(self):
        g = from_spatial_attributes(to_spatial_attributes(SQUARE))

        assert isinstance(g, Polygon)
        assert list(g.exterior.coords) == list(SQUARE.exterior.coords)
        assert list(g.interiors[0].coords) == list(SQUARE.interiors[0].coords)

    def test_attributes_are_unioned(self):
        g = from_spatial_attributes([
            PointProperty(pos=[0.0, 50.0]),
            CurveProperty(segments=[[55.0, 10.0, 56.0, 11.0]]),
        ])

        assert isinstance(g, GeometryCollection)
        assert sorted(member.geom_type for member in g.geoms) == ['LineString', 'Point']
        assert any(member.equals(Point(50.0, 0.0)) for member in g.geoms)

    def test_overlapping_surfaces_are_merged(self):
        g = from_spatial_attributes([
            SurfaceProperty(patches=[SurfacePatch(exterior=[0.0, 0.0, 0.0, 2.0, 2.0, 2.0, 2.0, 0.0, 0.0, 0.0])]),
            SurfaceProperty(patches=[SurfacePatch(exterior=[1.0, 1.0, 1.0, 3.0, 3.0, 3.0, 3.0, 1.0, 1.0, 1.0])]),
        ])

        assert isinstance(g, Polygon)
        assert g.area == pytest.approx(7.0)

    def test_empty_list(self):
        g = from_spatial_attributes([])
        assert g.is_empty

    def test_unknown_attribute(self):
        with pytest.raises(UnsupportedGeometryKind):
            from_spatial_attributes([object()])


class TestUnionGeometries:
    @pytest.mark.parametrize('g', [
        Point(1.0, 2.0),
        LineString([(0, 0), (1, 1)]),
        SQUARE,
    ])
    def test_empty_is_identity(self, g):
        assert union_geometries(GeometryCollection(), g) is g
        assert union_geometries(g, GeometryCollection()) is g
        assert union_geometries(Point(), g) is g
