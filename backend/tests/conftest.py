"""Pytest configuration and fixtures for maritime_geo tests."""

import pytest

from maritime_geo.schemas import geojson


def _square(lon: float, lat: float, size: float) -> list[list[float]]:
    return [[lon, lat], [lon + size, lat], [lon + size, lat + size], [lon, lat + size], [lon, lat]]


def _point():
    return geojson.Point(coordinates=[10.123456, 55.654321])


def _line_string():
    return geojson.LineString(coordinates=[[10.0, 55.0], [10.5, 55.25], [11.0, 55.1]])


def _polygon_with_hole():
    # Hole wound clockwise, opposite to the exterior
    return geojson.Polygon(coordinates=[
        _square(10.0, 55.0, 1.0),
        [[10.2, 55.2], [10.2, 55.4], [10.4, 55.4], [10.4, 55.2], [10.2, 55.2]],
    ])


def _multi_point():
    return geojson.MultiPoint(coordinates=[[10.0, 55.0], [-4.5, 48.3], [179.9, -17.7]])


def _multi_line_string():
    return geojson.MultiLineString(coordinates=[
        [[10.0, 55.0], [11.0, 56.0]],
        [[12.0, 54.0], [12.5, 54.5], [13.0, 54.0]],
    ])


def _multi_polygon():
    return geojson.MultiPolygon(coordinates=[
        [_square(10.0, 55.0, 0.5)],
        [_square(12.0, 54.0, 1.0), _square(12.25, 54.25, 0.25)],
    ])


def _geometry_collection():
    return geojson.GeometryCollection(geometries=[
        _point(),
        _line_string(),
        geojson.GeometryCollection(geometries=[_polygon_with_hole(), _multi_point()]),
        geojson.GeometryCollection(),
    ])


SAMPLE_GEOMETRIES = {
    'point': _point,
    'line_string': _line_string,
    'polygon_with_hole': _polygon_with_hole,
    'multi_point': _multi_point,
    'multi_line_string': _multi_line_string,
    'multi_polygon': _multi_polygon,
    'geometry_collection': _geometry_collection,
    'empty_polygon': lambda: geojson.Polygon(coordinates=[]),
    'empty_geometry_collection': geojson.GeometryCollection,
}


@pytest.fixture(params=list(SAMPLE_GEOMETRIES))
def sample_geometry(request):
    """A fresh instance of each supported geometry kind."""
    return SAMPLE_GEOMETRIES[request.param]()


@pytest.fixture
def point():
    return _point()


@pytest.fixture
def line_string():
    return _line_string()


@pytest.fixture
def polygon_with_hole():
    return _polygon_with_hole()


@pytest.fixture
def multi_line_string():
    return _multi_line_string()


@pytest.fixture
def geometry_collection():
    return _geometry_collection()
