"""Conversion between the GeoJSON models and shapely geometries.

shapely is the engine behind spatial predicates (intersects, within, bounding boxes)
and persistence, so every geometry built here carries the WGS84 SRID.
"""

from typing import Sequence

import shapely
from shapely import (
    Geometry, GeometryCollection, LinearRing, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon,
)

from maritime_geo.core.constants import WGS_84_SRID
from maritime_geo.core.exceptions import MalformedGeometry, UnsupportedOperation
from maritime_geo.schemas import geojson


def to_engine(g: geojson.Geometry | None, srid: int = WGS_84_SRID) -> Geometry | None:
    if g is None:
        return None
    return _stamp(_to_engine(g, srid), srid)


def from_engine(g: Geometry | None) -> geojson.Geometry | None:
    if g is None:
        return None
    # Exact type match: a LinearRing is a LineString subclass but has no GeoJSON counterpart
    converter = _FROM_ENGINE.get(type(g))
    if converter is None:
        raise UnsupportedOperation(g)
    return converter(g)


def to_engine_point(lat: float, lon: float, srid: int = WGS_84_SRID) -> Point:
    return _stamp(Point(lon, lat), srid)


def to_engine_extent(
    min_lat: float | None = None,
    min_lon: float | None = None,
    max_lat: float | None = None,
    max_lon: float | None = None,
    srid: int = WGS_84_SRID,
) -> Polygon | None:
    """Rectangle polygon for the given bounds, missing bounds extend to the edge of the world."""
    if min_lat is None and min_lon is None and max_lat is None and max_lon is None:
        return None
    min_lat = min_lat if min_lat is not None else -90.0
    min_lon = min_lon if min_lon is not None else -180.0
    max_lat = max_lat if max_lat is not None else 90.0
    max_lon = max_lon if max_lon is not None else 180.0

    ring = [
        (min_lon, min_lat),
        (min_lon, max_lat),
        (max_lon, max_lat),
        (max_lon, min_lat),
        (min_lon, min_lat),
    ]
    return _polygon([ring], srid)


def _stamp(g: Geometry, srid: int) -> Geometry:
    return shapely.set_srid(g, srid)


def _to_engine(g: geojson.Geometry, srid: int) -> Geometry:
    if isinstance(g, geojson.Point):
        return Point(_to_coords(g.coordinates))
    elif isinstance(g, geojson.LineString):
        return LineString([_to_coords(c) for c in g.coordinates])
    elif isinstance(g, geojson.Polygon):
        return _polygon(g.coordinates, srid)
    elif isinstance(g, geojson.MultiPoint):
        return MultiPoint([_stamp(Point(_to_coords(c)), srid) for c in g.coordinates])
    elif isinstance(g, geojson.MultiLineString):
        return MultiLineString([
            _stamp(LineString([_to_coords(c) for c in line]), srid)
            for line in g.coordinates
        ])
    elif isinstance(g, geojson.MultiPolygon):
        return MultiPolygon([_polygon(polygon, srid) for polygon in g.coordinates])
    elif isinstance(g, geojson.GeometryCollection):
        return GeometryCollection([to_engine(member, srid) for member in g.geometries])
    raise UnsupportedOperation(g)


def _to_coords(c: Sequence[float]) -> tuple[float, float]:
    return c[0], c[1]


def _ring(coordinates: Sequence[Sequence[float]], srid: int) -> LinearRing:
    # shapely closes open rings silently
    if coordinates and list(coordinates[0]) != list(coordinates[-1]):
        raise MalformedGeometry(f'Ring is not closed: {coordinates[0]} != {coordinates[-1]}')
    return _stamp(LinearRing([_to_coords(c) for c in coordinates]), srid)


def _polygon(rings: Sequence[Sequence[Sequence[float]]], srid: int) -> Polygon:
    if not rings:
        return _stamp(Polygon(), srid)
    exterior = _ring(rings[0], srid)
    holes = [_ring(ring, srid) for ring in rings[1:]]
    return _stamp(Polygon(exterior, holes), srid)


def _from_coords(coords) -> list[list[float]]:
    return [[c[0], c[1]] for c in coords]


def _from_point(g: Point) -> geojson.Point:
    if g.is_empty:
        raise MalformedGeometry('GeoJSON has no empty Point')
    return geojson.Point(coordinates=[g.x, g.y])


def _from_line_string(g: LineString) -> geojson.LineString:
    return geojson.LineString(coordinates=_from_coords(g.coords))


def _from_polygon_rings(g: Polygon) -> list[list[list[float]]]:
    if g.is_empty:
        return []
    rings = [_from_coords(g.exterior.coords)]
    rings.extend(_from_coords(ring.coords) for ring in g.interiors)
    return rings


def _from_polygon(g: Polygon) -> geojson.Polygon:
    return geojson.Polygon(coordinates=_from_polygon_rings(g))


def _from_multi_point(g: MultiPoint) -> geojson.MultiPoint:
    return geojson.MultiPoint(coordinates=[[p.x, p.y] for p in g.geoms])


def _from_multi_line_string(g: MultiLineString) -> geojson.MultiLineString:
    return geojson.MultiLineString(coordinates=[_from_coords(line.coords) for line in g.geoms])


def _from_multi_polygon(g: MultiPolygon) -> geojson.MultiPolygon:
    return geojson.MultiPolygon(coordinates=[_from_polygon_rings(polygon) for polygon in g.geoms])


def _from_geometry_collection(g: GeometryCollection) -> geojson.GeometryCollection:
    return geojson.GeometryCollection(geometries=[from_engine(member) for member in g.geoms])


_FROM_ENGINE = {
    Point: _from_point,
    LineString: _from_line_string,
    Polygon: _from_polygon,
    MultiPoint: _from_multi_point,
    MultiLineString: _from_multi_line_string,
    MultiPolygon: _from_multi_polygon,
    GeometryCollection: _from_geometry_collection,
}
