"""Traversal of every [lon, lat] coordinate of a GeoJSON tree."""

from typing import Callable

from maritime_geo.core.exceptions import UnsupportedGeometryKind
from maritime_geo.core.settings import settings
from maritime_geo.schemas.geojson import (
    Feature, FeatureCollection, GeoJson, GeometryCollection, LineString, MultiLineString, MultiPoint, MultiPolygon,
    Point, Polygon,
)

CoordinateHandler = Callable[[list[float]], None]


def visit_coordinates(g: GeoJson, handler: CoordinateHandler) -> None:
    """Call handler on each coordinate, depth-first in document order.

    The handler receives the coordinate list itself and may update it in place.
    """
    if isinstance(g, Point):
        handler(g.coordinates)
    elif isinstance(g, (LineString, MultiPoint)):
        for c in g.coordinates:
            handler(c)
    elif isinstance(g, (Polygon, MultiLineString)):
        for ring in g.coordinates:
            for c in ring:
                handler(c)
    elif isinstance(g, MultiPolygon):
        for polygon in g.coordinates:
            for ring in polygon:
                for c in ring:
                    handler(c)
    elif isinstance(g, GeometryCollection):
        for geometry in g.geometries:
            visit_coordinates(geometry, handler)
    elif isinstance(g, Feature):
        if g.geometry is not None:
            visit_coordinates(g.geometry, handler)
    elif isinstance(g, FeatureCollection):
        for feature in g.features:
            visit_coordinates(feature, handler)
    else:
        raise UnsupportedGeometryKind(g)


def map_coordinates(g: GeoJson, handler: CoordinateHandler) -> GeoJson:
    """Like visit_coordinates, but applied to a deep copy which is returned."""
    copy = g.model_copy(deep=True)
    visit_coordinates(copy, handler)
    return copy


def round_coordinates(g: GeoJson, decimals: int | None = None) -> GeoJson:
    if decimals is None:
        decimals = settings.coordinate_decimals

    def _round(c: list[float]):
        # round() on floats is half-to-even on the exact binary value
        c[0] = round(c[0], decimals)
        c[1] = round(c[1], decimals)

    visit_coordinates(g, _round)
    return g


def swap_coordinates(g: GeoJson) -> GeoJson:
    def _swap(c: list[float]):
        c[0], c[1] = c[1], c[0]

    visit_coordinates(g, _swap)
    return g


def compute_coordinate(g: GeoJson, n: int) -> list[float] | None:
    if n < 0:
        return None
    coordinates = []
    visit_coordinates(g, lambda c: coordinates.append(c) if len(coordinates) <= n else None)
    if len(coordinates) <= n:
        return None
    return list(coordinates[n])


def count_coordinates(g: GeoJson) -> int:
    count = 0

    def _count(_):
        nonlocal count
        count += 1

    visit_coordinates(g, _count)
    return count
