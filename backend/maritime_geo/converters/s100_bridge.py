"""Conversion between shapely geometries and S-100 point/curve/surface attributes.

The forward direction flattens collections into a list of attributes. The reverse
direction unions the attributes back into a single geometry, so the nesting of the
original collections is not restored.
"""

from functools import reduce
from typing import Iterable, Sequence

import numpy as np
import shapely
from shapely import (
    Geometry, GeometryCollection, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon,
)
from shapely.ops import unary_union

from maritime_geo.converters.shapely_bridge import to_engine
from maritime_geo.core.constants import WGS_84_SRID
from maritime_geo.core.exceptions import MalformedGeometry, UnsupportedGeometryKind
from maritime_geo.schemas import geojson
from maritime_geo.schemas.s100 import CurveProperty, PointProperty, SpatialAttribute, SurfacePatch, SurfaceProperty


def to_position_list(coords: Iterable[Sequence[float]]) -> list[float]:
    """Flatten (lon, lat) coordinates into a (lat, lon) position list."""
    array = np.array(coords, dtype=float, ndmin=2)
    return array[:, 1::-1].ravel().tolist()


def from_position_list(pos_list: Sequence[float]) -> list[tuple[float, float]]:
    """Split a (lat, lon) position list into (lon, lat) coordinates."""
    values = np.asarray(pos_list, dtype=float)
    if values.size % 2 != 0:
        raise MalformedGeometry(f'Position list has an odd number of values: {values.size}')
    return [(lon, lat) for lat, lon in values.reshape(-1, 2).tolist()]


def to_spatial_attributes(g: Geometry) -> list[SpatialAttribute]:
    attributes = []
    _populate_attributes(g, attributes)
    return attributes


def geojson_to_spatial_attributes(g: geojson.Geometry) -> list[SpatialAttribute]:
    return to_spatial_attributes(to_engine(g))


def from_spatial_attributes(attributes: Iterable[SpatialAttribute], srid: int = WGS_84_SRID) -> Geometry:
    geometries = GeometryCollection([_attribute_to_geometry(attribute) for attribute in attributes])
    combined = reduce(union_geometries, geometries.geoms, GeometryCollection())
    return shapely.set_srid(combined, srid)


def union_geometries(a: Geometry, b: Geometry) -> Geometry:
    if a.is_empty:
        return b
    if b.is_empty:
        return a
    return unary_union([a, b])


def _is_puntal(g: Geometry) -> bool:
    return isinstance(g, (Point, MultiPoint))

def _is_lineal(g: Geometry) -> bool:
    # LinearRing is a LineString subclass
    return isinstance(g, (LineString, MultiLineString))

def _is_polygonal(g: Geometry) -> bool:
    return isinstance(g, (Polygon, MultiPolygon))


def _populate_attributes(g: Geometry, attributes: list[SpatialAttribute]):
    # Multi geometries yield one attribute per part, they are never merged into one
    if _is_puntal(g):
        for point in shapely.get_parts(g):
            attributes.append(PointProperty(pos=to_position_list(point.coords)))
    elif _is_lineal(g):
        for line in shapely.get_parts(g):
            attributes.append(CurveProperty(segments=[to_position_list(line.coords)]))
    elif _is_polygonal(g):
        for polygon in shapely.get_parts(g):
            attributes.append(SurfaceProperty(patches=[SurfacePatch(
                exterior=to_position_list(polygon.exterior.coords),
                interiors=[to_position_list(ring.coords) for ring in polygon.interiors],
            )]))
    elif isinstance(g, GeometryCollection):
        for member in g.geoms:
            _populate_attributes(member, attributes)
    else:
        raise UnsupportedGeometryKind(g)


def _attribute_to_geometry(attribute: SpatialAttribute) -> Geometry:
    if isinstance(attribute, PointProperty):
        coords = from_position_list(attribute.pos)
        return Point(coords[0]) if coords else Point()
    elif isinstance(attribute, CurveProperty):
        return _collapse([_segment_to_geometry(segment) for segment in attribute.segments])
    elif isinstance(attribute, SurfaceProperty):
        return _collapse([_patch_to_geometry(patch) for patch in attribute.patches])
    raise UnsupportedGeometryKind(attribute)


def _segment_to_geometry(pos_list: Sequence[float]) -> Geometry:
    coords = from_position_list(pos_list)
    if len(coords) == 1:
        return Point(coords[0])
    return LineString(coords)


def _patch_to_geometry(patch: SurfacePatch) -> Geometry:
    exterior = from_position_list(patch.exterior)
    if len(exterior) == 1:
        return Point(exterior[0])
    return Polygon(exterior, [from_position_list(ring) for ring in patch.interiors])


def _collapse(geometries: list[Geometry]) -> Geometry:
    if len(geometries) == 1:
        return geometries[0]
    return GeometryCollection(geometries)
