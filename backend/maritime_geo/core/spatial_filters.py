"""SQL predicates for spatial filtering of geometry columns.

A normalized extent may consist of several boxes; each box becomes its own clause
and the clauses are OR'd together.
"""

import logging
from typing import Iterable

from geoalchemy2.elements import WKBElement
from geoalchemy2.functions import ST_Intersects, ST_Within
from geoalchemy2.shape import from_shape, to_shape
from sqlalchemy import false, or_
from sqlalchemy.sql.elements import ColumnElement

from maritime_geo.converters.shapely_bridge import from_engine, to_engine, to_engine_extent
from maritime_geo.core.constants import WGS_84_SRID
from maritime_geo.enums.spatial_predicate import SpatialPredicate
from maritime_geo.schemas import geojson
from maritime_geo.schemas.extent import Extent
from maritime_geo.schemas.spatial_filter import SpatialFilter

logger = logging.getLogger(__name__)


def to_column_value(g: geojson.Geometry | None, srid: int = WGS_84_SRID) -> WKBElement | None:
    engine_geometry = to_engine(g, srid)
    if engine_geometry is None:
        return None
    return from_shape(engine_geometry, srid=srid)


def from_column_value(element: WKBElement | None) -> geojson.Geometry | None:
    if element is None:
        return None
    return from_engine(to_shape(element))


def geometry_clause(
    column,
    g: geojson.Geometry,
    predicate: SpatialPredicate = SpatialPredicate.INTERSECTS,
    srid: int = WGS_84_SRID,
) -> ColumnElement[bool]:
    return _predicate_clause(column, to_column_value(g, srid), predicate)


def extent_clause(
    column,
    extents: Iterable[Extent],
    predicate: SpatialPredicate = SpatialPredicate.INTERSECTS,
    srid: int = WGS_84_SRID,
) -> ColumnElement[bool]:
    clauses = []
    for extent in extents:
        box = to_engine_extent(extent.min_lat, extent.min_lon, extent.max_lat, extent.max_lon, srid=srid)
        clauses.append(_predicate_clause(column, from_shape(box, srid=srid), predicate))

    if not clauses:
        # Nothing matches an empty list of boxes
        return false()
    logger.debug('Spatial filter on %s with %d box(es)', column, len(clauses))
    return or_(*clauses)


def spatial_filter_clause(column, spatial_filter: SpatialFilter, srid: int = WGS_84_SRID) -> ColumnElement[bool]:
    extent = Extent(spatial_filter.min_lat, spatial_filter.min_lon, spatial_filter.max_lat, spatial_filter.max_lon)
    return extent_clause(column, extent.normalize(), spatial_filter.predicate, srid)


def _predicate_clause(column, value: WKBElement, predicate: SpatialPredicate) -> ColumnElement[bool]:
    if predicate == SpatialPredicate.INTERSECTS:
        return ST_Intersects(column, value)
    elif predicate == SpatialPredicate.WITHIN:
        return ST_Within(column, value)
    raise NotImplementedError()
