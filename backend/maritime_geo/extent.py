from typing import Iterable, Sequence

import numpy as np

from maritime_geo.converters.visitor import visit_coordinates
from maritime_geo.core.constants import EMPTY_MAX_LAT, EMPTY_MAX_LON, EMPTY_MIN_LAT, EMPTY_MIN_LON
from maritime_geo.schemas.extent import Extent
from maritime_geo.schemas.geojson import GeoJson

EMPTY_EXTENT = Extent(EMPTY_MIN_LAT, EMPTY_MIN_LON, EMPTY_MAX_LAT, EMPTY_MAX_LON)


class _BoundsAccumulator:
    def __init__(self):
        self.min_lat = EMPTY_MIN_LAT
        self.min_lon = EMPTY_MIN_LON
        self.max_lat = EMPTY_MAX_LAT
        self.max_lon = EMPTY_MAX_LON

    def add(self, lat: float, lon: float):
        self.min_lat = min(self.min_lat, lat)
        self.min_lon = min(self.min_lon, lon)
        self.max_lat = max(self.max_lat, lat)
        self.max_lon = max(self.max_lon, lon)

    def extent(self) -> Extent:
        return Extent(self.min_lat, self.min_lon, self.max_lat, self.max_lon)


def bounds_of(points: Iterable[Sequence[float]]) -> Extent:
    """Bounds of (lat, lon) points.

    No points gives EMPTY_EXTENT, whose minimums lie above its maximums; check
    Extent.is_empty before using the result as a filter.
    """
    bounds = _BoundsAccumulator()
    for lat, lon in points:
        bounds.add(lat, lon)
    return bounds.extent()


def bounds_of_geometry(g: GeoJson) -> Extent:
    bounds = _BoundsAccumulator()
    visit_coordinates(g, lambda c: bounds.add(c[1], c[0]))
    return bounds.extent()


def compute_bbox(geometries: Sequence[GeoJson] | None) -> list[float] | None:
    """GeoJSON bbox, [min_lon, min_lat, max_lon, max_lat], over all the given objects."""
    if not geometries:
        return None
    bounds = _BoundsAccumulator()
    for g in geometries:
        extent = bounds_of_geometry(g)
        if not extent.is_empty:
            bounds.add(extent.min_lat, extent.min_lon)
            bounds.add(extent.max_lat, extent.max_lon)
    extent = bounds.extent()
    if extent.is_empty:
        return None
    return [extent.min_lon, extent.min_lat, extent.max_lon, extent.max_lat]


def compute_center(geometries: Sequence[GeoJson] | None) -> list[float] | None:
    """Mean of the bbox centers of the given objects, as [lon, lat]."""
    if not geometries:
        return None
    centers = []
    for g in geometries:
        extent = bounds_of_geometry(g)
        if not extent.is_empty:
            centers.append(((extent.min_lon + extent.max_lon) / 2.0, (extent.min_lat + extent.max_lat) / 2.0))
    if not centers:
        return None
    return np.mean(centers, axis=0).tolist()
