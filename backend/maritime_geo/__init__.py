from maritime_geo.converters.s100_bridge import (
    from_position_list, from_spatial_attributes, geojson_to_spatial_attributes, to_position_list,
    to_spatial_attributes, union_geometries,
)
from maritime_geo.converters.shapely_bridge import from_engine, to_engine, to_engine_extent, to_engine_point
from maritime_geo.converters.visitor import (
    compute_coordinate, count_coordinates, map_coordinates, round_coordinates, swap_coordinates, visit_coordinates,
)
from maritime_geo.core.exceptions import (
    GeometryError, MalformedGeometry, MALFORMED_GEOMETRY_ERRORS, UnsupportedGeometryKind, UnsupportedOperation,
)
from maritime_geo.extent import EMPTY_EXTENT, bounds_of, bounds_of_geometry, compute_bbox, compute_center
from maritime_geo.schemas.extent import Extent
