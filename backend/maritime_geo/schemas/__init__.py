from maritime_geo.schemas import geojson, s100
from maritime_geo.schemas.extent import Extent
from maritime_geo.schemas.spatial_filter import SpatialFilter
