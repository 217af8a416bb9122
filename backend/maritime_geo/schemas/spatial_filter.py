from maritime_geo.enums.spatial_predicate import SpatialPredicate
from pydantic import BaseModel, Field


class SpatialFilter(BaseModel):
    # bbox in WGS84, longitudes may run past +/-180 when coming from a map widget
    min_lat: float = Field(..., ge=-90, le=90, description="Minimum latitude (south/bottom)")
    min_lon: float = Field(..., description="Minimum longitude (west/left)")
    max_lat: float = Field(..., ge=-90, le=90, description="Maximum latitude (north/top)")
    max_lon: float = Field(..., description="Maximum longitude (east/right)")

    predicate: SpatialPredicate = Field(
        SpatialPredicate.INTERSECTS,
        description="Use ST_Intersects (default) or ST_Within"
    )
