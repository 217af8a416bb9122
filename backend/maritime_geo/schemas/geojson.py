from typing import Annotated, Any, Literal, Union
from pydantic import BaseModel, Field

# [longitude, latitude], kept as a list so visitors can update it in place
COORDINATES_TYPE = Annotated[list[float], Field(min_length=2, max_length=2)]

# ----- Geometry Types -----
class Point(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: COORDINATES_TYPE

class MultiPoint(BaseModel):
    type: Literal["MultiPoint"] = "MultiPoint"
    coordinates: list[COORDINATES_TYPE]

class LineString(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: list[COORDINATES_TYPE]

class MultiLineString(BaseModel):
    type: Literal["MultiLineString"] = "MultiLineString"
    coordinates: list[list[COORDINATES_TYPE]]

class Polygon(BaseModel):
    type: Literal["Polygon"] = "Polygon"
    # First ring is the exterior, the others are holes. Each ring: at least 4 positions,
    # first == last per RFC 7946 (not enforced here, to_engine rejects open rings)
    coordinates: list[list[COORDINATES_TYPE]]

class MultiPolygon(BaseModel):
    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: list[list[list[COORDINATES_TYPE]]]

class GeometryCollection(BaseModel):
    type: Literal["GeometryCollection"] = "GeometryCollection"
    geometries: list["Geometry"] = Field(default_factory=list)

Geometry = Annotated[
    Union[Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon, GeometryCollection],
    Field(discriminator="type"),
]

GeometryCollection.model_rebuild()

GEOMETRY_TYPES = (Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon, GeometryCollection)

# ----- Core GeoJSON Objects -----
class Feature(BaseModel):
    type: Literal["Feature"] = "Feature"
    geometry: Geometry | None = None
    properties: dict[str, Any] | None = Field(default=None)
    id: str | int | None = None
    bbox: list[float] | None = None

class FeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[Feature] = Field(default_factory=list)
    bbox: list[float] | None = None

GeoJson = Geometry | Feature | FeatureCollection
