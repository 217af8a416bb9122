"""Spatial attributes of the S-100 point/curve/surface geometry model.

Position lists are flat sequences of doubles alternating (lat, lon), which is the
reverse of the GeoJSON axis order.
"""

from dataclasses import dataclass, field


@dataclass
class PointProperty:
    pos: list[float]

@dataclass
class CurveProperty:
    # One position list per line string segment
    segments: list[list[float]] = field(default_factory=list)

@dataclass
class SurfacePatch:
    exterior: list[float]
    interiors: list[list[float]] = field(default_factory=list)

@dataclass
class SurfaceProperty:
    patches: list[SurfacePatch] = field(default_factory=list)


SpatialAttribute = PointProperty | CurveProperty | SurfaceProperty
