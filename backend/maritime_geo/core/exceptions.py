from shapely.errors import GEOSException


class GeometryError(Exception):
    pass


class UnsupportedGeometryKind(GeometryError, TypeError):
    def __init__(self, geometry):
        kind = getattr(geometry, 'geom_type', None) or getattr(geometry, 'type', None) or type(geometry).__name__
        super().__init__(f'Unsupported geometry kind: {kind}')
        self.kind = kind


class UnsupportedOperation(UnsupportedGeometryKind):
    pass


class MalformedGeometry(GeometryError, ValueError):
    pass


# What shapely raises when asked to build a structurally invalid geometry
MALFORMED_GEOMETRY_ERRORS = (MalformedGeometry, GEOSException, ValueError)
