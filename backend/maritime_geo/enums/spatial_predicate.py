from enum import StrEnum


class SpatialPredicate(StrEnum):
    INTERSECTS = 'intersects'
    WITHIN = 'within'
