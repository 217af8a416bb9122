from dataclasses import dataclass

from maritime_geo.core.constants import PRIME_MERIDIAN_TOLERANCE


@dataclass(frozen=True)
class Extent:
    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float

    @property
    def is_empty(self) -> bool:
        return self.min_lat > self.max_lat

    def within(self, lat: float, lon: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lon <= lon <= self.max_lon

    def normalize(self) -> list['Extent']:
        """Slice the extent into boxes a rectangular spatial filter can handle.

        Map widgets keep min_lon < max_lon by letting min_lon go below -180 or max_lon
        above 180, and boxes spanning the prime meridian are not handled well by the
        spatial back-end either, so both cases are split up.
        """
        if self.min_lon < -180:
            candidates = [
                Extent(self.min_lat, 360 + self.min_lon, self.max_lat, 180.0),
                Extent(self.min_lat, -180.0, self.max_lat, self.max_lon),
            ]
        elif self.max_lon > 180:
            candidates = [
                Extent(self.min_lat, self.min_lon, self.max_lat, 180.0),
                Extent(self.min_lat, -180.0, self.max_lat, self.max_lon - 360.0),
            ]
        else:
            candidates = [self]

        extents = []
        for candidate in candidates:
            _add_extent(extents, candidate)
        return extents


def _add_extent(extents: list[Extent], extent: Extent):
    if extent.min_lon < -PRIME_MERIDIAN_TOLERANCE and extent.max_lon > PRIME_MERIDIAN_TOLERANCE:
        _add_extent(extents, Extent(extent.min_lat, extent.min_lon, extent.max_lat, 0.0))
        _add_extent(extents, Extent(extent.min_lat, 0.0, extent.max_lat, extent.max_lon))
    else:
        extents.append(extent)
