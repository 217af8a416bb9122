WGS_84_SRID = 4326

# Bounds of the "no data" extent, wider than any real box so the first point wins
EMPTY_MIN_LAT = 90.0
EMPTY_MIN_LON = 180.0
EMPTY_MAX_LAT = -90.0
EMPTY_MAX_LON = -180.0

# Longitudes closer to the prime meridian than this are treated as 0
PRIME_MERIDIAN_TOLERANCE = 0.00001
