"""
Constants declarations for geoshift
"""

import math

PI = math.pi
# Intermediate constant of the GCJ-02 <-> BD-09 conversion
X_PI = math.pi * 3000.0 / 180.0

# Krasovsky 1940 Ellipsoid Constants
KRASOVSKY_A = 6378245.0  # Semi-major axis (meters)
KRASOVSKY_EE = 0.00669342162296594323  # Eccentricity squared, (a^2 - b^2) / a^2

# Origin the GCJ-02 warp functions are evaluated about
OFFSET_ORIGIN_LNG = 105.0
OFFSET_ORIGIN_LAT = 35.0

# Bounding box in which obfuscation is applied (lng_min, lng_max, lat_min, lat_max)
REGION_MIN_LNG = 72.004
REGION_MAX_LNG = 137.8347
REGION_MIN_LAT = 0.8293
REGION_MAX_LAT = 55.8271

# BD-09 constant shift
BD09_LNG_BIAS = 0.0065
BD09_LAT_BIAS = 0.006

# Inverse solver defaults
SOLVER_INITIAL_DELTA = 0.01  # degrees
SOLVER_THRESHOLD = 1e-9  # degrees
SOLVER_MAX_ITERATIONS = 10_000
