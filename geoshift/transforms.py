"""
Forward conversions: WGS-84 -> GCJ-02 -> BD-09
"""

__all__ = ['earth_to_encrypted', 'earth_to_provider', 'encrypted_to_provider']

import math

from geoshift._const import BD09_LAT_BIAS, BD09_LNG_BIAS, X_PI
from geoshift.coordinates import CoordinatePoint
from geoshift.geofence import is_outside_obfuscation_region
from geoshift.offset import compute_offset


def earth_to_encrypted(lng: float, lat: float) -> CoordinatePoint:
    """
    Convert a WGS-84 coordinate to GCJ-02.

    Coordinates outside the obfuscation region are returned unchanged.
    """
    if is_outside_obfuscation_region(lng, lat):
        return CoordinatePoint(lng, lat)

    d_lng, d_lat = compute_offset(lng, lat)
    return CoordinatePoint(lng + d_lng, lat + d_lat)


def encrypted_to_provider(lng: float, lat: float) -> CoordinatePoint:
    """
    Convert a GCJ-02 coordinate to BD-09.

    The point is treated as polar (radius, angle), both of which are perturbed
    slightly before a constant shift is added. Applies everywhere; there is
    no region check.
    """
    z = math.sqrt(lng * lng + lat * lat) + 0.00002 * math.sin(lat * X_PI)
    theta = math.atan2(lat, lng) + 0.000003 * math.cos(lng * X_PI)
    return CoordinatePoint(
        z * math.cos(theta) + BD09_LNG_BIAS,
        z * math.sin(theta) + BD09_LAT_BIAS
    )


def earth_to_provider(lng: float, lat: float) -> CoordinatePoint:
    """Convert a WGS-84 coordinate to BD-09, by way of GCJ-02"""
    point = earth_to_encrypted(lng, lat)
    return encrypted_to_provider(point.longitude, point.latitude)
