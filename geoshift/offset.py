"""
The GCJ-02 offset model.

GCJ-02 displaces a WGS-84 coordinate by a nonlinear, position-dependent amount.
The displacement is produced in two stages:

    1. Two empirical warp functions of the coordinate, relative to (105E, 35N),
       give a raw displacement in meters.
    2. The raw displacement is converted to degrees using the radii of
       curvature of the Krasovsky 1940 ellipsoid at the input latitude.

Every coefficient below is part of the published scheme and must not be altered.
"""

__all__ = ['compute_offset']

import math
from typing import Tuple

from geoshift._const import (
    KRASOVSKY_A, KRASOVSKY_EE, OFFSET_ORIGIN_LAT, OFFSET_ORIGIN_LNG, PI
)


def _warp_lng(x: float, y: float) -> float:
    """Raw longitudinal warp, in meters"""
    ret = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * PI) + 20.0 * math.sin(2.0 * x * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(x * PI) + 40.0 * math.sin(x / 3.0 * PI)) * 2.0 / 3.0
    ret += (150.0 * math.sin(x / 12.0 * PI) + 300.0 * math.sin(x / 30.0 * PI)) * 2.0 / 3.0
    return ret


def _warp_lat(x: float, y: float) -> float:
    """Raw latitudinal warp, in meters"""
    ret = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * PI) + 20.0 * math.sin(2.0 * x * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(y * PI) + 40.0 * math.sin(y / 3.0 * PI)) * 2.0 / 3.0
    ret += (160.0 * math.sin(y / 12.0 * PI) + 320 * math.sin(y * PI / 30.0)) * 2.0 / 3.0
    return ret


def compute_offset(lng: float, lat: float) -> Tuple[float, float]:
    """
    Compute the displacement GCJ-02 applies to a WGS-84 coordinate.

    Does not consult the obfuscation region; callers decide whether the
    offset applies.

    Args:
        lng: (float)
            The longitude, in degrees

        lat: (float)
            The latitude, in degrees

    Returns:
        (d_lng, d_lat) in degrees
    """
    x, y = lng - OFFSET_ORIGIN_LNG, lat - OFFSET_ORIGIN_LAT
    d_lng = _warp_lng(x, y)
    d_lat = _warp_lat(x, y)

    rad_lat = lat / 180.0 * PI
    magic = math.sin(rad_lat)
    magic = 1 - KRASOVSKY_EE * magic * magic
    sqrt_magic = math.sqrt(magic)

    # Prime vertical radius for longitude, meridional radius for latitude
    d_lng = (d_lng * 180.0) / (KRASOVSKY_A / sqrt_magic * math.cos(rad_lat) * PI)
    d_lat = (d_lat * 180.0) / ((KRASOVSKY_A * (1 - KRASOVSKY_EE)) / (magic * sqrt_magic) * PI)

    return d_lng, d_lat
