"""
Decides whether a coordinate falls within the region where GCJ-02 obfuscation applies
"""

__all__ = ['is_outside_obfuscation_region']

from geoshift._const import (
    REGION_MAX_LAT, REGION_MAX_LNG, REGION_MIN_LAT, REGION_MIN_LNG
)


def is_outside_obfuscation_region(lng: float, lat: float) -> bool:
    """
    Test whether a point lies outside the obfuscation region.

    The region is a rectangle roughly covering mainland China, so points just
    across a border (or inside it, near the corners) may be misclassified.

    Args:
        lng: (float)
            The longitude, in degrees

        lat: (float)
            The latitude, in degrees

    Returns:
        bool; True if coordinates in this location pass through unmodified
    """
    if lng < REGION_MIN_LNG or lng > REGION_MAX_LNG:
        return True

    if lat < REGION_MIN_LAT or lat > REGION_MAX_LAT:
        return True

    return False
