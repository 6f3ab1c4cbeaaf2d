"""
Module for converting between named map frames
"""
__all__ = ['FRAMES', 'convert']

from geoshift.coordinates import CoordinatePoint
from geoshift.inverse import (
    encrypted_to_earth_approx, encrypted_to_earth_exact, provider_to_encrypted
)
from geoshift.transforms import earth_to_encrypted, earth_to_provider, encrypted_to_provider

WGS84 = 'wgs84'
GCJ02 = 'gcj02'
BD09 = 'bd09'

FRAMES = {
    'wgs84': WGS84,
    'earth': WGS84,
    'gcj02': GCJ02,
    'encrypted': GCJ02,
    'bd09': BD09,
    'provider': BD09,
}


def _normalize_frame(frame: str) -> str:
    try:
        return FRAMES[frame.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown frame '{frame}'. Options: {list(FRAMES.keys())}"
        ) from None


def convert(
    lng: float,
    lat: float,
    source: str,
    target: str,
    exact: bool = True
) -> CoordinatePoint:
    """
    Converts a coordinate from one map frame to another.

    Args:
        lng (float): The longitude, in degrees.
        lat (float): The latitude, in degrees.
        source (str): The frame of the input ('wgs84'/'earth', 'gcj02'/'encrypted',
        'bd09'/'provider').
        target (str): The frame to convert to, using the same names.
        exact (bool): If True (default), conversions towards WGS-84 use the
        iterative GCJ-02 inverse; otherwise the single-step approximation.

    Returns:
        CoordinatePoint: The coordinate in the target frame.
    """
    source, target = _normalize_frame(source), _normalize_frame(target)
    to_earth = encrypted_to_earth_exact if exact else encrypted_to_earth_approx

    if source == target:
        return CoordinatePoint(lng, lat)

    if source == WGS84:
        if target == GCJ02:
            return earth_to_encrypted(lng, lat)
        return earth_to_provider(lng, lat)

    if source == GCJ02:
        if target == WGS84:
            return to_earth(lng, lat)
        return encrypted_to_provider(lng, lat)

    point = provider_to_encrypted(lng, lat)
    if target == GCJ02:
        return point
    return to_earth(point.longitude, point.latitude)
