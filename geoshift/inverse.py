"""
Inverse conversions: BD-09 -> GCJ-02 -> WGS-84

The GCJ-02 offset is a function of the WGS-84 coordinate, so it cannot be
undone in closed form. Two inverses are provided:

    encrypted_to_earth_approx:
        Subtracts the offset evaluated at the GCJ-02 coordinate. A single step;
        error is generally within a few meters.

    encrypted_to_earth_exact:
        Bisects a bracket around the GCJ-02 coordinate, re-applying the forward
        transform until it lands within `threshold` degrees of the target.
"""

__all__ = [
    'encrypted_to_earth_approx', 'encrypted_to_earth_exact',
    'provider_to_earth', 'provider_to_encrypted',
]

import math

from geoshift._const import (
    BD09_LAT_BIAS, BD09_LNG_BIAS, SOLVER_INITIAL_DELTA, SOLVER_MAX_ITERATIONS,
    SOLVER_THRESHOLD, X_PI
)
from geoshift.coordinates import CoordinatePoint
from geoshift.geofence import is_outside_obfuscation_region
from geoshift.offset import compute_offset
from geoshift.transforms import earth_to_encrypted
from geoshift.utils.logging import LOGGER


def encrypted_to_earth_approx(lng: float, lat: float) -> CoordinatePoint:
    """
    Convert a GCJ-02 coordinate to WGS-84 in a single step.

    Coordinates outside the obfuscation region are returned unchanged.
    """
    if is_outside_obfuscation_region(lng, lat):
        return CoordinatePoint(lng, lat)

    d_lng, d_lat = compute_offset(lng, lat)
    return CoordinatePoint(lng - d_lng, lat - d_lat)


def encrypted_to_earth_exact(
    lng: float,
    lat: float,
    *,
    threshold: float = SOLVER_THRESHOLD,
    max_iterations: int = SOLVER_MAX_ITERATIONS,
    initial_delta: float = SOLVER_INITIAL_DELTA,
) -> CoordinatePoint:
    """
    Convert a GCJ-02 coordinate to WGS-84 by bisection.

    The search starts from the bracket [lng +/- initial_delta, lat +/- initial_delta]
    and halves it independently on each axis, keeping whichever half the forward
    transform does not overshoot. If the iteration limit is reached first, the last
    candidate is returned and a warning is logged.

    Args:
        lng: (float)
            The GCJ-02 longitude, in degrees

        lat: (float)
            The GCJ-02 latitude, in degrees

        threshold: (float)
            (Default 1e-9) Maximum error, in degrees on each axis, of the forward
            transform of the result

        max_iterations: (int)
            (Default 10,000) Number of bisection steps after which to give up

        initial_delta: (float)
            (Default 0.01) Half-width of the starting bracket, in degrees

    Returns:
        CoordinatePoint
    """
    if threshold <= 0:
        raise ValueError(f'threshold must be positive, got {threshold}')
    if max_iterations < 1:
        raise ValueError(f'max_iterations must be at least 1, got {max_iterations}')
    if initial_delta <= 0:
        raise ValueError(f'initial_delta must be positive, got {initial_delta}')

    if is_outside_obfuscation_region(lng, lat):
        return CoordinatePoint(lng, lat)

    min_lng, max_lng = lng - initial_delta, lng + initial_delta
    min_lat, max_lat = lat - initial_delta, lat + initial_delta

    for _ in range(max_iterations):
        wgs_lng = (min_lng + max_lng) / 2
        wgs_lat = (min_lat + max_lat) / 2
        point = earth_to_encrypted(wgs_lng, wgs_lat)
        d_lng = point.longitude - lng
        d_lat = point.latitude - lat
        if abs(d_lat) < threshold and abs(d_lng) < threshold:
            break

        if d_lat > 0:
            max_lat = wgs_lat
        else:
            min_lat = wgs_lat

        if d_lng > 0:
            max_lng = wgs_lng
        else:
            min_lng = wgs_lng
    else:
        LOGGER.warning(
            'GCJ-02 inverse for (%s, %s) did not converge within %d iterations; '
            'residual is (%s, %s) degrees',
            lng, lat, max_iterations, d_lng, d_lat
        )

    return CoordinatePoint(wgs_lng, wgs_lat)


def provider_to_encrypted(lng: float, lat: float) -> CoordinatePoint:
    """
    Convert a BD-09 coordinate to GCJ-02.

    Mirrors `encrypted_to_provider`, but evaluates the perturbation terms at the
    BD-09 side of the conversion, so a round trip leaves a residual on the
    order of 1e-6 degrees.
    """
    x = lng - BD09_LNG_BIAS
    y = lat - BD09_LAT_BIAS
    z = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * X_PI)
    theta = math.atan2(y, x) - 0.000003 * math.cos(x * X_PI)
    return CoordinatePoint(z * math.cos(theta), z * math.sin(theta))


def provider_to_earth(lng: float, lat: float) -> CoordinatePoint:
    """Convert a BD-09 coordinate to WGS-84, by way of GCJ-02"""
    point = provider_to_encrypted(lng, lat)
    return encrypted_to_earth_exact(point.longitude, point.latitude)
