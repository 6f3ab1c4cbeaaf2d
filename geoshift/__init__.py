from geoshift._version import __version__  # noqa: F401
from geoshift.utils.logging import LOGGER
from geoshift.coordinates import CoordinatePoint
from geoshift.geofence import is_outside_obfuscation_region
from geoshift.offset import compute_offset
from geoshift.transforms import earth_to_encrypted, earth_to_provider, encrypted_to_provider
from geoshift.inverse import (
    encrypted_to_earth_approx, encrypted_to_earth_exact,
    provider_to_earth, provider_to_encrypted
)
from geoshift.conversion import convert


__all__ = [
    'CoordinatePoint',
    'compute_offset',
    'convert',
    'earth_to_encrypted',
    'earth_to_provider',
    'encrypted_to_earth_approx',
    'encrypted_to_earth_exact',
    'encrypted_to_provider',
    'is_outside_obfuscation_region',
    'provider_to_earth',
    'provider_to_encrypted',
    'LOGGER',
]
