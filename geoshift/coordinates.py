"""
Representation of a longitude/latitude pair in one of the Chinese map frames
"""

__all__ = ['CoordinatePoint']

from typing import Tuple, Union

from geoshift.utils.logging import warn_once


class CoordinatePoint:
    """
    An immutable (longitude, latitude) pair, in degrees.

    No bounds checking or normalization is performed; the frame the values
    belong to (WGS-84, GCJ-02 or BD-09) is known only to the caller.
    """

    __slots__ = ('_longitude', '_latitude')

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
    ):
        object.__setattr__(self, '_longitude', float(longitude))
        object.__setattr__(self, '_latitude', float(latitude))

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def latitude(self) -> float:
        return self._latitude

    def __eq__(self, other):
        if not isinstance(other, CoordinatePoint):
            return False

        return (
            self.longitude == other.longitude and
            self.latitude == other.latitude
        )

    def __hash__(self):
        return hash((self.longitude, self.latitude))

    def __repr__(self):
        return f'<CoordinatePoint({self.longitude}, {self.latitude})>'

    def __str__(self):
        return f'{self.longitude},{self.latitude}'

    @classmethod
    def from_str(cls, coord_str: str):
        """
        Create a CoordinatePoint from its canonical "<lng>,<lat>" rendering.

        Any fields past the second are discarded.

        Args:
            coord_str:
                A comma-separated longitude, latitude pair, e.g. "113.3,23.1"

        Returns:
            CoordinatePoint
        """
        parts = [x.strip() for x in coord_str.split(',')]
        if len(parts) < 2:
            raise ValueError(f'Invalid coordinate string: {coord_str!r}')

        if len(parts) > 2:
            warn_once(
                'Coordinate strings may only contain a longitude and latitude; '
                'additional values will be ignored. (this warning will not repeat)'
            )

        try:
            return cls(float(parts[0]), float(parts[1]))
        except ValueError as exc:
            raise ValueError(f'Invalid coordinate string: {coord_str!r}') from exc

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        if reverse:
            return self.latitude, self.longitude

        return self.longitude, self.latitude

    def to_str(self, reverse: bool = False) -> Tuple[str, str]:
        """
        Converts the point to a tuple of strings (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        lng, lat = self.to_float(reverse)
        return str(lng), str(lat)

    def to_frame(self, source: str, target: str, exact: bool = True) -> 'CoordinatePoint':
        """
        Convert this point from one map frame to another.

        Args:
            source:
                The frame this point is expressed in, one of 'wgs84', 'gcj02', 'bd09'
                (or 'earth', 'encrypted', 'provider')

            target:
                The frame to convert to

            exact:
                (Default True) Use the iterative solver when converting out of GCJ-02
                towards WGS-84; if False, the single-step approximation is used.

        Returns:
            A new CoordinatePoint in the target frame
        """
        from geoshift.conversion import convert  # pylint: disable=import-outside-toplevel

        return convert(self.longitude, self.latitude, source, target, exact=exact)
