"""
Representation of the coordinate pairs that flow in and out of projections.

Geographic and projected pairs are both just two floats, so they are kept as
separate types to stop one being passed where the other is expected.
"""

__all__ = ['GeographicCoord', 'PlanarCoord']

import math
from typing import Tuple, Union


class GeographicCoord:
    """A longitude/latitude pair on the ellipsoid, in radians"""

    def __init__(
        self,
        lon: Union[float, int, str],
        lat: Union[float, int, str],
    ):
        self.lon = float(lon)
        self.lat = float(lat)

    def __eq__(self, other):
        if not isinstance(other, GeographicCoord):
            return False

        return self.lon == other.lon and self.lat == other.lat

    def __hash__(self):
        return hash(('geographic', self.lon, self.lat))

    def __repr__(self):
        return f'<GeographicCoord({self.lon}, {self.lat})>'

    @classmethod
    def from_degrees(cls, lon: float, lat: float) -> 'GeographicCoord':
        """
        Creates a GeographicCoord from a longitude/latitude pair in decimal degrees.

        Args:
            lon:
                The longitude, in degrees

            lat:
                The latitude, in degrees

        Returns:
            GeographicCoord
        """
        return cls(math.radians(float(lon)), math.radians(float(lat)))

    def to_degrees(self) -> Tuple[float, float]:
        """
        Converts the coordinate to a (longitude, latitude) tuple in decimal degrees
        """
        return math.degrees(self.lon), math.degrees(self.lat)

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude), in radians.

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        if reverse:
            return self.lat, self.lon
        return self.lon, self.lat


class PlanarCoord:
    """An easting/northing pair in projected linear units"""

    def __init__(
        self,
        x: Union[float, int, str],
        y: Union[float, int, str],
    ):
        self.x = float(x)
        self.y = float(y)

    def __eq__(self, other):
        if not isinstance(other, PlanarCoord):
            return False

        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash(('planar', self.x, self.y))

    def __repr__(self):
        return f'<PlanarCoord({self.x}, {self.y})>'

    def to_float(self) -> Tuple[float, float]:
        """Converts the coordinate to a tuple of floats (x, y)"""
        return self.x, self.y
