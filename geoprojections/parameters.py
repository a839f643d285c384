"""
The ellipsoid/parameter record shared by every projection
"""

__all__ = ['ProjectionParameters']

import math
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from pydantic import validate_call

from geoprojections._const import ELLIPSOIDS, EARTH_RADIUS_METERS
from geoprojections.errors import ProjectionError


class ProjectionParameters:
    """
    Immutable record describing the ellipsoid and the projection's origin.

    Args:
        a:
            The semi-major axis (or sphere radius), in linear units

        es:
            The squared eccentricity; zero for a sphere

        phi0: (Default 0.0)
            The reference latitude, in radians

        lam0: (Default 0.0)
            The reference (central) longitude, in radians

        x0: (Default 0.0)
            False easting, in linear units

        y0: (Default 0.0)
            False northing, in linear units

        params: (Optional)
            Named projection-specific parameters, e.g. {'lat_1': ..., 'lat_2': ...}.
            Angular values are in radians.
    """

    _FIELDS = ('a', 'es', 'phi0', 'lam0', 'x0', 'y0')

    @validate_call
    def __init__(
        self,
        a: float,
        es: float,
        phi0: float = 0.,
        lam0: float = 0.,
        x0: float = 0.,
        y0: float = 0.,
        params: Optional[Dict[str, float]] = None,
    ):
        if not a > 0:
            raise ProjectionError(-13)
        if es < 0:
            raise ProjectionError(-12)
        if not es < 1:
            raise ProjectionError(-6)

        for name, value in zip(self._FIELDS, (a, es, phi0, lam0, x0, y0)):
            object.__setattr__(self, name, value)
        object.__setattr__(self, '_params', MappingProxyType(dict(params or {})))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, key):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, ProjectionParameters):
            return False

        return (
            all(getattr(self, x) == getattr(other, x) for x in self._FIELDS) and
            dict(self._params) == dict(other._params)
        )

    def __hash__(self):
        return hash(
            tuple(getattr(self, x) for x in self._FIELDS) +
            (frozenset(self._params.items()),)
        )

    def __repr__(self):
        extras = ''.join(f', {k}={v}' for k, v in self._params.items())
        return (
            f'<ProjectionParameters(a={self.a}, es={self.es}, phi0={self.phi0}, '
            f'lam0={self.lam0}{extras})>'
        )

    @property
    def params(self) -> Mapping[str, float]:
        """Read-only view of the named projection-specific parameters"""
        return self._params

    @property
    def e(self) -> float:
        """The eccentricity"""
        return math.sqrt(self.es)

    @property
    def one_es(self) -> float:
        return 1. - self.es

    @property
    def rone_es(self) -> float:
        return 1. / (1. - self.es)

    @property
    def ra(self) -> float:
        """Reciprocal of the semi-major axis"""
        return 1. / self.a

    @property
    def is_sphere(self) -> bool:
        return self.es == 0.

    def get(self, name: str, default: Any = None) -> Any:
        """Read a named projection-specific parameter"""
        return self._params.get(name, default)

    def with_sphere(self) -> 'ProjectionParameters':
        """Returns a copy of these parameters with the eccentricity forced to zero"""
        return ProjectionParameters(
            self.a, 0., self.phi0, self.lam0, self.x0, self.y0, dict(self._params)
        )

    @classmethod
    def from_ellipsoid(
        cls,
        ellps: str = 'WGS84',
        lat_0: float = 0.,
        lon_0: float = 0.,
        x_0: float = 0.,
        y_0: float = 0.,
        **params: float,
    ) -> 'ProjectionParameters':
        """
        Creates parameters from a named ellipsoid, with all angles given in
        decimal degrees.

        Args:
            ellps:
                One of 'WGS84', 'GRS80', 'clrk66', 'intl' or 'sphere'

            lat_0:
                The reference latitude, in degrees

            lon_0:
                The central longitude, in degrees

            x_0:
                False easting

            y_0:
                False northing

        Keyword Args:
            Any additional projection parameters (e.g. lat_1, lat_2), in degrees

        Returns:
            ProjectionParameters
        """
        if ellps not in ELLIPSOIDS:
            raise ProjectionError(-9, f'unknown elliptical parameter name: {ellps!r}')

        a, rf = ELLIPSOIDS[ellps]
        f = 1. / rf if rf else 0.
        return cls(
            a,
            f * (2. - f),
            math.radians(lat_0),
            math.radians(lon_0),
            x_0,
            y_0,
            {k: math.radians(v) for k, v in params.items()},
        )

    @classmethod
    def sphere(
        cls,
        radius: float = EARTH_RADIUS_METERS,
        lat_0: float = 0.,
        lon_0: float = 0.,
        **params: float,
    ) -> 'ProjectionParameters':
        """
        Creates spherical parameters, with all angles given in decimal degrees.

        Args:
            radius:
                The sphere radius, in linear units

            lat_0:
                The reference latitude, in degrees

            lon_0:
                The central longitude, in degrees

        Keyword Args:
            Any additional projection parameters (e.g. lat_1, lat_2), in degrees
        """
        return cls(
            radius,
            0.,
            math.radians(lat_0),
            math.radians(lon_0),
            params={k: math.radians(v) for k, v in params.items()},
        )
