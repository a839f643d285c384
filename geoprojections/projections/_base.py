"""
Base class declarations for projections
"""

__all__ = ['ProjectionBase']

from abc import ABC, abstractmethod
import math
from typing import Tuple

from geoprojections.coordinates import GeographicCoord, PlanarCoord
from geoprojections.errors import ProjectionError
from geoprojections.parameters import ProjectionParameters
from geoprojections.utils.functions import adjlon
from geoprojections.utils.mixins import LoggingMixin


def _finite_or_nan(value: float) -> float:
    # math.sin and friends raise on infinities instead of returning NaN
    return value if math.isfinite(value) else math.nan


class ProjectionBase(LoggingMixin, ABC):
    """
    A map projection bound to an immutable parameter record.

    Subclasses derive their constants once in _setup() and implement the
    kernels _forward() and _inverse(), which work on an ellipsoid with unit
    semi-major axis and with longitudes relative to the central meridian.
    This class handles the central meridian, the scaling by the semi-major
    axis and the false easting/northing.

    Args:
        params:
            The ellipsoid and projection parameters

    Raises:
        ProjectionError if the parameters cannot define this projection
    """

    name: str = ''

    def __init__(self, params: ProjectionParameters):
        super().__init__()
        self._params = params
        try:
            self._setup()
        except ProjectionError as exc:
            self.logger.debug('Cannot construct %s from %r: %s', self.name, params, exc)
            raise

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.name})>'

    @property
    def params(self) -> ProjectionParameters:
        return self._params

    def _setup(self) -> None:
        """Derive the projection-specific constants; runs once, at construction"""

    @abstractmethod
    def _forward(self, lam: float, phi: float) -> Tuple[float, float]:
        """Project (lam, phi) in radians to (x, y) on the unit ellipsoid"""

    @abstractmethod
    def _inverse(self, x: float, y: float) -> Tuple[float, float]:
        """Project (x, y) on the unit ellipsoid back to (lam, phi) in radians"""

    def forward_raw(self, lon: float, lat: float) -> Tuple[float, float]:
        """
        Project a bare longitude/latitude pair (radians) to (x, y).

        No domain checks are made; inputs outside the projection's domain
        produce NaN or infinite results. A non-finite lon or lat is treated
        as NaN.
        """
        params = self._params
        x, y = self._forward(adjlon(lon - params.lam0), _finite_or_nan(lat))
        return params.a * x + params.x0, params.a * y + params.y0

    def inverse_raw(self, x: float, y: float) -> Tuple[float, float]:
        """Unproject a bare (x, y) pair to (longitude, latitude) in radians"""
        params = self._params
        lam, phi = self._inverse(
            _finite_or_nan((x - params.x0) * params.ra),
            _finite_or_nan((y - params.y0) * params.ra),
        )
        return adjlon(lam + params.lam0), phi

    def forward(self, coord: GeographicCoord) -> PlanarCoord:
        """
        Project a geographic coordinate.

        Args:
            coord:
                The longitude/latitude pair, in radians

        Returns:
            PlanarCoord
        """
        if not isinstance(coord, GeographicCoord):
            raise TypeError(f'forward() expects a GeographicCoord, not {type(coord).__name__}')

        return PlanarCoord(*self.forward_raw(coord.lon, coord.lat))

    def inverse(self, coord: PlanarCoord) -> GeographicCoord:
        """
        Unproject a planar coordinate.

        Args:
            coord:
                The x/y pair, in projected linear units

        Returns:
            GeographicCoord
        """
        if not isinstance(coord, PlanarCoord):
            raise TypeError(f'inverse() expects a PlanarCoord, not {type(coord).__name__}')

        return GeographicCoord(*self.inverse_raw(coord.x, coord.y))
