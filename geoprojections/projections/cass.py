"""
Cassini (Cassini-Soldner) projection; transverse cylindrical, sphere and ellipsoid.
"""

__all__ = ['CassiniEllipsoid', 'CassiniSpheroid', 'cassini']

import math
from typing import Tuple

import numpy as np

from geoprojections.mlfn import enfn, inv_mlfn, mlfn
from geoprojections.parameters import ProjectionParameters
from geoprojections.projections._base import ProjectionBase

# Coefficients of the classical series; 1/6, 1/120, 1/24, 1/3, 1/15
C1 = .16666666666666666666
C2 = .00833333333333333333
C3 = .04166666666666666666
C4 = .33333333333333333333
C5 = .06666666666666666666


class CassiniEllipsoid(ProjectionBase):
    """Cassini projection on an ellipsoid, by truncated power series"""

    name = 'cass_ellipsoid'

    def _setup(self) -> None:
        phi0 = self.params.phi0
        self._en = enfn(self.params.es)
        self._m0 = mlfn(phi0, math.sin(phi0), math.cos(phi0), self._en)
        self.logger.debug('%s: m0=%s en=%s', self.name, self._m0, self._en)

    @property
    def m0(self) -> float:
        """Meridian distance to the reference latitude"""
        return self._m0

    @property
    def en(self) -> np.ndarray:
        return self._en

    def _forward(self, lam: float, phi: float) -> Tuple[float, float]:
        es = self.params.es
        n = math.sin(phi)
        c = math.cos(phi)
        y = mlfn(phi, n, c, self._en)
        n = 1. / math.sqrt(1. - es * n * n)
        tn = math.tan(phi)
        t = tn * tn
        a1 = lam * c
        c *= es * c / (1 - es)
        a2 = a1 * a1
        x = n * a1 * (1. - a2 * t * (C1 - (8. - t + 8. * c) * a2 * C2))
        y -= self._m0 - n * tn * a2 * (.5 + (5. - t + 6. * c) * a2 * C3)
        return x, y

    def _inverse(self, x: float, y: float) -> Tuple[float, float]:
        es = self.params.es
        ph1 = inv_mlfn(self._m0 + y, es, self._en)
        tn = math.tan(ph1)
        t = tn * tn
        n = math.sin(ph1)
        r = 1. / (1. - es * n * n)
        n = math.sqrt(r)
        r *= (1. - es) * n
        dd = x / n
        d2 = dd * dd
        phi = ph1 - (n * tn / r) * d2 * (.5 - (1. + 3. * t) * d2 * C3)
        lam = dd * (1. + t * d2 * (-C4 + (1. + 3. * t) * d2 * C5)) / math.cos(ph1)
        return lam, phi


class CassiniSpheroid(ProjectionBase):
    """Cassini projection on a sphere, in closed form"""

    name = 'cass_spheroid'

    def _forward(self, lam: float, phi: float) -> Tuple[float, float]:
        x = math.asin(math.cos(phi) * math.sin(lam))
        y = math.atan2(math.tan(phi), math.cos(lam)) - self.params.phi0
        return x, y

    def _inverse(self, x: float, y: float) -> Tuple[float, float]:
        dd = y + self.params.phi0
        phi = math.asin(math.sin(dd) * math.cos(x))
        lam = math.atan2(math.tan(x), math.cos(dd))
        return lam, phi


def cassini(params: ProjectionParameters) -> ProjectionBase:
    """Create the Cassini variant matching the eccentricity of params"""
    if params.es:
        return CassiniEllipsoid(params)
    return CassiniSpheroid(params)
