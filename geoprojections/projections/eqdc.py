"""
Equidistant Conic projection; sphere and ellipsoid.
"""

__all__ = ['EquidistantConic']

import math
from typing import Tuple

import numpy as np

from geoprojections._const import EPS10, HALF_PI
from geoprojections.errors import ProjectionError
from geoprojections.mlfn import enfn, inv_mlfn, mlfn, msfn
from geoprojections.projections._base import ProjectionBase


class EquidistantConic(ProjectionBase):
    """
    Equidistant Conic projection, with distances true along the meridians.

    Standard parallels come from the projection parameters lat_1 and lat_2
    (radians), each defaulting to 0. Equal parallels give a tangent cone.
    """

    name = 'eqdc_ellipsoid'

    def _setup(self) -> None:
        params = self.params
        phi1 = params.get('lat_1', 0.)
        phi2 = params.get('lat_2', 0.)
        if abs(phi1 + phi2) < EPS10:
            raise ProjectionError(-21)

        self._phi1 = phi1
        self._phi2 = phi2
        self._en = enfn(params.es)
        self._n = sinphi = math.sin(phi1)
        cosphi = math.cos(phi1)
        secant = abs(phi1 - phi2) >= EPS10
        self._ellips = params.es > 0.

        if self._ellips:
            m1 = msfn(sinphi, cosphi, params.es)
            ml1 = mlfn(phi1, sinphi, cosphi, self._en)
            if secant:
                sinphi = math.sin(phi2)
                cosphi = math.cos(phi2)
                self._n = (
                    (m1 - msfn(sinphi, cosphi, params.es)) /
                    (mlfn(phi2, sinphi, cosphi, self._en) - ml1)
                )
            self._c = ml1 + m1 / self._n
            self._rho0 = self._c - mlfn(
                params.phi0, math.sin(params.phi0), math.cos(params.phi0), self._en
            )
        else:
            if secant:
                self._n = (cosphi - math.cos(phi2)) / (phi2 - phi1)
            self._c = phi1 + math.cos(phi1) / self._n
            self._rho0 = self._c - params.phi0

        self.logger.debug(
            '%s: n=%s c=%s rho0=%s secant=%s ellips=%s',
            self.name, self._n, self._c, self._rho0, secant, self._ellips
        )

    @property
    def phi1(self) -> float:
        return self._phi1

    @property
    def phi2(self) -> float:
        return self._phi2

    @property
    def n(self) -> float:
        """The cone constant"""
        return self._n

    @property
    def c(self) -> float:
        return self._c

    @property
    def rho0(self) -> float:
        """Radius of the reference parallel, for a unit semi-major axis"""
        return self._rho0

    @property
    def ellips(self) -> bool:
        return self._ellips

    @property
    def en(self) -> np.ndarray:
        return self._en

    def _forward(self, lam: float, phi: float) -> Tuple[float, float]:
        if self._ellips:
            rho = self._c - mlfn(phi, math.sin(phi), math.cos(phi), self._en)
        else:
            rho = self._c - phi
        lam *= self._n
        return rho * math.sin(lam), self._rho0 - rho * math.cos(lam)

    def _inverse(self, x: float, y: float) -> Tuple[float, float]:
        y = self._rho0 - y
        rho = math.hypot(x, y)
        if rho == 0.:
            return 0., HALF_PI if self._n > 0. else -HALF_PI

        if self._n < 0.:
            rho = -rho
            x = -x
            y = -y
        phi = self._c - rho
        if self._ellips:
            phi = inv_mlfn(phi, self.params.es, self._en)
        return math.atan2(x, y) / self._n, phi
