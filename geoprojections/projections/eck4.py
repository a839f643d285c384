"""
Eckert IV projection; pseudocylindrical, equal-area, sphere only.
"""

__all__ = ['EckertIV']

import math
from typing import Tuple

from geoprojections.projections._base import ProjectionBase
from geoprojections.utils.functions import aasin

C_X = .42223820031577120149
C_Y = 1.32650042817700232218
C_P = 3.57079632679489661922

# Newton iteration limit and step tolerance for the auxiliary angle
EPS = 1e-7
NITER = 6


class EckertIV(ProjectionBase):
    """
    Eckert IV projection. The ellipsoid, if any, is replaced by a sphere with
    the same semi-major axis.
    """

    name = 'eck4_spheroid'

    def _setup(self) -> None:
        self._params = self._params.with_sphere()

    def _forward(self, lam: float, phi: float) -> Tuple[float, float]:
        # Solve theta + sin(theta) * (cos(theta) + 2) = C_P * sin(phi), seeding
        # theta with a polynomial fit in phi**2
        p = C_P * math.sin(phi)
        v = phi * phi
        theta = phi * (0.895168 + v * (0.0218849 + v * 0.00826809))
        for _ in range(NITER):
            c = math.cos(theta)
            s = math.sin(theta)
            v = (theta + s * (c + 2.) - p) / (1. + c * (c + 2.) - s * s)
            theta -= v
            if abs(v) < EPS:
                break
        else:
            # Root is ill-conditioned near the poles; use the limiting values
            self.logger.debug('%s: no convergence at phi=%s, using pole limit', self.name, phi)
            return C_X * lam, -C_Y if theta < 0. else C_Y

        return C_X * lam * (1. + math.cos(theta)), C_Y * math.sin(theta)

    def _inverse(self, x: float, y: float) -> Tuple[float, float]:
        theta = aasin(y / C_Y)
        c = math.cos(theta)
        lam = x / (C_X * (1. + c))
        phi = aasin((theta + math.sin(theta) * (c + 2.)) / C_P)
        return lam, phi
