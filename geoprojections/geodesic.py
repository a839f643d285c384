"""
Geodesic direct problem on an ellipsoid of revolution.

Solves for the end point of a geodesic given a start point, an initial azimuth
and a distance, following C. F. F. Karney, "Algorithms for geodesics",
J. Geodesy 87, 43-55 (2013). All of the ellipsoidal corrections come from the
series in geoprojections.series.
"""

__all__ = ['DEFAULT_SERIES_ORDER', 'Geodesic']

import math
import sys
from typing import Dict, Tuple

import numpy as np

from geoprojections._const import WGS84_A, WGS84_F
from geoprojections.coordinates import GeographicCoord
from geoprojections.errors import ProjectionError
from geoprojections.series import (
    coeffs_a3, coeffs_c1, coeffs_c1p, coeffs_c2, coeffs_c3x,
    evaluate_a1, evaluate_a2, evaluate_coeffs_c3, horner_evaluate, sin_cos_series,
)
from geoprojections.utils.mixins import LoggingMixin

DEFAULT_SERIES_ORDER = 6

_TINY = math.sqrt(sys.float_info.min)


def _norm(sinx: float, cosx: float) -> Tuple[float, float]:
    r = math.hypot(sinx, cosx)
    return sinx / r, cosx / r


def _ang_normalize(x: float) -> float:
    """Reduce an angle in degrees to (-180, 180]"""
    y = math.remainder(x, 360.)
    return 180. if y == -180 else y


class Geodesic(LoggingMixin):
    """
    An ellipsoid of revolution on which geodesic problems are solved.

    Args:
        a:
            The equatorial radius, in meters

        f:
            The flattening; zero for a sphere, negative for a prolate ellipsoid

        order: (Default 6)
            The order of the series expansions
    """

    WGS84: 'Geodesic'

    def __init__(self, a: float, f: float, order: int = DEFAULT_SERIES_ORDER):
        super().__init__()
        if not a > 0:
            raise ProjectionError(-13)
        if not f < 1:
            raise ProjectionError(-6)

        self.a = a
        self.f = f
        self.order = order

        self._f1 = 1. - f
        self._e2 = f * (2. - f)
        self._ep2 = self._e2 / self._f1 ** 2
        self._n = f / (2. - f)
        self._b = a * self._f1

        self._a3x = coeffs_a3(order, self._n)
        self._c3x = coeffs_c3x(order, self._n)
        self.logger.debug(
            'Geodesic a=%s f=%s n=%s order=%s', a, f, self._n, order
        )

    def __repr__(self):
        return f'<Geodesic(a={self.a}, f={self.f}, order={self.order})>'

    def _c3f(self, eps: float) -> np.ndarray:
        coeffs = np.zeros(self.order)
        evaluate_coeffs_c3(coeffs, self._c3x, eps)
        return coeffs

    def direct(self, lat1: float, lon1: float, azi1: float, s12: float) -> Dict[str, float]:
        """
        Solve the direct geodesic problem.

        Args:
            lat1:
                Latitude of the start point, in degrees

            lon1:
                Longitude of the start point, in degrees

            azi1:
                Azimuth at the start point, in degrees clockwise from north

            s12:
                Distance to travel, in meters

        Returns:
            dict with keys lat1, lon1, azi1, s12, lat2, lon2, azi2 (degrees and
            meters), a12 (arc length on the auxiliary sphere, degrees) and m12
            (reduced length, meters)
        """
        order = self.order
        lat1 = math.nan if abs(lat1) > 90 else lat1
        azi1 = _ang_normalize(azi1)

        alp1 = math.radians(azi1)
        salp1, calp1 = math.sin(alp1), math.cos(alp1)
        phi1 = math.radians(lat1)
        sbet1, cbet1 = _norm(self._f1 * math.sin(phi1), math.cos(phi1))
        cbet1 = max(_TINY, cbet1)
        dn1 = math.sqrt(1 + self._ep2 * sbet1 ** 2)

        # Azimuth of the geodesic where it crosses the equator
        salp0 = salp1 * cbet1
        calp0 = math.hypot(calp1, salp1 * sbet1)

        ssig1 = sbet1
        somg1 = salp0 * sbet1
        csig1 = comg1 = cbet1 * calp1 if sbet1 != 0 or calp1 != 0 else 1.
        ssig1, csig1 = _norm(ssig1, csig1)

        k2 = calp0 ** 2 * self._ep2
        eps = k2 / (2 * (1 + math.sqrt(1 + k2)) + k2)

        a1m1 = evaluate_a1(eps, order)
        c1a = coeffs_c1(order, eps)
        b11 = sin_cos_series(ssig1, csig1, c1a)
        s, c = math.sin(b11), math.cos(b11)
        stau1 = ssig1 * c + csig1 * s
        ctau1 = csig1 * c - ssig1 * s
        c1pa = coeffs_c1p(order, eps)

        a2m1 = evaluate_a2(eps, order)
        c2a = coeffs_c2(order, eps)
        b21 = sin_cos_series(ssig1, csig1, c2a)

        c3a = self._c3f(eps)
        a3c = -self.f * salp0 * horner_evaluate(eps, self._a3x)
        b31 = sin_cos_series(ssig1, csig1, c3a)

        # Distance to arc length on the auxiliary sphere, via the reverted series
        tau12 = s12 / (self._b * (1 + a1m1))
        s, c = math.sin(tau12), math.cos(tau12)
        b12 = -sin_cos_series(stau1 * c + ctau1 * s, ctau1 * c - stau1 * s, c1pa)
        sig12 = tau12 - (b12 - b11)
        ssig12, csig12 = math.sin(sig12), math.cos(sig12)

        if abs(self.f) > 0.01:
            # The reverted series loses accuracy for large flattening; take one
            # Newton step on the forward series
            ssig2 = ssig1 * csig12 + csig1 * ssig12
            csig2 = csig1 * csig12 - ssig1 * ssig12
            b12 = sin_cos_series(ssig2, csig2, c1a)
            serr = (1 + a1m1) * (sig12 + (b12 - b11)) - s12 / self._b
            sig12 = sig12 - serr / math.sqrt(1 + k2 * ssig2 ** 2)
            ssig12, csig12 = math.sin(sig12), math.cos(sig12)

        ssig2 = ssig1 * csig12 + csig1 * ssig12
        csig2 = csig1 * csig12 - ssig1 * ssig12
        dn2 = math.sqrt(1 + k2 * ssig2 ** 2)
        if abs(self.f) > 0.01:
            b12 = sin_cos_series(ssig2, csig2, c1a)
        ab1 = (1 + a1m1) * (b12 - b11)

        sbet2 = calp0 * ssig2
        cbet2 = math.hypot(salp0, calp0 * csig2)
        if cbet2 == 0:
            # Geodesic ends at a pole
            cbet2 = csig2 = _TINY
        salp2 = salp0
        calp2 = calp0 * csig2

        somg2 = salp0 * ssig2
        comg2 = csig2
        omg12 = math.atan2(somg2 * comg1 - comg2 * somg1, comg2 * comg1 + somg2 * somg1)
        lam12 = omg12 + a3c * (sig12 + (sin_cos_series(ssig2, csig2, c3a) - b31))

        b22 = sin_cos_series(ssig2, csig2, c2a)
        ab2 = (1 + a2m1) * (b22 - b21)
        j12 = (a1m1 - a2m1) * sig12 + (ab1 - ab2)
        m12 = self._b * ((dn2 * (csig1 * ssig2) - dn1 * (ssig1 * csig2)) - csig1 * csig2 * j12)

        return {
            'lat1': lat1,
            'lon1': lon1,
            'azi1': azi1,
            's12': s12,
            'lat2': math.degrees(math.atan2(sbet2, self._f1 * cbet2)),
            'lon2': _ang_normalize(_ang_normalize(lon1) + _ang_normalize(math.degrees(lam12))),
            'azi2': math.degrees(math.atan2(salp2, calp2)),
            'a12': math.degrees(sig12),
            'm12': m12,
        }

    def destination(
        self,
        start: GeographicCoord,
        azimuth_degrees: float,
        distance: float,
    ) -> GeographicCoord:
        """
        Calculate the destination point given a start point, a heading and a distance.

        Args:
            start:
                The starting location

            azimuth_degrees:
                The heading, in degrees clockwise from north

            distance:
                The distance to travel, in meters

        Returns:
            GeographicCoord
        """
        lon1, lat1 = start.to_degrees()
        res = self.direct(lat1, lon1, azimuth_degrees, distance)
        return GeographicCoord.from_degrees(res['lon2'], res['lat2'])


Geodesic.WGS84 = Geodesic(WGS84_A, WGS84_F)
