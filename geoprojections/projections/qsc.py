"""
Quadrilateralized Spherical Cube (QSC) projection.

The sphere is projected onto the face of a circumscribed cube chosen from the
projection's origin, with equal-area mapping inside each face. Ellipsoids are
handled by a shift between geodetic and geocentric latitude before and after
the spherical mapping.

References:
    [OL76] E.M. O'Neill and R.E. Laubscher, "Extended Studies of a
           Quadrilateralized Spherical Cube Earth Data Base", 1976.
    [LK12] M. Lambers and A. Kolb, "Ellipsoidal Cube Maps for Accurate
           Rendering of Planetary-Scale Terrain Data", 2012.
"""

__all__ = ['Face', 'QuadrilateralizedSphericalCube', 'select_face']

from enum import IntEnum
import math
from typing import Tuple

from geoprojections._const import EPS10, FORT_PI, HALF_PI, TWO_PI
from geoprojections.projections._base import ProjectionBase

# The four areas on a cube face; AREA_0 is the area of definition, the
# others follow counterclockwise
AREA_0 = 0
AREA_1 = 1
AREA_2 = 2
AREA_3 = 3


class Face(IntEnum):
    FRONT = 0
    RIGHT = 1
    BACK = 2
    LEFT = 3
    TOP = 4
    BOTTOM = 5


def _equat_face_theta(phi: float, y: float, x: float) -> Tuple[float, int]:
    """Theta angle and area number for a point on an equatorial face"""
    if phi < EPS10:
        return 0., AREA_0

    theta = math.atan2(y, x)
    if abs(theta) <= FORT_PI:
        return theta, AREA_0
    if FORT_PI < theta <= HALF_PI + FORT_PI:
        return theta - HALF_PI, AREA_1
    if theta > HALF_PI + FORT_PI or theta <= -(HALF_PI + FORT_PI):
        return (theta - math.pi if theta >= 0. else theta + math.pi), AREA_2
    return theta + HALF_PI, AREA_3


def _shift_lon_origin(lon: float, offset: float) -> float:
    slon = lon + offset
    if slon < -math.pi:
        slon += TWO_PI
    elif slon > math.pi:
        slon -= TWO_PI
    return slon


# Longitude offsets that bring each equatorial face to the front
_FACE_LON_SHIFT = {
    Face.RIGHT: HALF_PI,
    Face.BACK: math.pi,
    Face.LEFT: -HALF_PI,
}


def select_face(phi0: float, lam0: float) -> Face:
    """Cube face containing the projection origin"""
    if phi0 >= HALF_PI - FORT_PI / 2.:
        return Face.TOP
    if phi0 <= -(HALF_PI - FORT_PI / 2.):
        return Face.BOTTOM
    if abs(lam0) <= FORT_PI:
        return Face.FRONT
    if abs(lam0) <= HALF_PI + FORT_PI:
        return Face.RIGHT if lam0 > 0. else Face.LEFT
    return Face.BACK


class QuadrilateralizedSphericalCube(ProjectionBase):
    """
    Quadrilateralized Spherical Cube projection onto a single cube face,
    for the sphere and the ellipsoid.
    """

    name = 'qsc_ellipsoid'

    def _setup(self) -> None:
        params = self.params
        self._face = select_face(params.phi0, params.lam0)
        self._a_squared = params.a * params.a
        self._b = params.a * math.sqrt(1. - params.es)
        self._one_minus_f = 1. - (params.a - self._b) / params.a
        self._one_minus_f_squared = self._one_minus_f * self._one_minus_f
        self.logger.debug('%s: projecting onto the %s face', self.name, self._face.name)

    @property
    def face(self) -> Face:
        return self._face

    @property
    def a_squared(self) -> float:
        return self._a_squared

    @property
    def b(self) -> float:
        """The semi-minor axis"""
        return self._b

    @property
    def one_minus_f(self) -> float:
        return self._one_minus_f

    @property
    def one_minus_f_squared(self) -> float:
        return self._one_minus_f_squared

    def _forward(self, lam: float, phi: float) -> Tuple[float, float]:
        face = self._face

        # Geodetic to geocentric latitude
        if self.params.es:
            lat = math.atan(self._one_minus_f_squared * math.tan(phi))
        else:
            lat = phi

        lon = lam
        if face == Face.TOP:
            phi = HALF_PI - lat
            if FORT_PI <= lon <= HALF_PI + FORT_PI:
                area, theta = AREA_0, lon - HALF_PI
            elif lon > HALF_PI + FORT_PI or lon <= -(HALF_PI + FORT_PI):
                area = AREA_1
                theta = lon - math.pi if lon > 0. else lon + math.pi
            elif -(HALF_PI + FORT_PI) < lon <= -FORT_PI:
                area, theta = AREA_2, lon + HALF_PI
            else:
                area, theta = AREA_3, lon
        elif face == Face.BOTTOM:
            phi = HALF_PI + lat
            if FORT_PI <= lon <= HALF_PI + FORT_PI:
                area, theta = AREA_0, -lon + HALF_PI
            elif -FORT_PI <= lon < FORT_PI:
                area, theta = AREA_1, -lon
            elif -(HALF_PI + FORT_PI) <= lon < -FORT_PI:
                area, theta = AREA_2, -lon - HALF_PI
            else:
                area = AREA_3
                theta = -lon + math.pi if lon > 0. else -lon - math.pi
        else:
            # Equatorial faces go through unit sphere cartesian coordinates
            if face in _FACE_LON_SHIFT:
                lon = _shift_lon_origin(lon, _FACE_LON_SHIFT[face])
            coslat = math.cos(lat)
            q = coslat * math.cos(lon)
            r = coslat * math.sin(lon)
            s = math.sin(lat)
            if face == Face.FRONT:
                phi = math.acos(q)
                theta, area = _equat_face_theta(phi, s, r)
            elif face == Face.RIGHT:
                phi = math.acos(r)
                theta, area = _equat_face_theta(phi, s, -q)
            elif face == Face.BACK:
                phi = math.acos(-q)
                theta, area = _equat_face_theta(phi, s, -r)
            else:
                phi = math.acos(-r)
                theta, area = _equat_face_theta(phi, s, q)

        # mu from Eq. (3-21) of [OL76], corrected against Eq. (3-14); t is tan(nu)
        mu = math.atan(
            (12. / math.pi) * (theta + math.acos(math.sin(theta) * math.cos(FORT_PI)) - HALF_PI)
        )
        t = math.sqrt(
            (1. - math.cos(phi)) / (math.cos(mu) * math.cos(mu)) /
            (1. - math.cos(math.atan(1. / math.cos(theta))))
        )

        mu += area * HALF_PI
        return t * math.cos(mu), t * math.sin(mu)

    def _inverse(self, x: float, y: float) -> Tuple[float, float]:
        face = self._face

        nu = math.atan(math.sqrt(x * x + y * y))
        mu = math.atan2(y, x)
        if x >= 0. and x >= abs(y):
            area = AREA_0
        elif y >= 0. and y >= abs(x):
            area = AREA_1
            mu -= HALF_PI
        elif x < 0. and -x >= abs(y):
            area = AREA_2
            mu = mu + math.pi if mu < 0. else mu - math.pi
        else:
            area = AREA_3
            mu += HALF_PI

        t = (math.pi / 12.) * math.tan(mu)
        theta = math.atan(math.sin(t) / (math.cos(t) - (1. / math.sqrt(2.))))
        cosmu = math.cos(mu)
        tannu = math.tan(nu)
        cosphi = 1. - cosmu * cosmu * tannu * tannu * (1. - math.cos(math.atan(1. / math.cos(theta))))
        cosphi = min(max(cosphi, -1.), 1.)

        if face == Face.TOP:
            lat = HALF_PI - math.acos(cosphi)
            if area == AREA_0:
                lon = theta + HALF_PI
            elif area == AREA_1:
                lon = theta + math.pi if theta < 0. else theta - math.pi
            elif area == AREA_2:
                lon = theta - HALF_PI
            else:
                lon = theta
        elif face == Face.BOTTOM:
            lat = math.acos(cosphi) - HALF_PI
            if area == AREA_0:
                lon = -theta + HALF_PI
            elif area == AREA_1:
                lon = -theta
            elif area == AREA_2:
                lon = -theta - HALF_PI
            else:
                lon = -theta - math.pi if theta < 0. else -theta + math.pi
        else:
            q = cosphi
            t = q * q
            s = 0. if t >= 1. else math.sqrt(1. - t) * math.sin(theta)
            t += s * s
            r = 0. if t >= 1. else math.sqrt(1. - t)

            # Rotate into the area, then onto the face
            if area == AREA_1:
                r, s = -s, r
            elif area == AREA_2:
                r, s = -r, -s
            elif area == AREA_3:
                r, s = s, -r

            if face == Face.RIGHT:
                q, r = -r, q
            elif face == Face.BACK:
                q, r = -q, -r
            elif face == Face.LEFT:
                q, r = r, -q

            lat = math.acos(-s) - HALF_PI
            lon = math.atan2(r, q)
            if face in _FACE_LON_SHIFT:
                lon = _shift_lon_origin(lon, -_FACE_LON_SHIFT[face])

        # Geocentric back to geodetic latitude
        if self.params.es:
            tanphi = math.tan(lat)
            xa = self._b / math.sqrt(tanphi * tanphi + self._one_minus_f_squared)
            geodetic = math.atan(
                math.sqrt(self._a_squared - xa * xa) / (self._one_minus_f * xa)
            )
            lat = -geodetic if lat < 0. else geodetic

        return lon, lat
