"""
Meridian distance helpers shared by the ellipsoidal projections.

The meridian arc is expressed on an ellipsoid with unit semi-major axis as a
truncated series in the squared eccentricity; enfn() precomputes its
coefficients once so mlfn() is a plain polynomial evaluation.
"""

__all__ = ['enfn', 'inv_mlfn', 'mlfn', 'msfn']

import math

import numpy as np

from geoprojections._const import EN_SIZE
from geoprojections.errors import ProjectionError
from geoprojections.utils.logging import LOGGER

_C00 = 1.
_C02 = .25
_C04 = .046875
_C06 = .01953125
_C08 = .01068115234375
_C22 = .75
_C44 = .46875
_C46 = .01302083333333333333
_C48 = .00712076822916666666
_C66 = .36458333333333333333
_C68 = .00569661458333333333
_C88 = .3076171875

MLFN_EPS = 1e-11
MLFN_MAX_ITER = 10


def enfn(es: float) -> np.ndarray:
    """
    Compute the meridian-arc series coefficients for an ellipsoid.

    Args:
        es:
            The squared eccentricity

    Returns:
        A read-only numpy array of EN_SIZE coefficients

    Raises:
        ProjectionError (code 0) if the eccentricity cannot describe an ellipsoid
    """
    if not (math.isfinite(es) and 0. <= es < 1.):
        LOGGER.debug('Cannot build meridian-arc series for es=%s', es)
        raise ProjectionError(0, f'cannot build meridian-arc series for es={es}')

    en = np.empty(EN_SIZE, dtype=np.float64)
    en[0] = _C00 - es * (_C02 + es * (_C04 + es * (_C06 + es * _C08)))
    en[1] = es * (_C22 - es * (_C04 + es * (_C06 + es * _C08)))
    t = es * es
    en[2] = t * (_C44 - es * (_C46 + es * _C48))
    t *= es
    en[3] = t * (_C66 - es * _C68)
    en[4] = t * es * _C88
    en.flags.writeable = False
    return en


def mlfn(phi: float, sphi: float, cphi: float, en: np.ndarray) -> float:
    """
    Meridian distance from the equator to latitude phi, for a unit semi-major axis.

    Args:
        phi:
            The latitude, in radians

        sphi:
            sin(phi)

        cphi:
            cos(phi)

        en:
            Coefficients produced by enfn()

    Returns:
        (float) the meridian arc length
    """
    cphi *= sphi
    sphi *= sphi
    return float(
        en[0] * phi - cphi * (en[1] + sphi * (en[2] + sphi * (en[3] + sphi * en[4])))
    )


def inv_mlfn(arg: float, es: float, en: np.ndarray) -> float:
    """
    Latitude whose meridian distance is arg, found by Newton iteration.

    Args:
        arg:
            The meridian distance (unit semi-major axis)

        es:
            The squared eccentricity

        en:
            Coefficients produced by enfn()

    Returns:
        (float) the latitude, in radians; NaN when arg is not finite

    Raises:
        ProjectionError (code -17) if the iteration does not converge within
        MLFN_MAX_ITER steps
    """
    if not math.isfinite(arg):
        return math.nan

    k = 1. / (1. - es)
    phi = arg
    for _ in range(MLFN_MAX_ITER):
        s = math.sin(phi)
        t = 1. - es * s * s
        t = (mlfn(phi, s, math.cos(phi), en) - arg) * (t * math.sqrt(t)) * k
        phi -= t
        if abs(t) < MLFN_EPS:
            return phi

    raise ProjectionError(-17)


def msfn(sinphi: float, cosphi: float, es: float) -> float:
    """Radius of the parallel at a latitude, for a unit semi-major axis"""
    return cosphi / math.sqrt(1. - es * sinphi * sinphi)
