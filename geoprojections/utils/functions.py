"""Module for miscellaneous multi-use angle functions"""

__all__ = ['aasin', 'adjlon']

import math

from geoprojections._const import HALF_PI, TWO_PI
from geoprojections.utils.logging import warn_once

# Slightly larger than pi, so values a hair beyond +/-pi are left alone
_SPI = 3.14159265359

# Tolerance past +/-1 for asin arguments before a warning is raised
_ONE_TOL = 1.00000000000001


def adjlon(lon: float) -> float:
    """
    Reduce a longitude (radians) to the range [-pi, pi].

    Args:
        lon:
            The longitude, in radians

    Returns:
        (float) the equivalent longitude within +/- pi, or NaN when lon is
        not finite
    """
    if not math.isfinite(lon):
        return math.nan

    if abs(lon) <= _SPI:
        return lon

    lon += math.pi
    lon -= TWO_PI * math.floor(lon / TWO_PI)
    lon -= math.pi
    return lon


def aasin(value: float) -> float:
    """
    Arcsine that tolerates arguments marginally outside [-1, 1], clamping them
    to +/- pi/2. Arguments well outside the domain are clamped as well, but
    produce a (single) warning.
    """
    abs_value = abs(value)
    if abs_value >= 1.:
        if abs_value > _ONE_TOL:
            warn_once('asin argument out of range: |%s| > 1; result clamped', value)
        return -HALF_PI if value < 0. else HALF_PI

    return math.asin(value)
