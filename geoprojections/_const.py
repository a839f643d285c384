"""
Constants declarations for geoprojections
"""
import math

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_B = (1 - WGS84_F) * WGS84_A

# Mean Earth Radius (authalic sphere)
EARTH_RADIUS_METERS = 6_371_000.0

# Named ellipsoids as (semi-major axis, inverse flattening); 0 means sphere
ELLIPSOIDS = {
    'WGS84': (6378137.0, 298.257223563),
    'GRS80': (6378137.0, 298.257222101),
    'clrk66': (6378206.4, 294.9786982),
    'intl': (6378388.0, 297.0),
    'sphere': (EARTH_RADIUS_METERS, 0.),
}

HALF_PI = math.pi / 2
FORT_PI = math.pi / 4
TWO_PI = math.pi * 2

EPS10 = 1e-10

# Number of meridian-arc series coefficients
EN_SIZE = 5
