
from geoprojections._version import __version__  # noqa: F401
from geoprojections.utils.logging import LOGGER
from geoprojections.coordinates import GeographicCoord, PlanarCoord
from geoprojections.errors import ProjectionError
from geoprojections.parameters import ProjectionParameters
from geoprojections.geodesic import Geodesic
from geoprojections.projections import (
    CassiniEllipsoid, CassiniSpheroid, EckertIV, EquidistantConic,
    QuadrilateralizedSphericalCube, available_projections, create_projection
)

__all__ = [
    'CassiniEllipsoid',
    'CassiniSpheroid',
    'EckertIV',
    'EquidistantConic',
    'GeographicCoord',
    'Geodesic',
    'PlanarCoord',
    'ProjectionError',
    'ProjectionParameters',
    'QuadrilateralizedSphericalCube',
    'available_projections',
    'create_projection',
    'LOGGER',
]
