"""
Projection registry
"""

__all__ = [
    'CassiniEllipsoid', 'CassiniSpheroid', 'EckertIV', 'EquidistantConic', 'Face',
    'PROJECTIONS', 'ProjectionBase', 'QuadrilateralizedSphericalCube',
    'available_projections', 'cassini', 'create_projection',
]

from typing import Callable, Dict, List

from geoprojections.errors import ProjectionError
from geoprojections.parameters import ProjectionParameters
from geoprojections.projections._base import ProjectionBase
from geoprojections.projections.cass import CassiniEllipsoid, CassiniSpheroid, cassini
from geoprojections.projections.eck4 import EckertIV
from geoprojections.projections.eqdc import EquidistantConic
from geoprojections.projections.qsc import Face, QuadrilateralizedSphericalCube

PROJECTIONS: Dict[str, Callable[[ProjectionParameters], ProjectionBase]] = {
    'cass': cassini,
    'eck4': EckertIV,
    'eqdc': EquidistantConic,
    'qsc': QuadrilateralizedSphericalCube,
}


def available_projections() -> List[str]:
    """The registered projection identifiers, sorted"""
    return sorted(PROJECTIONS)


def create_projection(name: str, params: ProjectionParameters) -> ProjectionBase:
    """
    Creates a projection by its identifier.

    Args:
        name:
            The projection identifier, e.g. 'cass' or 'eqdc'

        params:
            The ellipsoid and projection parameters

    Returns:
        A projection instance

    Raises:
        ProjectionError (code -5) if the identifier is unknown, or the
        projection-specific error if the parameters are rejected
    """
    if name not in PROJECTIONS:
        raise ProjectionError(-5, f'unknown projection id: {name!r}')

    return PROJECTIONS[name](params)
