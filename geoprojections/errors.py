"""
Error declarations for geoprojections.

Error codes follow the classic PROJ numbering so that failures can be matched
against the reference library's documentation.
"""

__all__ = ['ERROR_MESSAGES', 'ProjectionError']

from typing import Optional


ERROR_MESSAGES = {
    0: 'failed to construct projection',
    -5: 'unknown projection id',
    -6: 'effective eccentricity = 1.',
    -9: 'unknown elliptical parameter name',
    -12: 'squared eccentricity < 0',
    -13: 'major axis or radius = 0 or not given',
    -17: 'non-convergent inverse meridional dist',
    -21: 'conic lat_1 = -lat_2',
}


class ProjectionError(ValueError):
    """
    Raised when a projection (or one of its helper series) cannot be
    constructed from the supplied parameters.

    Args:
        code:
            The PROJ-style numeric error code

        message: (Optional)
            A message overriding the default one for this code
    """

    def __init__(self, code: int, message: Optional[str] = None):
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, 'unknown error')
        super().__init__(f'{self.message} (code {code})')
