"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Mixin class for logging. Loggers are children of the package logger, so
    setting the level on geoprojections.LOGGER applies to every projection.
    """
    logger: logging.Logger

    def __init__(self):
        _class = self.__class__
        self.logger = logging.getLogger(f'{_class.__module__}.{_class.__qualname__}')
