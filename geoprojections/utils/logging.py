"""
Package logger. Every projection and geodesic logs to a child of
'geoprojections', so a single level change here silences or enables all of
them.
"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('geoprojections')
LOGGER.setLevel(logging.WARNING)

if not LOGGER.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
    LOGGER.addHandler(_handler)

_WARNED = set()


def warn_once(msg: str, *args) -> None:
    """
    Log a warning on the package logger, at most once per rendered message.

    Args:
        msg:
            A %-style format string

        *args:
            Arguments merged into msg

    Returns:
        None
    """
    rendered = msg % args if args else msg
    if rendered in _WARNED:
        return

    _WARNED.add(rendered)
    LOGGER.warning(rendered)
