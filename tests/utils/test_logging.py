import logging
import re

from geoprojections.utils.logging import LOGGER, warn_once


def test_logger():
    assert LOGGER.name == 'geoprojections'
    assert LOGGER.level == logging.WARNING
    assert len(LOGGER.handlers) == 1


def test_warn_once(caplog):
    warn_once('test')
    assert 'test' in caplog.text

    warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1


def test_warn_once_formats_arguments(caplog):
    warn_once('value %s clamped', 1.5)
    warn_once('value %s clamped', 2.5)
    warn_once('value %s clamped', 1.5)
    assert len(re.findall('value 1.5 clamped', caplog.text)) == 1
    assert 'value 2.5 clamped' in caplog.text
