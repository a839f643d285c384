from geoprojections import Geodesic
from geoprojections.projections import EckertIV
from geoprojections.parameters import ProjectionParameters
from geoprojections.utils.mixins import LoggingMixin


class Foo(LoggingMixin):
    pass


def test_logger_name():
    assert Foo().logger.name == f'{Foo.__module__}.Foo'

    proj = EckertIV(ProjectionParameters(1., 0.))
    assert proj.logger.name == 'geoprojections.projections.eck4.EckertIV'
    assert Geodesic.WGS84.logger.name == 'geoprojections.geodesic.Geodesic'


def test_logger_inherits_package_level(caplog):
    proj = EckertIV(ProjectionParameters(1., 0.))
    proj.logger.debug('hidden')
    assert 'hidden' not in caplog.text

    proj.logger.warning('shown')
    assert 'shown' in caplog.text
