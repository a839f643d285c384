import logging
import math

import pytest
from pytest import approx

from geoprojections import GeographicCoord, PlanarCoord, ProjectionParameters
from geoprojections._const import HALF_PI, WGS84_A
from geoprojections.projections.eck4 import C_X, C_Y, EckertIV

from tests.functions import assert_planar_equal, assert_round_trip


def test_eck4_forces_sphere():
    proj = EckertIV(ProjectionParameters.from_ellipsoid('WGS84'))
    assert proj.params.es == 0.
    assert proj.params.a == WGS84_A
    assert proj.name == 'eck4_spheroid'


def test_eck4_equator():
    proj = EckertIV(ProjectionParameters(1., 0.))
    x, y = proj.forward_raw(0.5, 0.)
    assert x == 2 * C_X * 0.5
    assert y == 0.


def test_eck4_pole_fallback(caplog):
    caplog.set_level(logging.DEBUG, logger='geoprojections')
    proj = EckertIV(ProjectionParameters(1., 0.))

    x, y = proj.forward_raw(0.5, HALF_PI)
    assert y == C_Y
    assert x == C_X * 0.5
    assert 'no convergence' in caplog.text

    x, y = proj.forward_raw(-0.5, -HALF_PI)
    assert y == -C_Y
    assert x == -C_X * 0.5


@pytest.mark.parametrize('lon, lat', [
    (0., 0.), (45., 30.), (-120., -60.), (179., 80.), (-179., -80.), (10., 1.),
])
def test_eck4_round_trip(lon, lat):
    proj = EckertIV(ProjectionParameters.sphere(lon_0=10.))
    assert_round_trip(proj, lon, lat, abs_tol=1e-10)


def test_eck4_inverse_out_of_range(caplog):
    proj = EckertIV(ProjectionParameters(1., 0.))
    lon, lat = proj.inverse_raw(0., 2.5 * C_Y)
    assert lat == approx(HALF_PI)
    assert 'asin argument out of range' in caplog.text


def test_eck4_against_proj():
    pyproj = pytest.importorskip('pyproj')
    reference = pyproj.Proj(proj='eck4', R=6_371_000.)
    proj = EckertIV(ProjectionParameters.sphere(6_371_000.))

    for lon, lat in ((0., 0.), (100., 45.), (-30., -75.), (179.5, 10.)):
        expected = PlanarCoord(*reference(lon, lat))
        actual = proj.forward(GeographicCoord.from_degrees(lon, lat))
        assert_planar_equal(actual, expected, abs_tol=1e-3)

        actual_lon, actual_lat = proj.inverse(actual).to_degrees()
        assert actual_lon == approx(lon, abs=1e-8)
        assert actual_lat == approx(lat, abs=1e-8)


def test_eck4_equal_area_rows():
    # Parallels are straight: y depends on latitude only
    proj = EckertIV(ProjectionParameters.sphere())
    ys = {proj.forward_raw(math.radians(lon), math.radians(35.))[1] for lon in (-150, -20, 0, 90)}
    assert max(ys) - min(ys) < 1e-9
