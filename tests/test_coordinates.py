import math

from pytest import approx

from geoprojections.coordinates import GeographicCoord, PlanarCoord


def test_geographic_init():
    coord = GeographicCoord('0.5', 1)
    assert coord.lon == 0.5
    assert coord.lat == 1.


def test_geographic_eq():
    assert GeographicCoord(0.1, 0.2) == GeographicCoord(0.1, 0.2)
    assert GeographicCoord(0.1, 0.2) != GeographicCoord(0.2, 0.1)
    assert GeographicCoord(0.1, 0.2) != PlanarCoord(0.1, 0.2)
    assert GeographicCoord(0.1, 0.2) != 'not a coordinate'


def test_geographic_hash():
    assert len({GeographicCoord(0.1, 0.2), GeographicCoord(0.1, 0.2)}) == 1
    assert hash(GeographicCoord(0.1, 0.2)) != hash(PlanarCoord(0.1, 0.2))


def test_geographic_repr():
    assert repr(GeographicCoord(0.5, 0.25)) == '<GeographicCoord(0.5, 0.25)>'


def test_geographic_degrees():
    coord = GeographicCoord.from_degrees(180, -45)
    assert coord.lon == approx(math.pi)
    assert coord.lat == approx(-math.pi / 4)

    lon, lat = coord.to_degrees()
    assert lon == approx(180.)
    assert lat == approx(-45.)


def test_geographic_to_float():
    coord = GeographicCoord(0.5, 0.25)
    assert coord.to_float() == (0.5, 0.25)
    assert coord.to_float(reverse=True) == (0.25, 0.5)


def test_planar():
    coord = PlanarCoord(500_000, '-10.5')
    assert coord.x == 500_000.
    assert coord.y == -10.5
    assert coord.to_float() == (500_000., -10.5)
    assert repr(coord) == '<PlanarCoord(500000.0, -10.5)>'
    assert coord == PlanarCoord(500_000., -10.5)
    assert len({coord, PlanarCoord(500_000., -10.5)}) == 1
