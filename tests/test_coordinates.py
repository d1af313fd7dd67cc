import math

import pytest
from pytest import approx

from greatcircle import Coordinate


def test_coordinate_init():
    c = Coordinate(0., 1.)
    assert c.longitude == 0.
    assert c.latitude == 1.

    c = Coordinate('0.0', '1.0')
    assert c.longitude == 0.
    assert c.latitude == 1.

    # Test longitude adjustment
    assert Coordinate(181., 0) == Coordinate(-179., 0)
    assert Coordinate(361., 0) == Coordinate(1., 0.)
    assert Coordinate(-181, 0) == Coordinate(179, 0)
    assert Coordinate(-361, 0) == Coordinate(-1, 0)

    # Test latitude adjustment
    assert Coordinate(1, 91) == Coordinate(-179, 89)
    assert Coordinate(1, 271) == Coordinate(1, -89)
    assert Coordinate(1, -91) == Coordinate(-179, -89)
    assert Coordinate(1, -271) == Coordinate(1, 89)

    # Bounds are inclusive
    assert Coordinate(180., 90.).to_float() == (180., 90.)
    assert Coordinate(-180., -90.).to_float() == (-180., -90.)

    # Test unbounded coordinates don't auto-adjust
    assert Coordinate(360, 180, _bounded=False).to_float() == (360, 180)


def test_coordinate_init_extreme_values():
    c = Coordinate(1e300, -1e300)
    assert -180 <= c.longitude <= 180
    assert -90 <= c.latitude <= 90

    assert Coordinate(720. + 10., 0.) == Coordinate(10., 0.)
    assert Coordinate(10., 360. + 45.) == Coordinate(10., 45.)

    for lon, lat in ((float('nan'), 0.), (0., float('inf')), ('-inf', 0.), (0., 'nan')):
        with pytest.raises(ValueError):
            Coordinate(lon, lat)


def test_coordinate_hash():
    coords = [
        Coordinate(0., 0.),
        Coordinate(0., 0.),
        Coordinate(1., 1.)
    ]
    assert len(set(coords)) == 2
    assert Coordinate(0., 0.) in set(coords)
    assert Coordinate(1., 1.) in set(coords)


def test_coordinate_eq():
    assert Coordinate(0., 0.) == Coordinate(0., 0.)
    assert Coordinate(0., 0.) != Coordinate(1., 0.)
    assert Coordinate(0., 0.) != (0., 0.)


def test_coordinate_repr():
    assert repr(Coordinate(0., 1.)) == '<Coordinate(0.0, 1.0)>'


def test_coordinate_radians():
    lon, lat = Coordinate(180., -90.).radians
    assert lon == approx(math.pi)
    assert lat == approx(-math.pi / 2)


def test_coordinate_from_fields():
    values = {'originLatitude': 51.5, 'originLongitude': -0.1}
    assert Coordinate.from_fields(values, 'originLatitude', 'originLongitude') == Coordinate(-0.1, 51.5)


def test_coordinate_to_float():
    assert Coordinate(0., 1.).to_float() == (0.0, 1.0)
    assert Coordinate(0., 1.).to_float(reverse=True) == (1.0, 0.0)
