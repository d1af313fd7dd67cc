import math

from pytest import approx

from greatcircle import Coordinate


def assert_coordinates_equal(c1: Coordinate, c2: Coordinate, abs_tol=1e-7):
    """
    Asserts that two coordinates are equal within a specified absolute tolerance.

    Args:
        c1: The first Coordinate
        c2: The second Coordinate
        abs_tol: The absolute tolerance for floating point comparison.
                 Default is 1e-7 (approx 1.1cm at the equator).
    """
    assert c1.longitude == approx(c2.longitude, abs=abs_tol)
    assert c1.latitude == approx(c2.latitude, abs=abs_tol)


def literal_legacy_azimuth(start: Coordinate, end: Coordinate) -> float:
    """The historical azimuth, written out term for term"""
    from_lon, from_lat = map(math.radians, start.to_float())
    to_lon, to_lat = map(math.radians, end.to_float())

    b = math.acos(
        math.cos(90 - to_lat) * math.cos(90 - from_lat)
        + math.sin(90 - to_lat) * math.sin(90 - from_lat) * math.cos(to_lon - from_lon)
    )
    return math.asin(math.sin(90 - to_lat) * math.sin(to_lon - from_lon) / math.sin(b))


def request_body(origin, destination, body_radius=None) -> dict:
    """Builds an operation payload from (lat, lon) pairs"""
    body = {
        'originLatitude': origin[0],
        'originLongitude': origin[1],
        'destinationLatitude': destination[0],
        'destinationLongitude': destination[1],
    }
    if body_radius is not None:
        body['bodyRadius'] = body_radius
    return body
