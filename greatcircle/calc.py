# greatcircle/calc.py
"""
Great-circle calculations on a spherical body.
Supports switching between the Haversine and (spherical) Vincenty distance formulas.
"""

__all__ = [
    'DegenerateAzimuthError', 'DISTANCE_ALGORITHMS',
    'azimuth', 'distance', 'half_circumference',
    'haversine_distance', 'vincenty_distance',
]

import math
from typing import Callable, Dict, Literal

from greatcircle._const import EARTH_RADIUS_METERS
from greatcircle.coordinates import Coordinate
from greatcircle.utils.logging import warn_once


_DEGENERATE_SIN_TOLERANCE = 1e-12


class DegenerateAzimuthError(ValueError):
    """The bearing between two points is undefined (coincident or antipodal points)"""


def _clamp(value: float, lower: float = -1., upper: float = 1.) -> float:
    return max(lower, min(upper, value))


# -------------------------------------------------------------------------
# Distance
# -------------------------------------------------------------------------

def haversine_distance(
    start: Coordinate,
    end: Coordinate,
    body_radius: float = EARTH_RADIUS_METERS,
) -> float:
    """
    Calculate distance along a sphere using the Haversine formula.

    Args:
        start:
            The origin Coordinate

        end:
            The destination Coordinate

        body_radius:
            The radius of the sphere. The result is expressed in the same unit.

    Returns:
        float
    """
    lon1, lat1 = start.radians
    lon2, lat2 = end.radians

    dlon = lon2 - lon1
    dlat = lat2 - lat1

    a = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
    # Rounding can push a just past 1 for antipodal points
    c = 2 * math.asin(math.sqrt(_clamp(a, 0., 1.)))

    return c * body_radius


def vincenty_distance(
    start: Coordinate,
    end: Coordinate,
    body_radius: float = EARTH_RADIUS_METERS,
) -> float:
    """
    Calculate distance along a sphere using the special case of Vincenty's
    formula for a sphere. Better conditioned than Haversine for both very
    small and near-antipodal separations.
    """
    lon1, lat1 = start.radians
    lon2, lat2 = end.radians

    dlon = lon2 - lon1

    numerator = math.sqrt(
        (math.cos(lat2) * math.sin(dlon)) ** 2 +
        (math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)) ** 2
    )
    denominator = (math.sin(lat1) * math.sin(lat2) +
                   math.cos(lat1) * math.cos(lat2) * math.cos(dlon))

    return math.atan2(numerator, denominator) * body_radius


DISTANCE_ALGORITHMS: Dict[str, Callable[[Coordinate, Coordinate, float], float]] = {
    'haversine': haversine_distance,
    'vincenty': vincenty_distance,
}


def distance(
    start: Coordinate,
    end: Coordinate,
    body_radius: float = EARTH_RADIUS_METERS,
    algorithm: Literal['haversine', 'vincenty'] = 'haversine',
) -> float:
    """
    Calculate the great-circle distance using the named algorithm.

    Args:
        start:
            The origin Coordinate

        end:
            The destination Coordinate

        body_radius:
            The radius of the sphere

        algorithm:
            'haversine' or 'vincenty'

    Returns:
        float
    """
    if algorithm not in DISTANCE_ALGORITHMS:
        raise ValueError(
            f"Unknown algorithm '{algorithm}'. Options: {list(DISTANCE_ALGORITHMS.keys())}"
        )

    return DISTANCE_ALGORITHMS[algorithm](start, end, body_radius)


# -------------------------------------------------------------------------
# Azimuth
# -------------------------------------------------------------------------

def azimuth(start: Coordinate, end: Coordinate, legacy_colatitude: bool = False) -> float:
    """
    Calculate the initial bearing from start to end, in radians, by solving the
    spherical triangle formed with the north pole.

    The sine rule only resolves bearings within [-pi/2, pi/2]; bearings with a
    southerly component are reflected into that range.

    Args:
        start:
            The origin Coordinate

        end:
            The destination Coordinate

        legacy_colatitude: (bool)
            (Default False) If True, colatitudes are computed as 90 minus the
            latitude in radians, reproducing the historical output of this
            service. Otherwise the colatitude is pi/2 minus the latitude.

    Returns:
        float

    Raises:
        DegenerateAzimuthError: when the points coincide or are antipodal
    """
    lon1, lat1 = start.radians
    lon2, lat2 = end.radians

    if legacy_colatitude:
        warn_once(
            'Legacy colatitude mode mixes degrees and radians; azimuths will not '
            'match true bearings. (this warning will not repeat)'
        )
        p1, p2 = 90 - lat1, 90 - lat2
    else:
        p1, p2 = math.pi / 2 - lat1, math.pi / 2 - lat2

    dlon = lon2 - lon1

    # b = acos(cos(p2)cos(p1) + sin(p2)sin(p1)cos(dlon)); sin(b) is the norm of the
    # cross product of the two position vectors
    sin_b = math.hypot(
        math.sin(p2) * math.sin(dlon),
        math.cos(p1) * math.sin(p2) * math.cos(dlon) - math.sin(p1) * math.cos(p2),
    )
    if abs(sin_b) < _DEGENERATE_SIN_TOLERANCE:
        raise DegenerateAzimuthError(
            f'Azimuth is undefined between {start!r} and {end!r}: '
            'points are coincident or antipodal.'
        )

    return math.asin(_clamp(math.sin(p2) * math.sin(dlon) / sin_b))


# -------------------------------------------------------------------------
# Body measurements
# -------------------------------------------------------------------------

def half_circumference(body_radius: float, legacy_area: bool = True) -> float:
    """
    The "half circumference" of a spherical body, i.e. the pole-to-pole
    distance along its surface.

    Args:
        body_radius:
            The radius of the body

        legacy_area: (bool)
            (Default True) The historical output of this service is pi * r^2,
            which is kept for compatibility. Set False to get the actual
            half circumference, pi * r.

    Returns:
        float
    """
    if legacy_area:
        return math.pi * body_radius ** 2

    return math.pi * body_radius
