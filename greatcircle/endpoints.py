"""
Request/response boundary for the great-circle operations.

Each operation accepts a flat mapping of named fields and returns an
OperationResult; invalid input and undefined results are converted into error
payloads rather than raised.
"""

__all__ = [
    'OperationResult',
    'azimuth', 'distance_to_poles', 'haversine', 'vincenty',
]

from typing import Any, Dict, Mapping, NamedTuple

from greatcircle import calc
from greatcircle._const import (
    BODY_RADIUS, BODY_RADIUS_BOUNDS, COORDINATE_FIELDS,
    DESTINATION_LATITUDE, DESTINATION_LONGITUDE, EARTH_RADIUS_METERS,
    LATITUDE_BOUNDS, LONGITUDE_BOUNDS, ORIGIN_LATITUDE, ORIGIN_LONGITUDE,
)
from greatcircle.coordinates import Coordinate
from greatcircle.utils.logging import LOGGER, warn_once
from greatcircle.validation import ValidationError, is_missing, validate

HTTP_OK = 200
HTTP_UNPROCESSABLE = 422

_RANGES = {
    ORIGIN_LATITUDE: LATITUDE_BOUNDS,
    ORIGIN_LONGITUDE: LONGITUDE_BOUNDS,
    DESTINATION_LATITUDE: LATITUDE_BOUNDS,
    DESTINATION_LONGITUDE: LONGITUDE_BOUNDS,
    BODY_RADIUS: BODY_RADIUS_BOUNDS,
}


class OperationResult(NamedTuple):
    """A response payload and its HTTP-style status code"""
    payload: Dict[str, Any]
    status: int = HTTP_OK

    @property
    def ok(self) -> bool:
        return self.status == HTTP_OK


def _error(errors: Dict[str, list]) -> OperationResult:
    return OperationResult({'errors': errors}, HTTP_UNPROCESSABLE)


def _validate_pair(data: Mapping[str, Any], default_body_radius: float) -> Dict[str, float]:
    return validate(
        data,
        required=COORDINATE_FIELDS,
        optional=(BODY_RADIUS,),
        defaults={BODY_RADIUS: default_body_radius},
        ranges=_RANGES,
    )


def _coordinates(values: Dict[str, float]):
    return (
        Coordinate.from_fields(values, ORIGIN_LATITUDE, ORIGIN_LONGITUDE),
        Coordinate.from_fields(values, DESTINATION_LATITUDE, DESTINATION_LONGITUDE),
    )


def _distance(
    data: Mapping[str, Any],
    algorithm: str,
    default_body_radius: float,
) -> OperationResult:
    try:
        values = _validate_pair(data, default_body_radius)
    except ValidationError as e:
        return _error(e.errors)

    start, end = _coordinates(values)
    return OperationResult({
        'distance': calc.distance(start, end, values[BODY_RADIUS], algorithm)
    })


def haversine(
    data: Mapping[str, Any],
    default_body_radius: float = EARTH_RADIUS_METERS,
) -> OperationResult:
    """Great-circle distance between the origin and destination (Haversine formula)"""
    return _distance(data, 'haversine', default_body_radius)


def vincenty(
    data: Mapping[str, Any],
    default_body_radius: float = EARTH_RADIUS_METERS,
) -> OperationResult:
    """Great-circle distance between the origin and destination (Vincenty formula)"""
    return _distance(data, 'vincenty', default_body_radius)


def azimuth(data: Mapping[str, Any], legacy_colatitude: bool = False) -> OperationResult:
    """
    Initial bearing, in radians, from the origin to the destination.

    bodyRadius is validated when supplied so this operation accepts the same
    payloads as the distance operations, but the bearing does not depend on it.
    """
    try:
        values = _validate_pair(data, EARTH_RADIUS_METERS)
    except ValidationError as e:
        return _error(e.errors)

    if not is_missing(data.get(BODY_RADIUS)):
        warn_once('bodyRadius has no effect on azimuth and is ignored.')

    start, end = _coordinates(values)
    try:
        result = calc.azimuth(start, end, legacy_colatitude=legacy_colatitude)
    except calc.DegenerateAzimuthError as e:
        LOGGER.debug(str(e))
        return _error({'azimuth': [str(e)]})

    return OperationResult({'azimuth': result})


def distance_to_poles(data: Mapping[str, Any], legacy_area: bool = True) -> OperationResult:
    """Half the circumference of a body, given its radius"""
    try:
        values = validate(
            data,
            required=(BODY_RADIUS,),
            ranges={BODY_RADIUS: BODY_RADIUS_BOUNDS},
        )
    except ValidationError as e:
        return _error(e.errors)

    return OperationResult({
        'halfCircumference': calc.half_circumference(values[BODY_RADIUS], legacy_area)
    })
