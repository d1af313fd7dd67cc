
import sys

from greatcircle._version import __version__  # noqa: F401
from greatcircle.utils.logging import LOGGER
from greatcircle.coordinates import Coordinate
from greatcircle.calc import (
    DegenerateAzimuthError, azimuth, distance, half_circumference,
    haversine_distance, vincenty_distance
)
from greatcircle.validation import ValidationError
from greatcircle.utils.conditional_imports import ConditionalPackageInterceptor


ConditionalPackageInterceptor.permit_packages(
    {
        'flask': 'greatcircle[web]',
    }
)
sys.meta_path.append(ConditionalPackageInterceptor)  # type: ignore

__all__ = [
    'Coordinate',
    'DegenerateAzimuthError',
    'ValidationError',
    'azimuth',
    'distance',
    'half_circumference',
    'haversine_distance',
    'vincenty_distance',
    'LOGGER',
]
