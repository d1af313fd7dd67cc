"""
Representation of a specific point on a spherical body
"""

__all__ = ['Coordinate']

from functools import cached_property
import math
from typing import Tuple, Union


class Coordinate:
    """Representation of a coordinate on the globe (i.e., a lon/lat pair)"""

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
        _bounded: bool = True,
    ):
        lon, lat = float(longitude), float(latitude)
        if not (math.isfinite(lon) and math.isfinite(lat)):
            raise ValueError(f'Coordinate values must be finite, got ({longitude}, {latitude})')

        if _bounded:
            if not -90 <= lat <= 90:
                lat = (lat + 90) % 360 - 90
                if lat > 90:
                    # Crosses one of the poles
                    lat = 180 - lat
                    lon = lon + 180 if lon < 0 else lon - 180

            if not -180 <= lon <= 180:
                # Crosses the antimeridian
                lon = (lon + 180) % 360 - 180

        self.longitude = lon
        self.latitude = lat

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.longitude, self.latitude))

    def __repr__(self):
        return f'<Coordinate({self.longitude}, {self.latitude})>'

    @cached_property
    def radians(self) -> Tuple[float, float]:
        """The (longitude, latitude) pair converted to radians"""
        return math.radians(self.longitude), math.radians(self.latitude)

    @classmethod
    def from_fields(cls, values: dict, latitude_field: str, longitude_field: str):
        """
        Creates a Coordinate from a flat mapping of named fields, e.g. a
        validated request body.

        Args:
            values:
                The mapping holding both fields

            latitude_field:
                The key of the latitude value

            longitude_field:
                The key of the longitude value

        Returns:
            Coordinate
        """
        return Coordinate(values[longitude_field], values[latitude_field])

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        if reverse:
            return self.latitude, self.longitude

        return self.longitude, self.latitude
