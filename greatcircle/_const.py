"""
Constants declarations for greatcircle
"""

# Mean Earth Radius (meters); the default reference body
EARTH_RADIUS_METERS = 6_371_000.0

# Request field names
ORIGIN_LATITUDE = 'originLatitude'
ORIGIN_LONGITUDE = 'originLongitude'
DESTINATION_LATITUDE = 'destinationLatitude'
DESTINATION_LONGITUDE = 'destinationLongitude'
BODY_RADIUS = 'bodyRadius'

COORDINATE_FIELDS = (
    ORIGIN_LATITUDE,
    ORIGIN_LONGITUDE,
    DESTINATION_LATITUDE,
    DESTINATION_LONGITUDE,
)

LATITUDE_BOUNDS = (-90., 90.)
LONGITUDE_BOUNDS = (-180., 180.)
BODY_RADIUS_BOUNDS = (0., None)
