"""
GIS package
===========

Coordinate core for geo-locations:

- `types`: the four location notations (DD, D, DM, DMS) and their validation
- `bearing`: compass points and bearings
- `location`: parse, format, convert, compare, distance and navigation
- `geo_line`: great circle lines and interpolated geodesics
- `projection`: equirectangular projection onto a bounded plane

Collaborators built on the core: `fields` (text field parsers, CSV adapter)
and `geojson` (typed GeoJSON reader).
"""

from .constants import PREC_DMS, SYM_ASCII, SYM_UNI1, SYM_UNI2
from .types import (
    CompassPoint,
    DistanceAlgorithm,
    Hemisphere,
    Location,
    LocationD,
    LocationDD,
    LocationDM,
    LocationDMS,
    LocationError,
    Separator,
    location,
)
from .location import LocationParseError
from .geo_line import GeoLine, Geodesic
from .projection import ClipStatus, Equirectangular, Projected

__all__ = [
    "PREC_DMS",
    "SYM_ASCII",
    "SYM_UNI1",
    "SYM_UNI2",
    "CompassPoint",
    "DistanceAlgorithm",
    "Hemisphere",
    "Location",
    "LocationD",
    "LocationDD",
    "LocationDM",
    "LocationDMS",
    "LocationError",
    "Separator",
    "location",
    "LocationParseError",
    "GeoLine",
    "Geodesic",
    "ClipStatus",
    "Equirectangular",
    "Projected",
]
