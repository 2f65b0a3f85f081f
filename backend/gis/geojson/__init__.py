"""
GeoJSON package
===============

Typed GeoJSON objects, built by a factory hooked into the standard
``json`` decoder. Depends on the coordinate core, never the reverse.
"""
from .geo_json import GEO_TYPES, from_file, from_json, geo_factory, to_bbox
from .types import (
    GeoFeature,
    GeoFeatureCollection,
    GeoGeometryCollection,
    GeoLineString,
    GeoMultiLineString,
    GeoMultiPoint,
    GeoMultiPolygon,
    GeoObject,
    GeoPoint,
    GeoPolygon,
)

__all__ = [
    "GEO_TYPES",
    "from_file",
    "from_json",
    "geo_factory",
    "to_bbox",
    "GeoFeature",
    "GeoFeatureCollection",
    "GeoGeometryCollection",
    "GeoLineString",
    "GeoMultiLineString",
    "GeoMultiPoint",
    "GeoMultiPolygon",
    "GeoObject",
    "GeoPoint",
    "GeoPolygon",
]
