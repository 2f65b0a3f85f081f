"""
GeoJSON Types
Typed models for the GeoJSON geometry and feature objects (RFC 7946).

All coordinates are decimal degrees in [longitude, latitude] order,
to match Cartesian (x, y). An optional bounding box is held as a shapely box.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from shapely.geometry import Polygon

from ..geo_line import Geodesic, new_geodesic
from ..types import LocationDD

Coord = List[float]
Coords = List[Coord]
Coordss = List[Coords]
Coordsss = List[Coordss]


def _to_dd(coord: Coord) -> LocationDD:
    return LocationDD(coord[1], coord[0])


class GeoObject(BaseModel):
    """Base of all GeoJSON objects: optional bounding box"""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    bbox: Optional[Polygon] = Field(None, description="Bounding box (min lon, min lat, max lon, max lat)")


class GeoPoint(GeoObject):
    type: Literal["Point"] = "Point"
    coordinates: Coord

    @field_validator("coordinates")
    @classmethod
    def _position(cls, v: Coord) -> Coord:
        if len(v) < 2:
            raise ValueError("Point position needs longitude and latitude")
        return v

    def to_location(self) -> LocationDD:
        return _to_dd(self.coordinates)


class GeoLineString(GeoObject):
    type: Literal["LineString"] = "LineString"
    coordinates: Coords

    @field_validator("coordinates")
    @classmethod
    def _two_positions(cls, v: Coords) -> Coords:
        if len(v) < 2:
            raise ValueError("LineString needs at least 2 positions")
        return v

    def to_geodesic(self) -> Geodesic:
        return new_geodesic(_to_dd(c) for c in self.coordinates)


class GeoPolygon(GeoObject):
    type: Literal["Polygon"] = "Polygon"
    coordinates: Coordss


class GeoMultiPoint(GeoObject):
    type: Literal["MultiPoint"] = "MultiPoint"
    coordinates: Coords


class GeoMultiLineString(GeoObject):
    type: Literal["MultiLineString"] = "MultiLineString"
    coordinates: Coordss


class GeoMultiPolygon(GeoObject):
    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: Coordsss


class GeoGeometryCollection(GeoObject):
    type: Literal["GeometryCollection"] = "GeometryCollection"
    geometries: List[Any]


class GeoFeature(GeoObject):
    type: Literal["Feature"] = "Feature"
    id: Optional[Union[str, int]] = None
    geometry: Optional[Any] = Field(..., description="Geometry object, or null for an unlocated feature")
    properties: Optional[Dict[str, Any]] = None


class GeoFeatureCollection(GeoObject):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[Any]
    properties: Optional[Dict[str, Any]] = None
