"""
GeoJSON Reader
Object factory that plugs into the standard JSON decoder.

The decoder calls ``geo_factory`` for every JSON object, innermost first,
so nested geometries are already typed when their container is built.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Union

from shapely.geometry import Polygon, box

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

logger = logging.getLogger(__name__)

GEO_TYPES: dict[str, type[GeoObject]] = {
    "Point": GeoPoint,
    "LineString": GeoLineString,
    "Polygon": GeoPolygon,
    "MultiPoint": GeoMultiPoint,
    "MultiLineString": GeoMultiLineString,
    "MultiPolygon": GeoMultiPolygon,
    "GeometryCollection": GeoGeometryCollection,
    "Feature": GeoFeature,
    "FeatureCollection": GeoFeatureCollection,
}


def geo_factory(pairs: list[tuple[str, Any]]) -> Union[GeoObject, dict[str, Any]]:
    """
    Build a GeoJSON object from decoded key/value pairs.

    Objects without a ``type`` field, or with an unrecognized type
    (e.g. TopoJSON), are returned as plain dicts.
    """
    obj = dict(pairs)
    geo_type = obj.get("type")
    if geo_type is None:
        return obj

    model = GEO_TYPES.get(geo_type) if isinstance(geo_type, str) else None
    if model is None:
        logger.warning(f"Unrecognized GeoJSON type '{geo_type}'")
        return obj

    fields = {k: v for k, v in obj.items() if k in model.model_fields}
    fields["bbox"] = to_bbox(obj.get("bbox"))
    return model(**fields)


def to_bbox(values: Any) -> Polygon | None:
    """Convert a 2D or 3D GeoJSON bbox array to a shapely box"""
    if values is None:
        return None
    if isinstance(values, list) and len(values) == 4:
        x1, y1, x2, y2 = values
        return box(x1, y1, x2, y2)
    if isinstance(values, list) and len(values) == 6:
        x1, y1, _, x2, y2, _ = values
        return box(x1, y1, x2, y2)
    raise ValueError(f"Invalid GeoJSON bbox: {values!r}")


def from_json(text: str) -> Any:
    """Decode a GeoJSON document from a string."""
    return json.loads(text, object_pairs_hook=geo_factory)


def from_file(path: str) -> Any:
    """Read a GeoJSON file."""
    logger.info(f"Reading GeoJSON file {path}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f, object_pairs_hook=geo_factory)
