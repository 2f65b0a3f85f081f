from __future__ import annotations

import json
import logging

import pytest
from shapely.geometry import Polygon

from ..geo_line import Geodesic
from ..types import LocationDD
from .geo_json import from_file, from_json, geo_factory, to_bbox
from .types import (
    GeoFeature,
    GeoFeatureCollection,
    GeoGeometryCollection,
    GeoLineString,
    GeoMultiPolygon,
    GeoPoint,
    GeoPolygon,
)

SIMPLE = {
    "type": "Point",
    "bbox": [100.0, 0.0, 101.0, 1.0],
    "coordinates": [100.5, 0.5],
}

FEATURES = {
    "type": "FeatureCollection",
    "features": [
        {
            "type": "Feature",
            "id": "f1",
            "geometry": {"type": "LineString", "coordinates": [[102, 0], [103, 1], [104, 0]]},
            "properties": {"prop0": "value0", "prop1": 0.0},
        },
        {
            "type": "Feature",
            "geometry": {
                "type": "Polygon",
                "coordinates": [[[100.0, 0.0], [101.0, 0.0], [101.0, 1.0], [100.0, 1.0], [100.0, 0.0]]],
            },
            "properties": {"prop1": {"this": "that"}},
        },
        {
            "type": "Feature",
            "geometry": None,
            "properties": None,
        },
    ],
}


def test_point_with_bbox() -> None:
    point = from_json(json.dumps(SIMPLE))
    assert isinstance(point, GeoPoint)
    assert point.coordinates == [100.5, 0.5]
    assert isinstance(point.bbox, Polygon)
    assert point.bbox.bounds == (100.0, 0.0, 101.0, 1.0)
    # GeoJSON positions are [longitude, latitude]
    assert point.to_location() == LocationDD(0.5, 100.5)


def test_feature_collection() -> None:
    fc = from_json(json.dumps(FEATURES))
    assert isinstance(fc, GeoFeatureCollection)
    assert fc.bbox is None
    assert len(fc.features) == 3
    assert all(isinstance(f, GeoFeature) for f in fc.features)

    line = fc.features[0].geometry
    assert isinstance(line, GeoLineString)
    assert line.coordinates[1] == [103.0, 1.0]
    assert fc.features[0].id == "f1"
    assert fc.features[0].properties == {"prop0": "value0", "prop1": 0.0}

    assert isinstance(fc.features[1].geometry, GeoPolygon)
    assert fc.features[1].properties == {"prop1": {"this": "that"}}
    assert fc.features[2].geometry is None


def test_line_string_to_geodesic() -> None:
    line = GeoLineString(coordinates=[[0.0, 10.0], [1.0, 11.0]])
    geodesic = line.to_geodesic()
    assert isinstance(geodesic, Geodesic)
    assert geodesic.points == (LocationDD(10.0, 0.0), LocationDD(11.0, 1.0))


def test_geometry_collection() -> None:
    doc = {
        "type": "GeometryCollection",
        "geometries": [
            {"type": "Point", "coordinates": [1, 2]},
            {"type": "MultiPolygon", "coordinates": [[[[0, 0], [1, 0], [1, 1], [0, 0]]]]},
        ],
    }
    gc = from_json(json.dumps(doc))
    assert isinstance(gc, GeoGeometryCollection)
    assert isinstance(gc.geometries[0], GeoPoint)
    assert isinstance(gc.geometries[1], GeoMultiPolygon)


def test_missing_type_gives_dict() -> None:
    assert geo_factory([("a", 1), ("b", [1, 2])]) == {"a": 1, "b": [1, 2]}


def test_unknown_type_gives_dict_and_warns(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="gis.geojson.geo_json"):
        result = from_json('{"type": "Topology", "objects": {}}')
    assert result == {"type": "Topology", "objects": {}}
    assert any("Topology" in r.getMessage() for r in caplog.records)


def test_bbox() -> None:
    assert to_bbox(None) is None
    assert to_bbox([0, 1, 2, 3]).bounds == (0.0, 1.0, 2.0, 3.0)
    assert to_bbox([0, 1, -5, 2, 3, 5]).bounds == (0.0, 1.0, 2.0, 3.0)
    with pytest.raises(ValueError):
        to_bbox([0, 1, 2])


def test_invalid_geometry() -> None:
    with pytest.raises(ValueError):
        from_json('{"type": "Point"}')
    with pytest.raises(ValueError):
        from_json('{"type": "LineString", "coordinates": [[0, 0]]}')


def test_from_file(tmp_path) -> None:
    path = tmp_path / "features.geojson"
    path.write_text(json.dumps(FEATURES), encoding="utf-8")
    fc = from_file(str(path))
    assert isinstance(fc, GeoFeatureCollection)
    assert len(fc.features) == 3
