"""
Projection Service
Map geo-locations and lines onto a bounded 2D Cartesian plane.

The plane has x to the right and y upwards, so x follows increasing
longitude and y follows increasing latitude. Units are metres.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from shapely.geometry import Point, box
from shapely.geometry.base import BaseGeometry

from .geo_line import GeoLine, Geodesic
from .location import equirect_scales, require_dd
from .types import LocationDD, is_number

logger = logging.getLogger(__name__)

Pos2D = tuple[float, float]


class ClipStatus(str, Enum):
    """Whether the projected shape lies inside the projection bounds"""

    OK = "ok"
    CLIP = "clip"


@dataclass(frozen=True)
class Line2D:
    start: Pos2D
    end: Pos2D


@dataclass(frozen=True)
class Polyline2D:
    points: tuple[Pos2D, ...]


@dataclass(frozen=True)
class Projected:
    status: ClipStatus
    shape: Union[Pos2D, Line2D, Polyline2D]

    @property
    def is_clipped(self) -> bool:
        return self.status is ClipStatus.CLIP


@dataclass(frozen=True)
class Equirectangular:
    """
    Equirectangular projection onto the plane tangent to a central location.

    Scale factors are metres per degree at the center latitude.
    The extent should not cross a pole or the antimeridian.
    """

    center: LocationDD
    lat_scale: float
    lon_scale: float
    bounds: BaseGeometry


def new_equirect(loc: Any, half_width: float, half_height: float) -> Equirectangular:
    """
    Create an equirectangular projection centered on a location.

    Args:
        loc: Center location in any representation
        half_width: Half extent along x in metres
        half_height: Half extent along y in metres

    Returns:
        Equirectangular: projection with bounds ``(-w2, -h2, w2, h2)``
    """
    for extent in (half_width, half_height):
        if not is_number(extent) or extent <= 0.0:
            raise ValueError(f"Invalid projection extent: {extent!r} (must be positive metres)")

    center = require_dd(loc)
    lat_scale, lon_scale = equirect_scales(center.lat)
    bounds = box(-half_width, -half_height, half_width, half_height)
    logger.debug(
        f"Equirectangular at {center.lat:.5f}, {center.lon:.5f}: "
        f"{lat_scale:.1f} m/deg lat, {lon_scale:.1f} m/deg lon"
    )
    return Equirectangular(center, lat_scale, lon_scale, bounds)


def project(proj: Equirectangular, target: Any) -> Projected:
    """
    Project a location, a GeoLine or a Geodesic.

    Positions are always computed. A shape is clipped when any of its
    points falls outside the bounds; points on the boundary are inside.
    """
    if isinstance(target, GeoLine):
        p1, ok1 = _project_point(proj, target.start)
        p2, ok2 = _project_point(proj, target.end)
        return Projected(_status(ok1 and ok2), Line2D(p1, p2))

    if isinstance(target, Geodesic):
        projected = [_project_point(proj, p) for p in target.points]
        return Projected(
            _status(all(ok for _, ok in projected)),
            Polyline2D(tuple(pos for pos, _ in projected)),
        )

    pos, ok = _project_point(proj, require_dd(target))
    return Projected(_status(ok), pos)


def _project_point(proj: Equirectangular, loc: LocationDD) -> tuple[Pos2D, bool]:
    x = proj.lon_scale * (loc.lon - proj.center.lon)
    y = proj.lat_scale * (loc.lat - proj.center.lat)
    return (x, y), proj.bounds.covers(Point(x, y))


def _status(inside: bool) -> ClipStatus:
    return ClipStatus.OK if inside else ClipStatus.CLIP
