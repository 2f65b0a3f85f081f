"""
GeoLine and Geodesic
Great circle lines between two locations, and their polyline approximations.

A GeoLine is the pair of endpoints of a great circle arc.
A Geodesic is a sequence of at least 2 points along such an arc,
whose first and last points are the original endpoints.
All points are stored as signed decimal degrees (DD).
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from .constants import MEAN_RADIUS
from .location import distance as loc_distance
from .location import require_dd
from .types import DistanceAlgorithm, LocationDD, is_int, is_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeoLine:
    start: LocationDD
    end: LocationDD


@dataclass(frozen=True)
class Geodesic:
    points: tuple[LocationDD, ...]

    def __post_init__(self) -> None:
        if len(self.points) < 2:
            raise ValueError(f"Geodesic needs at least 2 points, got {len(self.points)}")
        if not all(isinstance(p, LocationDD) for p in self.points):
            raise ValueError("Geodesic points must be DD locations")
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)


Line = Union[GeoLine, Geodesic]


def new_line(first: Any, last: Optional[Any] = None) -> GeoLine:
    """
    Create a line between two locations in any representation,
    or from the first and last points of a geodesic.
    """
    if isinstance(first, Geodesic) and last is None:
        return GeoLine(first.points[0], first.points[-1])
    return GeoLine(require_dd(first), require_dd(last))


def new_geodesic(locations: Iterable[Any]) -> Geodesic:
    """Create a geodesic from 2 or more locations in any representation."""
    return Geodesic(tuple(require_dd(loc) for loc in locations))


def distance(
    line: Line,
    algorithm: DistanceAlgorithm | str = DistanceAlgorithm.HAVERSINE,
) -> float:
    """Length of a line, or the sum of the segment lengths of a geodesic (m)."""
    if isinstance(line, GeoLine):
        return loc_distance(line.start, line.end, algorithm)
    if isinstance(line, Geodesic):
        return sum(
            loc_distance(p1, p2, algorithm)
            for p1, p2 in zip(line.points, line.points[1:])
        )
    raise ValueError(f"Not a GeoLine or Geodesic: {line!r}")


def midpoint(line: GeoLine) -> LocationDD:
    """Mid-point of the great circle arc."""
    return interp_count(line, 3).points[1]


def interp_step(line: GeoLine, step: float) -> Geodesic:
    """
    Interpolate a line so that no segment is longer than ``step`` metres.

    All segments have the same length.
    """
    if not is_number(step) or step <= 0.0:
        raise ValueError(f"Invalid step: {step!r} (must be positive metres)")

    segments = math.ceil(distance(line) / step)
    if segments <= 1:
        return Geodesic((line.start, line.end))
    return interp_count(line, segments + 1)


def interp_count(line: GeoLine, n: int) -> Geodesic:
    """
    Interpolate ``n`` equally spaced points along the great circle arc,
    including the two endpoints.

    Spherical linear interpolation between the unit vectors of the endpoints.
    Reference: https://www.movable-type.co.uk/scripts/latlong.html#intermediate-point
    """
    if not is_int(n) or n < 2:
        raise ValueError(f"Invalid interpolation count: {n!r} (must be at least 2)")
    if not isinstance(line, GeoLine):
        raise ValueError(f"Not a GeoLine: {line!r}")

    start, end = line.start, line.end
    if n == 2:
        return Geodesic((start, end))

    delta = loc_distance(start, end) / MEAN_RADIUS
    if delta == 0.0:
        return Geodesic((start,) * (n - 1) + (end,))

    sin_delta = math.sin(delta)
    if abs(sin_delta) < 1.0e-12:
        raise ValueError(f"Great circle undefined between antipodal points {start} and {end}")

    x1, y1, z1 = _unit_vector(start)
    x2, y2, z2 = _unit_vector(end)

    points = [start]
    for i in range(1, n - 1):
        t = i / (n - 1)
        a = math.sin((1.0 - t) * delta) / sin_delta
        b = math.sin(t * delta) / sin_delta
        x = a * x1 + b * x2
        y = a * y1 + b * y2
        z = a * z1 + b * z2
        points.append(_from_unit_vector(x, y, z))
    points.append(end)

    logger.debug(f"Interpolated {n} points over {delta:.6f} rad")
    return Geodesic(tuple(points))


def _unit_vector(loc: LocationDD) -> tuple[float, float, float]:
    lat = math.radians(loc.lat)
    lon = math.radians(loc.lon)
    return (math.cos(lat) * math.cos(lon), math.cos(lat) * math.sin(lon), math.sin(lat))


def _from_unit_vector(x: float, y: float, z: float) -> LocationDD:
    lat = math.degrees(math.atan2(z, math.sqrt(x * x + y * y)))
    lon = math.degrees(math.atan2(y, x))
    return LocationDD(lat, 180.0 if lon <= -180.0 else lon)
