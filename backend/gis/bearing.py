"""
Bearing Utilities
Compass points and bearings from North.

A valid bearing is a float in the range [0.0, 360.0).
A direction is either a compass point or a bearing.
"""
from __future__ import annotations

import math
from typing import Union

from .constants import EPSILON
from .types import CompassPoint, is_number

Direction = Union[CompassPoint, str, float, int]

COMPASS_BEARINGS: dict[CompassPoint, float] = {
    point: 22.5 * i for i, point in enumerate(CompassPoint)
}


def compass_point(direction: CompassPoint | str) -> CompassPoint:
    """Resolve a compass point or its name, e.g. ``"NNE"``"""
    if isinstance(direction, CompassPoint):
        return direction
    if isinstance(direction, str) and direction in CompassPoint.__members__:
        return CompassPoint[direction]
    raise ValueError(f"Unknown compass point: {direction!r}")


def is_compass(direction: object) -> bool:
    return isinstance(direction, CompassPoint) or (
        isinstance(direction, str) and direction in CompassPoint.__members__
    )


def frac(x: float) -> float:
    """Fractional part in [0, 1), so negative values wrap upwards."""
    return x - math.floor(x)


def to_bearing(direction: Direction) -> float:
    """
    Convert a compass point to a bearing from North in degrees.

    A numeric direction is normalized into the valid range [0.0, 360.0).
    """
    if is_compass(direction):
        return COMPASS_BEARINGS[compass_point(direction)]
    if not is_number(direction):
        raise ValueError(f"Invalid direction: {direction!r}")
    b = 360.0 * frac(direction / 360.0)
    # tiny negative inputs can round up to a full turn
    return 0.0 if b >= 360.0 else b


def add(d1: Direction, d2: Direction) -> float:
    """Add directions to give a bearing in the range [0.0, 360.0)."""
    return to_bearing(to_bearing(d1) + to_bearing(d2))


def equals(d1: Direction, d2: Direction, eps: float = EPSILON) -> bool:
    """Compare directions: exact for two compass points, otherwise within eps."""
    if is_compass(d1) and is_compass(d2):
        return compass_point(d1) is compass_point(d2)
    diff = abs(to_bearing(d1) - to_bearing(d2))
    return min(diff, 360.0 - diff) <= eps
