from __future__ import annotations

import pytest

from .bearing import COMPASS_BEARINGS, add, compass_point, equals, to_bearing
from .types import CompassPoint


def test_compass_table() -> None:
    assert len(COMPASS_BEARINGS) == 16
    assert to_bearing(CompassPoint.N) == 0.0
    assert to_bearing("NNE") == 22.5
    assert to_bearing(CompassPoint.E) == 90.0
    assert to_bearing("NNW") == 337.5


@pytest.mark.parametrize(
    "degrees, expected",
    [
        (0.0, 0.0),
        (90, 90.0),
        (-90.0, 270.0),
        (360.0, 0.0),
        (720.0, 0.0),
        (361.0, 1.0),
        (-1.0e-18, 0.0),
    ],
)
def test_normalize(degrees, expected) -> None:
    result = to_bearing(degrees)
    assert 0.0 <= result < 360.0
    assert result == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize(
    "d1, d2, expected",
    [
        (100.0, 180.0, 280.0),
        (300.0, 180.0, 120.0),
        (-100.0, 180.0, 80.0),
        (100.0, -180.0, 280.0),
        (-100.0, -80.0, 180.0),
        (CompassPoint.E, 20.0, 110.0),
        ("NNW", 22.5, 0.0),
    ],
)
def test_add(d1, d2, expected) -> None:
    assert add(d1, d2) == pytest.approx(expected, abs=1e-9)


def test_equals() -> None:
    assert equals("N", CompassPoint.N)
    assert not equals("N", "NNE")
    assert equals("NNE", 22.5)
    assert equals(359.9999999, 0.0)
    assert equals(-0.0000001, 0.0)
    assert not equals(10.0, 10.1)
    assert equals(10.0, 10.05, eps=0.1)


@pytest.mark.parametrize("bad", ["X", "n", None, True, float("nan"), float("inf")])
def test_invalid_direction(bad) -> None:
    with pytest.raises(ValueError):
        to_bearing(bad)


def test_compass_point_lookup() -> None:
    assert compass_point("SW") is CompassPoint.SW
    with pytest.raises(ValueError):
        compass_point("SWS")
