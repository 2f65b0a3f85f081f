from __future__ import annotations

import pytest

from .types import (
    Hemisphere,
    LocationD,
    LocationDD,
    LocationDM,
    LocationDMS,
    LocationError,
    is_lon_dec_deg,
    is_lon_int_deg,
    is_number,
    location,
)


def test_location_from_tuples() -> None:
    assert location((3.75, -2.2)) == LocationDD(3.75, -2.2)
    assert location(((3.75, "N"), (2.2, "W"))) == LocationD(3.75, Hemisphere.N, 2.2, Hemisphere.W)
    assert location(((3, 45.0, "N"), (2, 12.25, "W"))) == LocationDM(3, 45.0, "N", 2, 12.25, "W")
    assert location(((3, 45, 0.0, "S"), (2, 12, 15.0, "E"))) == LocationDMS(3, 45, 0.0, "S", 2, 12, 15.0, "E")


def test_location_passes_through_dataclasses() -> None:
    loc = LocationDD(1.0, 2.0)
    assert location(loc) is loc


def test_fields_are_coerced() -> None:
    d = LocationD(3, "N", 2, "W")
    assert isinstance(d.lat, float) and isinstance(d.lon, float)
    assert d.ns is Hemisphere.N and d.ew is Hemisphere.W
    assert d.to_tuple() == ((3.0, "N"), (2.0, "W"))


@pytest.mark.parametrize(
    "value",
    [
        "foo",
        None,
        (1.0, 2.0, 3.0),
        ((1.0, "X"), (2.0, "E")),
        ((1.0, "E"), (2.0, "N")),
        ((3, 45.0, "N"), (2, 12, 15.0, "W")),
        (91.0, 0.0),
        (0.0, -180.0),
    ],
)
def test_unrecognized_or_invalid_gives_error(value) -> None:
    result = location(value)
    assert isinstance(result, LocationError)
    assert result.value == value


@pytest.mark.parametrize(
    "factory",
    [
        lambda: LocationDD(90.1, 0.0),
        lambda: LocationDD(0.0, -180.0),
        lambda: LocationDD(float("nan"), 0.0),
        lambda: LocationD(-1.0, "N", 0.0, "E"),
        lambda: LocationD(1.0, "E", 0.0, "E"),
        lambda: LocationDM(90, 0.5, "N", 0, 0.0, "E"),
        lambda: LocationDM(True, 0.0, "N", 0, 0.0, "E"),
        lambda: LocationDM(3, 60.0, "N", 0, 0.0, "E"),
        lambda: LocationDMS(3, 45.5, 0.0, "N", 0, 0, 0.0, "E"),
        lambda: LocationDMS(180, 0, 0.1, "N", 0, 0, 0.0, "E"),
        lambda: LocationDMS(0, 0, 0.0, "N", 180, 0, 0.1, "E"),
    ],
)
def test_constructor_rejects_out_of_range(factory) -> None:
    with pytest.raises(ValueError):
        factory()


def test_longitude_bounds() -> None:
    assert LocationDD(0.0, 180.0).lon == 180.0
    assert is_lon_dec_deg(180.0)
    assert not is_lon_dec_deg(-180.0)
    assert is_lon_int_deg(180) and not is_lon_int_deg(-180)


def test_is_number_excludes_bool_and_non_finite() -> None:
    assert is_number(1) and is_number(1.5)
    assert not is_number(True)
    assert not is_number(float("inf"))
    assert not is_number("1.0")
