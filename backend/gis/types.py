"""
GIS Types
Coordinate shapes, range predicates and the validated location constructor.

There are 4 representations of geo-locations:

- DD: signed decimal degrees, no direction letters
- D: non-negative decimal degrees with direction letters
- DM: non-negative integer degrees, decimal minutes, direction letters
- DMS: non-negative integer degrees, integer minutes, decimal seconds, direction letters

Latitude is in [-90, 90]. Longitude is in (-180, 180]: the signed value -180
is never valid, use +180. At the poles longitude is undefined, so any valid
longitude is accepted there.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class Hemisphere(str, Enum):
    """Direction letter carried by the D, DM and DMS forms"""

    N = "N"
    S = "S"
    E = "E"
    W = "W"


LAT_HEMISPHERES = (Hemisphere.N, Hemisphere.S)
LON_HEMISPHERES = (Hemisphere.E, Hemisphere.W)


class CompassPoint(str, Enum):
    """The 16 named compass points, clockwise from North"""

    N = "N"
    NNE = "NNE"
    NE = "NE"
    ENE = "ENE"
    E = "E"
    ESE = "ESE"
    SE = "SE"
    SSE = "SSE"
    S = "S"
    SSW = "SSW"
    SW = "SW"
    WSW = "WSW"
    W = "W"
    WNW = "WNW"
    NW = "NW"
    NNW = "NNW"


class DistanceAlgorithm(str, Enum):
    EQUIRECT = "equirect"
    HAVERSINE = "haversine"


class Separator(str, Enum):
    """
    Separator between latitude and longitude when formatting:
    a single comma, or N/S after latitude and E/W after longitude.
    """

    COMMA = "comma"
    NSEW = "nsew"


# ----------------
# range predicates
# ----------------

def is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def is_number(x: Any) -> bool:
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return False
    return math.isfinite(x)


def is_lon_int_deg(d: Any) -> bool:
    return is_int(d) and -179 <= d <= 180


def is_lat_nat_deg(d: Any) -> bool:
    return is_int(d) and 0 <= d <= 90


def is_lon_nat_deg(d: Any) -> bool:
    return is_int(d) and 0 <= d <= 180


def is_nat_min(m: Any) -> bool:
    return is_int(m) and 0 <= m <= 59


def is_pos_min(m: Any) -> bool:
    return is_number(m) and 0.0 <= m < 60.0


def is_pos_sec(s: Any) -> bool:
    return is_number(s) and 0.0 <= s < 60.0


def is_lat_dec_deg(d: Any) -> bool:
    return is_number(d) and -90.0 <= d <= 90.0


def is_lon_dec_deg(d: Any) -> bool:
    return is_number(d) and -180.0 < d <= 180.0


def is_lat_pos_deg(d: Any) -> bool:
    return is_number(d) and 0.0 <= d <= 90.0


def is_lon_pos_deg(d: Any) -> bool:
    return is_number(d) and 0.0 <= d <= 180.0


def is_ns(h: Any) -> bool:
    return _hemisphere(h) in LAT_HEMISPHERES


def is_ew(h: Any) -> bool:
    return _hemisphere(h) in LON_HEMISPHERES


def _hemisphere(h: Any) -> Hemisphere | None:
    if isinstance(h, Hemisphere):
        return h
    if isinstance(h, str) and h in Hemisphere.__members__:
        return Hemisphere[h]
    return None


# ----------------
# shape predicates
# ----------------

def is_loc_dd(lat: Any, lon: Any) -> bool:
    return is_lat_dec_deg(lat) and is_lon_dec_deg(lon)


def is_loc_d(lat: Any, ns: Any, lon: Any, ew: Any) -> bool:
    return is_lat_pos_deg(lat) and is_ns(ns) and is_lon_pos_deg(lon) and is_ew(ew)


def is_lat_dm(d: Any, m: Any, ns: Any) -> bool:
    return is_lat_nat_deg(d) and is_pos_min(m) and is_ns(ns) and d + m / 60.0 <= 90.0


def is_lon_dm(d: Any, m: Any, ew: Any) -> bool:
    return is_lon_nat_deg(d) and is_pos_min(m) and is_ew(ew) and d + m / 60.0 <= 180.0


def is_loc_dm(ad: Any, am: Any, ns: Any, od: Any, om: Any, ew: Any) -> bool:
    return is_lat_dm(ad, am, ns) and is_lon_dm(od, om, ew)


def is_lat_dms(d: Any, m: Any, s: Any, ns: Any) -> bool:
    return (
        is_lat_nat_deg(d) and is_nat_min(m) and is_pos_sec(s) and is_ns(ns)
        and d + (m + s / 60.0) / 60.0 <= 90.0
    )


def is_lon_dms(d: Any, m: Any, s: Any, ew: Any) -> bool:
    return (
        is_lon_nat_deg(d) and is_nat_min(m) and is_pos_sec(s) and is_ew(ew)
        and d + (m + s / 60.0) / 60.0 <= 180.0
    )


def is_loc_dms(ad: Any, am: Any, as_: Any, ns: Any, od: Any, om: Any, os_: Any, ew: Any) -> bool:
    return is_lat_dms(ad, am, as_, ns) and is_lon_dms(od, om, os_, ew)


# -----------------
# location variants
# -----------------

def _set(obj: Any, name: str, value: Any) -> None:
    object.__setattr__(obj, name, value)


@dataclass(frozen=True)
class LocationDD:
    """Signed decimal degrees: positive is North and East"""

    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not is_loc_dd(self.lat, self.lon):
            raise ValueError(f"Invalid DD location: lat={self.lat!r}, lon={self.lon!r}")
        _set(self, "lat", float(self.lat))
        _set(self, "lon", float(self.lon))

    def to_tuple(self) -> tuple[float, float]:
        return (self.lat, self.lon)


@dataclass(frozen=True)
class LocationD:
    """Non-negative decimal degrees with direction letters"""

    lat: float
    ns: Hemisphere
    lon: float
    ew: Hemisphere

    def __post_init__(self) -> None:
        if not is_loc_d(self.lat, self.ns, self.lon, self.ew):
            raise ValueError(
                f"Invalid D location: {self.lat!r} {self.ns!r}, {self.lon!r} {self.ew!r}"
            )
        _set(self, "lat", float(self.lat))
        _set(self, "lon", float(self.lon))
        _set(self, "ns", _hemisphere(self.ns))
        _set(self, "ew", _hemisphere(self.ew))

    def to_tuple(self) -> tuple[tuple[float, str], tuple[float, str]]:
        return ((self.lat, self.ns.value), (self.lon, self.ew.value))


@dataclass(frozen=True)
class LocationDM:
    """Non-negative integer degrees and decimal minutes with direction letters"""

    lat_deg: int
    lat_min: float
    ns: Hemisphere
    lon_deg: int
    lon_min: float
    ew: Hemisphere

    def __post_init__(self) -> None:
        if not is_loc_dm(self.lat_deg, self.lat_min, self.ns, self.lon_deg, self.lon_min, self.ew):
            raise ValueError(
                f"Invalid DM location: {self.lat_deg!r} {self.lat_min!r} {self.ns!r}, "
                f"{self.lon_deg!r} {self.lon_min!r} {self.ew!r}"
            )
        _set(self, "lat_min", float(self.lat_min))
        _set(self, "lon_min", float(self.lon_min))
        _set(self, "ns", _hemisphere(self.ns))
        _set(self, "ew", _hemisphere(self.ew))

    def to_tuple(self) -> tuple[tuple[int, float, str], tuple[int, float, str]]:
        return (
            (self.lat_deg, self.lat_min, self.ns.value),
            (self.lon_deg, self.lon_min, self.ew.value),
        )


@dataclass(frozen=True)
class LocationDMS:
    """Non-negative integer degrees and minutes, decimal seconds, direction letters"""

    lat_deg: int
    lat_min: int
    lat_sec: float
    ns: Hemisphere
    lon_deg: int
    lon_min: int
    lon_sec: float
    ew: Hemisphere

    def __post_init__(self) -> None:
        if not is_loc_dms(
            self.lat_deg, self.lat_min, self.lat_sec, self.ns,
            self.lon_deg, self.lon_min, self.lon_sec, self.ew,
        ):
            raise ValueError(
                f"Invalid DMS location: {self.lat_deg!r} {self.lat_min!r} {self.lat_sec!r} {self.ns!r}, "
                f"{self.lon_deg!r} {self.lon_min!r} {self.lon_sec!r} {self.ew!r}"
            )
        _set(self, "lat_sec", float(self.lat_sec))
        _set(self, "lon_sec", float(self.lon_sec))
        _set(self, "ns", _hemisphere(self.ns))
        _set(self, "ew", _hemisphere(self.ew))

    def to_tuple(self) -> tuple[tuple[int, int, float, str], tuple[int, int, float, str]]:
        return (
            (self.lat_deg, self.lat_min, self.lat_sec, self.ns.value),
            (self.lon_deg, self.lon_min, self.lon_sec, self.ew.value),
        )


Location = Union[LocationDD, LocationD, LocationDM, LocationDMS]
LOCATION_TYPES = (LocationDD, LocationD, LocationDM, LocationDMS)


@dataclass(frozen=True)
class LocationError:
    """
    Result for a value that matches none of the four location shapes.
    Returned, not raised, by conversions.
    """

    value: Any
    message: str

    @classmethod
    def unrecognized(cls, value: Any) -> "LocationError":
        return cls(value=value, message=f"Unrecognized location format {value!r}")


def is_location(value: Any) -> bool:
    return isinstance(value, LOCATION_TYPES)


def location(value: Any) -> Location | LocationError:
    """
    Validated constructor for any location.

    Accepts one of the location dataclasses, or the structured tuple shapes:
    ``(lat, lon)``, ``((lat, "N"), (lon, "E"))``, ``((d, m, "N"), (d, m, "E"))``
    and ``((d, m, s, "N"), (d, m, s, "E"))``.

    Never raises: a value that does not match any shape,
    or that violates a range, gives a ``LocationError``.
    """
    if is_location(value):
        return value
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        return LocationError.unrecognized(value)

    lat, lon = value
    try:
        if is_number(lat) and is_number(lon):
            return LocationDD(lat, lon)
        if isinstance(lat, (tuple, list)) and isinstance(lon, (tuple, list)) and len(lat) == len(lon):
            if len(lat) == 2:
                return LocationD(lat[0], lat[1], lon[0], lon[1])
            if len(lat) == 3:
                return LocationDM(lat[0], lat[1], lat[2], lon[0], lon[1], lon[2])
            if len(lat) == 4:
                return LocationDMS(lat[0], lat[1], lat[2], lat[3], lon[0], lon[1], lon[2], lon[3])
    except ValueError as exc:
        return LocationError(value=value, message=str(exc))

    return LocationError.unrecognized(value)
