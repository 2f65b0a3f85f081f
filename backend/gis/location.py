"""
Location Module
Parsing, formatting, conversion, comparison and navigation for geo-locations.

All distance and navigation math works on signed decimal degrees (DD),
so every entry point first converts its arguments with ``to_dd``.

Equality uses a small epsilon on the final floating-point component
(default 1e-6, about 10 cm at degree scale). The poles at latitude +-90
are equal for any valid longitude.

There are two distance measures:

- equirectangular: Pythagoras in the plane tangent to the mid-point,
  allowing for the small ellipsoidal variation of a degree of latitude
- haversine: exact spherical geometry on a sphere of mean Earth radius

Haversine is more accurate, especially over larger distances.
For points within a few 100 km the equirectangular distance is usually
adequate: London to Paris is about 343.5 km, and the two measures differ
by about 160 m, or 0.05 %.

Reference: https://www.movable-type.co.uk/scripts/latlong.html
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

from . import bearing as Bearing
from .constants import (
    DELTA_POLE,
    EPSILON,
    LAT1_EQTR,
    LON1_EQTR,
    MEAN_RADIUS,
    PREC_DMS,
    SYM_ASCII,
)
from .lexer import LexError, Token, TokenKind, tokenize
from .types import (
    LAT_HEMISPHERES,
    LON_HEMISPHERES,
    DistanceAlgorithm,
    Hemisphere,
    Location,
    LocationD,
    LocationDD,
    LocationDM,
    LocationDMS,
    LocationError,
    Separator,
    is_int,
    is_number,
    location,
)

logger = logging.getLogger(__name__)


class LocationParseError(ValueError):
    """Raised when a string cannot be parsed as a geo-location"""
    pass


_NEGATIVE = (Hemisphere.S, Hemisphere.W)

# ----------
# comparison
# ----------

def equals(loc1: Any, loc2: Any, eps: float = EPSILON) -> bool:
    """
    Compare locations for equality.

    Integer degree and minute fields must match exactly, the final
    floating-point field is compared within ``eps``.
    Locations of different representations are compared in D form.
    """
    a = location(loc1)
    b = location(loc2)
    if isinstance(a, LocationError) or isinstance(b, LocationError):
        return False

    if type(a) is not type(b):
        a = to_d(a)
        b = to_d(b)

    pole = _pole(a)
    if pole is not None and pole is _pole(b):
        return True

    if isinstance(a, LocationDD):
        return _close(a.lat, b.lat, eps) and _close_lon(a.lon, b.lon, eps)

    if isinstance(a, LocationD):
        return (
            _close(_signed(a.lat, a.ns), _signed(b.lat, b.ns), eps)
            and _close_lon(_signed(a.lon, a.ew), _signed(b.lon, b.ew), eps)
        )

    if isinstance(a, LocationDM):
        return (
            a.lat_deg == b.lat_deg and _close(a.lat_min, b.lat_min, eps)
            and _same_side(a.ns, b.ns, a.lat_deg == 0 and _close(a.lat_min, 0.0, eps))
            and a.lon_deg == b.lon_deg and _close(a.lon_min, b.lon_min, eps)
            and _same_side(a.ew, b.ew, a.lon_deg in (0, 180) and _close(a.lon_min, 0.0, eps))
        )

    return (
        a.lat_deg == b.lat_deg and a.lat_min == b.lat_min and _close(a.lat_sec, b.lat_sec, eps)
        and _same_side(a.ns, b.ns, a.lat_deg == 0 and a.lat_min == 0 and _close(a.lat_sec, 0.0, eps))
        and a.lon_deg == b.lon_deg and a.lon_min == b.lon_min and _close(a.lon_sec, b.lon_sec, eps)
        and _same_side(a.ew, b.ew, a.lon_deg in (0, 180) and a.lon_min == 0 and _close(a.lon_sec, 0.0, eps))
    )


def _close(x: float, y: float, eps: float) -> bool:
    return abs(x - y) <= eps


def _close_lon(x: float, y: float, eps: float) -> bool:
    # 180 E and 180 W are the same meridian
    return _close(x, y, eps) or abs(abs(x - y) - 360.0) <= eps


def _same_side(h1: Hemisphere, h2: Hemisphere, neutral: bool) -> bool:
    # a zero magnitude, or the antimeridian, has no hemisphere
    return h1 is h2 or neutral


def _pole(loc: Location) -> Optional[Hemisphere]:
    """The pole for a latitude of exactly +-90 degrees, otherwise None"""
    if isinstance(loc, LocationDD):
        if abs(loc.lat) == 90.0:
            return Hemisphere.N if loc.lat > 0 else Hemisphere.S
        return None
    if isinstance(loc, LocationD):
        return loc.ns if loc.lat == 90.0 else None
    if isinstance(loc, LocationDM):
        return loc.ns if loc.lat_deg == 90 and loc.lat_min == 0.0 else None
    if loc.lat_deg == 90 and loc.lat_min == 0 and loc.lat_sec == 0.0:
        return loc.ns
    return None

# -----------
# conversions
# -----------

def to_dd(loc: Any) -> LocationDD | LocationError:
    """Convert any location to signed decimal degrees (DD)."""
    loc = location(loc)
    if isinstance(loc, (LocationDD, LocationError)):
        return loc
    d = to_d(loc)
    return LocationDD(_signed(d.lat, d.ns), _signed_lon(d.lon, d.ew))


def to_d(loc: Any) -> LocationD | LocationError:
    """Convert any location to non-negative decimal degrees with directions (D)."""
    loc = location(loc)
    if isinstance(loc, (LocationD, LocationError)):
        return loc
    if isinstance(loc, LocationDD):
        lat, ns = _lat_ns(loc.lat)
        lon, ew = _lon_ew(loc.lon)
        return LocationD(lat, ns, lon, ew)
    if isinstance(loc, LocationDM):
        return LocationD(
            _dec(loc.lat_deg, loc.lat_min), loc.ns,
            _dec(loc.lon_deg, loc.lon_min), loc.ew,
        )
    return LocationD(
        _dec(loc.lat_deg, loc.lat_min + loc.lat_sec / 60.0), loc.ns,
        _dec(loc.lon_deg, loc.lon_min + loc.lon_sec / 60.0), loc.ew,
    )


def to_dm(loc: Any) -> LocationDM | LocationError:
    """Convert any location to integer degrees, decimal minutes with directions (DM)."""
    loc = location(loc)
    if isinstance(loc, (LocationDM, LocationError)):
        return loc
    if isinstance(loc, LocationDMS):
        lat_deg, lat_min = _carry(loc.lat_deg, loc.lat_min + loc.lat_sec / 60.0)
        lon_deg, lon_min = _carry(loc.lon_deg, loc.lon_min + loc.lon_sec / 60.0)
        return LocationDM(lat_deg, lat_min, loc.ns, lon_deg, lon_min, loc.ew)
    d = to_d(loc)
    lat_deg, lat_min = _split(d.lat)
    lon_deg, lon_min = _split(d.lon)
    return LocationDM(lat_deg, lat_min, d.ns, lon_deg, lon_min, d.ew)


def to_dms(loc: Any) -> LocationDMS | LocationError:
    """Convert any location to integer degrees and minutes, decimal seconds with directions (DMS)."""
    loc = location(loc)
    if isinstance(loc, (LocationDMS, LocationError)):
        return loc
    dm = to_dm(loc)
    lat_deg, lat_min, lat_sec = _split_min(dm.lat_deg, dm.lat_min)
    lon_deg, lon_min, lon_sec = _split_min(dm.lon_deg, dm.lon_min)
    return LocationDMS(lat_deg, lat_min, lat_sec, dm.ns, lon_deg, lon_min, lon_sec, dm.ew)


def _frac(x: float) -> float:
    return x - math.trunc(x)


def _dec(deg: int, minutes: float) -> float:
    return deg + minutes / 60.0


def _split(value: float) -> tuple[int, float]:
    return _carry(math.trunc(value), 60.0 * _frac(value))


def _carry(deg: int, minutes: float) -> tuple[int, float]:
    # rounding can push a fraction just below 1 up to a full unit
    if minutes >= 60.0:
        return deg + 1, 0.0
    return deg, minutes


def _split_min(deg: int, minutes: float) -> tuple[int, int, float]:
    whole, seconds = _split(minutes)
    if whole == 60:
        return deg + 1, 0, 0.0
    return deg, whole, seconds


def _signed(value: float, hemisphere: Hemisphere) -> float:
    return -value if hemisphere in _NEGATIVE else value


def _signed_lon(value: float, hemisphere: Hemisphere) -> float:
    # -180 is not a valid signed longitude
    lon = _signed(value, hemisphere)
    return 180.0 if lon == -180.0 else lon


def _lat_ns(lat: float) -> tuple[float, Hemisphere]:
    return (abs(lat), Hemisphere.N) if lat >= 0.0 else (-lat, Hemisphere.S)


def _lon_ew(lon: float) -> tuple[float, Hemisphere]:
    return (abs(lon), Hemisphere.E) if lon >= 0.0 else (-lon, Hemisphere.W)


def require_dd(loc: Any) -> LocationDD:
    dd = to_dd(loc)
    if isinstance(dd, LocationError):
        raise ValueError(dd.message)
    return dd

# ----------
# formatting
# ----------

def format(
    loc: Any,
    precision: tuple[int, int, int] = PREC_DMS,
    separator: Separator | str = Separator.NSEW,
    delimiters: Optional[tuple[str, str, str]] = SYM_ASCII,
) -> str | LocationError:
    """
    Format any location as a string, in the notation of the input.

    Args:
        loc: Location in any representation
        precision: Decimal places for the degree, minute and second
            component, used when that component is the final float
        separator: ``comma`` for signed ``lat, lon``, or ``nsew`` for
            ``lat N/S lon E/W``; ignored for DD, which is always signed
        delimiters: Degree, minute and second marks, or None for
            space-separated components

    Returns:
        str: Formatted location, or LocationError for an unrecognized shape
    """
    loc = location(loc)
    if isinstance(loc, LocationError):
        return loc

    if len(precision) != 3 or not all(is_int(p) and p >= 0 for p in precision):
        raise ValueError(f"Invalid precision: {precision!r}")
    if delimiters is not None and len(delimiters) != 3:
        raise ValueError(f"Invalid delimiters: {delimiters!r}")
    separator = Separator(separator)
    dp, mp, sp = precision

    if isinstance(loc, LocationDD):
        return _join(
            [(_fixed(loc.lat, dp), 0)], [(_fixed_lon(loc.lon, dp), 0)], None, None,
            Separator.COMMA, delimiters,
        )

    if isinstance(loc, LocationD):
        if separator is Separator.COMMA:
            return _join(
                [(_fixed(_signed(loc.lat, loc.ns), dp), 0)],
                [(_fixed_lon(_signed(loc.lon, loc.ew), dp), 0)],
                None, None, separator, delimiters,
            )
        return _join(
            [(_fixed(loc.lat, dp), 0)], [(_fixed(loc.lon, dp), 0)],
            loc.ns, loc.ew, separator, delimiters,
        )

    if isinstance(loc, LocationDM):
        lat_deg, lat_min = _carry(loc.lat_deg, _round(loc.lat_min, mp))
        lon_deg, lon_min = _carry(loc.lon_deg, _round(loc.lon_min, mp))
        return _join(
            [(str(lat_deg), 0), (_fixed(lat_min, mp), 1)],
            [(str(lon_deg), 0), (_fixed(lon_min, mp), 1)],
            loc.ns, loc.ew, separator, delimiters,
        )

    lat = _round_dms(loc.lat_deg, loc.lat_min, loc.lat_sec, sp)
    lon = _round_dms(loc.lon_deg, loc.lon_min, loc.lon_sec, sp)
    return _join(
        [(str(lat[0]), 0), (str(lat[1]), 1), (_fixed(lat[2], sp), 2)],
        [(str(lon[0]), 0), (str(lon[1]), 1), (_fixed(lon[2], sp), 2)],
        loc.ns, loc.ew, separator, delimiters,
    )


def _round(value: float, places: int) -> float:
    return float(f"{value:.{places}f}")


def _fixed(value: float, places: int) -> str:
    """Fixed-point text without trailing zeros, always keeping one decimal"""
    text = f"{value:.{places}f}"
    if "." not in text:
        return text + ".0"
    text = text.rstrip("0")
    return text + "0" if text.endswith(".") else text


def _fixed_lon(lon: float, places: int) -> str:
    text = _fixed(lon, places)
    # -180 is not a valid signed longitude
    return text[1:] if float(text) == -180.0 else text


def _round_dms(deg: int, minutes: int, seconds: float, places: int) -> tuple[int, int, float]:
    seconds = _round(seconds, places)
    if seconds >= 60.0:
        seconds = 0.0
        minutes += 1
    if minutes == 60:
        minutes = 0
        deg += 1
    return deg, minutes, seconds


def _join(
    lat_parts: list[tuple[str, int]],
    lon_parts: list[tuple[str, int]],
    ns: Optional[Hemisphere],
    ew: Optional[Hemisphere],
    separator: Separator,
    delimiters: Optional[tuple[str, str, str]],
) -> str:
    def axis(parts: list[tuple[str, int]], hemisphere: Optional[Hemisphere]) -> str:
        if delimiters is None:
            text = " ".join(t for t, _ in parts)
        else:
            text = "".join(t + delimiters[i] for t, i in parts)
        if hemisphere is None:
            return text
        if separator is Separator.COMMA:
            return ("-" if hemisphere in _NEGATIVE else "") + text
        return f"{text} {hemisphere.value}"

    if separator is Separator.COMMA:
        return f"{axis(lat_parts, ns)}, {axis(lon_parts, ew)}"
    return f"{axis(lat_parts, ns)} {axis(lon_parts, ew)}"

# ---------
# map links
# ---------

GOOGLE_PLACE = "//www.google.com/maps/place/"

# RFC 3986 reserved characters stay literal in the path
_URI_SAFE = ":/?#[]@!$&'()*+,;="


def google_maps_url(loc: Any, zoom: int = 10, https: bool = False) -> str:
    """
    Convert a location to a Google Maps URL with zoom level 1-20.

    Example:
        >>> google_maps_url(LocationDMS(54, 28, 0.0, "N", 56, 16, 0.0, "E"), 15)
        "http://www.google.com/maps/place/54%C2%B028'0.0%22%20N%2056%C2%B016'0.0%22%20E/@54.4666667%C2%B0,%2056.2666667%C2%B0,15z"
    """
    if not (is_int(zoom) and 1 <= zoom <= 20):
        raise ValueError(f"Invalid zoom level: {zoom!r} (must be 1 to 20)")

    dd = format(require_dd(loc), (7, 3, 1))
    dms = format(to_dms(loc))
    scheme = "https:" if https else "http:"
    return scheme + GOOGLE_PLACE + quote(f"{dms}/@{dd},{zoom}z", safe=_URI_SAFE)

# ---------
# distances
# ---------

def equirect_scales(lat: float) -> tuple[float, float]:
    """
    Metres per degree of latitude and longitude at a latitude.

    Latitude uses a linear interpolation between the values at the equator
    and the pole. Longitude is the equator value scaled by cos(lat).
    """
    lat_scale = LAT1_EQTR + DELTA_POLE * abs(lat) / 90.0
    lon_scale = LON1_EQTR * math.cos(math.radians(lat))
    return lat_scale, lon_scale


def distance(
    loc1: Any,
    loc2: Any,
    algorithm: DistanceAlgorithm | str = DistanceAlgorithm.HAVERSINE,
) -> float:
    """
    Approximate distance (m) between two geo-locations.

    The equirectangular distance is the length of the line lying within the
    lat/lon bounds of the two points. It is only the shortest path when the
    great circle does not cross a pole or the antimeridian.
    """
    p1 = require_dd(loc1)
    p2 = require_dd(loc2)

    if DistanceAlgorithm(algorithm) is DistanceAlgorithm.EQUIRECT:
        lat_scale, lon_scale = equirect_scales(0.5 * (p1.lat + p2.lat))
        dlat = lat_scale * abs(p2.lat - p1.lat)
        dlon = lon_scale * abs(p2.lon - p1.lon)
        return math.sqrt(dlat * dlat + dlon * dlon)

    lat1 = math.radians(p1.lat)
    lat2 = math.radians(p2.lat)
    sin_dlat = math.sin(math.radians(0.5 * (p2.lat - p1.lat)))
    sin_dlon = math.sin(math.radians(0.5 * (p2.lon - p1.lon)))
    a = sin_dlat * sin_dlat + math.cos(lat1) * math.cos(lat2) * sin_dlon * sin_dlon
    a = min(1.0, max(0.0, a))
    return 2.0 * MEAN_RADIUS * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))

# ----------
# navigation
# ----------

def travel(loc: Any, direction: Bearing.Direction, meters: float) -> LocationDD:
    """
    Destination after travelling along a great circle
    on an initial bearing from a starting point.

    This is not a line of constant bearing. The result is always DD.
    """
    if not is_number(meters) or meters < 0.0:
        raise ValueError(f"Invalid distance: {meters!r} (must be non-negative metres)")

    start = require_dd(loc)
    brg = math.radians(Bearing.to_bearing(direction))
    lat1 = math.radians(start.lat)
    delta = meters / MEAN_RADIUS

    sin_lat2 = math.sin(lat1) * math.cos(delta) + math.cos(lat1) * math.sin(delta) * math.cos(brg)
    lat2 = math.asin(max(-1.0, min(1.0, sin_lat2)))
    dlon = math.atan2(
        math.sin(brg) * math.sin(delta) * math.cos(lat1),
        math.cos(delta) - math.sin(lat1) * math.sin(lat2),
    )

    return add(LocationDD(math.degrees(lat2), start.lon), 0.0, math.degrees(dlon))


def heading(loc1: Any, loc2: Any) -> float:
    """Initial bearing on the great circle path from loc1 to loc2."""
    p1 = require_dd(loc1)
    p2 = require_dd(loc2)
    lat1 = math.radians(p1.lat)
    lat2 = math.radians(p2.lat)
    dlon = math.radians(p2.lon - p1.lon)

    y = math.cos(lat2) * math.sin(dlon)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
    return Bearing.to_bearing(math.degrees(math.atan2(y, x)))


def add(loc: Any, delta_lat: float, delta_lon: float) -> LocationDD:
    """
    Add decimal degrees to a location. The result is always DD.

    Longitude wraps into (-180, 180]. Latitude folds back at the poles
    into [-90, 90]; a path that crosses a pole lands on the opposite
    meridian, so longitude is flipped by 180 degrees.
    """
    if not (is_number(delta_lat) and is_number(delta_lon)):
        raise ValueError(f"Invalid deltas: {delta_lat!r}, {delta_lon!r}")

    start = require_dd(loc)

    if delta_lat == 0:
        return LocationDD(start.lat, 180.0 * _wrap((start.lon + delta_lon) / 180.0))

    fac_lat = (start.lat + delta_lat) / 90.0
    lat = 90.0 * _fold(fac_lat)
    flip = 180.0 if abs(math.trunc(fac_lat)) % 4 in (1, 2) else 0.0
    lon = 180.0 * _wrap((start.lon + delta_lon + flip) / 180.0)
    return LocationDD(lat, lon)


def _wrap(x: float) -> float:
    """Symmetric modulo into (-1, 1]"""
    if -1.0 < x <= 1.0:
        return x
    return x - 2.0 * math.ceil((x - 1.0) / 2.0)


def _fold(x: float) -> float:
    """Mirror fold into [-1, 1], reflecting at +-1"""
    if -1.0 <= x <= 1.0:
        return x
    y = math.fmod(x + 1.0, 4.0)
    if y < 0.0:
        y += 4.0
    y -= 1.0
    return 2.0 - y if y > 1.0 else y

# -------
# parsing
# -------

def parse(text: Optional[str]) -> Location | str | None:
    """
    Parse a geo-location without raising.

    If the input cannot be parsed, the original string is returned.
    A None argument is passed through as None.
    """
    if text is None or not isinstance(text, str):
        return text
    try:
        return _parse(text)
    except (LexError, LocationParseError) as exc:
        logger.debug(f"Not a location '{text}': {exc}")
        return text


def parse_or_fail(text: str) -> Location:
    """Parse a geo-location, raising LocationParseError on failure."""
    try:
        if not isinstance(text, str):
            raise LocationParseError(f"Expected a string, got {type(text).__name__}")
        return _parse(text)
    except (LexError, LocationParseError) as exc:
        msg = f"Cannot parse location '{text}': {exc}"
        logger.warning(msg)
        raise LocationParseError(msg) from exc


@dataclass(frozen=True)
class _Axis:
    numbers: tuple[Token, ...]
    letter: Optional[Hemisphere]


_MARK_ORDER = (TokenKind.DEG, TokenKind.MIN, TokenKind.SEC)


def _parse(text: str) -> Location:
    tokens = tokenize(text)

    lat, pos = _axis(tokens, 0, LAT_HEMISPHERES, "latitude")
    if pos >= len(tokens) or tokens[pos].kind is not TokenKind.COMMA:
        raise LocationParseError(f"Illegal latitude tokens {_show(tokens[pos:])}")
    lon, pos = _axis(tokens, pos + 1, LON_HEMISPHERES, "longitude")
    if pos != len(tokens):
        raise LocationParseError(f"Illegal longitude tokens {_show(tokens[pos:])}")

    return _build(lat, lon)


def _axis(
    tokens: list[Token],
    pos: int,
    letters: tuple[Hemisphere, Hemisphere],
    name: str,
) -> tuple[_Axis, int]:
    numbers: list[Token] = []
    while pos < len(tokens) and tokens[pos].is_number and len(numbers) < 3:
        numbers.append(tokens[pos])
        pos += 1
        if pos < len(tokens) and tokens[pos].kind is _MARK_ORDER[len(numbers) - 1]:
            pos += 1

    if not numbers:
        raise LocationParseError(f"Missing {name} in tokens {_show(tokens[pos:])}")

    letter = None
    if pos < len(tokens) and tokens[pos].kind is TokenKind.DIR:
        if tokens[pos].value not in letters:
            raise LocationParseError(f"Illegal {name} direction '{tokens[pos].text}'")
        letter = tokens[pos].value
        pos += 1

    # components after the leading degree are unsigned, leading degrees of DM/DMS are integers
    if any(t.is_negative for t in numbers[1:]):
        raise LocationParseError(f"Negative {name} minutes or seconds")
    if len(numbers) > 1 and any(t.kind is not TokenKind.INT for t in numbers[:-1]):
        raise LocationParseError(f"Non-integer {name} degrees or minutes")
    if letter is not None and numbers[0].is_negative:
        raise LocationParseError(f"Signed {name} with direction '{letter.value}'")

    return _Axis(tuple(numbers), letter), pos


def _build(lat: _Axis, lon: _Axis) -> Location:
    if len(lat.numbers) != len(lon.numbers):
        raise LocationParseError(
            f"Mismatched latitude and longitude notations ({len(lat.numbers)} and {len(lon.numbers)} components)"
        )

    try:
        if len(lat.numbers) == 1:
            lat_value = float(lat.numbers[0].value)
            lon_value = float(lon.numbers[0].value)
            if lat.letter is None and lon.letter is None:
                return LocationDD(lat_value, lon_value)
            lat_mag, ns = (lat_value, lat.letter) if lat.letter else _lat_ns(lat_value)
            lon_mag, ew = (lon_value, lon.letter) if lon.letter else _lon_ew(lon_value)
            return LocationD(lat_mag, ns, lon_mag, ew)

        ns = lat.letter or (Hemisphere.S if lat.numbers[0].is_negative else Hemisphere.N)
        ew = lon.letter or (Hemisphere.W if lon.numbers[0].is_negative else Hemisphere.E)
        lat_parts = [abs(t.value) for t in lat.numbers]
        lon_parts = [abs(t.value) for t in lon.numbers]

        if len(lat.numbers) == 2:
            return LocationDM(lat_parts[0], lat_parts[1], ns, lon_parts[0], lon_parts[1], ew)
        return LocationDMS(
            lat_parts[0], lat_parts[1], lat_parts[2], ns,
            lon_parts[0], lon_parts[1], lon_parts[2], ew,
        )
    except ValueError as exc:
        raise LocationParseError(str(exc)) from exc


def _show(tokens: list[Token]) -> str:
    return "[" + " ".join(t.text for t in tokens) + "]"
