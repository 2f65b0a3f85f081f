"""
Command line for the coordinate core.

    gis convert "51°30′26″N 0°7′39″W"
    gis distance "51°30′26″N 0°7′39″W" "48°51′24″N 2°21′8″E"
    gis heading "35.0 N, 45.0 E" "35.0 N, 135.0 E"
    gis travel "51.5, -0.1" NE 10000
    gis link "54°28'0.0\"N 56°16'0.0\"E" --zoom 15
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from config import settings
from services.logging_service import init_logging

from . import location as Location
from .bearing import Direction
from .constants import PREC_DMS, SYM_ASCII, SYM_UNI1, SYM_UNI2
from .types import CompassPoint, DistanceAlgorithm, Separator

logger = logging.getLogger(__name__)

DELIMITERS = {"ascii": SYM_ASCII, "uni1": SYM_UNI1, "uni2": SYM_UNI2, "none": None}


def _direction(text: str) -> Direction:
    if text in CompassPoint.__members__:
        return CompassPoint[text]
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a compass point or bearing: {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="gis", description="Geo-location conversions and navigation")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("convert", help="Parse a location and print it in all notations")
    p.add_argument("location")
    p.add_argument("--precision", type=int, nargs=3, default=list(PREC_DMS), metavar=("DEG", "MIN", "SEC"))
    p.add_argument("--separator", choices=[s.value for s in Separator], default=Separator.NSEW.value)
    p.add_argument("--delimiters", choices=list(DELIMITERS), default="ascii")

    p = sub.add_parser("distance", help="Distance in metres between two locations")
    p.add_argument("start")
    p.add_argument("end")
    p.add_argument("--algorithm", choices=[a.value for a in DistanceAlgorithm], default=None,
                   help="Print only this algorithm (default: both)")

    p = sub.add_parser("heading", help="Initial bearing from one location to another")
    p.add_argument("start")
    p.add_argument("end")

    p = sub.add_parser("travel", help="Destination after travelling on a bearing")
    p.add_argument("start")
    p.add_argument("direction", type=_direction, help="Compass point (e.g. NNE) or bearing in degrees")
    p.add_argument("meters", type=float)

    p = sub.add_parser("link", help="Google Maps URL for a location")
    p.add_argument("location")
    p.add_argument("--zoom", type=int, default=settings.GIS_MAP_ZOOM)
    p.add_argument("--https", action="store_true", default=settings.GIS_MAP_HTTPS)

    return ap


def run(args: argparse.Namespace) -> list[str]:
    """Execute a parsed command, returning the output lines"""
    if args.command == "convert":
        loc = Location.parse_or_fail(args.location)
        precision = tuple(args.precision)
        delimiters = DELIMITERS[args.delimiters]
        return [
            f"{name}: {Location.format(conv(loc), precision, args.separator, delimiters)}"
            for name, conv in (
                ("DD", Location.to_dd),
                ("D", Location.to_d),
                ("DM", Location.to_dm),
                ("DMS", Location.to_dms),
            )
        ]

    if args.command == "distance":
        start = Location.parse_or_fail(args.start)
        end = Location.parse_or_fail(args.end)
        algorithms = [DistanceAlgorithm(args.algorithm)] if args.algorithm else list(DistanceAlgorithm)
        return [f"{a.value}: {Location.distance(start, end, a):.1f} m" for a in algorithms]

    if args.command == "heading":
        start = Location.parse_or_fail(args.start)
        end = Location.parse_or_fail(args.end)
        return [f"{Location.heading(start, end):.3f}"]

    if args.command == "travel":
        start = Location.parse_or_fail(args.start)
        return [Location.format(Location.travel(start, args.direction, args.meters))]

    loc = Location.parse_or_fail(args.location)
    return [Location.google_maps_url(loc, args.zoom, args.https)]


def configure_logging() -> None:
    """File and ring buffer logging, plus warnings on the console"""
    init_logging()
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.WARNING)
    console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logging.getLogger().addHandler(console)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        lines = run(args)
    except ValueError as e:
        logger.error(f"{args.command} failed: {e}")
        return 2

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
