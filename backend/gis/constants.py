"""
GIS Constants
Physical constants, symbol sets and default precisions for geo-locations
"""
from __future__ import annotations

# Degree, minute and second symbols for formatting output
SYM_ASCII: tuple[str, str, str] = ("°", "'", '"')
SYM_UNI1: tuple[str, str, str] = ("°", "′", "″")
SYM_UNI2: tuple[str, str, str] = ("°", "ʹ", "ʺ")

# Degree delimiters accepted when parsing.
# The masculine ordinal is often typed in place of the degree sign.
DEG_SYMS: frozenset[str] = frozenset({"°", "º", "˚"})

# Minute delimiters accepted when parsing.
# Word processors auto-convert apostrophes to the right single quotation mark.
MIN_SYMS: frozenset[str] = frozenset({"'", "′", "ʹ", "’"})

# Second delimiters accepted when parsing.
# Word processors auto-convert double quotes to the right double quotation mark.
SEC_SYMS: frozenset[str] = frozenset({'"', "″", "ʺ", "”"})

# Default decimal places for degree, minute and second components.
# Approximate accuracy:
#   degree 5 dp -> 1.11 m
#   minute 3 dp -> 1.85 m
#   second 1 dp -> 3.08 m
PREC_DMS: tuple[int, int, int] = (5, 3, 1)

# Distance for 1 degree of latitude (m), linear between equator and pole:
#   LAT1_EQTR + DELTA_POLE * |lat| / 90
LAT1_EQTR = 110_574.0
DELTA_POLE = 1_124.0

# Distance for 1 degree of longitude at the equator (m), scaled by cos(lat)
LON1_EQTR = 111_320.0

# Mean radius of the Earth (m) for the spherical approximation
MEAN_RADIUS = 6_371_000.0

# Default tolerance for floating-point comparison (degrees ~ 0.1 m)
EPSILON = 1.0e-6
