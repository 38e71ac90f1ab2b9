"""Coordinate normalization and compass-bearing parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from sunwait.astro.angles import revolution

# Exactly +/-90 makes cos(latitude) vanish in the rise/set solver.
POLE_LATITUDE_DEG = 89.9999999

_BEARING_RE = re.compile(
    r"""
    ^\s*
    (?P<prefix>[NSEW])?
    (?P<sign>[+-])?
    (?P<body>\d+(?:[.,]\d*)?|[.,]\d+)
    (?P<suffix>[NSEW])?
    \s*$
    """,
    re.IGNORECASE | re.VERBOSE,
)


@dataclass(frozen=True, slots=True)
class Bearing:
    """A parsed bearing folded into a north latitude or east longitude."""

    axis: Literal["lat", "lon"]
    value_deg: float


def fix_longitude(longitude_deg: float) -> float:
    """Normalize an east-positive longitude to [0, 360)."""
    return revolution(longitude_deg)


def fix_latitude(latitude_deg: float) -> float:
    """Fold any angle into a latitude strictly inside (-90, 90)."""
    folded = revolution(latitude_deg)

    if folded <= 90.0:
        pass
    elif folded <= 270.0:
        folded = 180.0 - folded
    else:
        folded = folded - 360.0

    if folded == 90.0:
        return POLE_LATITUDE_DEG
    if folded == -90.0:
        return -POLE_LATITUDE_DEG
    return folded


def parse_bearing(text: str) -> Bearing | None:
    """Parse a bearing such as `65N`, `25.5E`, `36S`, `-3.2W` or `N36.5`.

    Exactly one compass letter is required, before or after the number. South
    and west bearings are folded into north/east by subtracting from 360, and
    a leading minus sign does the same. Returns None when the text is not a
    bearing.
    """
    match = _BEARING_RE.match(text)
    if match is None:
        return None

    prefix, suffix = match.group("prefix"), match.group("suffix")
    if (prefix is None) == (suffix is None):
        return None
    compass = (prefix or suffix).upper()

    value = revolution(float(match.group("body").replace(",", ".")))
    if match.group("sign") == "-":
        value = 360.0 - value
    if compass in {"S", "W"}:
        value = 360.0 - value

    if compass in {"N", "S"}:
        return Bearing(axis="lat", value_deg=fix_latitude(value))
    return Bearing(axis="lon", value_deg=fix_longitude(value))


def parse_coordinates(first: str, second: str) -> tuple[float, float] | None:
    """Parse a latitude and a longitude bearing given in either order.

    Returns `(latitude, longitude)` or None when either bearing is malformed
    or both name the same axis.
    """
    parsed = [parse_bearing(first), parse_bearing(second)]
    if any(bearing is None for bearing in parsed):
        return None

    by_axis = {bearing.axis: bearing.value_deg for bearing in parsed if bearing is not None}
    if set(by_axis) != {"lat", "lon"}:
        return None
    return (by_axis["lat"], by_axis["lon"])
