"""
Distance and bearing calculations on a spherical earth.
Supports switching between great-circle (haversine) and rhumb-line (loxodrome) formulas.
"""

__all__ = [
    'great_circle_bearing', 'great_circle_distance',
    'rhumb_line_bearing', 'rhumb_line_distance',
    'bearing_degrees', 'distance_meters',
]

import math
from typing import Callable, Dict, Tuple

from azimuth._const import (
    EARTH_RADIUS_METERS, FORMULAS, GREAT_CIRCLE, RHUMB_LINE, RHUMB_EPSILON
)
from azimuth.coordinates import Coordinate
from azimuth.exceptions import UnsupportedValueError
from azimuth.utils.logging import warn_once


# -------------------------------------------------------------------------
# Great-Circle Implementation (Haversine)
# -------------------------------------------------------------------------

def great_circle_distance(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    Calculate the great-circle distance in meters between two points using the
    haversine formula.

    Args:
        coord1:
            A coordinate

        coord2:
            A second coordinate

    Returns:
        (float) the distance in meters
    """
    if coord1 == coord2:
        return 0.0

    lat1, lat2 = math.radians(coord1.lat), math.radians(coord2.lat)
    d_lat = math.radians(coord2.lat - coord1.lat)
    d_lng = math.radians(coord2.lng - coord1.lng)

    a = (math.sin(d_lat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2)
    # Near-antipodal points can push a fractionally past 1
    a = min(max(a, 0.0), 1.0)

    return EARTH_RADIUS_METERS * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def great_circle_bearing(start: Coordinate, end: Coordinate) -> float:
    """
    Calculate the initial bearing, in degrees clockwise from north, of the great
    circle from start to end. The heading along a great circle changes as it is
    followed; only the initial heading is returned.

    Args:
        start:
            The start point Coordinate

        end:
            The finish point Coordinate

    Returns:
        (float) the bearing in degrees, in [0, 360)
    """
    lat1, lat2 = math.radians(start.lat), math.radians(end.lat)
    d_lng = math.radians(end.lng - start.lng)

    y = math.sin(d_lng) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lng)

    return (math.degrees(math.atan2(y, x)) + 360) % 360


# -------------------------------------------------------------------------
# Rhumb-Line Implementation (Inverse Gudermannian)
# -------------------------------------------------------------------------

def _stretched_latitude_delta(lat1: float, lat2: float) -> float:
    """
    Difference in Mercator-projected latitude, ln(tan(pi/4 + lat2/2) / tan(pi/4 + lat1/2)),
    for latitudes in degrees. Infinite when exactly one of the points is a pole.
    """
    if lat1 == lat2:
        return 0.0

    # Mercator latitude diverges at either pole
    if abs(lat2) == 90:
        return math.copysign(math.inf, lat2)
    if abs(lat1) == 90:
        return -math.copysign(math.inf, lat1)

    return math.log(
        math.tan(math.pi / 4 + math.radians(lat2) / 2) /
        math.tan(math.pi / 4 + math.radians(lat1) / 2)
    )


def _rhumb_deltas(coord1: Coordinate, coord2: Coordinate) -> Tuple[float, float, float]:
    """
    Returns (d_lat, d_lng, d_phi) in radians, with d_lng wrapped to the shorter path
    across the antimeridian.
    """
    if 90 in (abs(coord1.lat), abs(coord2.lat)):
        warn_once(
            'Rhumb line touches a pole, where longitude is undefined; '
            'the path is treated as a meridian. (this warning will not repeat)'
        )

    d_lat = math.radians(coord2.lat - coord1.lat)
    d_lng = math.radians(coord2.lng - coord1.lng)
    d_phi = _stretched_latitude_delta(coord1.lat, coord2.lat)

    if abs(d_lng) > math.pi:
        d_lng = d_lng - 2 * math.pi if d_lng > 0 else d_lng + 2 * math.pi

    return d_lat, d_lng, d_phi


def rhumb_line_distance(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    Calculate the rhumb-line (constant bearing) distance in meters between two points.
    A rhumb line is generally longer than the great-circle path between the same points.

    Args:
        coord1:
            A coordinate

        coord2:
            A second coordinate

    Returns:
        (float) the distance in meters
    """
    if coord1 == coord2:
        return 0.0

    d_lat, d_lng, d_phi = _rhumb_deltas(coord1, coord2)

    # E-W course is ill-conditioned with 0/0
    q = d_lat / d_phi if abs(d_phi) > RHUMB_EPSILON else math.cos(math.radians(coord1.lat))

    return EARTH_RADIUS_METERS * math.sqrt(d_lat ** 2 + q ** 2 * d_lng ** 2)


def rhumb_line_bearing(start: Coordinate, end: Coordinate) -> float:
    """
    Calculate the constant bearing, in degrees clockwise from north, of the rhumb line
    from start to end.

    Args:
        start:
            The start point Coordinate

        end:
            The finish point Coordinate

    Returns:
        (float) the bearing in degrees, in [0, 360)
    """
    _, d_lng, d_phi = _rhumb_deltas(start, end)
    return (math.degrees(math.atan2(d_lng, d_phi)) + 360) % 360


# -------------------------------------------------------------------------
# Dispatch
# -------------------------------------------------------------------------

_ALGORITHMS: Dict[str, Tuple[Callable[[Coordinate, Coordinate], float], ...]] = {
    GREAT_CIRCLE: (
        great_circle_distance,
        great_circle_bearing,
    ),
    RHUMB_LINE: (
        rhumb_line_distance,
        rhumb_line_bearing,
    ),
}


def _algorithm(formula: str):
    if not isinstance(formula, str) or formula not in _ALGORITHMS:
        raise UnsupportedValueError(
            f"Unknown formula {formula!r}. Options: {list(FORMULAS)}"
        )

    return _ALGORITHMS[formula]


def distance_meters(coord1: Coordinate, coord2: Coordinate, formula: str = GREAT_CIRCLE) -> float:
    """
    Calculate the distance in meters between two points using the named formula.

    Args:
        coord1:
            A coordinate

        coord2:
            A second coordinate

        formula:
            'great-circle' or 'rhumb-line'

    Returns:
        (float) the distance in meters
    """
    return _algorithm(formula)[0](coord1, coord2)


def bearing_degrees(start: Coordinate, end: Coordinate, formula: str = GREAT_CIRCLE) -> float:
    """Calculate the bearing in degrees from start to end using the named formula"""
    return _algorithm(formula)[1](start, end)
