"""
Module for unit conversions
"""
__all__ = ['convert_from_meters', 'convert_to_meters']

from azimuth._const import UNIT_FACTORS
from azimuth.exceptions import UnsupportedValueError


def _unit_factor(unit: str) -> float:
    if not isinstance(unit, str) or unit not in UNIT_FACTORS:
        raise UnsupportedValueError(
            f"Units {unit!r} not supported. Options: {list(UNIT_FACTORS.keys())}"
        )

    return UNIT_FACTORS[unit]


def convert_from_meters(distance: float, unit: str) -> float:
    """
    Converts a distance in meters to another unit.

    Args:
        distance (float): The distance value, in meters.
        unit (str): The target unit of distance (meter = 'm', kilometer = 'km',
        feet = 'ft', yard = 'yd', mile = 'mi', nautical mile = 'nm').

    Returns:
        float: The distance in the target unit.
    """
    return distance * _unit_factor(unit)


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters. Exact inverse of convert_from_meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (see convert_from_meters).

    Returns:
        float: The distance in meters.
    """
    return distance / _unit_factor(unit)
