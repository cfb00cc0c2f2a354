from azimuth._version import __version__  # noqa: F401
from azimuth.utils.logging import LOGGER
from azimuth.calc import (
    bearing_degrees, distance_meters, great_circle_bearing, great_circle_distance,
    rhumb_line_bearing, rhumb_line_distance
)
from azimuth.compass import compass_direction
from azimuth.conversion import convert_from_meters, convert_to_meters
from azimuth.coordinates import Coordinate
from azimuth.core import Result, compute
from azimuth.exceptions import (
    AzimuthError, MissingFieldError, NotANumberError, OutOfRangeError,
    UnsupportedValueError
)
from azimuth.options import Options
from azimuth.utils.functions import round_half_up


__all__ = [
    'AzimuthError',
    'Coordinate',
    'MissingFieldError',
    'NotANumberError',
    'Options',
    'OutOfRangeError',
    'Result',
    'UnsupportedValueError',
    'bearing_degrees',
    'compass_direction',
    'compute',
    'convert_from_meters',
    'convert_to_meters',
    'distance_meters',
    'great_circle_bearing',
    'great_circle_distance',
    'rhumb_line_bearing',
    'rhumb_line_distance',
    'round_half_up',
    'LOGGER',
]
