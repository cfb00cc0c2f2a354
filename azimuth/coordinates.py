"""
Representation of a specific point on earth
"""

__all__ = ['Coordinate']

import math
from typing import Any, Mapping, Tuple

from azimuth.exceptions import MissingFieldError, NotANumberError, OutOfRangeError
from azimuth.utils.functions import is_number, round_half_up


def _check_axis(value: Any, name: str, limit: float) -> float:
    if not is_number(value):
        raise NotANumberError(
            f"Coordinate '{name}' must be a number, received {value!r}."
        )

    if abs(value) > limit:
        raise OutOfRangeError(
            f"Coordinate '{name}' must be between -{limit:g} and {limit:g} degrees, "
            f"received {value!r}."
        )

    return float(value)


class Coordinate:
    """
    Representation of a coordinate on the globe (i.e., a lat/lng pair), in decimal degrees.

    Unlike a free-form pair, a Coordinate is always valid: construction fails if either
    value is non-numeric or outside its range. Values are never wrapped.
    """

    __slots__ = ('lat', 'lng')

    def __init__(self, lat: float, lng: float):
        object.__setattr__(self, 'lat', _check_axis(lat, 'lat', 90))
        object.__setattr__(self, 'lng', _check_axis(lng, 'lng', 180))

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return self.lat == other.lat and self.lng == other.lng

    def __hash__(self):
        return hash((self.lat, self.lng))

    def __repr__(self):
        return f'<Coordinate({self.lat}, {self.lng})>'

    @classmethod
    def from_dict(cls, point: Mapping[str, Any]) -> 'Coordinate':
        """
        Creates a Coordinate from a mapping with 'lat' and 'lng' keys, e.g.
        {'lat': 51.509865, 'lng': -0.118092}

        Args:
            point:
                A mapping containing 'lat' and 'lng'

        Returns:
            Coordinate
        """
        missing = [key for key in ('lat', 'lng') if key not in point]
        if missing:
            raise MissingFieldError(
                f"Point is missing required field(s): {', '.join(missing)}."
            )

        return cls(point['lat'], point['lng'])

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lng: Tuple[int, int, float, str]):
        """
        Creates a Coordinate from a Degree Minutes Seconds (lat, lng) pair.

        The hemisphere value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <hemisphere> (str) )
            lng:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <hemisphere> (str))

        Returns:
            Coordinate
        """
        def convert(dms: Tuple[int, int, float, str]):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return round_half_up(mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600)), 6)

        return cls(convert(lat), convert(lng))

    def radians(self) -> Tuple[float, float]:
        """Returns the (lat, lng) pair in radians"""
        return math.radians(self.lat), math.radians(self.lng)

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the coordinate to a pair of (degrees, minutes, seconds, hemisphere) tuples

        Returns:
            ((lat degrees, minutes, seconds, hemisphere), (lng degrees, minutes, seconds, hemisphere))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.lat), 'N' if self.lat >= 0 else 'S'),
            (*convert(self.lng), 'E' if self.lng >= 0 else 'W'),
        )

    def to_float(self) -> Tuple[float, float]:
        """Converts the coordinate to a (lat, lng) tuple"""
        return self.lat, self.lng
