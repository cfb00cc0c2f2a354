"""
Distance, bearing and compass direction between two coordinates
"""

__all__ = ['Result', 'compute']

from typing import Any, Dict, Mapping, Optional, Union

from azimuth.calc import bearing_degrees, distance_meters
from azimuth.compass import compass_direction
from azimuth.conversion import convert_from_meters
from azimuth.coordinates import Coordinate
from azimuth.exceptions import MissingFieldError
from azimuth.options import Options
from azimuth.utils.functions import round_half_up
from azimuth.utils.logging import LOGGER

PointLike = Union[Coordinate, Mapping[str, Any]]


class Result:
    """
    The outcome of a distance/bearing calculation.

    Attributes:
        distance:
            Distance between the two points, in `units`

        units:
            Units of the distance

        bearing:
            Initial bearing in degrees from the first point to the second, in [0, 360).
            None when the distance is zero.

        formula:
            The formula used for both distance and bearing

        direction:
            Compass direction from the first point to the second. An empty string
            when the distance is zero, None when direction was disabled.
    """

    __slots__ = ('distance', 'units', 'bearing', 'formula', 'direction')

    def __init__(
        self,
        distance: float,
        units: str,
        bearing: Optional[float],
        formula: str,
        direction: Optional[str] = None,
    ):
        self.distance = distance
        self.units = units
        self.bearing = bearing
        self.formula = formula
        self.direction = direction

    def __eq__(self, other):
        if not isinstance(other, Result):
            return False

        return all(getattr(self, x) == getattr(other, x) for x in self.__slots__)

    def __repr__(self):
        parts = ', '.join(f'{k}={v!r}' for k, v in self.to_dict().items())
        return f'<Result({parts})>'

    def to_dict(self) -> Dict[str, Any]:
        """
        Converts the result to a dict. The 'direction' key is omitted when direction
        was disabled.

        Returns:
            dict
        """
        out: Dict[str, Any] = {
            'distance': self.distance,
            'units': self.units,
            'bearing': self.bearing,
            'formula': self.formula,
        }
        if self.direction is not None:
            out['direction'] = self.direction

        return out


def _as_coordinate(point: Optional[PointLike], name: str) -> Coordinate:
    if isinstance(point, Coordinate):
        return point

    if point is None:
        raise MissingFieldError(f'The {name} point is missing.')

    if not isinstance(point, Mapping):
        raise MissingFieldError(
            f"The {name} point must be a Coordinate or a mapping with 'lat' and 'lng', "
            f"received {type(point).__name__}."
        )

    return Coordinate.from_dict(point)


def compute(
    point_a: PointLike,
    point_b: PointLike,
    options: Union[Options, Mapping[str, Any], None] = None,
) -> Result:
    """
    Calculate the distance, bearing and compass direction from point_a to point_b on a
    spherical earth.

    Great-circle calculations use the haversine formula and report the initial bearing,
    since the heading changes along a great circle. Rhumb-line calculations follow a path
    of constant bearing, which is generally longer (sometimes by up to 30%).

    Args:
        point_a:
            The start point, as a Coordinate or a mapping like {'lat': 0., 'lng': 0.}

        point_b:
            The end point, in the same forms as point_a

        options:
            An Options instance, a mapping accepted by Options.from_dict, or None for
            the defaults

    Returns:
        Result
    """
    start = _as_coordinate(point_a, 'first')
    end = _as_coordinate(point_b, 'second')
    if not isinstance(options, Options):
        options = Options.from_dict(options)

    LOGGER.debug(
        'Computing %s from %r to %r in %s', options.formula, start, end, options.units
    )

    distance = round_half_up(
        convert_from_meters(distance_meters(start, end, options.formula), options.units),
        options.distance_precision
    )

    bearing: Optional[float] = None
    direction: Optional[str] = None
    if distance == 0:
        if options.direction_precision:
            direction = ''
    else:
        bearing = round_half_up(
            bearing_degrees(start, end, options.formula),
            options.bearing_precision
        )
        # Rounding can carry 359.5+ up to a full turn
        if bearing == 360:
            bearing = 0.0

        if options.direction_precision:
            direction = compass_direction(bearing, options.direction_precision)

    return Result(
        distance=distance,
        units=options.units,
        bearing=bearing,
        formula=options.formula,
        direction=direction,
    )
