"""Conversion of bearings to compass directions"""

__all__ = ['compass_direction']

from azimuth._const import COMPASS_LABELS, COMPASS_SECTORS
from azimuth.exceptions import NotANumberError, OutOfRangeError, UnsupportedValueError
from azimuth.utils.functions import is_integer, is_number, round_half_up


def compass_direction(bearing: float, precision: int = 2) -> str:
    """
    Convert a bearing in degrees to a compass direction.

    Args:
        bearing:
            The bearing in degrees clockwise from north, in [0, 360]

        precision:
            1 for cardinal (N, E, S, W), 2 for intercardinal (adds NE, SE, SW, NW) and
            3 for secondary intercardinal (all 16 points) directions

    Returns:
        (str) the compass direction
    """
    if not is_number(bearing):
        raise NotANumberError(f'Bearing must be a number, received {bearing!r}.')

    if not 0 <= bearing <= 360:
        raise OutOfRangeError(f'Bearing must be between 0 and 360 degrees, received {bearing!r}.')

    if not is_integer(precision) or precision not in COMPASS_SECTORS:
        raise UnsupportedValueError(
            f'Direction precision must be one of {list(COMPASS_SECTORS)}, received {precision!r}.'
        )

    sectors = COMPASS_SECTORS[precision]
    sector_width = 360 / sectors
    index = int(round_half_up(bearing / sector_width)) * (len(COMPASS_LABELS) // sectors)

    return COMPASS_LABELS[index % len(COMPASS_LABELS)]
