"""
Calculation options for azimuth.compute
"""

__all__ = ['Options']

from typing import Any, Mapping, Optional

from azimuth._const import (
    COMPASS_SECTORS, FORMULAS, GREAT_CIRCLE, MAX_DECIMAL_PRECISION, UNIT_FACTORS
)
from azimuth.exceptions import (
    NotANumberError, OutOfRangeError, UnsupportedValueError
)
from azimuth.utils.functions import is_integer, is_number

# camelCase names accepted alongside the keyword argument names
_OPTION_ALIASES = {
    'units': 'units',
    'formula': 'formula',
    'distance_precision': 'distance_precision',
    'distancePrecision': 'distance_precision',
    'bearing_precision': 'bearing_precision',
    'bearingPrecision': 'bearing_precision',
    'direction_precision': 'direction_precision',
    'directionPrecision': 'direction_precision',
}


def _check_decimal_precision(value: Any, name: str) -> int:
    if not is_number(value):
        raise NotANumberError(f"Option '{name}' must be a number, received {value!r}.")

    if not is_integer(value) or not 0 <= value <= MAX_DECIMAL_PRECISION:
        raise OutOfRangeError(
            f"Option '{name}' must be an integer between 0 and {MAX_DECIMAL_PRECISION}, "
            f"received {value!r}."
        )

    return int(value)


def _check_direction_precision(value: Any) -> int:
    if not is_number(value):
        raise NotANumberError(
            f"Option 'direction_precision' must be a number, received {value!r}."
        )

    if not is_integer(value) or value not in (0, *COMPASS_SECTORS):
        raise UnsupportedValueError(
            "Option 'direction_precision' must be one of "
            f"{[0, *COMPASS_SECTORS]}, received {value!r}."
        )

    return int(value)


class Options:
    """
    Validated options for a distance/bearing calculation.

    Args:
        units:
            (Default 'm') Units of the returned distance. One of 'm', 'km', 'ft',
            'yd', 'mi' or 'nm'.

        distance_precision:
            (Default 0) Decimal places of the returned distance, 0-15

        bearing_precision:
            (Default 0) Decimal places of the returned bearing, 0-15

        direction_precision:
            (Default 2) Compass direction granularity. 0 disables the direction,
            1 is cardinal, 2 intercardinal and 3 secondary intercardinal.

        formula:
            (Default 'great-circle') Either 'great-circle' or 'rhumb-line'
    """

    __slots__ = (
        'units', 'distance_precision', 'bearing_precision',
        'direction_precision', 'formula'
    )

    def __init__(
        self,
        units: str = 'm',
        distance_precision: int = 0,
        bearing_precision: int = 0,
        direction_precision: int = 2,
        formula: str = GREAT_CIRCLE,
    ):
        if not isinstance(units, str) or units not in UNIT_FACTORS:
            raise UnsupportedValueError(
                f"Units {units!r} not supported. Options: {list(UNIT_FACTORS)}"
            )

        if not isinstance(formula, str) or formula not in FORMULAS:
            raise UnsupportedValueError(
                f"Formula {formula!r} not supported. Options: {list(FORMULAS)}"
            )

        self.units = units
        self.formula = formula
        self.distance_precision = _check_decimal_precision(distance_precision, 'distance_precision')
        self.bearing_precision = _check_decimal_precision(bearing_precision, 'bearing_precision')
        self.direction_precision = _check_direction_precision(direction_precision)

    def __eq__(self, other):
        if not isinstance(other, Options):
            return False

        return all(getattr(self, x) == getattr(other, x) for x in self.__slots__)

    def __repr__(self):
        parts = ', '.join(f'{x}={getattr(self, x)!r}' for x in self.__slots__)
        return f'<Options({parts})>'

    @classmethod
    def from_dict(cls, options: Optional[Mapping[str, Any]]) -> 'Options':
        """
        Creates Options from a mapping. Keys may be given either as keyword argument
        names (e.g. 'distance_precision') or in camelCase (e.g. 'distancePrecision').

        Args:
            options:
                A mapping of option names to values, or None for all defaults

        Returns:
            Options
        """
        if options is None:
            return cls()

        if not isinstance(options, Mapping):
            raise UnsupportedValueError(
                'Options must be an Options instance, a mapping of option names to values '
                f'or None, received {type(options).__name__}.'
            )

        kwargs = {}
        for key, value in options.items():
            if key not in _OPTION_ALIASES:
                raise UnsupportedValueError(
                    f"Unknown option {key!r}. Options: {sorted(set(_OPTION_ALIASES.values()))}"
                )

            name = _OPTION_ALIASES[key]
            if name in kwargs:
                raise UnsupportedValueError(f"Option {name!r} was given more than once.")

            kwargs[name] = value

        return cls(**kwargs)
