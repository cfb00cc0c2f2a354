"""Module for miscellaneous multi-use functions"""

__all__ = ['is_integer', 'is_number', 'round_half_up']

from decimal import Decimal, ROUND_HALF_UP, localcontext
import math
from typing import Any

import numpy as np


def is_number(value: Any) -> bool:
    """
    Test whether a value is a real, non-NaN number. Booleans are not numbers
    here, and numeric strings are not coerced.

    Args:
        value:
            Any value

    Returns:
        bool
    """
    if isinstance(value, (bool, np.bool_)):
        return False

    if not isinstance(value, (int, float, np.integer, np.floating)):
        return False

    return not math.isnan(value)


def is_integer(value: Any) -> bool:
    """Test whether a value is an integer type (python or numpy), excluding booleans"""
    if isinstance(value, (bool, np.bool_)):
        return False

    return isinstance(value, (int, np.integer))


def round_half_up(value: float, precision: int = 0) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded away from zero.

    The value is rounded from its shortest decimal representation rather than its
    binary expansion, so round_half_up(1.005, 2) gives 1.01.

    Args:
        value:
            The float value to be rounded
        precision:
            The number of decimal places to round the float value to

    """
    if not math.isfinite(value):
        return float(value)

    decimal_value = Decimal(repr(float(value)))
    with localcontext() as ctx:
        # Enough digits for every place left of the point plus the requested decimals
        ctx.prec = max(ctx.prec, decimal_value.adjusted() + precision + 2)
        exponent = Decimal(1).scaleb(-precision)
        return float(decimal_value.quantize(exponent, rounding=ROUND_HALF_UP))
