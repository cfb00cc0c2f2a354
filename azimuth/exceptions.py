"""
Exceptions raised when validating azimuth inputs
"""

__all__ = [
    'AzimuthError', 'MissingFieldError', 'NotANumberError',
    'OutOfRangeError', 'UnsupportedValueError'
]


class AzimuthError(ValueError):
    """Base class for all azimuth validation errors"""


class MissingFieldError(AzimuthError):
    """A point is missing, or lacks its lat or lng value"""


class NotANumberError(AzimuthError):
    """A field expected to be numeric holds a non-numeric (or NaN) value"""


class OutOfRangeError(AzimuthError):
    """A coordinate or precision value falls outside its allowed domain"""


class UnsupportedValueError(AzimuthError):
    """An enumerated option (units, formula, direction precision) holds an unknown value"""
