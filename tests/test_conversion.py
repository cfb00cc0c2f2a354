import pytest

from azimuth.conversion import *
from azimuth.exceptions import UnsupportedValueError


def test_convert_from_meters():
    # Test cases: (distance, unit, expected_result)
    test_data = [
        (1000.0, 'm', 1000.0),
        (1000.0, 'km', 1.0),
        (1000.0, 'ft', 3280.84),
        (1000.0, 'yd', 1093.6),
        (1000.0, 'mi', 0.621371),
        (1000.0, 'nm', 0.539957),
    ]

    for distance, unit, expected_result in test_data:
        result = convert_from_meters(distance, unit)
        assert result == pytest.approx(expected_result, rel=1e-9)


def test_convert_to_meters():
    assert convert_to_meters(1.0, 'km') == pytest.approx(1000.0)
    assert convert_to_meters(1093.6, 'yd') == pytest.approx(1000.0)
    assert convert_to_meters(5.0, 'm') == 5.0


def test_conversion_round_trip():
    for unit in ('m', 'km', 'ft', 'yd', 'mi', 'nm'):
        for meters in (0.0, 1.0, 157_249.8, 5_564_892.6529, 20_015_114.0):
            assert convert_to_meters(convert_from_meters(meters, unit), unit) == pytest.approx(meters)


def test_convert_unsupported_unit():
    with pytest.raises(UnsupportedValueError):
        convert_from_meters(1.0, 'car')

    with pytest.raises(UnsupportedValueError):
        convert_from_meters(1.0, 'KM')

    with pytest.raises(UnsupportedValueError):
        convert_to_meters(1.0, None)
