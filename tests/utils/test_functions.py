import numpy as np

from azimuth.utils.functions import *


def test_round_half_up():
    assert round_half_up(1.59, 1) == 1.6
    assert round_half_up(1.51, 1) == 1.5
    assert round_half_up(1.55, 1) == 1.6
    assert round_half_up(1.65, 1) == 1.7

    # Ties round away from zero
    assert round_half_up(-1.59, 1) == -1.6
    assert round_half_up(-1.51, 1) == -1.5
    assert round_half_up(-1.55, 1) == -1.6
    assert round_half_up(-1.65, 1) == -1.7

    assert round_half_up(0.5) == 1.0
    assert round_half_up(2.5) == 3.0
    assert round_half_up(-2.5) == -3.0


def test_round_half_up_decimal_boundaries():
    # Binary expansions of these sit just below the tie
    assert round_half_up(1.005, 2) == 1.01
    assert round_half_up(0.285, 2) == 0.29
    assert round_half_up(1.0005, 3) == 1.001

    assert round_half_up(5564892.65290, 4) == 5564892.6529
    assert round_half_up(0.1 + 0.2, 15) == 0.3
    assert round_half_up(123.456, 0) == 123.0


def test_round_half_up_idempotent():
    for value in (0.0, 1.005, 2.675, 288.30814, 5564892.6529, 1e-9, 359.9999):
        for precision in (0, 1, 2, 4, 15):
            once = round_half_up(value, precision)
            assert round_half_up(once, precision) == once


def test_round_half_up_non_finite():
    assert round_half_up(float('inf'), 2) == float('inf')


def test_is_number():
    assert is_number(1)
    assert is_number(1.5)
    assert is_number(np.float32(1.5))
    assert is_number(np.int8(1))
    assert is_number(float('inf'))

    assert not is_number(float('nan'))
    assert not is_number(True)
    assert not is_number(np.bool_(True))
    assert not is_number('1')
    assert not is_number(None)


def test_is_integer():
    assert is_integer(3)
    assert is_integer(np.int64(3))

    assert not is_integer(3.0)
    assert not is_integer(False)
    assert not is_integer('3')


def test_round_half_up_large_values():
    assert round_half_up(1e300, 15) == 1e300
    assert round_half_up(-1.7976931348623157e308, 15) == -1.7976931348623157e308
    assert round_half_up(123456789012345.67, 1) == 123456789012345.7
