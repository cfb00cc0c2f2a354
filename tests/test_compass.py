import pytest

from azimuth._const import COMPASS_LABELS
from azimuth.compass import compass_direction
from azimuth.exceptions import NotANumberError, OutOfRangeError, UnsupportedValueError


def test_compass_cardinal():
    assert compass_direction(0, 1) == 'N'
    assert compass_direction(44.9, 1) == 'N'
    assert compass_direction(45, 1) == 'E'
    assert compass_direction(180, 1) == 'S'
    assert compass_direction(288, 1) == 'W'
    assert compass_direction(315, 1) == 'N'
    assert compass_direction(360, 1) == 'N'


def test_compass_intercardinal():
    assert compass_direction(22.4, 2) == 'N'
    assert compass_direction(22.5, 2) == 'NE'
    assert compass_direction(135, 2) == 'SE'
    assert compass_direction(258, 2) == 'W'
    assert compass_direction(288, 2) == 'W'
    assert compass_direction(359, 2) == 'N'


def test_compass_secondary_intercardinal():
    assert compass_direction(11.25, 3) == 'NNE'
    assert compass_direction(33, 3) == 'NNE'
    assert compass_direction(288, 3) == 'WNW'
    assert compass_direction(350, 3) == 'N'
    assert compass_direction(337.5, 3) == 'NNW'


def test_compass_default_precision():
    assert compass_direction(45) == 'NE'


def test_compass_labels_are_canonical():
    cardinal = {compass_direction(x / 4, 1) for x in range(0, 1441)}
    intercardinal = {compass_direction(x / 4, 2) for x in range(0, 1441)}
    secondary = {compass_direction(x / 4, 3) for x in range(0, 1441)}

    assert cardinal == {'N', 'E', 'S', 'W'}
    assert intercardinal == {'N', 'NE', 'E', 'SE', 'S', 'SW', 'W', 'NW'}
    assert secondary == set(COMPASS_LABELS)


def test_compass_invalid():
    with pytest.raises(NotANumberError):
        compass_direction('90', 2)

    with pytest.raises(OutOfRangeError):
        compass_direction(-1, 2)

    with pytest.raises(OutOfRangeError):
        compass_direction(360.5, 2)

    with pytest.raises(UnsupportedValueError):
        compass_direction(90, 0)

    with pytest.raises(UnsupportedValueError):
        compass_direction(90, 4)

    with pytest.raises(UnsupportedValueError):
        compass_direction(90, 2.0)
