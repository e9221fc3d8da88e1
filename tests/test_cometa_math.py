import math

import pytest

from cometa.cometa_math import (
    angle_2d,
    angle_between,
    approximately,
    bound_max,
    bound_min,
    remap,
    scope,
    scope01,
)


def test_bound_max():
    assert bound_max(5, 3) == 3
    assert bound_max(2, 3) == 2
    assert bound_max(2.5, 1.5) == 1.5


def test_bound_min():
    assert bound_min(-4, 0) == 0
    assert bound_min(7, 0) == 7
    assert bound_min(0.25, 0.5) == 0.5


@pytest.mark.parametrize("value", [-3.0, 0.0, 0.5, 2.0, 9.0])
def test_scope_stays_in_range(value):
    result = scope(value, -1.0, 2.0)
    assert -1.0 <= result <= 2.0
    if -1.0 <= value <= 2.0:
        assert result == value


def test_scope01():
    assert scope01(1.5) == 1.0
    assert scope01(-0.2) == 0.0
    assert scope01(0.3) == 0.3


def test_remap_endpoints():
    assert remap(2.0, 2.0, 6.0, -10.0, 10.0) == -10.0
    assert remap(6.0, 2.0, 6.0, -10.0, 10.0) == 10.0


def test_remap_round_trip():
    for value in (0.0, 1.3, 4.7, 9.9):
        there = remap(value, 0.0, 10.0, 100.0, 300.0)
        back = remap(there, 100.0, 300.0, 0.0, 10.0)
        assert back == pytest.approx(value)


def test_remap_empty_input_range():
    with pytest.raises(ZeroDivisionError):
        remap(1.0, 3.0, 3.0, 0.0, 1.0)


def test_angle_2d():
    assert angle_2d(0.0, 0.0, 1.0, 0.0) == 0.0
    assert angle_2d(0.0, 0.0, 0.0, 1.0) == pytest.approx(math.pi / 2)


def test_angle_between_matches_angle_2d():
    a = (1.0, 2.0, 5.0)
    b = (-3.0, 4.0, -1.0)
    assert angle_between(a, b) == angle_2d(a[0], a[1], b[0], b[1])


def test_approximately():
    assert approximately(1.0, 1.0005)
    assert not approximately(1.0, 1.002)
    assert approximately(1.0, 1.2, epsilon=0.5)