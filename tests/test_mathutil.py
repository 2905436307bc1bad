import math
from collections import namedtuple

import pytest

from animforge.mathutil import absvec2, angle_wrap, sq

Point = namedtuple("Point", "x y")


def test_sq_of_negative_equals_sq_of_positive():
    assert sq(-4) == sq(4)


def test_sq_identity_values():
    assert sq(0) == 0
    assert sq(1) == 1
    assert sq(-1) == 1


def test_sq_of_half_is_smaller():
    assert sq(0.5) < 0.5


@pytest.mark.parametrize("theta", [-20.0, -math.pi, -0.1, 0.0, 1.0, 7.0, 100.0])
def test_angle_wrap_in_range(theta):
    wrapped = angle_wrap(theta)
    assert 0.0 <= wrapped < 2.0 * math.pi


@pytest.mark.parametrize("theta", [-3.0, 0.5, 2.0, 5.5])
def test_angle_wrap_is_periodic(theta):
    assert angle_wrap(theta + 2.0 * math.pi) == pytest.approx(angle_wrap(theta))


def test_angle_wrap_zero_and_full_turn():
    assert angle_wrap(0.0) == 0.0
    assert angle_wrap(2.0 * math.pi) == pytest.approx(0.0)


def test_angle_wrap_negative_pi():
    assert angle_wrap(-math.pi) == pytest.approx(math.pi)


def test_angle_wrap_leaves_in_range_values_alone():
    assert angle_wrap(1.25) == pytest.approx(1.25)


def test_absvec2_keeps_type_and_takes_abs():
    result = absvec2(Point(-1.5, 2))
    assert result == Point(1.5, 2)
    assert isinstance(result, Point)


def test_absvec2_both_negative():
    assert absvec2(Point(-3, -7)) == Point(3, 7)