import math

import pytest

from cpkit.angles import minutes_to_degrees, to_degrees, to_radians


def test_half_turn_is_pi():
    assert to_radians(180) == pytest.approx(math.pi)


def test_pi_is_half_turn():
    assert to_degrees(math.pi) == pytest.approx(180.0)


def test_minutes_to_degrees():
    assert minutes_to_degrees(60) == pytest.approx(1.0)
    assert minutes_to_degrees(0) == 0


@pytest.mark.parametrize("degrees", [0, 15.5, 90, 200, 359.9])
def test_round_trip(degrees):
    assert to_degrees(to_radians(degrees)) == pytest.approx(degrees)


@pytest.mark.parametrize("radians", [0.1, 1.0, math.pi / 2, 3.0])
def test_negative_angle_wraps_into_full_turn(radians):
    assert to_degrees(-radians) == pytest.approx(to_degrees(2 * math.pi - radians))
    assert 0 <= to_degrees(-radians) < 360