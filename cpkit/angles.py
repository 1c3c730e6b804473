"""Conversions between degrees, arc minutes and radians."""

import math


def minutes_to_degrees(minutes: float) -> float:
    """Convert arc minutes to degrees."""
    return minutes / 60.0


def to_degrees(radians: float) -> float:
    """Convert radians to degrees, shifting a negative angle up by a turn."""
    if radians < 0:
        radians += 2 * math.pi
    return radians * 180.0 / math.pi


def to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180.0