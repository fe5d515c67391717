"""Maths helpers for sketches; trigonometry takes angles in degrees."""

from __future__ import annotations

import math

PI = math.pi
HALF_PI = math.pi / 2
QUARTER_PI = math.pi / 4
TWO_PI = math.pi * 2

_RANDOM_SEED = 9.7


def sin(angle: float) -> float:
    """Sine of an angle in degrees."""
    return math.sin(angle * math.pi / 180.0)


def cos(angle: float) -> float:
    """Cosine of an angle in degrees."""
    return math.cos(angle * math.pi / 180.0)


def tan(angle: float) -> float:
    """Tangent of an angle in degrees."""
    return math.tan(angle * math.pi / 180.0)


def degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * 180.0 / math.pi


def radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180.0


def map_range(value: float, start1: float, stop1: float, start2: float, stop2: float) -> float:
    """Remap ``value`` from one range to another."""
    return start2 + (stop2 - start2) * ((value - start1) / (stop1 - start1))


def constrain(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to ``[lo, hi]``."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def lerp(start: float, stop: float, amt: float) -> float:
    """Linear interpolation between ``start`` and ``stop``."""
    return start + (stop - start) * amt


def dist(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((x2 - x1) * (x2 - x1) + (y2 - y1) * (y2 - y1))


def random(lo: float, hi: float) -> float:
    """A cheap pseudo-random number in ``[lo, hi)``, fixed for given bounds."""
    return lo + math.fmod(abs(math.sin(_RANDOM_SEED)), hi - lo)