"""Scalar math helpers and common numeric constants."""

from __future__ import annotations

import math
from typing import TypeVar

PI = 3.1415926535897932
PI_DOUBLE = math.pi
SMALL_NUMBER = 1.0e-8
KINDA_SMALL_NUMBER = 1.0e-4

T = TypeVar("T")


def clamp(x, min_value, max_value):
    """Clamp ``x`` into ``[min_value, max_value]``; ``min_value`` wins if the bounds cross."""
    return max(min(x, max_value), min_value)


def lerp(a: T, b: T, alpha: float) -> T:
    """Linearly interpolate between ``a`` and ``b``."""
    return a * (1.0 - alpha) + b * alpha


def radians_to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * (180.0 / PI_DOUBLE)


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * (PI_DOUBLE / 180.0)


def inv_sqrt(value: float) -> float:
    """Return the reciprocal square root of ``value``."""
    return 1.0 / math.sqrt(value)


def square(value):
    """Return ``value`` multiplied by itself."""
    return value * value