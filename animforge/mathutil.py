"""Small numeric helpers shared by the geometry types."""

from __future__ import annotations

import math
from typing import Any, TypeVar

T = TypeVar("T")

TWO_PI = 2.0 * math.pi


def sq(x: T) -> T:
    """Return ``x`` multiplied by itself."""
    return x * x  # type: ignore[operator]


def angle_wrap(theta: float) -> float:
    """Wrap an angle in radians into the range ``[0, 2*pi)``."""
    wrapped = theta % TWO_PI
    if wrapped >= TWO_PI:
        wrapped -= TWO_PI
    return wrapped


def absvec2(v: Any) -> Any:
    """Return a vector of the same type with the absolute values of ``v.x`` and ``v.y``."""
    return type(v)(abs(v.x), abs(v.y))