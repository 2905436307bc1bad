"""8-bit RGBA colours and a palette of named colours."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any

from .vector import Vector4D


def _channel(value: Any) -> int:
    return int(value) & 0xFF


@dataclass(frozen=True, eq=False)
class Color:
    """An RGBA colour with one byte per channel.

    Channel values wrap into the range 0-255 the way byte arithmetic does.
    Equality compares the red, green and blue channels only; use
    :meth:`completely_equals` to compare alpha as well.
    """

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, _channel(getattr(self, name)))

    @classmethod
    def from_floats(cls, r: float, g: float, b: float, a: float = 1.0) -> "Color":
        """Build a colour from channels normalised to the range 0-1."""
        return cls(int(r * 255.0), int(g * 255.0), int(b * 255.0), int(a * 255.0))

    @classmethod
    def from_bgra(cls, value: int) -> "Color":
        """Build a colour from a packed 32-bit value laid out as B, G, R, A from the top byte down."""
        return cls(
            (value & 0x0000FF00) >> 8,
            (value & 0x00FF0000) >> 16,
            (value & 0xFF000000) >> 24,
            value & 0x000000FF,
        )

    @classmethod
    def from_vector(cls, v4: Vector4D) -> "Color":
        """Build a colour from a normalised vector ordered blue, green, red, alpha."""
        return cls.from_floats(v4.z, v4.y, v4.x, v4.w)

    def rn(self) -> float:
        return self.r / 255.0

    def gn(self) -> float:
        return self.g / 255.0

    def bn(self) -> float:
        return self.b / 255.0

    def an(self) -> float:
        return self.a / 255.0

    def to_vector(self) -> Vector4D:
        """Return the normalised channels ordered blue, green, red, alpha."""
        return Vector4D(self.bn(), self.gn(), self.rn(), self.an())

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b, self.a)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b, self.a)

    def __mul__(self, other: Any) -> Any:
        """Scale the colour by a number or by a blue, green, red, alpha vector."""
        if isinstance(other, (numbers.Real, Vector4D)):
            return Color.from_vector(self.to_vector() * other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def inverted(self) -> "Color":
        """Return the complementary colour, fully opaque."""
        return Color(255 - self.r, 255 - self.g, 255 - self.b)

    def blended_with(self, other: "Color") -> "Color":
        """Return the halved sum of this colour and ``other``."""
        return (self + other) * 0.5

    def completely_equals(self, other: "Color") -> bool:
        """Compare all four channels, alpha included."""
        return self == other and self.a == other.a


class Colors:
    """Named colours."""

    BLACK = Color(0, 0, 0)
    DARK_GREY = Color(64, 64, 64)
    MED_GREY = Color(128, 128, 128)
    LIGHT_GREY = Color(192, 192, 192)
    WHITE = Color(255, 255, 255)
    DARK_RED = Color(64, 0, 0)
    MED_RED = Color(128, 0, 0)
    LIGHT_RED = Color(192, 0, 0)
    BRIGHT_RED = Color(255, 0, 0)
    DARK_GREEN = Color(0, 64, 0)
    MED_GREEN = Color(0, 128, 0)
    LIGHT_GREEN = Color(0, 192, 0)
    BRIGHT_GREEN = Color(0, 255, 0)
    DARK_BLUE = Color(0, 0, 64)
    MED_BLUE = Color(0, 0, 128)
    LIGHT_BLUE = Color(0, 0, 192)
    BRIGHT_BLUE = Color(0, 0, 255)
    DARK_CYAN = Color(0, 64, 64)
    MED_CYAN = Color(0, 128, 128)
    LIGHT_CYAN = Color(0, 192, 192)
    BRIGHT_CYAN = Color(0, 255, 255)
    DARK_PURPLE = Color(64, 0, 64)
    MED_PURPLE = Color(128, 0, 128)
    LIGHT_PURPLE = Color(192, 0, 192)
    MAGENTA = Color(255, 0, 255)
    DARK_PINK = Color(255, 64, 255)
    PINK = Color(255, 128, 255)
    LIGHT_PINK = Color(255, 192, 255)
    DARK_YELLOW = Color(64, 64, 0)
    MED_YELLOW = Color(128, 128, 0)
    LIGHT_YELLOW = Color(192, 192, 0)
    BRIGHT_YELLOW = Color(255, 255, 0)
    DARK_BROWN = Color(64, 32, 0)
    BROWN = Color(128, 64, 0)
    DARK_ORANGE = Color(192, 96, 0)
    ORANGE = Color(255, 128, 0)
    DARK_PEACH = Color(255, 160, 64)
    PEACH = Color(255, 192, 128)
    LIGHT_PEACH = Color(255, 224, 192)
    TRANSPARENT = Color(0, 0, 0, 0)