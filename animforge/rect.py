"""Axis-aligned rectangles with touch, containment and clipping tests."""

from __future__ import annotations

import numbers
from typing import Any

from .vector import Vector2D


class Rect:
    """A rectangle given by its top-left position, width and height.

    Width and height may not be negative.
    """

    __slots__ = ("pos", "_width", "_height")

    def __init__(self, pos: Vector2D = Vector2D(), width: float = 1.0,
                 height: float = 1.0) -> None:
        self.pos = pos
        self.width = width
        self.height = height

    @classmethod
    def from_dimensions(cls, pos: Vector2D, dim: Vector2D) -> "Rect":
        """Build a rectangle whose width and height are the components of ``dim``."""
        return cls(pos, dim.x, dim.y)

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"rectangle width must not be negative, got {value!r}")
        self._width = value

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"rectangle height must not be negative, got {value!r}")
        self._height = value

    def to_int(self) -> "Rect":
        """Return a copy with every value truncated to an integer."""
        return Rect(Vector2D(int(self.pos.x), int(self.pos.y)), int(self.width), int(self.height))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.pos, self.width, self.height) == (other.pos, other.width, other.height)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Rect(pos={self.pos!r}, width={self.width!r}, height={self.height!r})"

    def __add__(self, delta: Any) -> Any:
        if not isinstance(delta, Vector2D):
            return NotImplemented
        return Rect(self.pos + delta, self.width, self.height)

    def __sub__(self, delta: Any) -> Any:
        if not isinstance(delta, Vector2D):
            return NotImplemented
        return Rect(self.pos - delta, self.width, self.height)

    def __mul__(self, scalar: Any) -> Any:
        """Scale the size by a number or per axis by a vector; the position stays."""
        if isinstance(scalar, Vector2D):
            return Rect(self.pos, self.width * scalar.x, self.height * scalar.y)
        if isinstance(scalar, numbers.Real):
            return Rect(self.pos, self.width * scalar, self.height * scalar)
        return NotImplemented

    def __truediv__(self, scalar: Any) -> Any:
        if isinstance(scalar, Vector2D):
            return Rect(self.pos, self.width / scalar.x, self.height / scalar.y)
        if isinstance(scalar, numbers.Real):
            return Rect(self.pos, self.width / scalar, self.height / scalar)
        return NotImplemented

    def move(self, delta: Vector2D) -> None:
        """Shift the rectangle in place by ``delta``."""
        self.pos = self.pos + delta

    def aspect_ratio(self) -> float:
        return self.width / self.height

    def inv_aspect_ratio(self) -> float:
        return self.height / self.width

    def is_horizontally_aligned_with(self, other: "Rect") -> bool:
        return (self.pos.x + self.width >= other.pos.x
                and self.pos.x < other.pos.x + other.width)

    def is_vertically_aligned_with(self, other: "Rect") -> bool:
        return (self.pos.y + self.height >= other.pos.y
                and self.pos.y < other.pos.y + other.height)

    def top_is_touching(self, other: "Rect") -> bool:
        return (self.is_horizontally_aligned_with(other)
                and other.pos.y <= self.pos.y < other.pos.y + other.height)

    def right_is_touching(self, other: "Rect") -> bool:
        right = self.pos.x + self.width
        return (self.is_vertically_aligned_with(other)
                and other.pos.x <= right < other.pos.x + other.width)

    def bottom_is_touching(self, other: "Rect") -> bool:
        bottom = self.pos.y + self.height
        return (self.is_horizontally_aligned_with(other)
                and other.pos.y <= bottom < other.pos.y + other.height)

    def left_is_touching(self, other: "Rect") -> bool:
        return (self.is_vertically_aligned_with(other)
                and other.pos.x <= self.pos.x < other.pos.x + other.width)

    def is_touching(self, other: "Rect") -> bool:
        return self.is_horizontally_aligned_with(other) and self.is_vertically_aligned_with(other)

    def is_contained_within(self, other: "Rect") -> bool:
        return (self.pos.x >= other.pos.x
                and self.pos.x + self.width < other.pos.x + other.width
                and self.pos.y >= other.pos.y
                and self.pos.y + self.height < other.pos.y + other.height)

    def contains_point(self, point: Vector2D) -> bool:
        return (self.pos.x <= point.x < self.pos.x + self.width
                and self.pos.y <= point.y < self.pos.y + self.height)

    def clipped_to(self, other: "Rect") -> "Rect":
        """Return the part of this rectangle that lies inside ``other``.

        Raises ValueError when the rectangles do not overlap.
        """
        x = self.pos.x if self.pos.x >= other.pos.x else other.pos.x
        width = self.width - (x - self.pos.x)
        y = self.pos.y if self.pos.y >= other.pos.y else other.pos.y
        height = self.height - (y - self.pos.y)
        other_right = other.pos.x + other.width
        other_bottom = other.pos.y + other.height
        if x + width > other_right:
            width = other_right - x
        if y + height > other_bottom:
            height = other_bottom - y
        return Rect(Vector2D(x, y), width, height)