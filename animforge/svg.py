"""Line-based vector shapes."""

from __future__ import annotations

import math
from typing import Iterable, List, Tuple

from .transformable import Transformable
from .vector import Vector2D

Segment = Tuple[Vector2D, Vector2D]


class SVG(Transformable):
    """A shape made of line segments in local coordinates, plus a transform."""

    def __init__(self, line_buffer: Iterable[Segment], pos: Vector2D = Vector2D(0.0, 0.0),
                 rotation: float = 0.0, scale: Vector2D = Vector2D(1.0, 1.0)) -> None:
        lines = [(start, end) for start, end in line_buffer]
        if not lines:
            raise ValueError("a shape needs at least one line segment")
        super().__init__(pos, rotation, scale)
        self._lines = lines

    @property
    def line_buffer(self) -> List[Segment]:
        """A copy of the shape's line segments."""
        return list(self._lines)

    @classmethod
    def generate_line(cls, p0: Vector2D, p1: Vector2D) -> "SVG":
        """A single segment, positioned at its midpoint."""
        midpoint = Vector2D((p1.x + p0.x) / 2, (p1.y + p0.y) / 2)
        return cls([(p0, p1)], midpoint, 0.0, Vector2D(1.0, 1.0))

    @classmethod
    def generate_polygon(cls, n_sides: int, pos: Vector2D = Vector2D(0.0, 0.0),
                         rot: float = 0.0, scale: Vector2D = Vector2D(1.0, 1.0)) -> "SVG":
        """A regular polygon inscribed in the unit circle, starting at (1, 0)."""
        if n_sides < 1:
            raise ValueError(f"a polygon needs at least one side, got {n_sides}")
        step = 2.0 * math.pi / n_sides
        points = [Vector2D(1.0, 0.0)]
        points.extend(Vector2D(math.cos(i * step), math.sin(i * step))
                      for i in range(1, n_sides + 1))
        return cls(list(zip(points, points[1:])), pos, rot, scale)

    @classmethod
    def generate_star(cls, n_points: int, inner_radius_ratio: float,
                      pos: Vector2D = Vector2D(0.0, 0.0), rot: float = 0.0,
                      scale: Vector2D = Vector2D(1.0, 1.0)) -> "SVG":
        """A star with ``n_points`` tips on the unit circle and inner corners at the given radius."""
        if n_points < 1:
            raise ValueError(f"a star needs at least one point, got {n_points}")
        step = 2.0 * math.pi / n_points
        half_step = step / 2.0
        lines: List[Segment] = []
        last = Vector2D(1.0, 0.0)
        angle = 0.0
        for i in range(1, n_points + 1):
            angle += half_step
            inner = Vector2D(math.cos(angle) * inner_radius_ratio,
                             math.sin(angle) * inner_radius_ratio)
            lines.append((last, inner))
            angle = i * step
            outer = Vector2D(math.cos(angle), math.sin(angle))
            lines.append((inner, outer))
            last = outer
        return cls(lines, pos, rot, scale)