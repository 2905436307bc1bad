"""An object with a position, a rotation and a scale."""

from __future__ import annotations

from .matrix import Matrix3D
from .vector import Vector2D


def _check_scale(value: Vector2D) -> None:
    if not (value.x > 0 and value.y > 0):
        raise ValueError(f"scale components must be positive, got {value!r}")


class Transformable:
    """Holds a 2D position, a rotation in radians and a per-axis scale."""

    def __init__(self, pos: Vector2D = Vector2D(0.0, 0.0), rotation: float = 0.0,
                 scale: Vector2D = Vector2D(1.0, 1.0)) -> None:
        self.position = pos
        self.rotation = rotation
        self._scale = scale

    @property
    def scale(self) -> Vector2D:
        return self._scale

    @scale.setter
    def scale(self, value: Vector2D) -> None:
        _check_scale(value)
        self._scale = value

    def move(self, delta: Vector2D) -> None:
        self.position = self.position + delta

    def rotate(self, radians: float) -> None:
        self.rotation += radians

    def scale_by(self, scalar: Vector2D) -> None:
        """Multiply the scale per axis; both factors must be positive."""
        _check_scale(scalar)
        self._scale = self._scale * scalar

    def transformation_matrix(self) -> Matrix3D:
        """Return rotation times scaling times translation."""
        return (
            Matrix3D.rotation_z(self.rotation)
            * Matrix3D.scaling(self._scale.x, self._scale.y, 1.0)
            * Matrix3D.translation(self.position.x, self.position.y)
        )