"""Two, three and four component vectors.

Vectors are immutable. Arithmetic returns new vectors. Ordering comparisons
compare squared lengths, while equality compares the components.
Multiplying by a matrix of matching size applies that matrix to the vector as
a column vector: component ``j`` of the result is the sum over ``i`` of
``v[i] * m.element(i, j)``.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from .matrix import Matrix2D, Matrix3D, Matrix4D


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real)


class _VectorBase:
    """Helpers shared by the vector classes."""

    __slots__ = ()

    def __iter__(self) -> Iterator[float]:
        raise NotImplementedError

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def _index(self, index: int) -> float:
        components = tuple(self)
        if not isinstance(index, int) or not 0 <= index < len(components):
            raise IndexError(f"vector index {index!r} out of range")
        return components[index]

    def _combine(self, other: Any, op: Callable[[Any, Any], Any]) -> Any:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(op(a, b) for a, b in zip(self, other)))

    def _scale(self, factor: Any, op: Callable[[Any, Any], Any]) -> Any:
        return type(self)(*(op(a, factor) for a in self))

    def _apply_matrix(self, matrix: Any) -> Any:
        components = tuple(self)
        return type(self)(
            *(
                sum(v * matrix.element(i, j) for i, v in enumerate(components))
                for j in range(len(components))
            )
        )

    def _length_sq(self) -> float:
        return sum(c * c for c in self)

    def _normalized(self) -> Any:
        length_sq = self._length_sq()
        if length_sq == 0:
            return self
        length = math.sqrt(length_sq)
        return type(self)(*(c / length for c in self))


@dataclass(frozen=True, slots=True)
class Vector2D(_VectorBase):
    """A two component vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Any) -> Any:
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: Any) -> Any:
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other: Any) -> Any:
        if _is_scalar(other):
            return self._scale(other, lambda a, b: a * b)
        if isinstance(other, Matrix2D):
            return self._apply_matrix(other)
        return self._combine(other, lambda a, b: a * b)

    def __truediv__(self, other: Any) -> Any:
        if _is_scalar(other):
            return self._scale(other, lambda a, b: a / b)
        return self._combine(other, lambda a, b: a / b)

    def __getitem__(self, index: int) -> float:
        return self._index(index)

    def __lt__(self, other: "Vector2D") -> bool:
        return self.length_sq() < other.length_sq()

    def __le__(self, other: "Vector2D") -> bool:
        return self.length_sq() <= other.length_sq()

    def __gt__(self, other: "Vector2D") -> bool:
        return self.length_sq() > other.length_sq()

    def __ge__(self, other: "Vector2D") -> bool:
        return self.length_sq() >= other.length_sq()

    def length_sq(self) -> float:
        return self._length_sq()

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalized(self) -> "Vector2D":
        """Return a unit vector in the same direction; a zero vector stays zero."""
        return self._normalized()

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def rotated90(self) -> "Vector2D":
        return Vector2D(-self.y, self.x)

    def rotated180(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def rotated270(self) -> "Vector2D":
        return Vector2D(self.y, -self.x)

    def rotated(self, radians: float) -> "Vector2D":
        cos_r = math.cos(radians)
        sin_r = math.sin(radians)
        return Vector2D(self.x * cos_r - self.y * sin_r, self.x * sin_r + self.y * cos_r)

    def interpolated_to(self, other: "Vector2D") -> "Vector2D":
        """Return the unit direction from this vector towards ``other``."""
        return (other - self).normalized()

    def aspect_ratio(self) -> float:
        return self.x / self.y

    def inv_aspect_ratio(self) -> float:
        return self.y / self.x


@dataclass(frozen=True, slots=True)
class Vector3D(_VectorBase):
    """A three component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    @classmethod
    def from_2d(cls, v2: Vector2D, z: float = 1.0) -> "Vector3D":
        """Extend a 2D vector with a ``z`` component (1 by default)."""
        return cls(v2.x, v2.y, z)

    @property
    def xy(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    def __add__(self, other: Any) -> Any:
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: Any) -> Any:
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other: Any) -> Any:
        if _is_scalar(other):
            return self._scale(other, lambda a, b: a * b)
        if isinstance(other, Matrix3D):
            return self._apply_matrix(other)
        return self._combine(other, lambda a, b: a * b)

    def __truediv__(self, other: Any) -> Any:
        if _is_scalar(other):
            return self._scale(other, lambda a, b: a / b)
        if type(other) is not Vector3D:
            return NotImplemented
        # The z component is multiplied, not divided, in component-wise division.
        return Vector3D(self.x / other.x, self.y / other.y, self.z * other.z)

    def __getitem__(self, index: int) -> float:
        return self._index(index)

    def __lt__(self, other: "Vector3D") -> bool:
        return self.length_sq() < other.length_sq()

    def __le__(self, other: "Vector3D") -> bool:
        return self.length_sq() <= other.length_sq()

    def __gt__(self, other: "Vector3D") -> bool:
        return self.length_sq() > other.length_sq()

    def __ge__(self, other: "Vector3D") -> bool:
        return self.length_sq() >= other.length_sq()

    def length_sq(self) -> float:
        return self._length_sq()

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalized(self) -> "Vector3D":
        """Return a unit vector in the same direction; a zero vector stays zero."""
        return self._normalized()

    def dot(self, other: "Vector3D") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(
            self.y * other.z - self.z * other.y,
            -(self.x * other.z - self.z * other.x),
            self.x * other.y - self.y * other.x,
        )

    def rotated_around_x(self, radians: float) -> "Vector3D":
        cos_r = math.cos(radians)
        sin_r = math.sin(radians)
        return Vector3D(
            self.x,
            self.y * cos_r - self.z * sin_r,
            self.y * sin_r + self.z * cos_r,
        )

    def rotated_around_y(self, radians: float) -> "Vector3D":
        cos_r = math.cos(radians)
        sin_r = math.sin(radians)
        return Vector3D(
            self.x * cos_r - self.z * sin_r,
            self.y,
            self.x * sin_r + self.z * cos_r,
        )

    def rotated_around_z(self, radians: float) -> "Vector3D":
        cos_r = math.cos(radians)
        sin_r = math.sin(radians)
        return Vector3D(
            self.x * cos_r - self.y * sin_r,
            self.x * sin_r + self.y * cos_r,
            self.z,
        )

    def interpolated_to(self, other: "Vector3D") -> "Vector3D":
        """Return the unit direction from this vector towards ``other``."""
        return (other - self).normalized()


@dataclass(frozen=True, slots=True)
class Vector4D(_VectorBase):
    """A four component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @classmethod
    def from_3d(cls, v3: Vector3D, w: float = 1.0) -> "Vector4D":
        """Extend a 3D vector with a ``w`` component (1 by default)."""
        return cls(v3.x, v3.y, v3.z, w)

    @property
    def xy(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    @property
    def xyz(self) -> Vector3D:
        return Vector3D(self.x, self.y, self.z)

    def __add__(self, other: Any) -> Any:
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: Any) -> Any:
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other: Any) -> Any:
        if _is_scalar(other):
            return self._scale(other, lambda a, b: a * b)
        if isinstance(other, Matrix4D):
            return self._apply_matrix(other)
        return self._combine(other, lambda a, b: a * b)

    def __truediv__(self, other: Any) -> Any:
        if _is_scalar(other):
            return self._scale(other, lambda a, b: a / b)
        return self._combine(other, lambda a, b: a / b)

    def __getitem__(self, index: int) -> float:
        return self._index(index)

    def __lt__(self, other: "Vector4D") -> bool:
        return self.length_sq() < other.length_sq()

    def __le__(self, other: "Vector4D") -> bool:
        return self.length_sq() <= other.length_sq()

    def __gt__(self, other: "Vector4D") -> bool:
        return self.length_sq() > other.length_sq()

    def __ge__(self, other: "Vector4D") -> bool:
        return self.length_sq() >= other.length_sq()

    def length_sq(self) -> float:
        return self._length_sq()

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalized(self) -> "Vector4D":
        """Return a unit vector in the same direction; a zero vector stays zero."""
        return self._normalized()

    def interpolated_to(self, other: "Vector4D") -> "Vector4D":
        """Return the unit direction from this vector towards ``other``."""
        return (other - self).normalized()