"""Square 2x2, 3x3 and 4x4 matrices.

Values are given to the constructors in reading order, row by row. Internally
each matrix keeps its elements by column first, and ``element(column, row)``
addresses them that way.
"""

from __future__ import annotations

import math
from typing import Any, ClassVar, Tuple

_Data = Tuple[Tuple[Any, ...], ...]


class _SquareMatrix:
    """Common behaviour for the fixed-size square matrices."""

    __slots__ = ("_data",)
    SIZE: ClassVar[int] = 0

    def __init__(self, *args: Any) -> None:
        n = self.SIZE
        if not args:
            self._data: _Data = tuple((0.0,) * n for _ in range(n))
        elif len(args) == 1 and isinstance(args[0], _SquareMatrix):
            other = args[0]
            if other.SIZE != n:
                raise TypeError(
                    f"cannot build a {n}x{n} matrix from a {other.SIZE}x{other.SIZE} one"
                )
            self._data = other._data
        elif len(args) == n * n:
            rows = [args[start:start + n] for start in range(0, n * n, n)]
            self._data = tuple(zip(*rows))
        else:
            raise TypeError(
                f"{type(self).__name__} takes no values, another matrix or {n * n} values"
            )

    @classmethod
    def _from_columns(cls, columns: _Data) -> "_SquareMatrix":
        matrix = cls.__new__(cls)
        matrix._data = tuple(tuple(column) for column in columns)
        return matrix

    def element(self, column: int, row: int) -> Any:
        """Return the element in ``column`` and ``row``."""
        return self._data[column][row]

    @property
    def rows(self) -> _Data:
        """The elements in reading order, one tuple per row."""
        return tuple(zip(*self._data))

    def __mul__(self, other: Any) -> Any:
        if type(other) is not type(self):
            return NotImplemented
        other_rows = list(zip(*other._data))
        product = tuple(
            tuple(sum(a * b for a, b in zip(column, other_row)) for other_row in other_rows)
            for column in self._data
        )
        return type(self)._from_columns(product)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._data))

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for row in self.rows for v in row)
        return f"{type(self).__name__}({values})"


class Matrix2D(_SquareMatrix):
    """A 2x2 matrix."""

    __slots__ = ()
    SIZE = 2

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)

    def __mul__(self, other: Any) -> Any:
        return super().__mul__(other)

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    __hash__ = _SquareMatrix.__hash__

    def element(self, column: int, row: int) -> Any:
        return super().element(column, row)

    @classmethod
    def identity(cls) -> "Matrix2D":
        return cls(1.0, 0.0,
                   0.0, 1.0)

    @classmethod
    def scaling(cls, x_scale: float, y_scale: float) -> "Matrix2D":
        return cls(x_scale, 0.0,
                   0.0, y_scale)

    @classmethod
    def rotation(cls, radians: float) -> "Matrix2D":
        cos_r = math.cos(radians)
        sin_r = math.sin(radians)
        return cls(cos_r, -sin_r,
                   sin_r, cos_r)


class Matrix3D(_SquareMatrix):
    """A 3x3 matrix."""

    __slots__ = ()
    SIZE = 3

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)

    def __mul__(self, other: Any) -> Any:
        return super().__mul__(other)

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    __hash__ = _SquareMatrix.__hash__

    def element(self, column: int, row: int) -> Any:
        return super().element(column, row)

    @classmethod
    def from_2d(cls, m2: Matrix2D, z1: float = 0.0, z2: float = 0.0,
                x3: float = 0.0, y3: float = 0.0, z3: float = 1.0) -> "Matrix3D":
        """Extend a 2x2 matrix with a third column and row."""
        (a, b), (c, d) = m2.rows
        return cls(a, b, z1,
                   c, d, z2,
                   x3, y3, z3)

    @classmethod
    def identity(cls) -> "Matrix3D":
        return cls(1.0, 0.0, 0.0,
                   0.0, 1.0, 0.0,
                   0.0, 0.0, 1.0)

    @classmethod
    def scaling(cls, x_scale: float, y_scale: float, z_scale: float) -> "Matrix3D":
        return cls(x_scale, 0.0, 0.0,
                   0.0, y_scale, 0.0,
                   0.0, 0.0, z_scale)

    @classmethod
    def rotation_x(cls, radians: float) -> "Matrix3D":
        cos_r = math.cos(radians)
        sin_r = math.sin(radians)
        return cls(1.0, 0.0, 0.0,
                   0.0, cos_r, -sin_r,
                   0.0, sin_r, cos_r)

    @classmethod
    def rotation_y(cls, radians: float) -> "Matrix3D":
        cos_r = math.cos(radians)
        sin_r = math.sin(radians)
        return cls(cos_r, 0.0, -sin_r,
                   0.0, 1.0, 0.0,
                   sin_r, 0.0, cos_r)

    @classmethod
    def rotation_z(cls, radians: float) -> "Matrix3D":
        cos_r = math.cos(radians)
        sin_r = math.sin(radians)
        return cls(cos_r, -sin_r, 0.0,
                   sin_r, cos_r, 0.0,
                   0.0, 0.0, 1.0)

    @classmethod
    def translation(cls, x_trans: float, y_trans: float) -> "Matrix3D":
        return cls(1.0, 0.0, x_trans,
                   0.0, 1.0, y_trans,
                   0.0, 0.0, 1.0)


class Matrix4D(_SquareMatrix):
    """A 4x4 matrix."""

    __slots__ = ()
    SIZE = 4

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)

    def __mul__(self, other: Any) -> Any:
        return super().__mul__(other)

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    __hash__ = _SquareMatrix.__hash__

    def element(self, column: int, row: int) -> Any:
        return super().element(column, row)

    @classmethod
    def from_3d(cls, m3: Matrix3D, w1: float = 0.0, w2: float = 0.0, w3: float = 0.0,
                x4: float = 0.0, y4: float = 0.0, z4: float = 0.0,
                w4: float = 1.0) -> "Matrix4D":
        """Extend a 3x3 matrix with a fourth column and row."""
        (a, b, c), (d, e, f), (g, h, i) = m3.rows
        return cls(a, b, c, w1,
                   d, e, f, w2,
                   g, h, i, w3,
                   x4, y4, z4, w4)

    @classmethod
    def identity(cls) -> "Matrix4D":
        return cls(1.0, 0.0, 0.0, 0.0,
                   0.0, 1.0, 0.0, 0.0,
                   0.0, 0.0, 1.0, 0.0,
                   0.0, 0.0, 0.0, 1.0)

    @classmethod
    def scaling(cls, x_scale: float, y_scale: float, z_scale: float,
                w_scale: float) -> "Matrix4D":
        return cls(x_scale, 0.0, 0.0, 0.0,
                   0.0, y_scale, 0.0, 0.0,
                   0.0, 0.0, z_scale, 0.0,
                   0.0, 0.0, 0.0, w_scale)

    @classmethod
    def translation(cls, x_trans: float, y_trans: float, z_trans: float) -> "Matrix4D":
        return cls(1.0, 0.0, 0.0, x_trans,
                   0.0, 1.0, 0.0, y_trans,
                   0.0, 0.0, 1.0, z_trans,
                   0.0, 0.0, 0.0, 1.0)