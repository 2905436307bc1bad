# animforge

Small, dependency-free building blocks for 2D animation work.

## What is inside

- `animforge.vector`: `Vector2D`, `Vector3D` and `Vector4D`.
  - They are immutable and support arithmetic with vectors and numbers.
  - They offer length, normalisation and linear interpolation direction (`interpolated_to`).
  - `Vector2D` and `Vector3D` have dot products. `Vector3D` also has a cross product.
  - They offer rotations.
  - Multiplying by a matrix of the same size applies the matrix.
  - Equality compares components. `<`, `<=`, `>` and `>=` compare squared lengths.
- `animforge.matrix`: `Matrix2D`, `Matrix3D` and `Matrix4D`.
  - They provide identity, scaling, rotation and translation factories.
  - `from_2d` and `from_3d` widen a matrix.
  - `element(column, row)` reads a single value.
- `animforge.color`: `Color`, an 8-bit RGBA colour whose channels wrap into 0–255.
  - It has normalised accessors (`rn`, `gn`, `bn`, `an`).
  - It has the constructors `from_floats`, `from_bgra` and `from_vector`.
  - It has `blended_with` and `inverted`.
  - `==` ignores alpha, and `completely_equals` includes it.
  - `Colors` holds a palette of named colours such as `Colors.ORANGE` and `Colors.TRANSPARENT`.
- `animforge.rect`: `Rect`, an axis-aligned rectangle whose width and height may not be negative.
  - It has alignment and side-touch tests and `is_touching`.
  - It has `is_contained_within` and `contains_point`.
  - It clips with `clipped_to`.
  - `to_int` truncates its values to integers.
- `animforge.transformable`: `Transformable`.
  - It holds a position, a rotation and a positive per-axis scale.
  - It has `move`, `rotate` and `scale_by`.
  - `transformation_matrix` returns rotation × scaling × translation as a `Matrix3D`.
- `animforge.svg`: `SVG`, a `Transformable` made of line segments. `generate_line`, `generate_polygon` and `generate_star` build common shapes.
- `animforge.mouse`: `Mouse`.
  - It tracks position, buttons and window presence, and keeps a bounded queue of `MouseEvent`s.
  - Feed it through the `on_*` methods.
  - `on_wheel_scroll` turns wheel movement into one scroll event per 120 units.
  - `read()` takes events from the queue. When the queue is empty it returns an event whose `is_end_of_queue()` is true.
- `animforge.clock`: `Clock`, a monotonic stopwatch with `peek` and `mark`.
- `animforge.mathutil`: the helpers `sq`, `angle_wrap` and `absvec2`.

## Example

```python
import math

from animforge.vector import Vector2D
from animforge.rect import Rect
from animforge.svg import SVG
from animforge.color import Colors

v = Vector2D(3.0, 4.0)
print(v.length())             # 5.0
print(v.rotated(math.pi / 2))

a = Rect(Vector2D(0.0, 0.0), 10.0, 10.0)
b = Rect(Vector2D(5.0, 5.0), 10.0, 10.0)
print(a.is_touching(b))       # True
print(b.clipped_to(a))

hexagon = SVG.generate_polygon(6)
print(len(hexagon.line_buffer))   # 6

print(Colors.ORANGE.blended_with(Colors.BRIGHT_BLUE))
```

## What it does not do

animforge only models geometry, colour and input state. It does not open windows or draw anything to the screen. It does not load images or play animations and sound. The mouse state is only updated by your own calls to its `on_*` methods.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```