import pytest

from animforge.svg import SVG
from animforge.transformable import Transformable
from animforge.vector import Vector2D


def _assert_chained(lines):
    for (_, end), (start, _) in zip(lines, lines[1:]):
        assert end == start


def test_empty_buffer_rejected():
    with pytest.raises(ValueError):
        SVG([])


def test_constructor_keeps_transform():
    seg = (Vector2D(0.0, 0.0), Vector2D(1.0, 1.0))
    shape = SVG([seg], Vector2D(2.0, 3.0), 0.5, Vector2D(2.0, 2.0))
    assert shape.line_buffer == [seg]
    assert shape.position == Vector2D(2.0, 3.0)
    assert shape.rotation == 0.5
    assert shape.scale == Vector2D(2.0, 2.0)
    assert isinstance(shape, Transformable)


def test_line_buffer_is_a_copy():
    seg = (Vector2D(0.0, 0.0), Vector2D(1.0, 1.0))
    shape = SVG([seg])
    shape.line_buffer.clear()
    assert shape.line_buffer == [seg]


def test_generate_line_sits_at_midpoint():
    p0 = Vector2D(0.0, 0.0)
    p1 = Vector2D(4.0, 2.0)
    shape = SVG.generate_line(p0, p1)
    assert shape.line_buffer == [(p0, p1)]
    assert shape.position * 2 == p0 + p1
    assert shape.rotation == 0.0
    assert shape.scale == Vector2D(1.0, 1.0)


@pytest.mark.parametrize("sides", [3, 4, 7])
def test_polygon_shape(sides):
    lines = SVG.generate_polygon(sides).line_buffer
    assert len(lines) == sides
    assert lines[0][0] == Vector2D(1.0, 0.0)
    _assert_chained(lines)
    for start, end in lines:
        assert end.length() == pytest.approx(1.0)
    assert lines[-1][1].x == pytest.approx(1.0)
    assert lines[-1][1].y == pytest.approx(0.0, abs=1e-9)


def test_polygon_passes_transform():
    shape = SVG.generate_polygon(5, Vector2D(1.0, 2.0), 0.3, Vector2D(3.0, 3.0))
    assert shape.position == Vector2D(1.0, 2.0)
    assert shape.rotation == 0.3
    assert shape.scale == Vector2D(3.0, 3.0)


def test_polygon_needs_a_side():
    with pytest.raises(ValueError):
        SVG.generate_polygon(0)


@pytest.mark.parametrize("points", [3, 5])
def test_star_shape(points):
    ratio = 0.4
    lines = SVG.generate_star(points, ratio).line_buffer
    assert len(lines) == 2 * points
    assert lines[0][0] == Vector2D(1.0, 0.0)
    _assert_chained(lines)
    for inner_seg, outer_seg in zip(lines[0::2], lines[1::2]):
        assert inner_seg[1].length() == pytest.approx(ratio)
        assert outer_seg[1].length() == pytest.approx(1.0)


def test_star_needs_a_point():
    with pytest.raises(ValueError):
        SVG.generate_star(0, 0.5)


def test_shape_moves_like_transformable():
    shape = SVG.generate_polygon(4)
    shape.move(Vector2D(1.5, -2.0))
    assert shape.position == Vector2D(1.5, -2.0)