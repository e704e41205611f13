import math

import pytest

from artillery.meshes import (
    DrawMode,
    Mesh,
    create_circle,
    create_diamond,
    create_ellipse,
    create_field,
    create_line,
    create_rectangle,
    create_semicircle,
    create_trapezoid,
)

RED = (1.0, 0.0, 0.0)


def test_rectangle_geometry():
    mesh = create_rectangle("r1", 24, 2, RED)
    assert mesh.name == "r1"
    assert mesh.vertices == (
        (-12.0, 0.0, 0.0),
        (12.0, 0.0, 0.0),
        (12.0, 2.0, 0.0),
        (-12.0, 2.0, 0.0),
    )
    assert mesh.indices == (0, 1, 2, 2, 3, 0)
    assert mesh.draw_mode is DrawMode.TRIANGLES


def test_trapezoid_top_and_base_widths():
    mesh = create_trapezoid("t1", 28, 6, 35, RED)
    xs_bottom = [v[0] for v in mesh.vertices if v[1] == 0.0]
    xs_top = [v[0] for v in mesh.vertices if v[1] == 6.0]
    assert max(xs_bottom) - min(xs_bottom) == pytest.approx(28)
    assert max(xs_top) - min(xs_top) == pytest.approx(35)


def test_circle_rim_lies_on_radius():
    mesh = create_circle("bullet", 0.7, 36, RED)
    assert len(mesh.vertices) == 36 + 2
    assert mesh.vertices[0] == (0.0, 0.0, 0.0)
    for x, y, _ in mesh.vertices[1:]:
        assert math.hypot(x, y) == pytest.approx(0.7)
    assert len(mesh.indices) == 3 * 36


def test_circle_closes_on_start_point():
    mesh = create_circle("sun", 30, 36, RED)
    assert mesh.vertices[1][:2] == pytest.approx(mesh.vertices[-1][:2], abs=1e-9)


def test_semicircle_stays_above_axis():
    mesh = create_semicircle("c1", 8, 30, RED)
    assert all(y >= -1e-9 for _, y, _ in mesh.vertices)
    assert mesh.vertices[-1][:2] == pytest.approx((-8.0, 0.0), abs=1e-9)


@pytest.mark.parametrize("factory", [create_circle, create_semicircle])
def test_fan_rejects_zero_segments(factory):
    with pytest.raises(ValueError):
        factory("bad", 1.0, 0, RED)


def test_line_is_unit_segment():
    mesh = create_line("line", RED)
    assert mesh.vertices == ((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
    assert mesh.indices == (0, 1)


def test_ellipse_is_triangle_fan_on_ellipse():
    mesh = create_ellipse("cloud", 40, 30, RED)
    assert mesh.draw_mode is DrawMode.TRIANGLE_FAN
    assert len(mesh.vertices) == 37
    assert mesh.indices == tuple(range(37))
    for x, y, _ in mesh.vertices:
        assert (x / 40) ** 2 + (y / 30) ** 2 == pytest.approx(1.0)


def test_diamond_extents():
    mesh = create_diamond("d", 10, 20, RED)
    xs = [v[0] for v in mesh.vertices]
    ys = [v[1] for v in mesh.vertices]
    assert (min(xs), max(xs)) == (-5.0, 5.0)
    assert (min(ys), max(ys)) == (-10.0, 10.0)


def test_field_from_given_heights():
    heights = [10.0, 20.0, 15.0, 5.0]
    mesh, returned = create_field(2000.0, 100.0, heights)
    assert returned == heights
    assert mesh.name == "field"
    assert len(mesh.vertices) == 2 * len(heights)
    assert len(mesh.indices) == 6 * (len(heights) - 1)
    assert [v[1] for v in mesh.vertices[0::2]] == heights
    assert all(v[1] == 0.0 for v in mesh.vertices[1::2])


def test_field_columns_are_evenly_spaced():
    mesh, _ = create_field(2000.0, 100.0, [1.0] * 5)
    xs = [v[0] for v in mesh.vertices[0::2]]
    steps = [b - a for a, b in zip(xs, xs[1:])]
    assert steps == pytest.approx([steps[0]] * len(steps))
    assert xs[0] == 0.0


def test_field_generates_heights_when_missing():
    mesh, heights = create_field(2560.0, 100.0, None)
    assert len(heights) == 2000
    assert len(mesh.vertices) == 4000
    assert max(mesh.indices) == len(mesh.vertices) - 1


def test_mesh_rejects_out_of_range_index():
    with pytest.raises(ValueError):
        Mesh("bad", ((0, 0, 0), (1, 0, 0)), (0, 1, 2), RED)


def test_mesh_rejects_short_vertex():
    with pytest.raises(ValueError):
        Mesh("bad", ((0, 0),), (0,), RED)


def test_mesh_is_immutable():
    mesh = create_line("line", RED)
    with pytest.raises(AttributeError):
        mesh.name = "other"
    assert mesh.name == "line"
    assert mesh.vertices == ((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))