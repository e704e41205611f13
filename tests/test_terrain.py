import pytest

from artillery.terrain import (
    cubic_spline_interpolation,
    generate_height_map,
    smooth_height_map,
)


def test_spline_returns_requested_sample_count():
    result = cubic_spline_interpolation([0, 1, 2, 3], [1, 4, 2, 5], 17)
    assert len(result) == 17


def test_spline_passes_through_knots_when_samples_align():
    ys = [1.0, 4.0, 2.0, 5.0, -3.0]
    result = cubic_spline_interpolation([0, 1, 2, 3, 4], ys, 5)
    assert result == pytest.approx(ys)


def test_spline_endpoints_match_data():
    ys = [2.0, -1.0, 0.5, 8.0]
    result = cubic_spline_interpolation([0.0, 0.5, 2.0, 3.0], ys, 40)
    assert result[0] == pytest.approx(ys[0])
    assert result[-1] == pytest.approx(ys[-1])


def test_spline_reproduces_linear_data():
    xs = [0.0, 1.0, 2.0, 3.0]
    ys = [1.0, 3.0, 5.0, 7.0]
    result = cubic_spline_interpolation(xs, ys, 7)
    midpoint_value = (ys[1] + ys[2]) / 2
    assert result[3] == pytest.approx(midpoint_value)
    steps = [b - a for a, b in zip(result, result[1:])]
    assert steps == pytest.approx([steps[0]] * len(steps))


def test_spline_two_points_is_straight_line():
    result = cubic_spline_interpolation([0.0, 4.0], [0.0, 8.0], 3)
    assert result[1] == pytest.approx(4.0)


@pytest.mark.parametrize(
    "x, y, samples",
    [
        ([0.0], [1.0], 5),
        ([0.0, 1.0], [1.0], 5),
        ([0.0, 1.0], [1.0, 2.0], 1),
        ([0.0, 0.0, 1.0], [1.0, 2.0, 3.0], 5),
        ([2.0, 1.0], [1.0, 2.0], 5),
    ],
)
def test_spline_rejects_bad_input(x, y, samples):
    with pytest.raises(ValueError):
        cubic_spline_interpolation(x, y, samples)


def test_smooth_keeps_endpoints_and_averages_interior():
    assert smooth_height_map([0.0, 3.0, 0.0]) == pytest.approx([0.0, 1.0, 0.0])


def test_smooth_leaves_constant_map_unchanged():
    flat = [5.0] * 10
    assert smooth_height_map(flat) == pytest.approx(flat)


def test_smooth_does_not_modify_input():
    heights = [1.0, 9.0, 2.0, 7.0]
    smooth_height_map(heights)
    assert heights == [1.0, 9.0, 2.0, 7.0]


def test_smooth_short_maps_are_copied():
    assert smooth_height_map([4.0]) == [4.0]
    assert smooth_height_map([]) == []


def test_generated_height_map_has_two_thousand_samples():
    heights = generate_height_map(2560.0, 100.0)
    assert len(heights) == 2000


def test_generated_height_map_is_positive_and_deterministic():
    first = generate_height_map(1280.0, 100.0)
    second = generate_height_map(1280.0, 100.0)
    assert first == second
    assert min(first) > 0


def test_generated_height_map_scales_with_height():
    low = generate_height_map(1000.0, 50.0)
    high = generate_height_map(1000.0, 100.0)
    assert [2 * v for v in low] == pytest.approx(high)