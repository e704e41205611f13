import math

import numpy as np
import pytest

from artillery.transforms import apply, identity, rotate, scale, translate


def test_identity_leaves_points_unchanged():
    assert apply(identity(), 3.5, -2.25) == pytest.approx((3.5, -2.25))


def test_translate_moves_origin_to_offset():
    assert apply(translate(12.0, -7.0), 0.0, 0.0) == pytest.approx((12.0, -7.0))


def test_translations_compose_additively():
    combined = translate(1.5, 2.0) @ translate(-4.0, 6.0)
    assert np.allclose(combined, translate(1.5 - 4.0, 2.0 + 6.0))


def test_scale_multiplies_coordinates():
    assert apply(scale(2.0, 3.0), 5.0, 7.0) == pytest.approx((2.0 * 5.0, 3.0 * 7.0))


def test_rotate_quarter_turn_maps_x_axis_to_y_axis():
    assert apply(rotate(math.pi / 2), 1.0, 0.0) == pytest.approx((0.0, 1.0), abs=1e-12)


def test_rotation_preserves_length():
    x, y = apply(rotate(0.7), 3.0, 4.0)
    assert math.hypot(x, y) == pytest.approx(math.hypot(3.0, 4.0))


def test_rotation_inverse_is_negative_angle():
    assert np.allclose(rotate(1.1) @ rotate(-1.1), identity())


def test_order_of_composition_matters():
    moved_then_turned = apply(rotate(math.pi / 2) @ translate(1.0, 0.0), 0.0, 0.0)
    turned_then_moved = apply(translate(1.0, 0.0) @ rotate(math.pi / 2), 0.0, 0.0)
    assert turned_then_moved == pytest.approx((1.0, 0.0))
    assert moved_then_turned == pytest.approx((0.0, 1.0), abs=1e-12)