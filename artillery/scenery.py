"""Static scenery: the mesh catalogue, clouds, the sun and the victory cup."""

from __future__ import annotations

import math
import random

import numpy as np

from artillery.meshes import (
    Mesh,
    create_circle,
    create_ellipse,
    create_rectangle,
    create_semicircle,
    create_trapezoid,
)
from artillery.transforms import rotate, translate

SUN_CENTER = (500.0, 500.0)
SUN_RADIUS = 30.0
SUN_COLOR = (1.0, 1.0, 0.0)
SUN_RAY_LENGTH = 50.0
SUN_RAY_THICKNESS = 4.0
SUN_RAY_COUNT = 10
SUN_RAY_GAP = 10.0

CLOUD_COUNT = 30
CLOUD_COLOR = (0.9, 0.9, 0.9)
CLOUD_RADII = (40.0, 30.0)
CLOUD_OFFSETS: tuple[tuple[tuple[float, float], ...], ...] = (
    ((0.0, 0.0), (40.0, 15.0), (-40.0, 15.0), (20.0, -10.0)),
    ((0.0, 0.0), (30.0, 10.0), (-30.0, 10.0)),
    ((0.0, 0.0), (40.0, 15.0), (-40.0, 15.0), (20.0, -10.0)),
    ((0.0, 0.0), (25.0, 5.0), (-25.0, 5.0), (15.0, -5.0), (-15.0, -5.0)),
    ((0.0, 0.0), (35.0, 10.0), (-35.0, 10.0), (20.0, -10.0), (-20.0, -10.0)),
    ((0.0, 0.0), (35.0, 10.0), (-35.0, 10.0), (20.0, -10.0), (-20.0, -10.0)),
    ((0.0, 0.0), (30.0, 10.0), (-30.0, 10.0)),
    ((0.0, 0.0), (35.0, 10.0), (-35.0, 10.0), (20.0, -10.0), (-20.0, -10.0)),
    (
        (0.0, 0.0),
        (30.0, 10.0),
        (-30.0, 10.0),
        (15.0, -10.0),
        (-15.0, -10.0),
        (0.0, -20.0),
    ),
)

CUP_POSITION = (500.0, 500.0)
CUP_RAYS_POSITION = (500.0, 600.0)
CUP_GOLD = (1.0, 0.843, 0.0)
CUP_RAY_NAMES = ("cupRay1", "cupRay2", "cupRay3")
CUP_RAY_OFFSETS = (
    0.0, 0.523, 1.046, 1.569, 2.09, 2.615,
    3.138, 3.661, 4.184, 4.707, 5.23, 5.753,
)
_CUP_X_SHIFT = 110.0
_CUP_RAY_Y_SHIFT = -142.0
_CUP_LAYOUT = (
    ("cupStem3", -142.0),
    ("cupBase", -150.0),
    ("cupStem1", -130.0),
    ("cupLowerBowl1", -80.0),
    ("cupUpperBowl2", 50.0),
    ("cupStem2", -80.0),
)


def build_scene_meshes() -> dict[str, Mesh]:
    """Every fixed mesh the scene draws, keyed by name."""
    meshes = [
        create_trapezoid("t1", 28, 6, 35, (0.21, 0.27, 0.31)),
        create_trapezoid("t2", 42, 9, 33, (0.29, 0.33, 0.13)),
        create_semicircle("c1", 8, 30, (0.29, 0.33, 0.13)),
        create_rectangle("r1", 24, 2, (0.0, 0.0, 0.0)),
        create_trapezoid("t3", 28, 6, 35, (0.2, 0.2, 0.2)),
        create_trapezoid("t4", 42, 9, 33, (0.3, 0.3, 0.3)),
        create_semicircle("c2", 8, 30, (0.3, 0.3, 0.3)),
        create_rectangle("r2", 24, 2, (0.5, 0.35, 0.05)),
        create_circle("bullet", 0.7, 36, (0.0, 0.0, 0.0)),
        create_rectangle("healthBar", 2, 6, (0.0, 0.5, 0.0)),
        create_circle("sun", SUN_RADIUS, 36, SUN_COLOR),
        create_rectangle("sunRay", SUN_RAY_THICKNESS, SUN_RAY_LENGTH, SUN_COLOR),
        create_trapezoid("t5", 28, 6, 35, (0.0, 0.0, 0.0)),
        create_trapezoid("t6", 42, 9, 33, (0.0, 0.0, 0.0)),
        create_semicircle("c3", 8, 30, (0.0, 0.0, 0.0)),
        create_rectangle("r3", 24, 2, (0.0, 0.0, 0.0)),
        create_ellipse("cloudPart", *CLOUD_RADII, CLOUD_COLOR),
        create_rectangle("cupBase", 160, 25, (0.4, 0.26, 0.13)),
        create_ellipse("cupUpperBowl2", 80.0, 20.0, (0.72, 0.52, 0.043)),
        create_ellipse("cupLowerBowl1", 80.0, 20.0, CUP_GOLD),
        create_rectangle("cupStem1", 30, 40, CUP_GOLD),
        create_rectangle("cupStem2", 160, 130, CUP_GOLD),
        create_rectangle("cupStem3", 70, 10, CUP_GOLD),
        create_rectangle("cupRay1", 15, 180, (0.5, 0.0, 0.5)),
        create_rectangle("cupRay2", 15, 180, (1.0, 1.0, 0.0)),
        create_rectangle("cupRay3", 15, 180, (1.0, 0.0, 0.0)),
    ]
    return {mesh.name: mesh for mesh in meshes}


def cloud_positions(
    rng: random.Random, count: int = CLOUD_COUNT
) -> list[tuple[float, float]]:
    """Random cloud centres across the sky band of the field."""
    if count < 0:
        raise ValueError("count must not be negative")
    return [
        (float(rng.randrange(2000)), float(rng.randrange(300) + 400))
        for _ in range(count)
    ]


def sun_ray_transforms(
    center_x: float,
    center_y: float,
    num_rays: int = SUN_RAY_COUNT,
    thickness: float = SUN_RAY_THICKNESS,
) -> list[np.ndarray]:
    """Model matrices for rays spread evenly around the sun."""
    if num_rays < 1:
        raise ValueError("num_rays must be at least 1")
    step = 2 * math.pi / num_rays
    return [
        translate(center_x, center_y)
        @ rotate(i * step)
        @ translate(-thickness / 2, SUN_RAY_GAP)
        for i in range(num_rays)
    ]


def cup_ray_angles(base_angle: float) -> list[tuple[str, float]]:
    """Mesh name and rotation of each ray fanning out behind the cup."""
    return [
        (CUP_RAY_NAMES[i % len(CUP_RAY_NAMES)], base_angle + offset)
        for i, offset in enumerate(CUP_RAY_OFFSETS)
    ]


def cup_parts(x: float, y: float) -> list[tuple[str, tuple[float, float]]]:
    """Mesh name and translation of each cup part, in drawing order."""
    return [(name, (x + _CUP_X_SHIFT, y + dy)) for name, dy in _CUP_LAYOUT]


def cup_ray_origin(x: float, y: float) -> tuple[float, float]:
    """Pivot that the cup rays rotate about."""
    return (x + _CUP_X_SHIFT, y + _CUP_RAY_Y_SHIFT)