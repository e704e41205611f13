"""Homogeneous 3x3 matrices for 2D affine transforms."""

from __future__ import annotations

import math

import numpy as np


def identity() -> np.ndarray:
    """Return the 3x3 identity matrix."""
    return np.identity(3, dtype=float)


def translate(tx: float, ty: float) -> np.ndarray:
    """Return a matrix that moves points by (tx, ty)."""
    return np.array(
        [
            [1.0, 0.0, float(tx)],
            [0.0, 1.0, float(ty)],
            [0.0, 0.0, 1.0],
        ]
    )


def scale(sx: float, sy: float) -> np.ndarray:
    """Return a matrix that scales points by sx horizontally and sy vertically."""
    return np.array(
        [
            [float(sx), 0.0, 0.0],
            [0.0, float(sy), 0.0],
            [0.0, 0.0, 1.0],
        ]
    )


def rotate(radians: float) -> np.ndarray:
    """Return a matrix that rotates points counter-clockwise about the origin."""
    c = math.cos(radians)
    s = math.sin(radians)
    return np.array(
        [
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ]
    )


def apply(matrix: np.ndarray, x: float, y: float) -> tuple[float, float]:
    """Transform the point (x, y) by a homogeneous matrix."""
    rx, ry, _ = np.asarray(matrix, dtype=float) @ np.array([float(x), float(y), 1.0])
    return float(rx), float(ry)