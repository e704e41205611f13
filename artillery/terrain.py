"""Terrain height-map generation: natural cubic splines and smoothing."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Sequence

_BASE_SAMPLES = 200
_REFINEMENT = 10
_WAVES = ((0.9, 1.0), (0.6, 2.0), (2.1, 0.5))
_WAVE_OFFSET = 7.0


def cubic_spline_interpolation(
    x: Sequence[float], y: Sequence[float], num_samples: int
) -> list[float]:
    """Fit a natural cubic spline through (x, y) and sample it evenly.

    Returns ``num_samples`` values spaced uniformly from ``x[0]`` to ``x[-1]``.
    """
    xs = [float(v) for v in x]
    ys = [float(v) for v in y]
    n = len(xs)
    if n != len(ys):
        raise ValueError("x and y must have the same length")
    if n < 2:
        raise ValueError("at least two points are required")
    if num_samples < 2:
        raise ValueError("num_samples must be at least 2")

    h = [right - left for left, right in zip(xs, xs[1:])]
    if any(step <= 0 for step in h):
        raise ValueError("x values must be strictly increasing")

    mu = [0.0] * n
    z = [0.0] * n
    for i in range(1, n - 1):
        alpha = 3 * (ys[i + 1] - ys[i]) / h[i] - 3 * (ys[i] - ys[i - 1]) / h[i - 1]
        pivot = 2 * (xs[i + 1] - xs[i - 1]) - h[i - 1] * mu[i - 1]
        mu[i] = h[i] / pivot
        z[i] = (alpha - h[i - 1] * z[i - 1]) / pivot

    c = [0.0] * n
    b = [0.0] * (n - 1)
    d = [0.0] * (n - 1)
    for j in reversed(range(n - 1)):
        c[j] = z[j] - mu[j] * c[j + 1]
        b[j] = (ys[j + 1] - ys[j]) / h[j] - h[j] * (c[j + 1] + 2 * c[j]) / 3
        d[j] = (c[j + 1] - c[j]) / (3 * h[j])

    step = (xs[-1] - xs[0]) / (num_samples - 1)
    samples = []
    for i in range(num_samples):
        xi = xs[0] + i * step
        j = min(max(bisect_right(xs, xi) - 1, 0), n - 2)
        diff = xi - xs[j]
        samples.append(ys[j] + b[j] * diff + c[j] * diff**2 + d[j] * diff**3)
    return samples


def smooth_height_map(heights: Sequence[float]) -> list[float]:
    """Return a copy with each interior value replaced by a three-point average."""
    original = [float(v) for v in heights]
    smoothed = list(original)
    for i, (left, mid, right) in enumerate(
        zip(original, original[1:], original[2:]), start=1
    ):
        smoothed[i] = (left + mid + right) / 3
    return smoothed


def generate_height_map(width: float, height: float) -> list[float]:
    """Build the default rolling terrain for a field of the given size."""
    dx = width / _BASE_SAMPLES
    xs = [i * dx for i in range(_BASE_SAMPLES + 1)]
    ys = [
        sum(amplitude * math.sin(frequency * xv) for amplitude, frequency in _WAVES)
        + _WAVE_OFFSET
        for xv in xs
    ]
    curve = cubic_spline_interpolation(xs, ys, _BASE_SAMPLES * _REFINEMENT)
    scaled = [(value + 2) * height / 4 for value in curve]
    return smooth_height_map(scaled)