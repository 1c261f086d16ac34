"""
Cubic Bezier evaluation and arc-length utilities.

All functions take the 4 control points of a single cubic segment as an
array-like of shape (4, D) and never modify it.
"""

import numpy as np

CUBIC_POINT_COUNT = 4


def as_control_array(points):
    """Return control points as a float array, checking there are exactly 4."""
    arr = np.asarray(points, dtype=float)
    if arr.ndim != 2 or arr.shape[0] != CUBIC_POINT_COUNT:
        raise ValueError(f"a cubic curve needs exactly 4 control points, got shape {arr.shape}")
    return arr


def lerp(a, b, t):
    """Linear interpolation between a and b."""
    return a + (b - a) * t


def evaluate(points, t):
    """
    Evaluate a cubic Bezier at parameter t using De Casteljau's algorithm.

    Three interpolation passes reduce the 4 control points to 3, 2 and
    finally 1. t is not clamped: values outside [0, 1] extrapolate along the
    same polynomial.
    """
    level = as_control_array(points)
    while len(level) > 1:
        level = lerp(level[:-1], level[1:], t)
    return level[0]


def _subdivision_points(points, subdivisions):
    if subdivisions < 1:
        raise ValueError(f"subdivisions must be >= 1, got {subdivisions}")
    arr = as_control_array(points)
    return np.array([evaluate(arr, i / subdivisions) for i in range(subdivisions + 1)])


def estimate_length(points, subdivisions):
    """
    Approximate the arc length of a cubic Bezier.

    Evaluates subdivisions + 1 points at uniform t and sums the straight-line
    distances between neighbours.
    """
    samples = _subdivision_points(points, subdivisions)
    return float(np.linalg.norm(np.diff(samples, axis=0), axis=1).sum())


def point_at_distance(points, target_distance, subdivisions):
    """
    Locate the point at a given arc-length distance from the start.

    Walks the same uniform subdivision as estimate_length and interpolates
    linearly inside the segment that contains the target distance. Distances
    beyond the estimated total return the curve's end point.
    """
    if target_distance < 0:
        raise ValueError(f"target distance must be >= 0, got {target_distance}")

    samples = _subdivision_points(points, subdivisions)
    accumulated = 0.0

    for start, end in zip(samples[:-1], samples[1:]):
        segment_length = float(np.linalg.norm(end - start))
        if accumulated + segment_length >= target_distance:
            if segment_length == 0.0:
                return start
            return lerp(start, end, (target_distance - accumulated) / segment_length)
        accumulated += segment_length

    return evaluate(points, 1.0)
