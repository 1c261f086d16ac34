"""
Point sampling strategies for a cubic Bezier.

Each strategy returns an (N, D) array of points ordered from the start of the
curve to its end. The functions are stateless; callers pass control points
already in the space they want the samples in.
"""

import math

import numpy as np

from lanecurve.curves.evaluate import as_control_array, estimate_length, evaluate, point_at_distance
from lanecurve.models import SamplingMode
from lanecurve.tracer import get_tracer

DEFAULT_SUBDIVISIONS = 20
MIN_SAMPLE_COUNT = 3

# Absorbs floating error when flooring ratios such as 3.0 / 1.0.
_EPS = 1e-9


def sample_by_percentage(points, step):
    """
    Sample at a fixed parameter step.

    Emits t = 0, step, 2*step, ... up to floor(1/step)*step, never past t = 1.
    When the step does not divide [0, 1] evenly, the end point at t = 1 is
    appended.
    """
    if step <= 0:
        raise ValueError(f"percentage step must be > 0, got {step}")
    step = min(float(step), 1.0)
    arr = as_control_array(points)

    n = int(math.floor(1.0 / step + _EPS))
    samples = [evaluate(arr, min(i * step, 1.0)) for i in range(n + 1)]

    if n * step < 1.0 - _EPS:
        samples.append(evaluate(arr, 1.0))

    return np.array(samples)


def sample_by_distance(points, spacing, subdivisions=DEFAULT_SUBDIVISIONS):
    """
    Sample at a fixed arc-length spacing.

    Emits points at distances 0, spacing, 2*spacing, ... up to the estimated
    length, then always appends the exact end point. When the length is a
    multiple of spacing the last two points coincide.
    """
    if spacing <= 0:
        raise ValueError(f"distance spacing must be > 0, got {spacing}")
    arr = as_control_array(points)

    total = estimate_length(arr, subdivisions)
    n = int(math.floor(total / spacing + _EPS))

    samples = [point_at_distance(arr, i * spacing, subdivisions) for i in range(n + 1)]
    samples.append(evaluate(arr, 1.0))

    return np.array(samples)


def sample_by_count(points, count):
    """
    Sample a fixed number of points evenly spaced in t.

    Counts below 3 are raised to 3. Both end points are always included.
    """
    count = max(int(count), MIN_SAMPLE_COUNT)
    arr = as_control_array(points)
    return np.array([evaluate(arr, i / (count - 1)) for i in range(count)])


def sample_points(points, mode, value, subdivisions=DEFAULT_SUBDIVISIONS):
    """
    Sample a curve with the strategy named by mode.

    Raises ValueError for a mode that is not a SamplingMode.
    """
    mode = SamplingMode(mode)

    if mode == SamplingMode.PERCENTAGE:
        samples = sample_by_percentage(points, value)
    elif mode == SamplingMode.DISTANCE:
        samples = sample_by_distance(points, value, subdivisions)
    elif mode == SamplingMode.COUNT:
        samples = sample_by_count(points, value)
    else:
        raise ValueError(f"Unsupported sampling mode: {mode}")

    get_tracer().event(f"Sampled {len(samples)} points", level="DEBUG", mode=mode, value=value)

    return samples
