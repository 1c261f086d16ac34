"""Pytest fixtures for lanecurve tests."""

import tempfile

import numpy as np
import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def straight_points():
    """Control points of a straight cubic along X with length 3."""
    return np.array([
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [2.0, 0.0, 0.0],
        [3.0, 0.0, 0.0],
    ])


@pytest.fixture
def s_curve_points():
    """Control points of an S-shaped cubic in the XZ plane."""
    return np.array([
        [0.0, 0.0, 0.0],
        [2.0, 0.0, 1.0],
        [-1.0, 0.5, 3.0],
        [1.0, 0.0, 4.0],
    ])


@pytest.fixture
def degenerate_points():
    """Four coincident control points."""
    return np.tile([1.5, -2.0, 0.25], (4, 1))


@pytest.fixture
def default_config():
    """Create default configuration."""
    from lanecurve.config import LaneCurveConfig
    return LaneCurveConfig()


@pytest.fixture(autouse=True)
def reset_tracer():
    """Leave the global tracer disabled after every test."""
    yield
    from lanecurve.tracer import configure_tracer
    configure_tracer(enabled=False)
