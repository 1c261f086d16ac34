"""
A single cubic curve bound to a coordinate frame.

The curve owns exactly 4 control points in frame-local space. All queries and
sampling happen in world space by mapping the control points through the
frame first, so distances are measured in world units.
"""

import operator

import numpy as np

from lanecurve.curves import evaluate as bezier
from lanecurve.curves.sampling import DEFAULT_SUBDIVISIONS, sample_points
from lanecurve.geometry.frame import LOCAL_FORWARD, CoordinateFrame
from lanecurve.models import CurveRecord
from lanecurve.tracer import get_tracer, trace


class Curve:
    """
    Cubic Bezier with 4 local control points and a frame reference.

    The frame belongs to the host scene entity and is never copied, so moving
    it moves the curve. Control points change only through
    add_control_points and update_control_point.
    """

    def __init__(self, frame=None, control_points=None, name="curve"):
        self.name = name
        self.frame = frame if frame is not None else CoordinateFrame()

        if control_points is None:
            self._control_points = np.zeros((bezier.CUBIC_POINT_COUNT, 3))
        else:
            self._control_points = bezier.as_control_array(control_points).copy()
            if self._control_points.shape[1] != 3:
                raise ValueError(f"control points must be 3D, got shape {self._control_points.shape}")

        self._sample_points = np.empty((0, 3))

    def __repr__(self):
        return f"Curve(name={self.name!r}, samples={len(self._sample_points)})"

    def add_control_points(self, origin, length):
        """
        Seed the 4 control points along the local forward axis.

        origin is a world-space point; the points are spaced evenly so that
        the first and last are length apart in local units.
        """
        local_origin = self.frame.inverse_transform_point(origin)
        offsets = np.linspace(0.0, float(length), bezier.CUBIC_POINT_COUNT)
        self._control_points = local_origin + offsets[:, None] * LOCAL_FORWARD

        get_tracer().event(f"Seeded control points for {self.name}", level="DEBUG", length=float(length))

    def update_control_point(self, index, point):
        """
        Replace one control point with a world-space position.

        Returns False and leaves the curve unchanged when index is not an
        integer in range.
        """
        try:
            index = operator.index(index)
        except TypeError:
            get_tracer().event(
                f"Control point index {index!r} is not an integer for {self.name}",
                level="ERROR",
            )
            return False

        if not 0 <= index < bezier.CUBIC_POINT_COUNT:
            get_tracer().event(
                f"Control point index {index} out of range for {self.name}",
                level="ERROR",
            )
            return False

        self._control_points[index] = self.frame.inverse_transform_point(point)
        return True

    def get_local_control_points(self):
        """Copy of the control points in frame-local space."""
        return self._control_points.copy()

    def get_world_control_points(self):
        """Control points mapped to world space."""
        return self.frame.transform_points(self._control_points)

    def evaluate(self, t):
        """World-space point at parameter t."""
        return bezier.evaluate(self.get_world_control_points(), t)

    def estimate_length(self, subdivisions=DEFAULT_SUBDIVISIONS):
        """Approximate world-space arc length."""
        return bezier.estimate_length(self.get_world_control_points(), subdivisions)

    def point_at_distance(self, distance, subdivisions=DEFAULT_SUBDIVISIONS):
        """World-space point at an arc-length distance from the start."""
        return bezier.point_at_distance(self.get_world_control_points(), distance, subdivisions)

    @trace(label="sample_curve")
    def sample_curve(self, mode, value, subdivisions=None):
        """
        Sample the curve and retain the result.

        Any previously retained samples are replaced. Returns the new
        (N, 3) array of world-space points.
        """
        if subdivisions is None:
            subdivisions = DEFAULT_SUBDIVISIONS

        self.clear_sample_points()
        self._sample_points = sample_points(self.get_world_control_points(), mode, value, subdivisions)
        return self.get_sample_points()

    def get_sample_points(self):
        """Copy of the samples retained by the last sample_curve call."""
        return self._sample_points.copy()

    def clear_sample_points(self):
        self._sample_points = np.empty((0, 3))

    def to_record(self):
        """Raw control-point list and frame as a CurveRecord."""
        return CurveRecord(
            name=self.name,
            control_points=self._control_points.tolist(),
            frame=self.frame,
        )

    @classmethod
    def from_record(cls, record):
        return cls(frame=record.frame, control_points=record.control_points, name=record.name)
