"""
Lanes: pairs of curves sampled together.

A lane has no geometry of its own. It holds a right and a left rail and runs
the same sampling request over both.
"""

import numpy as np

from lanecurve.curves.curve import Curve
from lanecurve.geometry.frame import CoordinateFrame
from lanecurve.models import LaneRecord, generate_lane_id
from lanecurve.tracer import get_tracer, trace


class Lane:
    """Right and left rail curves sampled with one shared request."""

    def __init__(self, right=None, left=None, name="lane"):
        self.name = name
        self.right = right
        self.left = left

    def __repr__(self):
        return f"Lane(name={self.name!r}, right={self.right!r}, left={self.left!r})"

    def set_right_curve(self, curve):
        self.right = curve

    def set_left_curve(self, curve):
        self.left = curve

    @property
    def lane_id(self):
        """Deterministic ID derived from both rails' world control points."""
        if self.right is None or self.left is None:
            return None
        return generate_lane_id(
            self.right.get_world_control_points(),
            self.left.get_world_control_points(),
        )

    @trace(label="sample_bezier_lines")
    def sample_bezier_lines(self, mode, value, subdivisions=None):
        """
        Sample both rails with the same mode and value.

        The rails are sampled independently, so distance sampling on rails of
        different length can give different counts. Returns
        (right_samples, left_samples), or None if a rail is missing.
        """
        tracer = get_tracer()

        if self.right is None or self.left is None:
            tracer.event(f"Right or left curve is not set on {self.name}", level="ERROR")
            return None

        self.clear_sample_points()

        right_samples = self.right.sample_curve(mode, value, subdivisions)
        left_samples = self.left.sample_curve(mode, value, subdivisions)

        tracer.event(f"Sampled lane rails: right={len(right_samples)} left={len(left_samples)}")

        return right_samples, left_samples

    def get_sample_points(self):
        """Retained samples as (right_samples, left_samples)."""
        empty = np.empty((0, 3))
        right = self.right.get_sample_points() if self.right is not None else empty
        left = self.left.get_sample_points() if self.left is not None else empty
        return right, left

    def clear_sample_points(self):
        for curve in (self.right, self.left):
            if curve is not None:
                curve.clear_sample_points()

    def to_record(self):
        """Persistable LaneRecord; both rails must be set."""
        if self.right is None or self.left is None:
            raise ValueError(f"Lane {self.name} needs both rails to be saved")
        return LaneRecord(
            lane_id=self.lane_id,
            right=self.right.to_record(),
            left=self.left.to_record(),
        )

    @classmethod
    def from_record(cls, record, name="lane"):
        return cls(
            right=Curve.from_record(record.right),
            left=Curve.from_record(record.left),
            name=name,
        )


@trace(label="spawn_lane")
def spawn_lane(origin, width, length, lane_frame=None, name="lane"):
    """
    Create a lane with two straight rails.

    The rails start width/2 either side of origin along the lane's local X
    axis and run length units along its local forward axis. Each rail gets
    its own frame at its start node, sharing the lane's rotation.
    """
    if width <= 0 or length <= 0:
        raise ValueError(f"lane width and length must be > 0, got width={width} length={length}")

    if lane_frame is None:
        lane_frame = CoordinateFrame(position=list(map(float, origin)))
    else:
        lane_frame = lane_frame.model_copy(update={"position": list(map(float, origin))})

    half = width / 2.0
    rails = {}
    for side, offset in (("right", half), ("left", -half)):
        node = lane_frame.transform_point([offset, 0.0, 0.0])
        frame = CoordinateFrame(position=node.tolist(), rotation=list(lane_frame.rotation))
        curve = Curve(frame=frame, name=f"{side}Line")
        curve.add_control_points(node, length)
        rails[side] = curve

    get_tracer().event(f"Spawned {name}", width=float(width), length=float(length))

    return Lane(right=rails["right"], left=rails["left"], name=name)
