"""Tests for lanes."""

import numpy as np
import pytest

from lanecurve.curves.curve import Curve
from lanecurve.geometry.frame import CoordinateFrame
from lanecurve.lanes.lane import Lane, spawn_lane
from lanecurve.models import SamplingMode


def _straight_curve(length, x=0.0):
    curve = Curve(frame=CoordinateFrame(position=[x, 0.0, 0.0]))
    curve.add_control_points([x, 0.0, 0.0], length)
    return curve


class TestSpawnLane:
    """Tests for spawning a lane from width and length."""

    def test_rails_offset_by_half_width(self):
        """Test that rails start width/2 either side of the origin."""
        lane = spawn_lane([1.0, 0.0, 2.0], width=3.0, length=5.0)

        right = lane.right.get_world_control_points()
        left = lane.left.get_world_control_points()

        np.testing.assert_allclose(right[0], [2.5, 0.0, 2.0])
        np.testing.assert_allclose(left[0], [-0.5, 0.0, 2.0])
        np.testing.assert_allclose(right[3], [2.5, 0.0, 7.0])
        np.testing.assert_allclose(left[3], [-0.5, 0.0, 7.0])

    def test_rail_frames_at_nodes(self):
        """Test that each rail's frame sits on its start node."""
        lane = spawn_lane([0.0, 0.0, 0.0], width=2.0, length=4.0)

        assert lane.right.frame.position == [1.0, 0.0, 0.0]
        assert lane.left.frame.position == [-1.0, 0.0, 0.0]
        np.testing.assert_allclose(lane.right.get_local_control_points()[0], [0.0, 0.0, 0.0])

    def test_rotated_lane(self):
        """Test that a yawed lane runs along +X with rails split along -Z/+Z."""
        lane_frame = CoordinateFrame(rotation=[0.0, 90.0, 0.0])
        lane = spawn_lane([0.0, 0.0, 0.0], width=2.0, length=4.0, lane_frame=lane_frame)

        right = lane.right.get_world_control_points()

        np.testing.assert_allclose(right[0], [0.0, 0.0, -1.0], atol=1e-12)
        np.testing.assert_allclose(right[3], [4.0, 0.0, -1.0], atol=1e-12)
        assert lane_frame.position == [0.0, 0.0, 0.0]

    def test_rail_names(self):
        lane = spawn_lane([0.0, 0.0, 0.0], width=3.0, length=5.0)

        assert lane.right.name == "rightLine"
        assert lane.left.name == "leftLine"

    @pytest.mark.parametrize("width,length", [(0.0, 5.0), (3.0, -1.0)])
    def test_invalid_dimensions(self, width, length):
        with pytest.raises(ValueError):
            spawn_lane([0.0, 0.0, 0.0], width=width, length=length)


class TestSampleBezierLines:
    """Tests for sampling both rails together."""

    def test_same_request_on_both_rails(self):
        """Test that both rails are sampled with the same mode and value."""
        lane = spawn_lane([0.0, 0.0, 0.0], width=3.0, length=5.0)

        right, left = lane.sample_bezier_lines(SamplingMode.COUNT, 6)

        assert len(right) == len(left) == 6
        np.testing.assert_allclose(right[:, 0], 1.5)
        np.testing.assert_allclose(left[:, 0], -1.5)

    def test_clears_previous_samples(self):
        """Test that earlier samples are replaced on both rails."""
        lane = spawn_lane([0.0, 0.0, 0.0], width=3.0, length=5.0)
        lane.sample_bezier_lines(SamplingMode.COUNT, 12)

        lane.sample_bezier_lines(SamplingMode.PERCENTAGE, 0.5)

        right, left = lane.get_sample_points()
        assert len(right) == len(left) == 3

    def test_unequal_rails_sampled_independently(self):
        """Test that distance sampling may give rails different counts."""
        lane = Lane(right=_straight_curve(4.0, x=1.0), left=_straight_curve(2.0, x=-1.0))

        right, left = lane.sample_bezier_lines(SamplingMode.DISTANCE, 1.0, subdivisions=10)

        assert len(right) == 6
        assert len(left) == 4

    def test_missing_rail(self, capsys):
        """Test that a lane without both rails reports and samples nothing."""
        from lanecurve.tracer import configure_tracer

        configure_tracer(enabled=True, level="ERROR")
        curve = _straight_curve(3.0)
        curve.sample_curve(SamplingMode.COUNT, 5)
        lane = Lane(right=curve)

        assert lane.sample_bezier_lines(SamplingMode.COUNT, 4) is None
        assert len(curve.get_sample_points()) == 5
        assert "not set" in capsys.readouterr().err

    def test_setters(self):
        lane = Lane()
        right = _straight_curve(3.0)
        left = _straight_curve(3.0, x=-2.0)

        lane.set_right_curve(right)
        lane.set_left_curve(left)

        assert lane.right is right
        assert lane.left is left
        assert lane.sample_bezier_lines(SamplingMode.COUNT, 3) is not None

    def test_clear_sample_points(self):
        lane = spawn_lane([0.0, 0.0, 0.0], width=3.0, length=5.0)
        lane.sample_bezier_lines(SamplingMode.COUNT, 4)

        lane.clear_sample_points()

        right, left = lane.get_sample_points()
        assert len(right) == 0
        assert len(left) == 0


class TestLaneRecord:
    """Tests for lane records and IDs."""

    def test_lane_id_deterministic(self):
        """Test that identical lanes get identical IDs."""
        lane1 = spawn_lane([0.0, 0.0, 0.0], width=3.0, length=5.0)
        lane2 = spawn_lane([0.0, 0.0, 0.0], width=3.0, length=5.0)
        lane3 = spawn_lane([0.0, 0.0, 1.0], width=3.0, length=5.0)

        assert lane1.lane_id == lane2.lane_id
        assert lane1.lane_id != lane3.lane_id
        assert lane1.lane_id.startswith("lane_")

    def test_record_round_trip(self):
        lane = spawn_lane([2.0, 0.0, 0.0], width=3.0, length=5.0)

        restored = Lane.from_record(lane.to_record())

        assert restored.lane_id == lane.lane_id
        np.testing.assert_allclose(
            restored.left.get_world_control_points(), lane.left.get_world_control_points()
        )

    def test_record_needs_both_rails(self):
        with pytest.raises(ValueError):
            Lane(right=_straight_curve(3.0)).to_record()
