"""
Pipeline orchestrator for lanecurve.

Spawns lanes to disk and samples saved lanes, writing sample points and a
validation report next to them.
"""

import os

from lanecurve.config import clamp_config, load_config
from lanecurve.geometry.frame import CoordinateFrame
from lanecurve.io.save_artifacts import ensure_dir, load_lane, save_json, save_lane
from lanecurve.lanes.lane import spawn_lane
from lanecurve.models import SampleRecord, SamplingMode, SamplingRequest
from lanecurve.tracer import get_tracer, trace
from lanecurve.validate.report import generate_report
from lanecurve.validate.rules import run_lane_validation


def _resolve_config(config, config_path):
    if config is None:
        config = load_config(config_path)
    return clamp_config(config)


@trace(label="run_spawn")
def run_spawn(origin, out_dir, config=None, config_path=None, rotation=None):
    """
    Spawn a lane at origin and save it as lane.json.

    Args:
        origin: world-space [x, y, z] of the lane's start centre
        out_dir: output directory
        config: LaneCurveConfig object (optional)
        config_path: path to YAML config file (optional)
        rotation: lane Euler angles in degrees (optional)

    Returns:
        the spawned Lane
    """
    config = _resolve_config(config, config_path)

    lane_frame = CoordinateFrame(rotation=list(rotation)) if rotation is not None else None
    lane = spawn_lane(origin, config.lane.width, config.lane.length, lane_frame=lane_frame)
    lane.name = lane.lane_id

    ensure_dir(out_dir)
    save_lane(lane, os.path.join(out_dir, "lane.json"))

    return lane


@trace(label="run_sampling")
def run_sampling(lane_path, out_dir, config=None, config_path=None, mode=None, value=None):
    """
    Sample a saved lane and write samples.json plus a validation report.

    mode and value override the configured sampling settings; when only mode
    is given, the configured value for that mode is used.

    Returns:
        (lane, SampleRecord, ValidationReport)
    """
    tracer = get_tracer()
    config = _resolve_config(config, config_path)

    mode = SamplingMode(mode or config.sampling.mode)
    if value is None:
        value = config.sampling.value_for(mode)

    request = SamplingRequest(mode=mode, value=value, subdivisions=config.sampling.subdivisions)

    lane = load_lane(lane_path)

    with tracer.span("sample_lane", module="pipeline", mode=mode, value=value):
        right, left = lane.sample_bezier_lines(request.mode, request.value, request.subdivisions)

    t_value = config.preview.t_value
    record = SampleRecord(
        lane_id=lane.lane_id,
        request=request,
        right=right.tolist(),
        left=left.tolist(),
        preview_t=t_value,
        preview={
            "right": lane.right.evaluate(t_value).tolist(),
            "left": lane.left.evaluate(t_value).tolist(),
        },
    )

    ensure_dir(out_dir)
    save_json(record, os.path.join(out_dir, "samples.json"))

    report = run_lane_validation(lane, config)
    generate_report(report, out_dir)

    return lane, record, report
