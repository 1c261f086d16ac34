"""
Artifact saving utilities for lanecurve.

Writes and reads JSON files for lanes, sample sets and reports.
"""

import json
import os

from lanecurve.lanes.lane import Lane
from lanecurve.models import LaneRecord
from lanecurve.tracer import get_tracer


def ensure_dir(path):
    """Create directory if it does not exist."""
    if path:
        os.makedirs(path, exist_ok=True)


def save_json(data, path, indent=2):
    """
    Save a dictionary or Pydantic model to JSON.
    """
    tracer = get_tracer()

    ensure_dir(os.path.dirname(path))

    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, default=str)

    tracer.event(f"Saved JSON: {path}")


def load_json(path):
    """Load a JSON file into plain Python objects."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def save_lane(lane, path):
    """Save a lane's raw control points and frames."""
    save_json(lane.to_record(), path)


def load_lane(path):
    """
    Load a lane saved by save_lane.

    Raises pydantic.ValidationError when the file does not hold a valid
    lane record.
    """
    record = LaneRecord.model_validate(load_json(path))
    get_tracer().event(f"Loaded lane {record.lane_id} from {path}")
    return Lane.from_record(record, name=record.lane_id)
