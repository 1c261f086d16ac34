"""
Configuration management for lanecurve.

Loads YAML configuration with defaults for sampling, lane spawning, preview
and tracing. Configuration objects are passed explicitly into every call;
nothing here is read from module-level state.
"""

import os
from dataclasses import asdict, dataclass, field

import yaml

from lanecurve.models import SamplingMode


@dataclass
class SamplingConfig:
    """Configuration for curve sampling."""
    mode: str = "percentage"  # "percentage", "distance" or "count"
    percentage: float = 0.25
    distance: float = 1.0
    count: int = 3
    subdivisions: int = 20

    def value_for(self, mode=None):
        """Return the scalar parameter that goes with a sampling mode."""
        mode = SamplingMode(mode or self.mode)
        if mode == SamplingMode.PERCENTAGE:
            return self.percentage
        if mode == SamplingMode.DISTANCE:
            return self.distance
        return self.count


@dataclass
class LaneConfig:
    """Configuration for lane spawning."""
    width: float = 3.0
    length: float = 5.0


@dataclass
class PreviewConfig:
    """Configuration for the single-point curve preview."""
    t_value: float = 0.5


@dataclass
class TracingConfig:
    """Configuration for runtime tracing."""
    enabled: bool = False
    level: str = "INFO"
    file_path: str = None
    json_output: bool = False


@dataclass
class LaneCurveConfig:
    """Complete configuration."""
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    lane: LaneConfig = field(default_factory=LaneConfig)
    preview: PreviewConfig = field(default_factory=PreviewConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)


# Slider bounds of the interactive tool, (min, max); None means unbounded.
VALUE_RANGES = {
    ("sampling", "percentage"): (0.01, 1.0),
    ("sampling", "distance"): (0.01, 100.0),
    ("sampling", "count"): (1, None),
    ("sampling", "subdivisions"): (2, 50),
    ("lane", "width"): (0.1, 10.0),
    ("lane", "length"): (0.1, 100.0),
    ("preview", "t_value"): (0.0, 1.0),
}

_SECTIONS = ("sampling", "lane", "preview", "tracing")


def load_config(config_path=None):
    """
    Load configuration from YAML file.

    Falls back to defaults for any missing values.
    """
    config = LaneCurveConfig()

    if config_path and os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

        config = _merge_config(config, yaml_data)

    return config


def _merge_config(config, yaml_data):
    """Merge YAML data into config dataclass, ignoring unknown keys."""
    for section_name in _SECTIONS:
        section_data = yaml_data.get(section_name)
        if not section_data:
            continue
        section = getattr(config, section_name)
        for key, value in section_data.items():
            if hasattr(section, key):
                setattr(section, key, value)

    return config


def clamp_config(config):
    """
    Pull slider-bounded values back into their allowed ranges.

    Modifies and returns the given config.
    """
    for (section_name, key), (low, high) in VALUE_RANGES.items():
        section = getattr(config, section_name)
        value = getattr(section, key)
        if low is not None and value < low:
            value = low
        if high is not None and value > high:
            value = high
        setattr(section, key, value)

    return config


def save_default_config(path):
    """Save default configuration to YAML file for reference."""
    config = LaneCurveConfig()

    yaml_data = asdict(config)
    yaml_data["tracing"].pop("file_path")

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=False)
