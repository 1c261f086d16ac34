"""Tests for configuration loading."""

import os

import pytest
import yaml

from lanecurve.config import (
    LaneCurveConfig, clamp_config, load_config, save_default_config,
)


class TestLoadConfig:
    """Tests for YAML configuration."""

    def test_defaults_without_file(self):
        config = load_config(None)

        assert config.sampling.mode == "percentage"
        assert config.sampling.percentage == 0.25
        assert config.sampling.subdivisions == 20
        assert config.lane.width == 3.0
        assert config.lane.length == 5.0
        assert config.preview.t_value == 0.5

    def test_missing_file_falls_back(self, temp_dir):
        config = load_config(os.path.join(temp_dir, "nope.yaml"))

        assert config.sampling.distance == 1.0

    def test_partial_override(self, temp_dir):
        """Test that values missing from the file keep their defaults."""
        path = os.path.join(temp_dir, "config.yaml")
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump({"sampling": {"mode": "distance", "distance": 0.5}, "lane": {"width": 4.0}}, f)

        config = load_config(path)

        assert config.sampling.mode == "distance"
        assert config.sampling.distance == 0.5
        assert config.sampling.count == 3
        assert config.lane.width == 4.0
        assert config.lane.length == 5.0

    def test_unknown_keys_ignored(self, temp_dir):
        path = os.path.join(temp_dir, "config.yaml")
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump({"sampling": {"bogus": 1}, "colors": {"left": "blue"}}, f)

        config = load_config(path)

        assert not hasattr(config.sampling, "bogus")

    def test_save_default_round_trip(self, temp_dir):
        """Test that the saved default file loads back to the defaults."""
        path = os.path.join(temp_dir, "default.yaml")
        save_default_config(path)

        assert load_config(path) == LaneCurveConfig()


class TestSamplingConfig:
    """Tests for per-mode values and clamping."""

    @pytest.mark.parametrize("mode,expected", [
        ("percentage", 0.25),
        ("distance", 1.0),
        ("count", 3),
    ])
    def test_value_for(self, default_config, mode, expected):
        assert default_config.sampling.value_for(mode) == expected

    def test_value_for_configured_mode(self, default_config):
        default_config.sampling.mode = "distance"
        default_config.sampling.distance = 2.5

        assert default_config.sampling.value_for() == 2.5

    def test_value_for_unknown_mode(self, default_config):
        with pytest.raises(ValueError):
            default_config.sampling.value_for("spiral")

    def test_clamp(self, default_config):
        """Test that slider-bounded values are pulled into range."""
        default_config.sampling.percentage = 0.0
        default_config.sampling.distance = 500.0
        default_config.sampling.subdivisions = 1
        default_config.lane.width = 20.0
        default_config.preview.t_value = -1.0

        clamp_config(default_config)

        assert default_config.sampling.percentage == 0.01
        assert default_config.sampling.distance == 100.0
        assert default_config.sampling.subdivisions == 2
        assert default_config.lane.width == 10.0
        assert default_config.preview.t_value == 0.0

    def test_clamp_leaves_valid_values(self, default_config):
        default_config.sampling.count = 250

        clamp_config(default_config)

        assert default_config.sampling.count == 250
