"""Test YAML configuration loading and validation."""

import pytest
import yaml
from pydantic import ValidationError

from binopt2d.core.config import (
    Binopt2dConfig,
    default_config,
    load_config,
    merge_config,
    save_config,
)
from binopt2d.core.types import AxisRange, FunctionConfig, Mode


def test_default_config():
    """Test defaults match the core's defaults."""
    cfg = default_config()
    fc = cfg.function.to_function_config()

    assert isinstance(fc, FunctionConfig)
    assert fc.range_x == AxisRange(0.0, 1.0)
    assert fc.range_y == AxisRange(0.0, 1.0)
    assert fc.mode is Mode.MAXIMIZATION
    assert cfg.genome.length == 32


def test_load_config(tmp_path):
    """Test loading a YAML file with ranges and mode."""
    path = tmp_path / "run.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "function": {
                    "range_x": {"min": -4, "max": 4},
                    "range_y": {"min": -2, "max": 2},
                    "mode": "Minimization",
                    "objective": "sphere",
                },
                "genome": {"length": 20},
            }
        )
    )

    cfg = load_config(path)

    assert cfg.function.mode is Mode.MINIMIZATION
    assert cfg.function.range_x.to_axis_range() == AxisRange(-4.0, 4.0)
    assert cfg.function.objective == "sphere"
    assert cfg.genome.length == 20
    assert cfg.optimization.seed == 42


def test_empty_file_gives_defaults(tmp_path):
    """Test an empty YAML file yields the default config."""
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_config(path) == default_config()


def test_save_load_roundtrip(tmp_path):
    """Test save_config output loads back to an equal config."""
    cfg = merge_config(default_config(), {"function": {"mode": "minimization"}})
    path = tmp_path / "nested" / "cfg.yaml"

    save_config(cfg, path)

    assert load_config(path) == cfg


def test_missing_file():
    """Test a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_config("/nonexistent/binopt2d.yaml")


def test_reversed_range_rejected():
    """Test the config layer rejects min > max."""
    with pytest.raises(ValidationError, match="must not exceed"):
        Binopt2dConfig.model_validate({"function": {"range_x": {"min": 1, "max": 0}}})


@pytest.mark.parametrize("length", [0, 65])
def test_genome_length_bounds(length):
    """Test genome length must be in [1, 64]."""
    with pytest.raises(ValidationError):
        Binopt2dConfig.model_validate({"genome": {"length": length}})


def test_bad_mode_rejected():
    """Test unknown mode strings are rejected."""
    with pytest.raises(ValidationError):
        Binopt2dConfig.model_validate({"function": {"mode": "sideways"}})


def test_merge_config_keeps_siblings():
    """Test merge only replaces the overridden keys."""
    base = merge_config(default_config(), {"function": {"range_y": {"min": -3, "max": 3}}})
    merged = merge_config(base, {"function": {"range_x": {"min": -1, "max": 1}}})

    assert merged.function.range_x.to_axis_range() == AxisRange(-1.0, 1.0)
    assert merged.function.range_y.to_axis_range() == AxisRange(-3.0, 3.0)
