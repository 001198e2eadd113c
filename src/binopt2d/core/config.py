"""Configuration management with pydantic and YAML support."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import MAX_GENOME_LENGTH, MIN_GENOME_LENGTH
from .types import AxisRange, FunctionConfig, Mode


class RangeConfig(BaseModel):
    """One axis range."""

    min: float = 0.0
    max: float = 1.0

    @model_validator(mode="after")
    def _check_order(self) -> RangeConfig:
        if self.min > self.max:
            raise ValueError(f"range min ({self.min}) must not exceed max ({self.max})")
        return self

    def to_axis_range(self) -> AxisRange:
        """Convert to core AxisRange."""
        return AxisRange(self.min, self.max)


class FunctionSettings(BaseModel):
    """Objective function, ranges and mode."""

    range_x: RangeConfig = Field(default_factory=RangeConfig)
    range_y: RangeConfig = Field(default_factory=RangeConfig)
    mode: Mode = Mode.MAXIMIZATION
    objective: str = "sample"

    @field_validator("mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: Any) -> Mode:
        return Mode.parse(value)

    def to_function_config(self) -> FunctionConfig:
        """Build the core's mutable FunctionConfig."""
        return FunctionConfig(
            range_x=self.range_x.to_axis_range(),
            range_y=self.range_y.to_axis_range(),
            mode=self.mode,
        )


class GenomeConfig(BaseModel):
    """Genome layout."""

    length: int = Field(default=32, ge=MIN_GENOME_LENGTH, le=MAX_GENOME_LENGTH)


class OptimizationConfig(BaseModel):
    """GA settings."""

    pop_size: int = Field(default=40, ge=2, le=10000)
    n_gen: int = Field(default=50, ge=1, le=100000)
    seed: int = Field(default=42, ge=0)


class Binopt2dConfig(BaseModel):
    """Root configuration object."""

    function: FunctionSettings = Field(default_factory=FunctionSettings)
    genome: GenomeConfig = Field(default_factory=GenomeConfig)
    optimization: OptimizationConfig = Field(default_factory=OptimizationConfig)


def load_config(path: str | Path) -> Binopt2dConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Parsed Binopt2dConfig object.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return Binopt2dConfig.model_validate(data or {})


def save_config(config: Binopt2dConfig, path: str | Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration to save.
        path: Output path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, default_flow_style=False)


def default_config() -> Binopt2dConfig:
    """Return default configuration."""
    return Binopt2dConfig()


def merge_config(base: Binopt2dConfig, overrides: dict[str, Any]) -> Binopt2dConfig:
    """Merge overrides into base configuration.

    Args:
        base: Base configuration.
        overrides: Dictionary of override values.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.model_dump(mode="json")

    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    merged = deep_merge(base_dict, overrides)
    return Binopt2dConfig.model_validate(merged)
