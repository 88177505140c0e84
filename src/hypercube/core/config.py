"""
Animation settings and YAML configuration loading.

Exports:
    - AnimationConfig: Pydantic model holding the driver parameters.
    - load_config: Read a YAML file, apply overrides, validate.
"""

import math
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hypercube.core.enums import OutputFormat
from hypercube.core.logging import logger

__all__ = [
    "AnimationConfig",
    "load_config",
    "DEFAULT_DIMENSIONS",
    "DEFAULT_VERTICES_TO_SHOW",
    "DEFAULT_STEP",
    "DEFAULT_T_END",
]

DEFAULT_DIMENSIONS = 5
DEFAULT_VERTICES_TO_SHOW = 8
DEFAULT_STEP = 0.2
DEFAULT_T_END = 2 * math.pi


class AnimationConfig(BaseModel):
    """Parameters of one animation run."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Values below 1 are clamped by Hypercube itself
    dimensions: int = Field(DEFAULT_DIMENSIONS, description="Number of hypercube axes")
    vertices_to_show: int = Field(DEFAULT_VERTICES_TO_SHOW, description="Vertices printed per frame")
    step: float = Field(DEFAULT_STEP, description="Time increment between frames")
    t_end: float = Field(DEFAULT_T_END, description="Exclusive upper bound on t")
    output_format: OutputFormat = Field(OutputFormat.PLAIN, description="plain | json")

    @field_validator("vertices_to_show")
    @classmethod
    def _non_negative(cls, v):
        if v < 0:
            raise ValueError("vertices_to_show must be non-negative")
        return v

    @field_validator("step", "t_end")
    @classmethod
    def _strictly_positive(cls, v):
        if not (math.isfinite(v) and v > 0):
            raise ValueError("Value must be finite and strictly positive")
        return v

    @model_validator(mode="after")
    def _step_advances_time(self):
        # t += step must still move t once it is close to t_end
        if self.t_end + self.step == self.t_end:
            raise ValueError(f"step {self.step} is too small to advance t up to t_end {self.t_end}")
        return self


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> AnimationConfig:
    """
    Build an AnimationConfig from an optional YAML file plus overrides.

    The YAML document is either a flat mapping of AnimationConfig fields or
    has them under an `animation:` key. Overrides whose value is None are
    ignored, so unset CLI options leave file values alone.

    Args:
        config_path: YAML file to read, or None for defaults only.
        overrides: Field values taking precedence over the file.

    Returns:
        AnimationConfig: The validated configuration.

    Raises:
        FileNotFoundError: If `config_path` does not exist.
        ValueError: If the YAML document is not a mapping.
        pydantic.ValidationError: If a value is invalid.
    """
    data: Dict[str, Any] = {}
    if config_path is not None:
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")

        with open(config_file, "r") as f:
            loaded = yaml.safe_load(f)

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file must contain a mapping: {config_file}")
        if isinstance(loaded.get("animation"), dict):
            loaded = loaded["animation"]
        data.update(loaded)
        logger.debug(f"Loaded config from {config_file}: {data}")

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    return AnimationConfig(**data)
